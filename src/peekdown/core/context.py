"""Application context with dependency injection."""

from dataclasses import dataclass

from peekdown.core.config import FilesystemConfigOps, PeekdownConfig
from peekdown.core.layout import STATE_FILE_NAME, app_support_dir
from peekdown.core.registration_state import FileRegistrationStore, RegistrationStore
from peekdown.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback
from peekdown.ops.code_signing import CodeSigning, RealCodeSigning
from peekdown.ops.detached import DetachedLauncher, RealDetachedLauncher
from peekdown.ops.dialogs import Dialogs, RealDialogs
from peekdown.ops.installer import BundleInstaller, RealBundleInstaller
from peekdown.ops.registry import ExtensionRegistry, RealExtensionRegistry
from peekdown.ops.time import RealTime, Time


@dataclass(frozen=True)
class PeekdownContext:
    """Immutable context holding all dependencies for registration work.

    Created at the entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    installer: BundleInstaller
    code_signing: CodeSigning
    registry: ExtensionRegistry
    launcher: DetachedLauncher
    dialogs: Dialogs
    state_store: RegistrationStore
    time: Time
    feedback: UserFeedback
    config: PeekdownConfig

    @staticmethod
    def for_test(
        installer: BundleInstaller | None = None,
        code_signing: CodeSigning | None = None,
        registry: ExtensionRegistry | None = None,
        launcher: DetachedLauncher | None = None,
        dialogs: Dialogs | None = None,
        state_store: RegistrationStore | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        config: PeekdownConfig | None = None,
    ) -> "PeekdownContext":
        """Create test context with optional pre-configured ops.

        Unspecified dependencies get their fake implementations: a recording
        installer backed by the real one (fingerprints need real files), a code
        signer that trusts everything, and in-memory registry, launcher,
        dialogs, store, clock and feedback.

        Example:
            >>> signing = FakeCodeSigning(invalid_bundles={source})
            >>> ctx = PeekdownContext.for_test(code_signing=signing)
        """
        from tests.fakes.code_signing import FakeCodeSigning
        from tests.fakes.detached import FakeDetachedLauncher
        from tests.fakes.dialogs import FakeDialogs
        from tests.fakes.installer import RecordingBundleInstaller
        from tests.fakes.registry import FakeExtensionRegistry
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        from peekdown.core.registration_state import InMemoryRegistrationStore

        return PeekdownContext(
            installer=installer if installer is not None else RecordingBundleInstaller(),
            code_signing=code_signing if code_signing is not None else FakeCodeSigning(),
            registry=registry if registry is not None else FakeExtensionRegistry(),
            launcher=launcher if launcher is not None else FakeDetachedLauncher(),
            dialogs=dialogs if dialogs is not None else FakeDialogs(),
            state_store=state_store if state_store is not None else InMemoryRegistrationStore(),
            time=time if time is not None else FakeTime(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            config=config if config is not None else PeekdownConfig.defaults(),
        )


def create_context(*, quiet: bool = False) -> PeekdownContext:
    """Create production context with real implementations.

    Called once at the entry point.

    Args:
        quiet: Suppress informational feedback (Finder launches)

    Raises:
        ValueError: If the config file is malformed
    """
    config = FilesystemConfigOps().load()
    launcher = RealDetachedLauncher()
    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return PeekdownContext(
        installer=RealBundleInstaller(),
        code_signing=RealCodeSigning(),
        registry=RealExtensionRegistry(launcher),
        launcher=launcher,
        dialogs=RealDialogs(),
        state_store=FileRegistrationStore(app_support_dir() / STATE_FILE_NAME),
        time=RealTime(),
        feedback=feedback,
        config=config,
    )
