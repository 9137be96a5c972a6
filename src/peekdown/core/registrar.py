"""Helper registration orchestration.

Each interactive launch of a packaged build runs register_helper(). The state
machine it implements is:

    Unregistered -> Registering -> Registered -> Stale -> Registering -> ...

Staleness is always detected, never assumed away: the stored record is diffed
against the host location and version, the bundled helper's fingerprint, and
the installed copy's own fingerprint.

Verification is an input to the decision and blocks. Activation is a
consequence of the decision and is dispatched best-effort after the new state
has been saved. Only one launch is expected to run this at a time; nothing
here takes a lock, so two concurrent launches could interleave installs.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from peekdown.core.context import PeekdownContext
from peekdown.core.fingerprint import fingerprint
from peekdown.core.launch import HostBundle
from peekdown.core.layout import (
    HELPER_BUNDLE_NAME,
    helper_extension_path,
    helper_source_path,
    helper_target_path,
)
from peekdown.core.registration_state import RegistrationState
from peekdown.core.trust import verify_trust

logger = logging.getLogger(__name__)


class StaleReason(Enum):
    NEVER_REGISTERED = "never registered"
    HOST_MOVED = "host application moved"
    HOST_VERSION_CHANGED = "host version changed"
    HELPER_PATH_CHANGED = "helper install location changed"
    SOURCE_CHANGED = "bundled helper changed"
    INSTALL_MODIFIED = "installed helper missing or modified"
    FORCED = "re-registration requested"


class RegistrationStatus(Enum):
    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    STALE = "stale"


class RegistrationOutcome(Enum):
    UP_TO_DATE = "up-to-date"
    REGISTERED = "registered"
    SOURCE_UNVERIFIABLE = "source-unverifiable"
    UNTRUSTED = "untrusted"
    INSTALL_FAILED = "install-failed"


@dataclass(frozen=True)
class RegistrationResult:
    """What a registration attempt decided and did.

    Attributes:
        outcome: Terminal decision of the attempt
        reasons: Why the installed state was considered Stale (empty if not)
        helper_path: Target helper location for this host
        message: Human-readable detail for failures
    """

    outcome: RegistrationOutcome
    reasons: tuple[StaleReason, ...]
    helper_path: Path
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (RegistrationOutcome.UP_TO_DATE, RegistrationOutcome.REGISTERED)


def check_staleness(
    state: RegistrationState | None,
    *,
    host: HostBundle,
    target_path: Path,
    source_fingerprint: str,
) -> tuple[StaleReason, ...]:
    """List every reason the recorded registration no longer holds.

    Reads the installed helper to fingerprint it, but never writes.

    Args:
        state: Last stored registration, or None
        host: Running host bundle
        target_path: Where the helper should be installed for this host
        source_fingerprint: Fingerprint of the bundled helper

    Returns:
        Stale reasons in check order; empty when the registration is current
    """
    if state is None:
        return (StaleReason.NEVER_REGISTERED,)

    reasons: list[StaleReason] = []
    if state.host_path != host.path:
        reasons.append(StaleReason.HOST_MOVED)
    if state.host_version != host.version:
        reasons.append(StaleReason.HOST_VERSION_CHANGED)
    if state.helper_path != target_path:
        reasons.append(StaleReason.HELPER_PATH_CHANGED)
    if state.helper_fingerprint != source_fingerprint:
        reasons.append(StaleReason.SOURCE_CHANGED)

    installed_fingerprint = fingerprint(state.helper_path) if state.helper_path else None
    if installed_fingerprint is None or installed_fingerprint != state.helper_fingerprint:
        reasons.append(StaleReason.INSTALL_MODIFIED)

    return tuple(reasons)


def registration_status(
    state: RegistrationState | None, reasons: tuple[StaleReason, ...]
) -> RegistrationStatus:
    if state is None:
        return RegistrationStatus.UNREGISTERED
    if reasons:
        return RegistrationStatus.STALE
    return RegistrationStatus.REGISTERED


def register_helper(ctx: PeekdownContext, host: HostBundle, *, force: bool = False) -> RegistrationResult:
    """Install, verify and register the helper if the current one is Stale.

    When nothing is Stale this performs one state read and two fingerprint
    reads, and no writes or registry calls.

    Args:
        ctx: Dependencies
        host: Running host bundle
        force: Treat a current registration as Stale

    Returns:
        RegistrationResult describing the decision
    """
    source = helper_source_path(host.path)
    target = helper_target_path(host.path, ctx.config.helper_install_dir)

    state = ctx.state_store.load()
    source_fingerprint = fingerprint(source)

    # Reinstalling from a source we can't identify would defeat the trust model
    if source_fingerprint is None:
        logger.warning("Bundled helper at %s is incomplete; skipping registration", source)
        return RegistrationResult(
            outcome=RegistrationOutcome.SOURCE_UNVERIFIABLE,
            reasons=(),
            helper_path=target,
            message=f"Bundled helper is missing or incomplete: {source}",
        )

    reasons = check_staleness(
        state, host=host, target_path=target, source_fingerprint=source_fingerprint
    )
    if force and not reasons:
        reasons = (StaleReason.FORCED,)

    if not reasons:
        logger.debug("Helper registration is current (%s)", target)
        return RegistrationResult(
            outcome=RegistrationOutcome.UP_TO_DATE, reasons=(), helper_path=target
        )

    logger.debug("Helper registration is stale: %s", ", ".join(r.value for r in reasons))

    source_verdict = verify_trust(ctx.code_signing, source)
    if not source_verdict.trusted:
        logger.warning("Bundled helper failed verification: %s", source_verdict.summary)
        return RegistrationResult(
            outcome=RegistrationOutcome.UNTRUSTED,
            reasons=reasons,
            helper_path=target,
            message=f"Bundled helper failed verification: {source_verdict.summary}",
        )

    try:
        ctx.installer.install(source, target)
    except OSError as e:
        logger.warning("Could not install helper to %s: %s", target, e)
        return RegistrationResult(
            outcome=RegistrationOutcome.INSTALL_FAILED,
            reasons=reasons,
            helper_path=target,
            message=f"Could not install helper to {target}: {e}",
        )

    # A partial copy fails here and is reinstalled on the next launch
    installed_verdict = verify_trust(ctx.code_signing, target)
    if not installed_verdict.trusted or fingerprint(target) != source_fingerprint:
        summary = installed_verdict.summary if not installed_verdict.trusted else "content mismatch"
        logger.warning("Installed helper at %s failed verification: %s", target, summary)
        return RegistrationResult(
            outcome=RegistrationOutcome.UNTRUSTED,
            reasons=reasons,
            helper_path=target,
            message=f"Installed helper failed verification: {summary}",
        )

    if state is not None and state.helper_path is not None:
        _remove_superseded_helper(ctx, state.helper_path, target)

    new_state = RegistrationState(
        registered_at=ctx.time.now(),
        host_path=host.path,
        helper_path=target,
        helper_fingerprint=source_fingerprint,
        host_version=host.version,
    )
    try:
        ctx.state_store.save(new_state)
    except OSError as e:
        logger.warning("Could not record registration at %s: %s", ctx.state_store.path(), e)
        return RegistrationResult(
            outcome=RegistrationOutcome.INSTALL_FAILED,
            reasons=reasons,
            helper_path=target,
            message=f"Could not record registration: {e}",
        )

    _activate_helper(ctx, target)
    return RegistrationResult(
        outcome=RegistrationOutcome.REGISTERED, reasons=reasons, helper_path=target
    )


def _is_helper_bundle(path: Path) -> bool:
    """Whether path looks like an installed helper and may be deleted.

    Recorded paths come from a user-editable file; only a complete helper
    bundle qualifies.
    """
    return path.name == HELPER_BUNDLE_NAME and fingerprint(path) is not None


def _remove_superseded_helper(ctx: PeekdownContext, old_path: Path, target: Path) -> None:
    if old_path == target or not old_path.exists():
        return
    if not _is_helper_bundle(old_path):
        logger.warning("Recorded helper path %s is not a helper bundle; not removing it", old_path)
        return

    ctx.registry.remove_extension(helper_extension_path(old_path))
    try:
        ctx.installer.remove(old_path)
    except OSError as e:
        logger.warning("Could not remove superseded helper at %s: %s", old_path, e)


def _activate_helper(ctx: PeekdownContext, target: Path) -> None:
    # Best-effort: failures surface as a Stale registration on a later launch
    ctx.registry.clear_quarantine(target)
    ctx.registry.add_extension(helper_extension_path(target))
    ctx.registry.launch_helper(target)


def unregister_helper(ctx: PeekdownContext, host: HostBundle | None) -> list[Path]:
    """Remove installed helpers and forget the registration.

    Covers both the recorded helper and, when the host is known, the helper
    location derived from it.

    Args:
        ctx: Dependencies
        host: Running host bundle, if packaged

    Returns:
        Helper bundles that were removed

    Raises:
        OSError: If a helper bundle cannot be deleted
    """
    candidates: list[Path] = []
    state = ctx.state_store.load()
    if state is not None and state.helper_path is not None:
        if _is_helper_bundle(state.helper_path):
            candidates.append(state.helper_path)
        elif state.helper_path.exists():
            logger.warning(
                "Recorded helper path %s is not a helper bundle; not removing it",
                state.helper_path,
            )
    if host is not None:
        target = helper_target_path(host.path, ctx.config.helper_install_dir)
        if target not in candidates:
            candidates.append(target)

    removed: list[Path] = []
    for path in candidates:
        if not path.exists():
            continue
        ctx.registry.remove_extension(helper_extension_path(path))
        ctx.installer.remove(path)
        removed.append(path)

    ctx.state_store.clear()
    return removed
