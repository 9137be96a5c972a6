"""Code signing inspection interface.

Both operations are blocking. Their answers feed the trust decision and must
be known before any registration is committed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SignatureCheck:
    """Outcome of a deep signature verification.

    Attributes:
        valid: True when the signature is intact and covers all nested code
        detail: Tool diagnostics when invalid (stderr of the verifier)
    """

    valid: bool
    detail: str | None = None


class CodeSigning(ABC):
    """Abstract interface over the platform code signing tool."""

    @abstractmethod
    def verify_signature(self, bundle_path: Path) -> SignatureCheck:
        """Deep-verify the code signature of a bundle.

        Unsigned, tampered or partially copied bundles report valid=False
        rather than raising.

        Args:
            bundle_path: Bundle directory to verify

        Returns:
            SignatureCheck describing the result
        """
        ...

    @abstractmethod
    def read_entitlements(self, binary_path: Path) -> dict[str, Any]:
        """Read the entitlements embedded in a signed binary.

        Args:
            binary_path: Executable whose signature carries the entitlements

        Returns:
            Entitlement key/value mapping; empty when none are embedded or the
            binary cannot be inspected
        """
        ...
