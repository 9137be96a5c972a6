"""Trust verification for helper bundles.

A helper is only handed to the OS after two independent checks pass:

1. Its code signature is intact and covers all nested code.
2. The nested extension binary carries the sandbox entitlement the OS
   requires before it will load a preview extension.

Both checks block. A signing tool that is missing or times out yields an
untrusted verdict rather than an exception. A failed verdict aborts the
registration attempt and is not retried; a correctly signed helper has to ship
with a later host version.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from peekdown.core.layout import EXTENSION_EXECUTABLE_RELATIVE, REQUIRED_ENTITLEMENT
from peekdown.ops.code_signing.abc import CodeSigning

logger = logging.getLogger(__name__)

SIGNATURE_INVALID_REASON = "signature invalid or bundle tampered/unsigned"
CAPABILITY_MISSING_REASON = "required capability missing"
SIGNING_TOOL_FAILED_REASON = "signing tool failed"


@dataclass(frozen=True)
class TrustVerdict:
    """Result of verifying a helper bundle.

    Attributes:
        trusted: True only when every check passed
        reasons: One entry per failed check, in check order
        detail: Diagnostics from the signing tool, if any
    """

    trusted: bool
    reasons: tuple[str, ...] = ()
    detail: str | None = None

    @property
    def summary(self) -> str:
        if self.trusted:
            return "trusted"
        return "; ".join(self.reasons)


def verify_trust(code_signing: CodeSigning, bundle_path: Path) -> TrustVerdict:
    """Run both trust checks on a helper bundle.

    Args:
        code_signing: Signing tool implementation
        bundle_path: Helper bundle root

    Returns:
        TrustVerdict listing every failed check
    """
    reasons: list[str] = []

    try:
        signature = code_signing.verify_signature(bundle_path)
        entitlements = code_signing.read_entitlements(bundle_path / EXTENSION_EXECUTABLE_RELATIVE)
    except RuntimeError as e:
        logger.warning("Could not verify %s: %s", bundle_path, e)
        return TrustVerdict(trusted=False, reasons=(SIGNING_TOOL_FAILED_REASON,), detail=str(e))

    if not signature.valid:
        reasons.append(SIGNATURE_INVALID_REASON)

    if entitlements.get(REQUIRED_ENTITLEMENT) is not True:
        reasons.append(CAPABILITY_MISSING_REASON)

    return TrustVerdict(trusted=not reasons, reasons=tuple(reasons), detail=signature.detail)
