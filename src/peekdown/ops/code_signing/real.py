"""Real code signing inspection using the codesign CLI."""

import logging
import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from peekdown.core.subprocess import run_subprocess_with_context
from peekdown.ops.code_signing.abc import CodeSigning, SignatureCheck

logger = logging.getLogger(__name__)

CODESIGN_TIMEOUT_SECONDS = 60


class RealCodeSigning(CodeSigning):
    """Calls /usr/bin/codesign.

    Probes use check=False and interpret the exit code; only a missing tool
    surfaces as RuntimeError.
    """

    def verify_signature(self, bundle_path: Path) -> SignatureCheck:
        if not bundle_path.exists():
            return SignatureCheck(valid=False, detail=f"Bundle not found: {bundle_path}")

        result = run_subprocess_with_context(
            ["codesign", "--verify", "--deep", "--strict", str(bundle_path)],
            operation_context=f"verify code signature of {bundle_path}",
            check=False,
            timeout=CODESIGN_TIMEOUT_SECONDS,
        )
        if result.returncode == 0:
            return SignatureCheck(valid=True)

        detail = result.stderr.strip() or f"codesign exited with {result.returncode}"
        logger.debug("Signature check failed for %s: %s", bundle_path, detail)
        return SignatureCheck(valid=False, detail=detail)

    def read_entitlements(self, binary_path: Path) -> dict[str, Any]:
        if not binary_path.exists():
            return {}

        # ":-" asks for the raw plist on stdout instead of the blob header
        result = run_subprocess_with_context(
            ["codesign", "-d", "--entitlements", ":-", str(binary_path)],
            operation_context=f"read entitlements of {binary_path}",
            check=False,
            timeout=CODESIGN_TIMEOUT_SECONDS,
        )
        if result.returncode != 0:
            logger.debug("codesign -d failed for %s: %s", binary_path, result.stderr.strip())
            return {}

        payload = result.stdout.strip()
        if not payload:
            return {}

        try:
            data = plistlib.loads(payload.encode("utf-8"))
        except (ValueError, ExpatError):
            logger.debug("Unparsable entitlements plist for %s", binary_path)
            return {}

        if not isinstance(data, dict):
            return {}
        return data
