"""Content-addressed identity for helper bundles.

A fingerprint covers exactly the two binaries that decide what the helper
does: its main executable and the nested extension's executable. Two bundles
with byte-identical binaries always share a fingerprint; metadata such as
mtimes and resource files never affects it.
"""

import hashlib
from pathlib import Path

from peekdown.core.layout import EXTENSION_EXECUTABLE_RELATIVE, HELPER_EXECUTABLE_RELATIVE

# Not a hex digit, so it can never be confused with digest content
FINGERPRINT_SEPARATOR = ":"

_CHUNK_SIZE = 1024 * 1024


def _file_digest(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def fingerprint(bundle_path: Path) -> str | None:
    """Compute the fingerprint of a helper bundle.

    Args:
        bundle_path: Helper bundle root (source or installed copy)

    Returns:
        "<helper sha256>:<extension sha256>", or None when either binary is
        missing, which callers treat as "identity unknown"
    """
    helper_exe = bundle_path / HELPER_EXECUTABLE_RELATIVE
    extension_exe = bundle_path / EXTENSION_EXECUTABLE_RELATIVE

    if not helper_exe.is_file() or not extension_exe.is_file():
        return None

    return FINGERPRINT_SEPARATOR.join((_file_digest(helper_exe), _file_digest(extension_exe)))
