from peekdown.ops.installer.abc import BundleInstaller
from peekdown.ops.installer.real import RealBundleInstaller

__all__ = [
    "BundleInstaller",
    "RealBundleInstaller",
]
