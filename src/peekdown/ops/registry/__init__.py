from peekdown.ops.registry.abc import ExtensionRegistry
from peekdown.ops.registry.real import RealExtensionRegistry

__all__ = [
    "ExtensionRegistry",
    "RealExtensionRegistry",
]
