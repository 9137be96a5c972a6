from peekdown.ops.code_signing.abc import CodeSigning, SignatureCheck
from peekdown.ops.code_signing.real import RealCodeSigning

__all__ = [
    "CodeSigning",
    "RealCodeSigning",
    "SignatureCheck",
]
