"""
Schemas

Error taxonomy shared by the library and the CLI.
"""

from .errors import (
    ConfigException,
    DigestDecodeException,
    DigestLengthException,
    ErrorCodes,
    SimpleMerkleError,
    SimpleMerkleException,
    UnknownHashAlgorithmException,
)

__all__ = [
    "ErrorCodes",
    "SimpleMerkleError",
    "SimpleMerkleException",
    "DigestLengthException",
    "DigestDecodeException",
    "UnknownHashAlgorithmException",
    "ConfigException",
]
