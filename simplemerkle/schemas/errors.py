"""
Schemas
File: errors.py

Purpose: Standard error taxonomy for simplemerkle.
Defines both a Pydantic model for structured error reporting
and Python exceptions for control flow.

The Merkle tree builder itself never raises: every input sequence,
including the empty one, maps to a defined result. The exceptions here
are raised at the edges (digest decoding, hash selection, configuration loading).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Digest Errors
    DIGEST_LENGTH_INVALID = "DIGEST_LENGTH_INVALID"
    DIGEST_DECODE_ERROR = "DIGEST_DECODE_ERROR"

    # Hashing Errors
    HASH_ALGORITHM_UNKNOWN = "HASH_ALGORITHM_UNKNOWN"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class SimpleMerkleError(BaseModel):
    """
    Error model for structured error reporting (e.g. CLI JSON output).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.DIGEST_LENGTH_INVALID],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SimpleMerkleException(Exception):
    """
    Base exception for all simplemerkle errors.

    Carries a stable error code and structured details, and can be
    converted to a SimpleMerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SIMPLEMERKLE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> SimpleMerkleError:
        """Convert this exception to a SimpleMerkleError model."""
        return SimpleMerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class DigestLengthException(SimpleMerkleException):
    """Raised when a digest is built from a buffer of the wrong size."""

    def __init__(
        self,
        expected: int,
        actual: int,
    ) -> None:
        super().__init__(
            message=f"digest should be {expected} bytes, but it is {actual} bytes",
            code=ErrorCodes.DIGEST_LENGTH_INVALID,
            details={"expected": expected, "actual": actual},
        )


class DigestDecodeException(SimpleMerkleException):
    """Raised when a digest string is not valid hex."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.DIGEST_DECODE_ERROR,
            details=details,
        )


class UnknownHashAlgorithmException(SimpleMerkleException):
    """Raised when a hash algorithm name is not registered."""

    def __init__(
        self,
        name: str,
        available: list[str] | None = None,
    ) -> None:
        super().__init__(
            message=f"Unknown hash algorithm: {name}",
            code=ErrorCodes.HASH_ALGORITHM_UNKNOWN,
            details={"name": name, "available": available or []},
        )


class ConfigException(SimpleMerkleException):
    """Exception raised when configuration cannot be loaded or is invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
        )
