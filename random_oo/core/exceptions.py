"""Custom exceptions for random-oo."""

from __future__ import annotations

from typing import Any


class RandomOOError(Exception):
    """Base exception for all random-oo errors."""

    code: str = "UNKNOWN_ERROR"
    phase: str = "unknown"

    def __init__(
        self,
        message: str,
        generator: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.generator = generator
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to error response dict."""
        error = {
            "code": self.code,
            "message": self.message,
            "phase": self.phase,
        }
        if self.generator:
            error["generator"] = self.generator
        if self.details:
            error["details"] = self.details
        return {"error": error}


class AbstractMethodError(RandomOOError):
    """Abstract generator operation was called instead of a subclass override."""

    code = "ABSTRACT_METHOD"
    phase = "dispatch"

    def __init__(self, method_name: str, generator: str | None = None):
        super().__init__(
            message=f"call to abstract method '{method_name}'",
            generator=generator,
            details={"method": method_name},
        )


class InvalidArgumentError(RandomOOError):
    """Generator constructed or called with an invalid argument."""

    code = "INVALID_ARGUMENT"
    phase = "construct"

    def __init__(self, generator: str, reason: str):
        super().__init__(
            message=f"Invalid argument for '{generator}': {reason}",
            generator=generator,
            details={"reason": reason},
        )


class UnknownGeneratorError(RandomOOError):
    """Generator name not found in the registry."""

    code = "UNKNOWN_GENERATOR"
    phase = "resolve"

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            message=f"Unknown generator '{name}'. Available: {available}",
            details={"name": name, "available": available},
        )


class SeedError(RandomOOError):
    """Seed value cannot be turned into generator entropy."""

    code = "SEED_ERROR"
    phase = "seed"

    def __init__(self, value: Any, reason: str):
        super().__init__(
            message=f"Unsupported seed {value!r}: {reason}",
            details={"seed": repr(value), "reason": reason},
        )


class LimitError(RandomOOError):
    """Exceeded configured limits."""

    code = "LIMIT_ERROR"
    phase = "sample"

    def __init__(self, limit_name: str, value: int, max_value: int):
        super().__init__(
            message=f"Exceeded {limit_name} limit: {value} > {max_value}",
            details={"limit": limit_name, "value": value, "max": max_value},
        )
