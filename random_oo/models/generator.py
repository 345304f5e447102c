"""Generator-related models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class ParameterInfo(BaseModel):
    """Information about a generator constructor parameter."""

    name: str = Field(..., description="Parameter name")
    description: str = Field(..., description="Parameter description")
    type: Literal["float", "int", "list"] = Field(..., description="Parameter type")
    required: bool = Field(False, description="Whether the parameter is required")
    default: float | int | list | None = Field(None, description="Default value")
    min_value: float | None = Field(None, description="Minimum value (if applicable)")


class GeneratorInfo(BaseModel):
    """Information about an available generator."""

    name: str = Field(..., description="Registry name (e.g., 'uniform_int')")
    display_name: str = Field(..., description="Display name (e.g., 'UniformInt')")
    description: str = Field(..., description="Generator description")
    category: Literal["continuous", "discrete", "empirical"] = Field(
        ..., description="Generator category"
    )
    parameters: list[ParameterInfo] = Field(..., description="List of parameters")


class DefaultRange(BaseModel):
    """No bounds given; the generator's own default range applies."""

    mode: Literal["default"] = "default"


class HighOnly(BaseModel):
    """Only the upper bound given; the lower bound is 0."""

    mode: Literal["high_only"] = "high_only"
    high: float | int


class BoundedRange(BaseModel):
    """Both bounds given, in either order."""

    mode: Literal["range"] = "range"
    low: float | int
    high: float | int


RangeSpec = Annotated[
    Union[DefaultRange, HighOnly, BoundedRange], Field(discriminator="mode")
]


class NormalParams(BaseModel):
    """Mean and standard deviation of a normal generator."""

    mean: float = 0.0
    stdev: float = 1.0


def range_spec_from_args(args: tuple[Any, ...]) -> DefaultRange | HighOnly | BoundedRange:
    """Map 0, 1 or 2 positional bounds onto a construction mode.

    Callers validate the values and the argument count beforehand.
    """
    if len(args) == 0:
        return DefaultRange()
    if len(args) == 1:
        return HighOnly(high=args[0])
    return BoundedRange(low=args[0], high=args[1])


def range_args(spec: DefaultRange | HighOnly | BoundedRange) -> tuple[Any, ...]:
    """Inverse of ``range_spec_from_args``: the positional bounds for a mode."""
    if isinstance(spec, HighOnly):
        return (spec.high,)
    if isinstance(spec, BoundedRange):
        return (spec.low, spec.high)
    return ()
