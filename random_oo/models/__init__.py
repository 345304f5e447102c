"""Pydantic models for random-oo."""

from __future__ import annotations

from random_oo.models.generator import (
    BoundedRange,
    DefaultRange,
    GeneratorInfo,
    HighOnly,
    NormalParams,
    ParameterInfo,
    RangeSpec,
    range_args,
    range_spec_from_args,
)

__all__ = [
    "BoundedRange",
    "DefaultRange",
    "GeneratorInfo",
    "HighOnly",
    "NormalParams",
    "ParameterInfo",
    "RangeSpec",
    "range_args",
    "range_spec_from_args",
]
