"""Generators, uniform sources and the generator registry."""

from __future__ import annotations

from random_oo.services.generator_registry import (
    GeneratorRegistry,
    create_generator,
    get_generator_registry,
)
from random_oo.services.generators import Bootstrap, Generator, Normal, Uniform, UniformInt
from random_oo.services.inverse_normal import inverse_normal_cdf, ltqnorm
from random_oo.services.uniform_source import (
    NumpyUniformSource,
    UniformSource,
    get_shared_source,
    normalize_seed,
    set_shared_source,
)

__all__ = [
    "Bootstrap",
    "Generator",
    "GeneratorRegistry",
    "Normal",
    "NumpyUniformSource",
    "Uniform",
    "UniformInt",
    "UniformSource",
    "create_generator",
    "get_generator_registry",
    "get_shared_source",
    "inverse_normal_cdf",
    "ltqnorm",
    "normalize_seed",
    "set_shared_source",
]
