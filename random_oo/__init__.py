"""Consistent object-oriented interface for generating random variates.

    >>> from random_oo import Normal, Uniform, UniformInt
    >>> prngs = [Uniform(), UniformInt(1, 6), Normal(0, 2)]
    >>> for prng in prngs:
    ...     prng.seed(23)
    >>> values = [prng.next() for prng in prngs]
"""

from __future__ import annotations

from random_oo.core import (
    AbstractMethodError,
    InvalidArgumentError,
    LimitError,
    RandomOOError,
    SeedError,
    UnknownGeneratorError,
    settings,
)
from random_oo.services import (
    Bootstrap,
    Generator,
    GeneratorRegistry,
    Normal,
    NumpyUniformSource,
    Uniform,
    UniformInt,
    UniformSource,
    create_generator,
    get_generator_registry,
    get_shared_source,
    inverse_normal_cdf,
    set_shared_source,
)

__version__ = "0.1.0"

__all__ = [
    "AbstractMethodError",
    "Bootstrap",
    "Generator",
    "GeneratorRegistry",
    "InvalidArgumentError",
    "LimitError",
    "Normal",
    "NumpyUniformSource",
    "RandomOOError",
    "SeedError",
    "Uniform",
    "UniformInt",
    "UniformSource",
    "UnknownGeneratorError",
    "create_generator",
    "get_generator_registry",
    "get_shared_source",
    "inverse_normal_cdf",
    "set_shared_source",
    "settings",
]
