"""Random variate generators with a common seed/next interface.

Each generator turns exactly one draw from a uniform [0, 1) source into one
variate. Generators built without an explicit ``source`` share the
process-wide source from ``get_shared_source()``: seeding one of them
reseeds them all.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Iterable

import numpy as np

from random_oo.core.config import settings
from random_oo.core.exceptions import AbstractMethodError, InvalidArgumentError, LimitError
from random_oo.models.generator import (
    BoundedRange,
    DefaultRange,
    GeneratorInfo,
    HighOnly,
    NormalParams,
    ParameterInfo,
    range_args,
    range_spec_from_args,
)
from random_oo.services.inverse_normal import inverse_normal_cdf
from random_oo.services.uniform_source import UniformSource, get_shared_source

logger = logging.getLogger(__name__)

_NUMBER_TYPES = (int, float, np.integer, np.floating)


def _check_number(generator: str, param_name: str, value: Any) -> int | float:
    """Reject non-numeric and non-finite parameters.

    Returns:
        The value as a plain Python int or float

    Raises:
        InvalidArgumentError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, _NUMBER_TYPES):
        raise InvalidArgumentError(
            generator,
            f"Parameter '{param_name}' must be a number, got {type(value).__name__}",
        )
    if isinstance(value, (float, np.floating)) and not math.isfinite(value):
        raise InvalidArgumentError(generator, f"Parameter '{param_name}' must be finite, got {value}")
    try:
        float(value)
    except OverflowError:
        raise InvalidArgumentError(generator, f"Parameter '{param_name}' is out of range, got {value}")
    if isinstance(value, np.generic):
        return value.item()
    return value


def _check_arity(generator: str, args: tuple[Any, ...], max_args: int) -> None:
    if len(args) > max_args:
        raise InvalidArgumentError(
            generator, f"expected at most {max_args} positional arguments, got {len(args)}"
        )


class Generator(ABC):
    """Base class for random variate generators.

    Subclasses implement ``seed`` and ``next``. ``seed`` accepts a list of
    seed values; generators that need a single seed use the first one.
    ``next`` takes no arguments and returns one variate.
    """

    name: str
    display_name: str
    description: str
    category: str
    parameters: list[ParameterInfo]
    sample_dtype: Any = np.float64

    def __init__(self, *, source: UniformSource | None = None):
        self._source = source

    @property
    def source(self) -> UniformSource:
        """Uniform source this generator draws from."""
        if self._source is not None:
            return self._source
        return get_shared_source()

    @property
    def shares_source(self) -> bool:
        """True when the generator uses the process-wide shared source."""
        return self._source is None

    @abstractmethod
    def seed(self, *seeds: Any) -> None:
        """Seed the underlying random source."""
        raise AbstractMethodError("seed", type(self).__name__)

    @abstractmethod
    def next(self) -> Any:
        """Return the next variate."""
        raise AbstractMethodError("next", type(self).__name__)

    def params(self) -> dict[str, Any]:
        """Resolved construction parameters."""
        return {}

    def _reseed(self, seeds: tuple[Any, ...]) -> None:
        """Reseed the source from the first seed value.

        A single list or tuple argument is taken as the list of seeds. With
        no seeds the source is reseeded from OS entropy.
        """
        if len(seeds) == 1 and isinstance(seeds[0], (list, tuple)):
            seeds = tuple(seeds[0])
        value = seeds[0] if seeds else None
        logger.debug(
            "Reseeding %s source from %s with %r",
            "shared" if self.shares_source else "private",
            type(self).__name__,
            value,
        )
        self.source.reseed(value)

    def sample(self, size: int) -> np.ndarray:
        """Draw ``size`` consecutive variates.

        Args:
            size: Number of variates to draw

        Returns:
            Array of shape (size,) holding the results of ``size`` calls to ``next``

        Raises:
            InvalidArgumentError: If size is not a non-negative integer
            LimitError: If size exceeds the configured maximum
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidArgumentError(self.name, f"size must be an integer, got {type(size).__name__}")
        if size < 0:
            raise InvalidArgumentError(self.name, f"size must be non-negative, got {size}")
        if size > settings.max_sample_size:
            raise LimitError("sample size", int(size), settings.max_sample_size)

        samples = np.empty(int(size), dtype=self.sample_dtype)
        for i in range(int(size)):
            samples[i] = self.next()
        return samples

    def get_info(self) -> GeneratorInfo:
        """Get generator metadata as GeneratorInfo."""
        return GeneratorInfo(
            name=self.name,
            display_name=self.display_name,
            description=self.description,
            category=self.category,  # type: ignore
            parameters=self.parameters,
        )

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        return self.next()

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.params().items())
        return f"{type(self).__name__}({fields})"


class Uniform(Generator):
    """Uniform distribution of reals over [low, high).

    ``Uniform()`` covers [0, 1), ``Uniform(high)`` covers [0, high) and
    ``Uniform(a, b)`` covers [min(a, b), max(a, b)). With ``low == high``
    every draw returns ``low``.
    """

    name = "uniform"
    display_name = "Uniform"
    description = "Uniform distribution of reals over [low, high)"
    category = "continuous"
    parameters = [
        ParameterInfo(name="low", description="Lower bound (inclusive)", type="float", default=0.0),
        ParameterInfo(name="high", description="Upper bound (exclusive)", type="float", default=1.0),
    ]

    def __init__(self, *bounds: Any, source: UniformSource | None = None):
        super().__init__(source=source)
        _check_arity(self.name, bounds, 2)
        names = ("high",) if len(bounds) == 1 else ("low", "high")
        bounds = tuple(_check_number(self.name, n, v) for n, v in zip(names, bounds))

        spec = range_spec_from_args(bounds)
        if isinstance(spec, BoundedRange):
            low, high = sorted((float(spec.low), float(spec.high)))
        elif isinstance(spec, HighOnly):
            low, high = 0.0, float(spec.high)
        else:
            low, high = 0.0, 1.0
        self.low = low
        self.high = high

    @classmethod
    def from_spec(
        cls, spec: DefaultRange | HighOnly | BoundedRange, *, source: UniformSource | None = None
    ) -> Uniform:
        """Build from an explicit construction mode."""
        return cls(*range_args(spec), source=source)

    def seed(self, *seeds: Any) -> None:
        self._reseed(seeds)

    def next(self) -> float:
        u = self.source.draw_uniform_01()
        span = self.high - self.low
        if math.isinf(span):
            # Bounds too far apart to subtract; interpolate instead
            value = (1 - u) * self.low + u * self.high
        else:
            value = self.low + u * span
        # Rounding can land on the open upper bound for wide ranges
        if self.low < self.high and value >= self.high:
            value = math.nextafter(self.high, self.low)
        return value

    def params(self) -> dict[str, Any]:
        return {"low": self.low, "high": self.high}


class UniformInt(Generator):
    """Uniform distribution of integers over [low, high], both inclusive.

    Bounds are truncated toward zero before they are ordered. ``UniformInt()``
    yields 0 or 1 and ``UniformInt(high)`` yields integers in [0, high].

    A single negative argument keeps ``low=0, high=<argument>``; draws then
    cover [argument, 0].
    """

    name = "uniform_int"
    display_name = "UniformInt"
    description = "Uniform distribution of integers over [low, high], both inclusive"
    category = "discrete"
    parameters = [
        ParameterInfo(name="low", description="Lower bound (inclusive)", type="int", default=0),
        ParameterInfo(name="high", description="Upper bound (inclusive)", type="int", default=1),
    ]
    sample_dtype = np.int64

    def __init__(self, *bounds: Any, source: UniformSource | None = None):
        super().__init__(source=source)
        _check_arity(self.name, bounds, 2)
        names = ("high",) if len(bounds) == 1 else ("low", "high")
        bounds = tuple(_check_number(self.name, n, v) for n, v in zip(names, bounds))

        spec = range_spec_from_args(bounds)
        if isinstance(spec, BoundedRange):
            low, high = sorted((int(spec.low), int(spec.high)))
        elif isinstance(spec, HighOnly):
            low, high = 0, int(spec.high)
        else:
            low, high = 0, 1
        self.low = low
        self.high = high

    @classmethod
    def from_spec(
        cls, spec: DefaultRange | HighOnly | BoundedRange, *, source: UniformSource | None = None
    ) -> UniformInt:
        """Build from an explicit construction mode."""
        return cls(*range_args(spec), source=source)

    def seed(self, *seeds: Any) -> None:
        self._reseed(seeds)

    def next(self) -> int:
        u = self.source.draw_uniform_01()
        span = self.high - self.low
        if span >= 0:
            return math.floor(u * (span + 1)) + self.low
        return self.low - math.floor(u * (1 - span))

    def params(self) -> dict[str, Any]:
        return {"low": self.low, "high": self.high}


class Normal(Generator):
    """Normal (Gaussian) distribution with given mean and standard deviation.

    Variates come from the inverse normal CDF applied to one uniform draw.
    ``Normal()`` is the standard normal, ``Normal(mean)`` has unit standard
    deviation, and ``Normal(mean, stdev)`` stores ``abs(stdev)``.
    """

    name = "normal"
    display_name = "Normal"
    description = "Normal (Gaussian) distribution with mean and standard deviation"
    category = "continuous"
    parameters = [
        ParameterInfo(name="mean", description="Mean (center) of the distribution", type="float", default=0.0),
        ParameterInfo(
            name="stdev",
            description="Standard deviation; the absolute value is used",
            type="float",
            default=1.0,
            min_value=0.0,
        ),
    ]

    def __init__(self, *params: Any, source: UniformSource | None = None):
        super().__init__(source=source)
        _check_arity(self.name, params, 2)
        params = tuple(_check_number(self.name, n, v) for n, v in zip(("mean", "stdev"), params))

        self.mean = float(params[0]) if len(params) > 0 else 0.0
        self.stdev = abs(float(params[1])) if len(params) > 1 else 1.0

    @classmethod
    def from_params(cls, params: NormalParams, *, source: UniformSource | None = None) -> Normal:
        """Build from explicit mean and standard deviation."""
        return cls(params.mean, params.stdev, source=source)

    def seed(self, *seeds: Any) -> None:
        self._reseed(seeds)

    def next(self) -> float:
        p = self.source.draw_uniform_01()
        if p == 0.0:
            p = settings.zero_probability_substitute
        return inverse_normal_cdf(p) * self.stdev + self.mean

    def params(self) -> dict[str, Any]:
        return {"mean": self.mean, "stdev": self.stdev}


class Bootstrap(Generator):
    """Bootstrap resampling, with replacement, from a fixed set of observations.

    ``Bootstrap(2, 3, 3, 4)`` and ``Bootstrap([2, 3, 3, 4])`` are equivalent: a
    single list, tuple or array argument is the whole dataset. To resample
    from a dataset of sequences, wrap it (``Bootstrap([[1, 2], [3, 4]])``) or
    use ``from_values``. The data is copied into a tuple at construction.
    """

    name = "bootstrap"
    display_name = "Bootstrap"
    description = "Resampling with replacement from a fixed set of observations"
    category = "empirical"
    parameters = [
        ParameterInfo(
            name="data",
            description="Observations to resample from (at least one)",
            type="list",
            required=True,
        ),
    ]
    sample_dtype = object

    def __init__(self, *data: Any, source: UniformSource | None = None):
        super().__init__(source=source)
        if len(data) == 1 and isinstance(data[0], (list, tuple, np.ndarray)):
            data = tuple(data[0])
        if len(data) == 0:
            raise InvalidArgumentError(self.name, "requires at least one data item")

        self.data: tuple[Any, ...] = tuple(data)
        self.size = len(self.data)

    @classmethod
    def from_values(cls, *items: Any, source: UniformSource | None = None) -> Bootstrap:
        """Build from individual observations, each kept as one data item."""
        return cls(list(items), source=source)

    @classmethod
    def from_sequence(cls, seq: Iterable[Any], *, source: UniformSource | None = None) -> Bootstrap:
        """Build from an iterable holding the whole dataset."""
        return cls(list(seq), source=source)

    def seed(self, *seeds: Any) -> None:
        self._reseed(seeds)

    def next(self) -> Any:
        index = int(self.source.draw_uniform_01() * self.size)
        return self.data[index]

    def params(self) -> dict[str, Any]:
        return {"size": self.size}
