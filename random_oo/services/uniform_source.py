"""Uniform random sources consumed by the generators.

Every generator reduces each variate to exactly one draw from a uniform
source over [0, 1). By default all generators share one process-wide source,
so reseeding any generator reseeds the stream seen by every other generator
that was built without an explicit ``source``.
"""

from __future__ import annotations

import hashlib
import logging
import math
import struct
from typing import Any, Protocol, runtime_checkable

import numpy as np

from random_oo.core.config import settings
from random_oo.core.exceptions import SeedError

logger = logging.getLogger(__name__)

_SEED_MASK = (1 << 128) - 1


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform [0, 1) random sources.

    Any seedable uniform generator (numpy, a scripted test double, ...)
    can back the generators as long as it implements this protocol.
    """

    def reseed(self, value: Any) -> None:
        """Reset the source state from a single seed value."""
        ...

    def draw_uniform_01(self) -> float:
        """Return the next uniform real in [0, 1)."""
        ...


def normalize_seed(value: Any) -> int | None:
    """Convert a seed value into non-negative integer entropy for numpy.

    Args:
        value: None, an integer, a float, a string or bytes

    Returns:
        Non-negative integer, or None to request OS entropy

    Raises:
        SeedError: If the value has an unsupported type or is not finite
    """
    if value is None:
        return None

    if isinstance(value, (int, np.integer)):
        return int(value) & _SEED_MASK

    if isinstance(value, (float, np.floating)):
        value = float(value)
        if not math.isfinite(value):
            raise SeedError(value, "seed must be finite")
        if value.is_integer():
            return int(value) & _SEED_MASK
        # Fractional seeds use their IEEE-754 bit pattern
        return int.from_bytes(struct.pack(">d", value), "big")

    if isinstance(value, str):
        value = value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(hashlib.sha256(bytes(value)).digest(), "big")

    raise SeedError(value, f"unsupported seed type {type(value).__name__}")


class NumpyUniformSource:
    """Uniform source backed by ``numpy.random.default_rng``."""

    def __init__(self, seed: Any = None):
        self._rng = np.random.default_rng(normalize_seed(seed))

    def reseed(self, value: Any) -> None:
        """Replace the underlying numpy generator with a freshly seeded one."""
        self._rng = np.random.default_rng(normalize_seed(value))

    def draw_uniform_01(self) -> float:
        return float(self._rng.random())


_shared_source: UniformSource = NumpyUniformSource(settings.default_seed)


def get_shared_source() -> UniformSource:
    """Get the process-wide shared uniform source.

    Returns:
        The source used by every generator built without an explicit source
    """
    return _shared_source


def set_shared_source(source: UniformSource) -> UniformSource:
    """Replace the process-wide shared uniform source.

    Args:
        source: New shared source

    Returns:
        The previously shared source, so callers can restore it
    """
    global _shared_source
    if not isinstance(source, UniformSource):
        raise TypeError(f"Expected a UniformSource, got {type(source).__name__}")
    previous = _shared_source
    _shared_source = source
    logger.debug("Shared uniform source replaced with %s", type(source).__name__)
    return previous
