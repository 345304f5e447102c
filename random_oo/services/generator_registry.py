"""Generator registry for creating generators by name.

Generators are looked up by their registry name (``"uniform_int"``) or by
their class name (``"UniformInt"``), then constructed with the caller's
arguments passed straight through.
"""

from __future__ import annotations

import logging
from typing import Any

from random_oo.core.exceptions import UnknownGeneratorError
from random_oo.models.generator import GeneratorInfo
from random_oo.services.generators import Bootstrap, Generator, Normal, Uniform, UniformInt

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Registry for managing available generator classes."""

    def __init__(self):
        """Initialize an empty generator registry."""
        self._generators: dict[str, type[Generator]] = {}
        self._aliases: dict[str, str] = {}

    def register_generator(self, generator_cls: type[Generator]) -> None:
        """Register a generator class in the registry.

        Args:
            generator_cls: Generator subclass to register

        Raises:
            ValueError: If a generator with the same name already exists
        """
        name = generator_cls.name
        if name in self._generators:
            raise ValueError(f"Generator '{name}' is already registered")
        self._generators[name] = generator_cls
        self._aliases[generator_cls.__name__] = name
        logger.debug("Registered generator %s as '%s'", generator_cls.__name__, name)

    def get_generator(self, name: str) -> type[Generator]:
        """Get a generator class by registry name or class name.

        Raises:
            UnknownGeneratorError: If no generator matches the name
        """
        if name in self._generators:
            return self._generators[name]
        if name in self._aliases:
            return self._generators[self._aliases[name]]
        raise UnknownGeneratorError(name, list(self._generators.keys()))

    def create(self, name: str, *args: Any, **kwargs: Any) -> Generator:
        """Construct the named generator with the given arguments."""
        return self.get_generator(name)(*args, **kwargs)

    def get_available_generators(self) -> list[GeneratorInfo]:
        """Get information about all registered generators."""
        return [
            GeneratorInfo(
                name=cls.name,
                display_name=cls.display_name,
                description=cls.description,
                category=cls.category,  # type: ignore
                parameters=cls.parameters,
            )
            for cls in self._generators.values()
        ]

    def is_registered(self, name: str) -> bool:
        """Check if a generator is registered under a registry or class name."""
        return name in self._generators or name in self._aliases


# Global registry instance
_global_registry = GeneratorRegistry()

_global_registry.register_generator(Uniform)
_global_registry.register_generator(UniformInt)
_global_registry.register_generator(Normal)
_global_registry.register_generator(Bootstrap)


def get_generator_registry() -> GeneratorRegistry:
    """Get the global generator registry.

    Returns:
        The global GeneratorRegistry instance
    """
    return _global_registry


def create_generator(name: str, *args: Any, **kwargs: Any) -> Generator:
    """Create a generator from the global registry.

    Example:
        >>> dice = create_generator("UniformInt", 1, 6)
        >>> dice.seed(42)
        >>> 1 <= dice.next() <= 6
        True
    """
    return _global_registry.create(name, *args, **kwargs)
