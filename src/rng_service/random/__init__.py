"""Random source subsystem for rng-service.

Re-exports the ABC, registry, and built-in source implementations::

    from rng_service.random import RandomSource, RandomSourceRegistry
    from rng_service.random import SeededRandomSource, SystemRandomSource
"""

from rng_service.random.base import RandomSource
from rng_service.random.registry import (
    RandomSourceRegistry,
    build_random_source,
    register_random_source,
)
from rng_service.random.seeded import SeededRandomSource
from rng_service.random.system import SystemRandomSource

__all__ = [
    "RandomSource",
    "RandomSourceRegistry",
    "SeededRandomSource",
    "SystemRandomSource",
    "build_random_source",
    "register_random_source",
]
