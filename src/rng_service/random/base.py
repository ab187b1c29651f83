"""Abstract base class for all random sources.

A random source hands out ``numpy.random.Generator`` instances. Generators
are not safe to share between threads, so every implementation must return
a generator owned by the calling thread. Subclasses implement ``name`` and
``generator()``; ``health_check()`` has a default.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import numpy as np


class RandomSource(ABC):
    """Abstract base for all random sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``, ``'seeded'``)."""

    @abstractmethod
    def generator(self) -> np.random.Generator:
        """Return the generator for the calling thread.

        Returns:
            A ``numpy.random.Generator`` never handed to another thread.
        """

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}
