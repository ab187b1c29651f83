"""System random source: one OS-seeded generator per thread."""

from __future__ import annotations

import threading

import numpy as np

from rng_service.random.base import RandomSource
from rng_service.random.registry import register_random_source


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """Thread-local PCG64 generators seeded from OS entropy.

    Each thread lazily creates its own generator on first use, so in-flight
    requests on different worker threads never contend for one.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def generator(self) -> np.random.Generator:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            rng = np.random.default_rng()
            self._local.rng = rng
        return rng
