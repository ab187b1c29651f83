"""Seeded random source for reproducible sampling.

Used by tests and for replaying a run. Per-thread generators are spawned
from a single ``SeedSequence``, so output is fully reproducible when one
thread does all the sampling, and streams stay independent otherwise.
"""

from __future__ import annotations

import threading
from typing import Any

import numpy as np

from rng_service.random.base import RandomSource
from rng_service.random.registry import register_random_source


@register_random_source("seeded")
class SeededRandomSource(RandomSource):
    """Deterministic random source.

    Args:
        seed: Root seed. ``None`` draws one from OS entropy; the chosen
            value is exposed as :attr:`seed` so a run can be replayed.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed_sequence = np.random.SeedSequence(seed)
        self._spawn_lock = threading.Lock()
        self._local = threading.local()

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    @property
    def seed(self) -> int:
        """Root entropy of the seed sequence."""
        return int(self._seed_sequence.entropy)  # type: ignore[arg-type]

    def generator(self) -> np.random.Generator:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            with self._spawn_lock:
                (child,) = self._seed_sequence.spawn(1)
            rng = np.random.default_rng(child)
            self._local.rng = rng
        return rng

    def health_check(self) -> dict[str, Any]:
        return {"source": self.name, "healthy": True, "seed": self.seed}
