"""Sampler: maps a validated request variant to its random result.

Dispatch is by request type. Parameter domains are checked here, before
any draw, so a bad request fails with
:class:`~rng_service.exceptions.ParameterValidationError` instead of
producing NaN or an arbitrary value.

Randomness comes from an injected :class:`~rng_service.random.RandomSource`;
each call asks it for the calling thread's generator, so one ``Sampler``
can serve concurrent requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rng_service.color import Color
from rng_service.exceptions import ParameterValidationError, SamplingError
from rng_service.random.system import SystemRandomSource
from rng_service.requests import (
    BernoulliRequest,
    ColorRangeRequest,
    NormalRequest,
    ShuffleRequest,
    UniformRequest,
)
from rng_service.responses import BytesResponse, ColorResponse, ValueResponse

if TYPE_CHECKING:
    from rng_service.random.base import RandomSource
    from rng_service.requests import SamplingRequest
    from rng_service.responses import SamplingResponse


def _channel_range(start: int, stop: int) -> tuple[int, int]:
    """Order two channel bounds as ``(lo, hi)``."""
    return min(start, stop), max(start, stop)


class Sampler:
    """Draws one result per request from an injected random source.

    Args:
        source: Provider of per-thread ``numpy.random.Generator`` instances.
    """

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    @property
    def source(self) -> RandomSource:
        """The random source backing this sampler."""
        return self._source

    def sample(self, request: SamplingRequest) -> SamplingResponse:
        """Sample the distribution described by *request*.

        Args:
            request: A decoded request variant.

        Returns:
            ``ValueResponse`` for uniform, normal and bernoulli;
            ``BytesResponse`` for shuffle; ``ColorResponse`` for color.

        Raises:
            ParameterValidationError: If the parameters are outside the
                distribution's domain.
            SamplingError: If *request* is not a known variant.
        """
        rng = self._source.generator()
        if isinstance(request, UniformRequest):
            return self._uniform(rng, request)
        if isinstance(request, NormalRequest):
            return self._normal(rng, request)
        if isinstance(request, BernoulliRequest):
            return self._bernoulli(rng, request)
        if isinstance(request, ShuffleRequest):
            return self._shuffle(rng, request)
        if isinstance(request, ColorRangeRequest):
            return self._color(rng, request)
        raise SamplingError(f"cannot sample request of type {type(request).__name__}")

    @staticmethod
    def _uniform(rng: np.random.Generator, request: UniformRequest) -> ValueResponse:
        if request.end <= request.start:
            raise ParameterValidationError(
                f"invalid uniform range: end ({request.end}) must be greater than "
                f"start ({request.start})"
            )
        value = rng.integers(request.start, request.end)
        return ValueResponse(float(value))

    @staticmethod
    def _normal(rng: np.random.Generator, request: NormalRequest) -> ValueResponse:
        if request.std_dev < 0:
            raise ParameterValidationError(
                f"invalid std_dev: {request.std_dev} (must be non-negative)"
            )
        return ValueResponse(float(rng.normal(request.mean, request.std_dev)))

    @staticmethod
    def _bernoulli(rng: np.random.Generator, request: BernoulliRequest) -> ValueResponse:
        if not 0.0 <= request.p <= 1.0:
            raise ParameterValidationError(
                f"invalid probability: {request.p} (must be in [0, 1])"
            )
        # random() is in [0, 1): p=0 never succeeds, p=1 always does.
        return ValueResponse(1.0 if rng.random() < request.p else 0.0)

    @staticmethod
    def _shuffle(rng: np.random.Generator, request: ShuffleRequest) -> BytesResponse:
        if not request.data:
            return BytesResponse(b"")
        data = np.frombuffer(request.data, dtype=np.uint8)
        return BytesResponse(rng.permutation(data).tobytes())

    @staticmethod
    def _color(rng: np.random.Generator, request: ColorRangeRequest) -> ColorResponse:
        channels = []
        for start, stop in zip(request.from_.channels(), request.to.channels()):
            lo, hi = _channel_range(start, stop)
            channels.append(int(rng.integers(lo, hi, endpoint=True)))
        return ColorResponse(Color(*channels))


_DEFAULT_SAMPLER = Sampler(SystemRandomSource())


def sample(request: SamplingRequest, source: RandomSource | None = None) -> SamplingResponse:
    """Sample *request* once, using *source* or the shared system source."""
    if source is None:
        return _DEFAULT_SAMPLER.sample(request)
    return Sampler(source).sample(request)
