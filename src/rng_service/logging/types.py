"""Data types for the request logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleRecord:
    """Immutable record of one served sampling request.

    Attributes:
        timestamp_ns: Wall-clock time the request was received (ns since epoch).
        distribution: Discriminator of the request variant.
        format: Wire format the response was encoded in.
        response_kind: ``'value'``, ``'bytes'`` or ``'color'``.
        sampling_ms: Time spent in the sampler (milliseconds).
        total_ms: Time from decode start to encoded body (milliseconds).
        random_source: Name of the random source used.
        body_size: Size of the encoded response body in bytes.
    """

    timestamp_ns: int
    distribution: str
    format: str
    response_kind: str
    sampling_ms: float
    total_ms: float
    random_source: str
    body_size: int
