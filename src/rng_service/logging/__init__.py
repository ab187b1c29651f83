"""Request logging subsystem for rng-service."""

from rng_service.logging.logger import SamplingLogger
from rng_service.logging.types import SampleRecord

__all__ = [
    "SampleRecord",
    "SamplingLogger",
]
