"""Per-request logger for served samples.

Uses the standard ``logging`` module with the ``"rng_service"`` logger.
Sampled values are never logged, only their shape and timing.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rng_service.config import ServiceConfig
    from rng_service.logging.types import SampleRecord

logger = logging.getLogger("rng_service")


class SamplingLogger:
    """Emits one log entry per served request.

    Log levels:
        ``"none"``: No output.

        ``"summary"``: One line with distribution, format, and timings.

        ``"full"``: JSON dump of all record fields.
    """

    def __init__(self, config: ServiceConfig) -> None:
        self._log_level = config.log_level

    def log_sample(self, record: SampleRecord) -> None:
        """Log a single served request.

        Args:
            record: Immutable record of the request.
        """
        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "distribution=%s format=%s kind=%s size=%d source=%s "
                "sample=%.3fms total=%.3fms",
                record.distribution,
                record.format,
                record.response_kind,
                record.body_size,
                record.random_source,
                record.sampling_ms,
                record.total_ms,
            )
        elif self._log_level == "full":
            logger.info("sample_record: %s", json.dumps(asdict(record)))
