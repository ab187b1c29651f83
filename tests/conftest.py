"""Shared pytest fixtures for rng-service tests.

Provides a seeded random source and sampler for reproducible draws, a
quiet configuration, and a FastAPI test client wired to both.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from rng_service.app import create_app
from rng_service.config import ServiceConfig
from rng_service.random.seeded import SeededRandomSource
from rng_service.sampler import Sampler


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    """Return a SeededRandomSource with a fixed seed."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def sampler(seeded_source: SeededRandomSource) -> Sampler:
    """Return a Sampler backed by the seeded source."""
    return Sampler(seeded_source)


@pytest.fixture
def silent_config() -> ServiceConfig:
    """Return a config with per-request logging off, ignoring any .env file."""
    return ServiceConfig(_env_file=None, log_level="none")


@pytest.fixture
def client(silent_config: ServiceConfig, sampler: Sampler) -> TestClient:
    """Return a TestClient for an app using the seeded sampler."""
    return TestClient(create_app(silent_config, sampler))
