"""Tests for the rng-service command-line entry point."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from rng_service.server import build_parser, main


class TestParser:
    """Argument parsing."""

    def test_defaults_are_unset(self) -> None:
        args = build_parser().parse_args([])
        assert args.host is None
        assert args.port is None
        assert args.random_source_type is None
        assert args.random_seed is None
        assert args.verbose is False

    def test_options(self) -> None:
        args = build_parser().parse_args(["--port", "9000", "--source", "seeded", "--seed", "4", "-v"])
        assert args.port == 9000
        assert args.random_source_type == "seeded"
        assert args.random_seed == 4
        assert args.verbose is True

    def test_invalid_log_level(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "loud"])


class TestMain:
    """main() wiring, with uvicorn patched out."""

    def test_runs_uvicorn_with_config(self) -> None:
        with patch("rng_service.server.uvicorn.run") as run:
            main(["--host", "0.0.0.0", "--port", "9000", "--source", "seeded", "--seed", "3"])
        run.assert_called_once()
        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000
        app = run.call_args.args[0]
        assert app.state.sampler.source.name == "seeded"

    def test_unknown_source_exits(self) -> None:
        with patch("rng_service.server.uvicorn.run") as run, pytest.raises(SystemExit) as excinfo:
            main(["--source", "no_such_source"])
        assert excinfo.value.code == 2
        run.assert_not_called()

    def test_unrelated_key_error_propagates(self) -> None:
        with patch("rng_service.server.uvicorn.run"), patch(
            "rng_service.server.create_app", side_effect=KeyError("state")
        ), pytest.raises(KeyError, match="state"):
            main([])
