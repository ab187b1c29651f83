"""HTTP front end for rng-service.

Wires the request pipeline into FastAPI::

    body -> decode_request_json -> Sampler.sample -> encode -> body

Every :class:`~rng_service.exceptions.RngServiceError` raised along the
way becomes a 422 with the error message as a plain-text body. Unknown
routes and methods answer 404 ``Not Found``.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from rng_service.config import ServiceConfig
from rng_service.encoding import DEFAULT_FORMAT, EncoderRegistry
from rng_service.exceptions import RngServiceError
from rng_service.logging.logger import SamplingLogger
from rng_service.logging.types import SampleRecord
from rng_service.random.registry import build_random_source
from rng_service.requests import decode_request_json
from rng_service.sampler import Sampler

logger = logging.getLogger("rng_service")


@dataclass(frozen=True, slots=True)
class EncodedSample:
    """An encoded response body and its media type."""

    body: bytes
    media_type: str


def handle_sample(
    raw: bytes,
    format: str | None,
    sampler: Sampler,
    sampling_logger: SamplingLogger | None = None,
) -> EncodedSample:
    """Run one request through decode, sample and encode.

    Args:
        raw: The request body.
        format: Wire format selector; ``None`` or ``""`` selects JSON.
        sampler: The sampler to draw with.
        sampling_logger: Optional per-request logger.

    Returns:
        The encoded body and its media type.

    Raises:
        RngServiceError: On any decode, validation, sampling or encode failure.
    """
    format = format or DEFAULT_FORMAT
    timestamp_ns = time.time_ns()
    t_start = time.perf_counter()

    request = decode_request_json(raw)
    encoder = EncoderRegistry.build(format)

    t_sample = time.perf_counter()
    response = sampler.sample(request)
    sampling_ms = (time.perf_counter() - t_sample) * 1000.0

    body = encoder.encode(response)
    total_ms = (time.perf_counter() - t_start) * 1000.0

    if sampling_logger is not None:
        sampling_logger.log_sample(
            SampleRecord(
                timestamp_ns=timestamp_ns,
                distribution=request.distribution,
                format=format,
                response_kind=response.kind,
                sampling_ms=sampling_ms,
                total_ms=total_ms,
                random_source=sampler.source.name,
                body_size=len(body),
            )
        )
    return EncodedSample(body=body, media_type=encoder.media_type)


def create_app(config: ServiceConfig | None = None, sampler: Sampler | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Service configuration. Loaded from the environment if ``None``.
        sampler: Sampler to use. Built from ``config`` if ``None``.

    Returns:
        A ready-to-serve FastAPI app.
    """
    config = config or ServiceConfig()
    sampler = sampler or Sampler(build_random_source(config))
    sampling_logger = SamplingLogger(config)

    app = FastAPI(title="rng-service", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.config = config
    app.state.sampler = sampler

    @app.exception_handler(StarletteHTTPException)
    async def _not_found(request: Request, exc: StarletteHTTPException) -> Response:
        # Wrong method on a known path is reported like an unknown path.
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(RngServiceError)
    async def _unprocessable(request: Request, exc: RngServiceError) -> Response:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=422)

    @app.middleware("http")
    async def _internal_error(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        # Unexpected errors stop here: logged once, answered with 500, never re-raised.
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error serving %s %s", request.method, request.url.path)
            return PlainTextResponse("Internal Server Error", status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    @app.get("/random", response_class=PlainTextResponse)
    async def index() -> str:
        return config.index_body

    @app.post("/random")
    async def random_sample(request: Request) -> Response:
        raw = await request.body()
        result = handle_sample(
            raw,
            request.query_params.get("format"),
            sampler,
            sampling_logger,
        )
        return Response(content=result.body, media_type=result.media_type)

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok", "random_source": sampler.source.health_check()})

    return app
