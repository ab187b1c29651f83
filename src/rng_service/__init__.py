"""rng-service: a stateless HTTP microservice for random sampling.

Decodes a tagged-union sampling request (uniform, normal, bernoulli,
shuffle, color range), draws the result from an injectable random source,
and encodes it as JSON or CBOR.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("rng-service")
except PackageNotFoundError:
    __version__ = "0.0.0"

from rng_service.color import BLACK, WHITE, Color, format_color, parse_color
from rng_service.config import ServiceConfig, load_config
from rng_service.encoding import EncoderRegistry, encode
from rng_service.exceptions import (
    ColorError,
    ConfigValidationError,
    DecodeError,
    EncodeError,
    ParameterValidationError,
    RngServiceError,
    SamplingError,
    UnsupportedFormatError,
)
from rng_service.requests import (
    BernoulliRequest,
    ColorRangeRequest,
    NormalRequest,
    RequestRegistry,
    SamplingRequest,
    ShuffleRequest,
    UniformRequest,
    decode_request,
    decode_request_json,
)
from rng_service.responses import BytesResponse, ColorResponse, SamplingResponse, ValueResponse
from rng_service.sampler import Sampler, sample

__all__ = [
    "BLACK",
    "WHITE",
    "BernoulliRequest",
    "BytesResponse",
    "Color",
    "ColorError",
    "ColorRangeRequest",
    "ColorResponse",
    "ConfigValidationError",
    "DecodeError",
    "EncodeError",
    "EncoderRegistry",
    "NormalRequest",
    "ParameterValidationError",
    "RequestRegistry",
    "RngServiceError",
    "Sampler",
    "SamplingError",
    "SamplingRequest",
    "SamplingResponse",
    "ServiceConfig",
    "ShuffleRequest",
    "UniformRequest",
    "UnsupportedFormatError",
    "ValueResponse",
    "__version__",
    "decode_request",
    "decode_request_json",
    "encode",
    "format_color",
    "load_config",
    "parse_color",
    "sample",
]
