"""Sampling request model.

A request is a tagged union: the ``distribution`` field names the variant
and ``parameters`` carries its payload::

    {"distribution": "normal", "parameters": {"mean": 0.0, "std_dev": 1.0}}

Each variant is a frozen pydantic model registered under its discriminator
via ``@RequestRegistry.register()``. :func:`decode_request` looks the
variant up, validates the payload, and converts every pydantic
``ValidationError`` into a :class:`~rng_service.exceptions.DecodeError`
naming the offending field. Color parse failures surface unchanged as
:class:`~rng_service.exceptions.ColorError`.
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rng_service.color import Color
from rng_service.exceptions import DecodeError

if TYPE_CHECKING:
    from collections.abc import Callable

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class RequestRegistry:
    """Registry mapping discriminator values to request model classes.

    Matching is exact and case-sensitive. A class may be registered under
    several names (``bernouli`` and ``bernoulli``).
    """

    _registry: ClassVar[dict[str, type[SamplingRequestBase]]] = {}

    @classmethod
    def register(
        cls, *names: str
    ) -> Callable[[type[SamplingRequestBase]], type[SamplingRequestBase]]:
        """Decorator that registers a request model under one or more *names*.

        Args:
            names: Discriminator values selecting this variant.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If a name is already registered.
        """

        def decorator(klass: type[SamplingRequestBase]) -> type[SamplingRequestBase]:
            for name in names:
                if name in cls._registry:
                    raise ValueError(f"Request variant '{name}' is already registered")
                cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SamplingRequestBase]:
        """Return the request model registered under *name*.

        Raises:
            DecodeError: If *name* is not a known variant.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise DecodeError(
                f"unknown variant {name!r} in field 'distribution', expected one of: {available}"
            )
        return cls._registry[name]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered discriminator values."""
        return sorted(cls._registry)


class SamplingRequestBase(BaseModel):
    """Common configuration for all request variants.

    Strict mode keeps JSON types honest: integers are not accepted from
    strings or floats, and non-finite floats are rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        allow_inf_nan=False,
        extra="ignore",
        populate_by_name=True,
    )

    distribution: ClassVar[str]


@RequestRegistry.register("uniform")
class UniformRequest(SamplingRequestBase):
    """Integer drawn uniformly from the half-open range ``[start, end)``."""

    distribution: ClassVar[str] = "uniform"

    start: int = Field(ge=_INT32_MIN, le=_INT32_MAX)
    end: int = Field(ge=_INT32_MIN, le=_INT32_MAX)


@RequestRegistry.register("normal")
class NormalRequest(SamplingRequestBase):
    """Gaussian draw with the given mean and standard deviation."""

    distribution: ClassVar[str] = "normal"

    mean: float
    std_dev: float


@RequestRegistry.register("bernouli", "bernoulli")
class BernoulliRequest(SamplingRequestBase):
    """Single trial with success probability ``p``.

    The wire discriminator is ``bernouli``; ``bernoulli`` is accepted too.
    """

    distribution: ClassVar[str] = "bernouli"

    p: float


@RequestRegistry.register("shuffle")
class ShuffleRequest(SamplingRequestBase):
    """Random permutation of a byte sequence (standard base64 on the wire)."""

    distribution: ClassVar[str] = "shuffle"

    data: bytes

    @field_validator("data", mode="before")
    @classmethod
    def _decode_base64(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"invalid base64: {exc}") from exc
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        raise ValueError("expected a base64 string")


@RequestRegistry.register("color")
class ColorRangeRequest(SamplingRequestBase):
    """Color drawn per channel between two bounding colors."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    distribution: ClassVar[str] = "color"

    from_: Color = Field(alias="from")
    to: Color

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> Any:
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            # ColorError is not a ValueError, so pydantic lets it propagate.
            return Color.parse(value)
        raise ValueError("expected a color string")


SamplingRequest = Union[
    UniformRequest,
    NormalRequest,
    BernoulliRequest,
    ShuffleRequest,
    ColorRangeRequest,
]


def _format_validation_error(exc: ValidationError, prefix: str) -> str:
    """Render pydantic errors as ``<field path>: <message>`` joined by ``; ``."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in (prefix, *error["loc"]) if item != "")
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)


def _extract_parameters(name: str, payload: Mapping[str, Any]) -> tuple[Mapping[str, Any], str]:
    """Return the variant payload and the path prefix used in error messages.

    ``uniform`` additionally accepts ``start``/``end`` flattened beside the
    discriminator when no ``parameters`` object is present.
    """
    if "parameters" in payload:
        parameters = payload["parameters"]
        if not isinstance(parameters, Mapping):
            raise DecodeError("invalid type for field 'parameters', expected an object")
        return parameters, "parameters"
    if name == "uniform":
        return payload, ""
    raise DecodeError("missing field 'parameters'")


def decode_request(payload: Any) -> SamplingRequest:
    """Decode a structured payload into exactly one request variant.

    Args:
        payload: The JSON object as a mapping.

    Returns:
        The validated, immutable request variant.

    Raises:
        DecodeError: If the payload is not an object, the discriminator is
            missing or unknown, or the parameters fail validation.
        ColorError: If a color field holds invalid color text.
    """
    if not isinstance(payload, Mapping):
        raise DecodeError("request body must be a JSON object")
    if "distribution" not in payload:
        raise DecodeError("missing field 'distribution'")
    name = payload["distribution"]
    if not isinstance(name, str):
        raise DecodeError("invalid type for field 'distribution', expected a string")

    model_cls = RequestRegistry.get(name)
    parameters, prefix = _extract_parameters(name, payload)
    try:
        return model_cls.model_validate(dict(parameters))
    except ValidationError as exc:
        raise DecodeError(_format_validation_error(exc, prefix)) from exc


def decode_request_json(raw: bytes | str) -> SamplingRequest:
    """Parse a JSON document and decode it with :func:`decode_request`.

    Raises:
        DecodeError: If *raw* is not valid JSON, or on any decode failure.
        ColorError: If a color field holds invalid color text.
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON body: {exc}") from exc
    return decode_request(payload)
