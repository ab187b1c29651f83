"""Format-negotiated response encoding.

Encoders register under the format name a client passes in the ``format``
query parameter. Both built-in formats serialize the same logical map
(``{"value": ...}``, ``{"bytes": ...}`` or ``{"color": ...}``); they differ
only in how bytes travel: base64 text in JSON, a native byte string in
CBOR.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

import cbor2

from rng_service.exceptions import EncodeError, UnsupportedFormatError

if TYPE_CHECKING:
    from collections.abc import Callable

    from rng_service.responses import SamplingResponse

DEFAULT_FORMAT = "json"


class ResponseEncoder(ABC):
    """Serializes a sampling response into one wire format."""

    media_type: ClassVar[str]

    @abstractmethod
    def encode(self, response: SamplingResponse) -> bytes:
        """Serialize *response*.

        Raises:
            EncodeError: If serialization fails.
        """


class EncoderRegistry:
    """Registry mapping format names to ResponseEncoder classes."""

    _registry: ClassVar[dict[str, type[ResponseEncoder]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[ResponseEncoder]], type[ResponseEncoder]]:
        """Decorator that registers a ResponseEncoder class under *name*.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[ResponseEncoder]) -> type[ResponseEncoder]:
            if name in cls._registry:
                raise ValueError(f"Encoder '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[ResponseEncoder]:
        """Return the encoder class registered under *name*.

        Raises:
            UnsupportedFormatError: If *name* is not registered.
        """
        if name not in cls._registry:
            raise UnsupportedFormatError(name)
        return cls._registry[name]

    @classmethod
    def build(cls, name: str | None) -> ResponseEncoder:
        """Instantiate the encoder for *name*; ``None`` or ``""`` means JSON."""
        return cls.get(name or DEFAULT_FORMAT)()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered format names."""
        return sorted(cls._registry)


@EncoderRegistry.register("json")
class JsonEncoder(ResponseEncoder):
    """UTF-8 JSON; bytes as standard base64 strings."""

    media_type: ClassVar[str] = "application/json"

    def encode(self, response: SamplingResponse) -> bytes:
        try:
            body = json.dumps(response.to_wire(binary=False), separators=(",", ":"), allow_nan=False)
        except ValueError as exc:
            raise EncodeError(f"cannot encode response as json: {exc}") from exc
        return body.encode("utf-8")


@EncoderRegistry.register("cbor")
class CborEncoder(ResponseEncoder):
    """CBOR (RFC 8949); bytes as native byte strings."""

    media_type: ClassVar[str] = "application/cbor"

    def encode(self, response: SamplingResponse) -> bytes:
        try:
            return cbor2.dumps(response.to_wire(binary=True))
        except cbor2.CBOREncodeError as exc:
            raise EncodeError(f"cannot encode response as cbor: {exc}") from exc


def encode(response: SamplingResponse, format: str | None = DEFAULT_FORMAT) -> bytes:
    """Serialize *response* in the wire *format*.

    Args:
        response: The sampler result.
        format: ``"json"`` or ``"cbor"``; ``None`` or ``""`` selects JSON.

    Returns:
        The encoded body.

    Raises:
        UnsupportedFormatError: If *format* has no registered encoder.
    """
    return EncoderRegistry.build(format).encode(response)
