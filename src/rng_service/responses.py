"""Sampling response types.

A response is one of three shapes: a single float, a byte sequence, or a
Color. Each knows the lowercase key it is serialized under and how to
render its payload for text and binary wire formats.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from rng_service.color import Color


@dataclass(frozen=True, slots=True)
class ValueResponse:
    """A single numeric result (uniform, normal and bernoulli draws)."""

    kind: ClassVar[str] = "value"

    value: float

    def to_wire(self, binary: bool) -> dict[str, Any]:
        return {self.kind: float(self.value)}


@dataclass(frozen=True, slots=True)
class BytesResponse:
    """A byte sequence result (shuffle).

    Text formats carry the bytes as standard base64; binary formats carry
    them natively.
    """

    kind: ClassVar[str] = "bytes"

    data: bytes

    def to_wire(self, binary: bool) -> dict[str, Any]:
        if binary:
            return {self.kind: bytes(self.data)}
        return {self.kind: base64.b64encode(self.data).decode("ascii")}


@dataclass(frozen=True, slots=True)
class ColorResponse:
    """A color result, serialized through its text form."""

    kind: ClassVar[str] = "color"

    color: Color

    def to_wire(self, binary: bool) -> dict[str, Any]:
        return {self.kind: self.color.format()}


SamplingResponse = Union[ValueResponse, BytesResponse, ColorResponse]
