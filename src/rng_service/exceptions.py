"""Exception hierarchy for rng-service.

All exceptions derive from RngServiceError, enabling a single catch at the
HTTP boundary (mapped to 422) while allowing fine-grained handling
internally.
"""


class RngServiceError(Exception):
    """Base exception for all rng-service errors."""


class ColorError(RngServiceError):
    """A textual color could not be parsed.

    Raised for anything other than ``white``, ``black`` or ``#RRGGBB``.
    The offending input is kept verbatim on :attr:`value`.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid color value: {value!r}")


class DecodeError(RngServiceError):
    """A sampling request payload could not be decoded.

    Raised for malformed JSON, an unknown or missing discriminator, missing
    or mistyped parameters, and invalid base64 data.
    """


class ParameterValidationError(RngServiceError):
    """Distribution parameters are well-typed but outside their domain.

    Raised by the sampler for an empty uniform range, a negative standard
    deviation, or a probability outside [0, 1].
    """


class SamplingError(RngServiceError):
    """The sampler was handed something it cannot sample."""


class EncodeError(RngServiceError):
    """A sampling response could not be serialized."""


class UnsupportedFormatError(EncodeError):
    """The requested wire format has no registered encoder."""

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(f"unsupported format {format}")


class ConfigValidationError(RngServiceError):
    """Service configuration failed validation."""
