"""RGB color value and its textual codec.

Colors travel on the wire as text: the two named constants ``white`` and
``black``, or ``#RRGGBB``. Parsing accepts hex digits in either case;
formatting always emits uppercase, so ``format(parse(s)) == s`` only holds
for canonical input.
"""

from __future__ import annotations

from dataclasses import dataclass

from rng_service.exceptions import ColorError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True, slots=True)
class Color:
    """Immutable RGB color with 8-bit channels.

    Attributes:
        red: Red channel in [0, 255].
        green: Green channel in [0, 255].
        blue: Blue channel in [0, 255].
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(
                    f"color channels must be ints in [0, 255], "
                    f"got {(self.red, self.green, self.blue)!r}"
                )

    @classmethod
    def parse(cls, text: str) -> Color:
        """Parse ``white``, ``black`` or ``#RRGGBB`` into a Color.

        Args:
            text: The textual color.

        Returns:
            The parsed Color.

        Raises:
            ColorError: If *text* is not one of the accepted forms.
        """
        if text == "white":
            return WHITE
        if text == "black":
            return BLACK
        if (
            isinstance(text, str)
            and len(text) == 7
            and text.startswith("#")
            and all(ch in _HEX_DIGITS for ch in text[1:])
        ):
            return cls(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))
        raise ColorError(text)

    def format(self) -> str:
        """Return the canonical text form (``white``, ``black`` or ``#RRGGBB``)."""
        if self == WHITE:
            return "white"
        if self == BLACK:
            return "black"
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def channels(self) -> tuple[int, int, int]:
        """Return ``(red, green, blue)``."""
        return (self.red, self.green, self.blue)

    def __str__(self) -> str:
        return self.format()


WHITE = Color(0xFF, 0xFF, 0xFF)
BLACK = Color(0x00, 0x00, 0x00)


def parse_color(text: str) -> Color:
    """Module-level alias for :meth:`Color.parse`."""
    return Color.parse(text)


def format_color(color: Color) -> str:
    """Module-level alias for :meth:`Color.format`."""
    return color.format()
