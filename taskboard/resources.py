"""Shared per-frame resources: input state, filter, session, font and framebuffer."""

from __future__ import annotations

import io
import threading
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from taskboard.components import Status
from taskboard.engine import FontLoadError

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


@dataclass
class Mouse:
    """Mouse position and left-button state for the current frame."""

    position: tuple[float, float] = (0.0, 0.0)
    pressed: bool = False


@dataclass
class Keyboard:
    """Keyboard state for the current frame."""

    key: str | None = None
    chars: str = ""
    enter: bool = False
    escape: bool = False
    backspace: bool = False
    e: bool = False


@dataclass
class Time:
    """Frame counter used as the current time."""

    now: int = 0


@dataclass
class Filter:
    """Criteria that decide which entities are visible."""

    text: str | None = None
    status: Status | None = None
    overdue: bool = False
    owner: int | None = None


@dataclass
class Session:
    """The user currently working with the board."""

    user: int


@dataclass
class Framebuffer:
    """A width x height grid of 0xAARRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("framebuffer dimensions must not be negative")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(
                f"framebuffer needs {size} pixels, got {len(self.pixels)}"
            )

    def fill(self, color: int) -> None:
        """Set every pixel to one color."""
        self.pixels[:] = [color] * len(self.pixels)


@dataclass(frozen=True)
class GlyphMetrics:
    """Size of a rasterized glyph and how far the pen advances after it."""

    width: int
    height: int
    advance_width: float


class FontResource:
    """A TrueType font that rasterizes single characters to coverage bitmaps."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._fonts: dict[int, ImageFont.FreeTypeFont] = {}
        self._font(12)

    @classmethod
    def load(cls, path: str | Path) -> FontResource:
        """Read a font file; raise FontLoadError if it is missing or invalid."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FontLoadError(f"cannot read font file {path}") from exc
        return cls(data)

    def _font(self, size: float) -> ImageFont.FreeTypeFont:
        pixels = max(1, round(size))
        font = self._fonts.get(pixels)
        if font is None:
            try:
                font = ImageFont.truetype(io.BytesIO(self._data), pixels)
            except (OSError, ValueError) as exc:
                raise FontLoadError("font data is not a usable font") from exc
            self._fonts[pixels] = font
        return font

    def rasterize(self, ch: str, size: float) -> tuple[GlyphMetrics, bytes]:
        """Return the metrics and the 8-bit coverage bitmap of one character."""
        font = self._font(size)
        advance = float(font.getlength(ch))
        left, top, right, bottom = font.getbbox(ch)
        width, height = right - left, bottom - top
        if width <= 0 or height <= 0:
            return GlyphMetrics(0, 0, advance), b""
        image = Image.new("L", (width, height), 0)
        ImageDraw.Draw(image).text((-left, -top), ch, font=font, fill=255)
        return GlyphMetrics(width, height, advance), image.tobytes()


@dataclass
class Resources:
    """Everything systems share besides the world."""

    mouse: Mouse = field(default_factory=Mouse)
    keyboard: Keyboard = field(default_factory=Keyboard)
    time: Time = field(default_factory=Time)
    filter: Filter = field(default_factory=Filter)
    framebuffer: Framebuffer | None = None
    font: FontResource | None = None
    session: Session | None = None


class Input:
    """Thread-safe queue of characters typed since the last frame."""

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._lock = threading.Lock()

    def add_char(self, uni_char: int) -> None:
        """Queue a character given by code point; invalid code points are ignored."""
        if not 0 <= uni_char <= _MAX_CODE_POINT or uni_char in _SURROGATES:
            return
        with self._lock:
            self._chars.append(chr(uni_char))

    def take_chars(self) -> list[str]:
        """Return the queued characters and empty the queue."""
        with self._lock:
            chars, self._chars = self._chars, []
        return chars