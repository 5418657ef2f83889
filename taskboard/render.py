"""Drawing of visible entities, their text and the detail panel into a framebuffer."""

from __future__ import annotations

from collections.abc import Sequence

from taskboard.engine import System, World
from taskboard.resources import FontResource, Framebuffer, Resources

BACKGROUND = 0xFF222222
SELECTED_COLOR = 0xFF1976D2
HOVER_COLOR = 0xFF90CAF9
TEXT_COLOR = 0xFFFFFFFF
OWNER_TEXT_COLOR = 0xFFCCCCCC
DETAIL_TEXT_COLOR = 0xFF222222
DETAIL_PANEL_COLOR = "#e3e3e3"
DEFAULT_COLOR = 0xFF757575

_NAMED_COLORS = {
    "blue": 0xFF2196F3,
    "green": 0xFF4CAF50,
    "red": 0xFFF44336,
    "gray": 0xFFBDBDBD,
    "yellow": 0xFFFFEB3B,
    "orange": 0xFFFF9800,
    "purple": 0xFF9C27B0,
    "black": 0xFF000000,
    "white": 0xFFFFFFFF,
}


def color_to_u32(color: str) -> int:
    """Map a color name to an 0xAARRGGBB value; unknown names give a neutral gray."""
    return _NAMED_COLORS.get(color, DEFAULT_COLOR)


def _to_index(value: float) -> int:
    """Convert a coordinate to a pixel index, clamping negatives and NaN to zero."""
    return int(value) if value > 0 else 0


def blit_glyph(
    framebuffer: Framebuffer,
    x: int,
    y: int,
    bitmap: Sequence[int],
    glyph_w: int,
    glyph_h: int,
    color: int,
) -> None:
    """Alpha-blend a coverage bitmap of the given color onto the framebuffer at (x, y)."""
    width, height = framebuffer.width, framebuffer.height
    pixels = framebuffer.pixels
    r = (color >> 16) & 0xFF
    g = (color >> 8) & 0xFF
    b = color & 0xFF
    for row in range(glyph_h):
        py = y + row
        if py >= height:
            break
        coverage = bitmap[row * glyph_w:(row + 1) * glyph_w]
        for col, value in enumerate(coverage):
            px = x + col
            if px >= width:
                break
            alpha = value / 255.0
            index = py * width + px
            bg = pixels[index]
            nr = int(r * alpha + ((bg >> 16) & 0xFF) * (1.0 - alpha))
            ng = int(g * alpha + ((bg >> 8) & 0xFF) * (1.0 - alpha))
            nb = int(b * alpha + (bg & 0xFF) * (1.0 - alpha))
            pixels[index] = (0xFF << 24) | (nr << 16) | (ng << 8) | nb


def _draw_text(
    framebuffer: Framebuffer,
    font: FontResource,
    text: str,
    cursor_x: int,
    baseline: int,
    size: float,
    color: int,
) -> int:
    """Draw a line of text centred on the baseline; return the final pen position."""
    for ch in text:
        metrics, bitmap = font.rasterize(ch, size)
        glyph_y = max(baseline - metrics.height // 2, 0)
        blit_glyph(
            framebuffer, cursor_x, glyph_y, bitmap, metrics.width, metrics.height, color
        )
        cursor_x += int(metrics.advance_width)
    return cursor_x


class RenderSystem(System):
    """Draws every visible entity as a colored box with its text and owner,
    then the details of the selected entity on the detail panel."""

    def run(self, world: World, resources: Resources) -> None:
        """Render one frame into resources.framebuffer, if there is one."""
        framebuffer = resources.framebuffer
        if framebuffer is None:
            return
        framebuffer.fill(BACKGROUND)
        font = resources.font
        if font is None:
            return
        for entity in range(world.entity_count):
            if world.visible[entity] is not None:
                self._draw_entity(world, entity, framebuffer, font)
        self._draw_details(world, framebuffer, font)

    @staticmethod
    def _draw_entity(
        world: World, entity: int, framebuffer: Framebuffer, font: FontResource
    ) -> None:
        bounds = world.bounds[entity]
        style = world.styles[entity]
        if bounds is None or style is None:
            return
        color = color_to_u32(style.color)
        if world.selected[entity] is not None:
            color = SELECTED_COLOR
        elif world.hovers[entity] is not None:
            color = HOVER_COLOR

        x0, y0 = _to_index(bounds.x), _to_index(bounds.y)
        w, h = _to_index(bounds.width), _to_index(bounds.height)
        width = framebuffer.width
        x_end = min(x0 + w, width)
        if x0 < x_end:
            span = [color] * (x_end - x0)
            for y in range(y0, min(y0 + h, framebuffer.height)):
                start = y * width
                framebuffer.pixels[start + x0:start + x_end] = span

        text = world.texts[entity]
        if text is None:
            return
        baseline = y0 + h // 2
        size = max(h * 0.5, 12.0)
        cursor_x = _draw_text(
            framebuffer, font, text.value, x0 + 8, baseline, size, TEXT_COLOR
        )
        owner = world.owners[entity]
        if owner is not None:
            user = world.users[owner.user]
            if user is not None:
                _draw_text(
                    framebuffer,
                    font,
                    f" - ({user.name})",
                    cursor_x,
                    baseline,
                    size,
                    OWNER_TEXT_COLOR,
                )

    @staticmethod
    def _draw_details(world: World, framebuffer: Framebuffer, font: FontResource) -> None:
        selected = next(
            (entity for entity, mark in enumerate(world.selected) if mark is not None),
            None,
        )
        panel = next(
            (
                entity
                for entity, style in enumerate(world.styles)
                if style is not None and style.color == DETAIL_PANEL_COLOR
            ),
            None,
        )
        if selected is None or panel is None:
            return
        bounds = world.bounds[panel]
        if bounds is None:
            return
        x0 = _to_index(bounds.x) + 16
        y0 = _to_index(bounds.y) + 32
        size = max(bounds.height * 0.06, 14.0)
        baseline = y0 + _to_index(size)

        labels: list[str] = []
        text = world.texts[selected]
        if text is not None:
            labels.append(f"Task: {text.value}")
        if world.statuses[selected] is not None:
            labels.append("Status: Active")
        due = world.dues[selected]
        if due is not None:
            labels.append(f"Due: {due.timestamp}")
        owner = world.owners[selected]
        if owner is not None:
            user = world.users[owner.user]
            if user is not None:
                labels.append(f"Owner: {user.name}")

        for label in labels:
            _draw_text(framebuffer, font, label, x0, baseline, size, DETAIL_TEXT_COLOR)