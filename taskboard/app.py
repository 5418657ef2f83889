"""The application object and the windowed main loop."""

from __future__ import annotations

import argparse
import sys
from array import array
from pathlib import Path

from taskboard.engine import FontLoadError, Plugin, Scheduler, System, World
from taskboard.resources import FontResource, Framebuffer, Input, Resources

WIDTH = 800
HEIGHT = 600
TITLE = "ECS Platform - Cycle 5"
FRAME_RATE = 60


class App:
    """Holds the world, the scheduler and the shared resources."""

    def __init__(self, font: FontResource | None = None) -> None:
        self.world = World()
        self.scheduler = Scheduler()
        self.resources = Resources(font=font)

    def add(self, plugin: Plugin) -> App:
        """Let a plugin register its systems and entities; return the app."""
        plugin.build(self)
        return self

    def system(self, system: System) -> App:
        """Register a system directly; return the app."""
        self.scheduler.add(system)
        return self

    def run_with_framebuffer(self, framebuffer: Framebuffer) -> None:
        """Run one frame with a framebuffer available to the systems."""
        self.resources.time.now += 1
        self.resources.framebuffer = framebuffer
        try:
            self.scheduler.run(self.world, self.resources)
        finally:
            self.resources.framebuffer = None

    def run(self) -> None:
        """Run one frame without a framebuffer."""
        self.resources.time.now += 1
        self.scheduler.run(self.world, self.resources)


def _default_font_path() -> Path:
    import pygame

    return Path(pygame.__file__).parent / pygame.font.get_default_font()


def _pixels_to_bytes(pixels: list[int]) -> bytes:
    data = array("I", pixels)
    if sys.byteorder == "big":
        data.byteswap()
    return data.tobytes()


def main(argv: list[str] | None = None) -> int:
    """Open the board window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="taskboard", description="Task board.")
    parser.add_argument("--font", type=Path, help="TrueType font file to draw text with")
    args = parser.parse_args(argv)

    try:
        font = FontResource.load(args.font or _default_font_path())
    except FontLoadError as exc:
        print(f"failed to initialise application: {exc}", file=sys.stderr)
        return 1

    from taskboard.plugins import TaskPlugin, UiPlugin, UserPlugin

    app = App(font)
    app.add(UserPlugin()).add(TaskPlugin()).add(UiPlugin())

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        framebuffer = Framebuffer(WIDTH, HEIGHT)
        typed = Input()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.TEXTINPUT:
                    for ch in event.text:
                        typed.add_char(ord(ch))
            keys = pygame.key.get_pressed()
            if not running or keys[pygame.K_ESCAPE]:
                break

            if pygame.mouse.get_focused():
                mx, my = pygame.mouse.get_pos()
                app.resources.mouse.position = (float(mx), float(my))
            app.resources.mouse.pressed = bool(pygame.mouse.get_pressed()[0])

            keyboard = app.resources.keyboard
            keyboard.chars = "".join(typed.take_chars())
            keyboard.enter = bool(keys[pygame.K_RETURN])
            keyboard.escape = bool(keys[pygame.K_ESCAPE])
            keyboard.backspace = bool(keys[pygame.K_BACKSPACE])
            keyboard.e = bool(keys[pygame.K_e])

            app.run_with_framebuffer(framebuffer)
            surface = pygame.image.frombuffer(
                _pixels_to_bytes(framebuffer.pixels), (WIDTH, HEIGHT), "BGRA"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0