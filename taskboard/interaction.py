"""Mouse and keyboard interaction: selection, editing, commands, due dates and filtering."""

from __future__ import annotations

from taskboard.components import (
    Click,
    Collapsed,
    Create,
    Delete,
    Dirty,
    Due,
    Editing,
    Hover,
    Scheduling,
    Selected,
    Status,
)
from taskboard.engine import System, World
from taskboard.resources import Filter, Keyboard, Mouse, Resources

ICON_WIDTH = 24.0
_MAX_TIMESTAMP = 2**64 - 1
_DIGITS = frozenset("0123456789")


def _is_search_char(ch: str) -> bool:
    return ch == " " or (ch.isascii() and ch.isalnum())


class InteractSystem(System):
    """Turns per-frame input into component changes and filter updates.

    The system remembers, between frames, whether the mouse button was down,
    whether search mode is on, and the due-date digits typed per entity.
    """

    def __init__(self) -> None:
        self._last_pressed = False
        self._search_mode = False
        self._due_input: dict[int, str] = {}

    def run(self, world: World, resources: Resources) -> None:
        """Process one frame of input."""
        keyboard = resources.keyboard
        self._handle_filter(resources.filter, keyboard)

        if (
            keyboard.key == "u"
            and resources.filter.owner is None
            and resources.session is not None
        ):
            resources.filter.owner = resources.session.user

        mouse = resources.mouse
        self._reset_hover_click(world)
        self._handle_editing(world, keyboard)
        self._handle_create(world, keyboard)
        self._handle_delete(world, keyboard)
        self._handle_due(world, keyboard)
        self._handle_mouse(world, mouse)
        self._handle_button_click(world)
        self._last_pressed = mouse.pressed

    @staticmethod
    def _reset_hover_click(world: World) -> None:
        world.clicks = [None] * world.entity_count
        world.hovers = [None] * world.entity_count

    @staticmethod
    def _handle_editing(world: World, keyboard: Keyboard) -> None:
        for entity in range(world.entity_count):
            if (
                world.selected[entity] is not None
                and keyboard.e
                and world.editing[entity] is None
            ):
                world.editing[entity] = Editing()
            if world.editing[entity] is not None and (keyboard.enter or keyboard.escape):
                world.editing[entity] = None
                if keyboard.enter:
                    world.dirty[entity] = Dirty()

    @staticmethod
    def _handle_create(world: World, keyboard: Keyboard) -> None:
        if keyboard.key == "n":
            command = world.spawn()
            world.creates[command] = Create()

    @staticmethod
    def _handle_delete(world: World, keyboard: Keyboard) -> None:
        if keyboard.key != "d":
            return
        for entity in range(world.entity_count):
            if world.selected[entity] is not None:
                world.deletes[entity] = Delete()

    def _handle_due(self, world: World, keyboard: Keyboard) -> None:
        if keyboard.key == "t":
            for entity in range(world.entity_count):
                if world.selected[entity] is not None and world.scheduling[entity] is None:
                    world.scheduling[entity] = Scheduling()

        for entity in range(world.entity_count):
            if world.scheduling[entity] is None:
                continue
            if keyboard.key is not None and keyboard.key in _DIGITS:
                self._due_input[entity] = self._due_input.get(entity, "") + keyboard.key
            if keyboard.backspace and entity in self._due_input:
                self._due_input[entity] = self._due_input[entity][:-1]
            if keyboard.enter:
                digits = self._due_input.pop(entity, None)
                if digits:
                    timestamp = int(digits)
                    if timestamp <= _MAX_TIMESTAMP:
                        world.dues[entity] = Due(timestamp)
                        world.dirty[entity] = Dirty()
                world.scheduling[entity] = None
            if keyboard.escape:
                self._due_input.pop(entity, None)
                world.scheduling[entity] = None

    def _handle_filter(self, criteria: Filter, keyboard: Keyboard) -> None:
        key = keyboard.key
        if key == "/":
            self._search_mode = True
            criteria.text = ""

        if self._search_mode:
            if key is not None and _is_search_char(key) and criteria.text is not None:
                criteria.text += key
            if keyboard.backspace and criteria.text is not None:
                criteria.text = criteria.text[:-1]
            if keyboard.enter or keyboard.escape:
                self._search_mode = False
                if criteria.text == "":
                    criteria.text = None

        if key == "s":
            criteria.status = None if criteria.status is not None else Status()
        if key == "o":
            criteria.overdue = not criteria.overdue
        if key == "u" and criteria.owner is not None:
            criteria.owner = None

    def _handle_mouse(self, world: World, mouse: Mouse) -> None:
        mx, my = mouse.position
        released = self._last_pressed and not mouse.pressed
        for entity in range(world.entity_count):
            if world.editing[entity] is not None:
                continue
            bounds = world.bounds[entity]
            if bounds is None:
                continue
            in_rows = bounds.y <= my <= bounds.y + bounds.height
            in_icon = in_rows and bounds.x <= mx <= bounds.x + ICON_WIDTH
            in_main = in_rows and bounds.x + ICON_WIDTH < mx <= bounds.x + bounds.width
            if in_icon and world.children[entity] is not None:
                world.hovers[entity] = Hover()
                if mouse.pressed:
                    world.collapsed[entity] = (
                        None if world.collapsed[entity] is not None else Collapsed()
                    )
                    world.dirty[entity] = Dirty()
            elif in_main:
                world.hovers[entity] = Hover()
                if mouse.pressed:
                    world.selected = [None] * world.entity_count
                    world.selected[entity] = Selected()
                if released:
                    world.clicks[entity] = Click()

    @staticmethod
    def _handle_button_click(world: World) -> None:
        for entity in range(world.entity_count):
            if world.clicks[entity] is not None and world.buttons[entity] is not None:
                command = world.spawn()
                world.creates[command] = Create()