"""Plugins that assemble the board: task systems and sample data, UI systems, users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.components import (
    Bounds,
    Children,
    Container,
    Flow,
    Owner,
    Parent,
    Style,
    Text,
    User,
    Visible,
)
from taskboard.engine import Plugin, World
from taskboard.filtering import FilterSystem
from taskboard.interaction import InteractSystem
from taskboard.layout import LayoutSystem
from taskboard.render import RenderSystem
from taskboard.resources import Session
from taskboard.tasks import (
    CreateSystem,
    DeleteSystem,
    PersistSystem,
    TextSystem,
    ToggleSystem,
)

if TYPE_CHECKING:
    from taskboard.app import App

SAMPLE_TASK_COUNT = 3


def _spawn_panel(
    world: World, bounds: Bounds, color: str, flow: Flow, parent: int | None
) -> int:
    """Spawn a visible container panel, attaching it to a parent if given."""
    panel = world.spawn()
    world.bounds[panel] = bounds
    world.styles[panel] = Style(color)
    world.visible[panel] = Visible()
    world.children[panel] = Children()
    world.containers[panel] = Container()
    world.flows[panel] = flow
    if parent is not None:
        world.parents[panel] = Parent(parent)
        _attach(world, parent, panel)
    return panel


def _attach(world: World, parent: int, child: int) -> None:
    children = world.children[parent]
    if children is not None:
        children.entities.append(child)


class TaskPlugin(Plugin):
    """Registers the task systems and creates the sample users, layout and tasks."""

    def build(self, app: App) -> None:
        """Add task systems, two users, a master-detail layout and sample tasks."""
        (
            app.system(CreateSystem())
            .system(DeleteSystem())
            .system(ToggleSystem())
            .system(PersistSystem())
            .system(TextSystem())
        )
        world = app.world

        user_a = world.spawn()
        world.users[user_a] = User("User A")
        user_b = world.spawn()
        world.users[user_b] = User("User B")

        app.resources.session = Session(user_a)

        root = _spawn_panel(
            world, Bounds(0.0, 0.0, 800.0, 600.0), "#f0f0f0", Flow.ROW, None
        )
        master = _spawn_panel(
            world, Bounds(0.0, 0.0, 400.0, 600.0), "#ffffff", Flow.COLUMN, root
        )
        _spawn_panel(
            world, Bounds(400.0, 0.0, 400.0, 600.0), "#e3e3e3", Flow.COLUMN, root
        )

        for number in range(1, SAMPLE_TASK_COUNT + 1):
            task = world.spawn()
            world.bounds[task] = Bounds(0.0, 0.0, 380.0, 40.0)
            world.styles[task] = Style("#e3f2fd")
            world.visible[task] = Visible()
            world.texts[task] = Text(f"Task {number}")
            world.parents[task] = Parent(master)
            world.owners[task] = Owner(user_a if number % 2 == 1 else user_b)
            _attach(world, master, task)

        print("Task Plugin loaded.")


class UiPlugin(Plugin):
    """Registers the layout, filter, interaction and render systems."""

    def build(self, app: App) -> None:
        """Add the UI systems in their running order."""
        (
            app.system(LayoutSystem())
            .system(FilterSystem())
            .system(InteractSystem())
            .system(RenderSystem())
        )
        print("UI Plugin loaded.")


class UserPlugin(Plugin):
    """User support; users themselves are created by the task plugin."""

    def build(self, app: App) -> None:
        """Register nothing; announce that the plugin is loaded."""
        print("User Plugin loaded.")