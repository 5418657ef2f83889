"""Task systems: creating, deleting, toggling, editing and saving tasks."""

from __future__ import annotations

from taskboard.components import (
    Bounds,
    Children,
    Delete,
    Dirty,
    Owner,
    Parent,
    Priority,
    Status,
    Style,
    Text,
    Visible,
)
from taskboard.engine import System, World
from taskboard.resources import Resources

NEW_TASK_TEXT = "New Task"
NEW_TASK_COLOR = "gray"
NEW_TASK_BOUNDS = Bounds(x=0.0, y=0.0, width=100.0, height=30.0)


def _first_selected(world: World) -> int | None:
    return next(
        (entity for entity, mark in enumerate(world.selected) if mark is not None),
        None,
    )


class CreateSystem(System):
    """Turns every Create command into a new task."""

    def run(self, world: World, resources: Resources) -> None:
        """Spawn a task per Create command, owned by the session user and
        attached as a child of the selected entity, if any."""
        for entity in range(world.entity_count):
            if world.creates[entity] is None:
                continue
            task = world.spawn()
            world.texts[task] = Text(NEW_TASK_TEXT)
            world.statuses[task] = Status()
            world.priorities[task] = Priority()
            world.visible[task] = Visible()
            world.bounds[task] = NEW_TASK_BOUNDS
            world.styles[task] = Style(NEW_TASK_COLOR)

            if resources.session is not None:
                world.owners[task] = Owner(resources.session.user)

            parent = _first_selected(world)
            if parent is not None:
                world.parents[task] = Parent(parent)
                siblings = world.children[parent]
                if siblings is None:
                    world.children[parent] = Children([task])
                else:
                    siblings.entities.append(task)

            world.creates[entity] = None


class DeleteSystem(System):
    """Removes entities carrying Delete, together with all their descendants."""

    @staticmethod
    def _mark_cascade(world: World, root: int) -> None:
        stack = [root]
        while stack:
            entity = stack.pop()
            children = world.children[entity]
            if children is None:
                continue
            for child in children.entities:
                if world.deletes[child] is None:
                    world.deletes[child] = Delete()
                    stack.append(child)

    def run(self, world: World, resources: Resources) -> None:
        """Mark descendants of deleted entities, then sweep them all away."""
        for entity in range(world.entity_count):
            if world.deletes[entity] is not None:
                self._mark_cascade(world, entity)
        for entity in range(world.entity_count):
            if world.deletes[entity] is not None:
                world.mark_for_delete(entity)
                world.deletes[entity] = None
        world.sweep()


class ToggleSystem(System):
    """Toggles the status of clicked tasks."""

    def run(self, world: World, resources: Resources) -> None:
        """For entities with both Click and Status, drop the status, mark them
        dirty and consume the click."""
        for entity in range(world.entity_count):
            if world.clicks[entity] is not None and world.statuses[entity] is not None:
                world.statuses[entity] = None
                world.dirty[entity] = Dirty()
                world.clicks[entity] = None


class TextSystem(System):
    """Appends typed characters to the text of entities being edited."""

    def run(self, world: World, resources: Resources) -> None:
        """Append this frame's characters to every edited text."""
        chars = resources.keyboard.chars
        if not chars:
            return
        for entity in range(world.entity_count):
            if world.editing[entity] is None:
                continue
            text = world.texts[entity]
            if text is not None:
                text.value += chars
                world.dirty[entity] = Dirty()


class PersistSystem(System):
    """Saves changed entities by consuming their Dirty markers."""

    def run(self, world: World, resources: Resources) -> None:
        """Clear the Dirty marker of every entity."""
        for entity in range(world.entity_count):
            if world.dirty[entity] is not None:
                world.dirty[entity] = None