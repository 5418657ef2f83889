"""Components attached to entities: task data, UI state and ownership."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# Task components


@dataclass
class Text:
    """Text held by an entity, such as a task title."""

    value: str


@dataclass(frozen=True)
class Status:
    """Marks a task as carrying a TODO/DONE status."""


@dataclass(frozen=True)
class Priority:
    """Marks a task as having a priority."""


@dataclass
class Parent:
    """Parent entity of an entity in the hierarchy."""

    entity: int


@dataclass
class Children:
    """Child entities of an entity in the hierarchy."""

    entities: list[int] = field(default_factory=list)


@dataclass
class Due:
    """Due date of an entity as epoch seconds."""

    timestamp: int


@dataclass(frozen=True)
class Scheduling:
    """Marks an entity whose due date is being entered."""


@dataclass(frozen=True)
class Collapsed:
    """Marks an entity collapsed in the hierarchy."""


@dataclass(frozen=True)
class Dirty:
    """Marks an entity with changes that still need saving."""


@dataclass(frozen=True)
class Create:
    """Command marker: a new task should be created."""


@dataclass(frozen=True)
class Delete:
    """Command marker: this entity should be deleted."""


# UI components


@dataclass(frozen=True)
class Bounds:
    """Position and size of an entity on screen."""

    x: float
    y: float
    width: float
    height: float


@dataclass
class Style:
    """Visual style of an entity."""

    color: str


@dataclass(frozen=True)
class Visible:
    """Marks an entity that is shown."""


@dataclass(frozen=True)
class Selected:
    """Marks the selected entity."""


@dataclass(frozen=True)
class Editing:
    """Marks an entity whose text is being edited."""


@dataclass(frozen=True)
class Hover:
    """Marks an entity under the mouse pointer."""


@dataclass(frozen=True)
class Active:
    """Marks an entity being interacted with."""


@dataclass(frozen=True)
class Click:
    """Marks an entity that was just clicked."""


@dataclass(frozen=True)
class Disabled:
    """Marks an entity that cannot be interacted with."""


@dataclass(frozen=True)
class Container:
    """Marks an entity that lays out its children."""


class Flow(enum.Enum):
    """Direction in which a container arranges its children."""

    ROW = enum.auto()
    COLUMN = enum.auto()


class Align(enum.Enum):
    """Alignment on the cross axis."""

    START = enum.auto()
    CENTER = enum.auto()
    END = enum.auto()


class Justify(enum.Enum):
    """Distribution of space on the main axis."""

    START = enum.auto()
    CENTER = enum.auto()
    END = enum.auto()
    SPACE_BETWEEN = enum.auto()
    SPACE_AROUND = enum.auto()


@dataclass(frozen=True)
class Button:
    """Marks an entity that acts as a button."""


# User components


@dataclass
class User:
    """A user of the board."""

    name: str


@dataclass
class Owner:
    """Ownership of an entity, pointing at the user's entity."""

    user: int