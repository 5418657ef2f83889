"""Entity-component storage, system and plugin interfaces, and the scheduler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from taskboard.components import (
    Active,
    Align,
    Bounds,
    Button,
    Children,
    Click,
    Collapsed,
    Container,
    Create,
    Delete,
    Dirty,
    Disabled,
    Due,
    Editing,
    Flow,
    Hover,
    Justify,
    Owner,
    Parent,
    Priority,
    Scheduling,
    Selected,
    Status,
    Style,
    Text,
    User,
    Visible,
)

if TYPE_CHECKING:
    from taskboard.resources import Resources


class FontLoadError(Exception):
    """The font could not be read or parsed."""


class System(ABC):
    """A unit of per-frame logic."""

    @abstractmethod
    def run(self, world: World, resources: Resources) -> None:
        """Advance the world by one frame."""


class Plugin(ABC):
    """A bundle of systems and initial entities added to an application."""

    @abstractmethod
    def build(self, app: Any) -> None:
        """Register systems and entities with the application."""


_STORES = (
    "texts",
    "statuses",
    "priorities",
    "selected",
    "editing",
    "visible",
    "hovers",
    "actives",
    "clicks",
    "dirty",
    "disabled",
    "bounds",
    "styles",
    "creates",
    "deletes",
    "parents",
    "children",
    "collapsed",
    "dues",
    "scheduling",
    "aligns",
    "containers",
    "flows",
    "justifies",
    "buttons",
    "users",
    "owners",
)


@dataclass
class World:
    """Column storage: one list per component, indexed by entity id."""

    texts: list[Text | None] = field(default_factory=list)
    statuses: list[Status | None] = field(default_factory=list)
    priorities: list[Priority | None] = field(default_factory=list)
    selected: list[Selected | None] = field(default_factory=list)
    editing: list[Editing | None] = field(default_factory=list)
    visible: list[Visible | None] = field(default_factory=list)
    hovers: list[Hover | None] = field(default_factory=list)
    actives: list[Active | None] = field(default_factory=list)
    clicks: list[Click | None] = field(default_factory=list)
    dirty: list[Dirty | None] = field(default_factory=list)
    disabled: list[Disabled | None] = field(default_factory=list)
    bounds: list[Bounds | None] = field(default_factory=list)
    styles: list[Style | None] = field(default_factory=list)
    creates: list[Create | None] = field(default_factory=list)
    deletes: list[Delete | None] = field(default_factory=list)
    parents: list[Parent | None] = field(default_factory=list)
    children: list[Children | None] = field(default_factory=list)
    collapsed: list[Collapsed | None] = field(default_factory=list)
    dues: list[Due | None] = field(default_factory=list)
    scheduling: list[Scheduling | None] = field(default_factory=list)
    aligns: list[Align | None] = field(default_factory=list)
    containers: list[Container | None] = field(default_factory=list)
    flows: list[Flow | None] = field(default_factory=list)
    justifies: list[Justify | None] = field(default_factory=list)
    buttons: list[Button | None] = field(default_factory=list)
    users: list[User | None] = field(default_factory=list)
    owners: list[Owner | None] = field(default_factory=list)
    to_delete: list[bool] = field(default_factory=list)

    @property
    def entity_count(self) -> int:
        """Number of live entities."""
        return len(self.to_delete)

    def spawn(self) -> int:
        """Create an entity with no components and return its id."""
        entity = self.entity_count
        for name in _STORES:
            getattr(self, name).append(None)
        self.to_delete.append(False)
        return entity

    def mark_for_delete(self, entity: int) -> None:
        """Flag an entity for removal at the next sweep."""
        if not 0 <= entity < self.entity_count:
            raise IndexError(f"no entity {entity}")
        self.to_delete[entity] = True

    def sweep(self) -> None:
        """Remove flagged entities and compact storage; later ids shift down."""
        keep = [entity for entity, marked in enumerate(self.to_delete) if not marked]
        for name in _STORES:
            store = getattr(self, name)
            setattr(self, name, [store[entity] for entity in keep])
        self.to_delete = [False] * len(keep)


class Scheduler:
    """Runs registered systems in the order they were added."""

    def __init__(self) -> None:
        self._systems: list[System] = []

    def add(self, system: System) -> None:
        """Register a system to run every frame."""
        self._systems.append(system)

    def run(self, world: World, resources: Resources) -> None:
        """Run every system once."""
        for system in self._systems:
            system.run(world, resources)