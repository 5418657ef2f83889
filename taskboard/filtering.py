"""Visibility filtering by text, status, overdue state and owner."""

from __future__ import annotations

from taskboard.components import Visible
from taskboard.engine import System, World
from taskboard.resources import Resources


class FilterSystem(System):
    """Makes visible exactly the entities that pass the current filter."""

    def run(self, world: World, resources: Resources) -> None:
        """Recompute Visible for every entity from resources.filter."""
        criteria = resources.filter
        now = resources.time.now
        world.visible = [None] * world.entity_count
        for entity in range(world.entity_count):
            if criteria.text is not None:
                text = world.texts[entity]
                if criteria.text not in (text.value if text is not None else ""):
                    continue
            if criteria.status is not None and world.statuses[entity] is None:
                continue
            if criteria.overdue:
                due = world.dues[entity]
                if due is None or due.timestamp >= now or world.statuses[entity] is None:
                    continue
            if criteria.owner is not None:
                owner = world.owners[entity]
                if owner is None or owner.user != criteria.owner:
                    continue
            world.visible[entity] = Visible()