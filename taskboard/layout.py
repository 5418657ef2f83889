"""Layout systems: container visibility and nested flow layout."""

from __future__ import annotations

from taskboard.components import Align, Bounds, Flow, Justify, Visible
from taskboard.engine import System, World
from taskboard.resources import Resources


class LayoutSystem(System):
    """Keeps every container entity visible."""

    def run(self, world: World, resources: Resources) -> None:
        """Mark each entity with a Container as Visible."""
        for entity in range(world.entity_count):
            if world.containers[entity] is not None:
                world.visible[entity] = Visible()


def _justify_offsets(justify: Justify, extra: float, count: int) -> tuple[float, float]:
    """Return the start offset and the gap between children on the main axis."""
    if justify is Justify.CENTER:
        return extra / 2.0, 0.0
    if justify is Justify.END:
        return extra, 0.0
    if justify is Justify.SPACE_BETWEEN:
        return 0.0, extra / (count - 1) if count > 1 else 0.0
    if justify is Justify.SPACE_AROUND:
        gap = extra / count
        return gap / 2.0, gap
    return 0.0, 0.0


class ContainerLayout(System):
    """Lays out nested containers, splitting space evenly along their flow."""

    def run(self, world: World, resources: Resources) -> None:
        """Lay out every root container (one with bounds and no parent)."""
        for entity in range(world.entity_count):
            if world.parents[entity] is not None or world.containers[entity] is None:
                continue
            bounds = world.bounds[entity]
            if bounds is not None:
                self.layout_container(world, entity, bounds)

    def layout_container(self, world: World, entity: int, bounds: Bounds) -> None:
        """Assign bounds to the children of a container within the given bounds,
        recursing into children that are containers themselves."""
        if world.containers[entity] is None:
            return
        children = world.children[entity]
        child_ids = list(children.entities) if children is not None else []
        count = len(child_ids)
        if count == 0:
            return
        flow = world.flows[entity] or Flow.COLUMN
        align = world.aligns[entity] or Align.START
        justify = world.justifies[entity] or Justify.START

        if flow is Flow.COLUMN:
            child_height = bounds.height / count
            extra = bounds.height - child_height * count
            offset, gap = _justify_offsets(justify, extra, count)
            y = bounds.y + offset
            for child in child_ids:
                x = bounds.x
                width = bounds.width
                if align is Align.CENTER:
                    x += (bounds.width - width) / 2.0
                elif align is Align.END:
                    x += bounds.width - width
                child_bounds = Bounds(x=x, y=y, width=width, height=child_height)
                world.bounds[child] = child_bounds
                self.layout_container(world, child, child_bounds)
                y += child_height + gap
        else:
            child_width = bounds.width / count
            extra = bounds.width - child_width * count
            offset, gap = _justify_offsets(justify, extra, count)
            x = bounds.x + offset
            for child in child_ids:
                y = bounds.y
                height = bounds.height
                if align is Align.CENTER:
                    y += (bounds.height - height) / 2.0
                elif align is Align.END:
                    y += bounds.height - height
                child_bounds = Bounds(x=x, y=y, width=child_width, height=height)
                world.bounds[child] = child_bounds
                self.layout_container(world, child, child_bounds)
                x += child_width + gap