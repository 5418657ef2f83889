import pytest

from taskboard.components import (
    Align,
    Bounds,
    Children,
    Container,
    Flow,
    Justify,
    Parent,
    Visible,
)
from taskboard.engine import World
from taskboard.layout import ContainerLayout, LayoutSystem
from taskboard.resources import Resources

ROOT = Bounds(x=10.0, y=20.0, width=800.0, height=600.0)


def _container(world, bounds=None, flow=None, children=()):
    entity = world.spawn()
    world.containers[entity] = Container()
    world.bounds[entity] = bounds
    world.flows[entity] = flow
    world.children[entity] = Children(list(children))
    return entity


def _tree(flow, count=2, justify=None, align=None):
    world = World()
    kids = [world.spawn() for _ in range(count)]
    root = _container(world, ROOT, flow, kids)
    world.justifies[root] = justify
    world.aligns[root] = align
    for kid in kids:
        world.parents[kid] = Parent(root)
    return world, root, kids


def test_layout_system_marks_containers_visible():
    world = World()
    container = _container(world)
    plain = world.spawn()
    LayoutSystem().run(world, Resources())
    assert world.visible[container] == Visible()
    assert world.visible[plain] is None


def test_row_splits_width():
    world, _, kids = _tree(Flow.ROW, count=3)
    ContainerLayout().run(world, Resources())
    boxes = [world.bounds[k] for k in kids]
    assert boxes[0].x == ROOT.x
    assert sum(b.width for b in boxes) == pytest.approx(ROOT.width)
    for left, right in zip(boxes, boxes[1:]):
        assert right.x == pytest.approx(left.x + left.width)
        assert right.width == pytest.approx(left.width)
    assert all(b.y == ROOT.y and b.height == ROOT.height for b in boxes)


def test_column_splits_height():
    world, _, kids = _tree(Flow.COLUMN, count=2)
    ContainerLayout().run(world, Resources())
    top, bottom = (world.bounds[k] for k in kids)
    assert top.y == ROOT.y
    assert bottom.y == pytest.approx(top.y + top.height)
    assert top.height + bottom.height == pytest.approx(ROOT.height)
    assert top.x == ROOT.x and top.width == ROOT.width


def test_flow_defaults_to_column():
    default_world, _, default_kids = _tree(None)
    column_world, _, column_kids = _tree(Flow.COLUMN)
    ContainerLayout().run(default_world, Resources())
    ContainerLayout().run(column_world, Resources())
    assert [default_world.bounds[k] for k in default_kids] == [
        column_world.bounds[k] for k in column_kids
    ]


@pytest.mark.parametrize("justify", list(Justify))
@pytest.mark.parametrize("align", list(Align))
def test_even_split_leaves_no_extra_space(justify, align):
    start_world, _, start_kids = _tree(Flow.ROW, count=4)
    world, _, kids = _tree(Flow.ROW, count=4, justify=justify, align=align)
    ContainerLayout().run(start_world, Resources())
    ContainerLayout().run(world, Resources())
    for a, b in zip(start_kids, kids):
        assert world.bounds[b].x == pytest.approx(start_world.bounds[a].x)
        assert world.bounds[b].y == pytest.approx(start_world.bounds[a].y)


def test_nested_container_fills_its_slot():
    world = World()
    leaf = world.spawn()
    inner = _container(world, None, Flow.COLUMN, [leaf])
    other = world.spawn()
    root = _container(world, ROOT, Flow.ROW, [inner, other])
    world.parents[inner] = Parent(root)
    world.parents[other] = Parent(root)
    world.parents[leaf] = Parent(inner)
    ContainerLayout().run(world, Resources())
    assert world.bounds[leaf] == world.bounds[inner]
    assert world.bounds[inner].width == pytest.approx(ROOT.width / 2)


def test_container_with_parent_is_not_a_root():
    world = World()
    kid = world.spawn()
    root = _container(world, ROOT, Flow.ROW, [kid])
    world.parents[root] = Parent(kid)
    ContainerLayout().run(world, Resources())
    assert world.bounds[kid] is None


def test_root_without_bounds_is_skipped():
    world = World()
    kid = world.spawn()
    _container(world, None, Flow.ROW, [kid])
    ContainerLayout().run(world, Resources())
    assert world.bounds[kid] is None


def test_layout_container_ignores_non_container():
    world = World()
    kid = world.spawn()
    entity = world.spawn()
    world.children[entity] = Children([kid])
    ContainerLayout().layout_container(world, entity, ROOT)
    assert world.bounds[kid] is None


def test_layout_container_with_no_children_changes_nothing():
    world = World()
    entity = _container(world, ROOT, Flow.ROW)
    ContainerLayout().layout_container(world, entity, ROOT)
    assert world.bounds == [ROOT]