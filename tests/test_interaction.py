import pytest

from taskboard.components import (
    Bounds,
    Button,
    Children,
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
from taskboard.engine import World
from taskboard.interaction import InteractSystem
from taskboard.resources import Keyboard, Mouse, Resources, Session


def frame(system, world, resources, mouse=None, **keys):
    resources.keyboard = Keyboard(**keys)
    if mouse is not None:
        resources.mouse = mouse
    system.run(world, resources)


@pytest.fixture
def setup():
    return InteractSystem(), World(), Resources()


def test_search_mode_builds_filter_text(setup):
    system, world, resources = setup
    frame(system, world, resources, key="/")
    assert resources.filter.text == ""
    frame(system, world, resources, key="a")
    frame(system, world, resources, key="-")
    frame(system, world, resources, key="b")
    assert resources.filter.text == "ab"
    frame(system, world, resources, backspace=True)
    assert resources.filter.text == "a"
    frame(system, world, resources, enter=True)
    frame(system, world, resources, key="c")
    assert resources.filter.text == "a"


def test_empty_search_clears_filter_text(setup):
    system, world, resources = setup
    frame(system, world, resources, key="/")
    frame(system, world, resources, escape=True)
    assert resources.filter.text is None


def test_status_and_overdue_hotkeys_toggle(setup):
    system, world, resources = setup
    frame(system, world, resources, key="s")
    assert resources.filter.status == Status()
    frame(system, world, resources, key="s")
    assert resources.filter.status is None
    frame(system, world, resources, key="o")
    assert resources.filter.overdue is True
    frame(system, world, resources, key="o")
    assert resources.filter.overdue is False


def test_owner_hotkey_uses_session(setup):
    system, world, resources = setup
    frame(system, world, resources, key="u")
    assert resources.filter.owner is None
    resources.session = Session(user=3)
    frame(system, world, resources, key="u")
    assert resources.filter.owner == 3


def test_create_key_spawns_command(setup):
    system, world, resources = setup
    world.spawn()
    frame(system, world, resources, key="n")
    assert world.entity_count == 2
    assert world.creates[1] == Create()


def test_delete_key_marks_selected(setup):
    system, world, resources = setup
    a, b = world.spawn(), world.spawn()
    world.selected[b] = Selected()
    frame(system, world, resources, key="d")
    assert world.deletes[a] is None
    assert world.deletes[b] == Delete()


def test_editing_enter_marks_dirty(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.selected[entity] = Selected()
    frame(system, world, resources, e=True)
    assert world.editing[entity] == Editing()
    frame(system, world, resources, enter=True)
    assert world.editing[entity] is None
    assert world.dirty[entity] == Dirty()


def test_editing_escape_does_not_mark_dirty(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.selected[entity] = Selected()
    frame(system, world, resources, e=True)
    frame(system, world, resources, escape=True)
    assert world.editing[entity] is None
    assert world.dirty[entity] is None


def test_due_date_entry(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.selected[entity] = Selected()
    frame(system, world, resources, key="t")
    assert world.scheduling[entity] == Scheduling()
    for ch in "12":
        frame(system, world, resources, key=ch)
    frame(system, world, resources, backspace=True)
    frame(system, world, resources, key="7")
    frame(system, world, resources, enter=True)
    assert world.dues[entity] == Due(17)
    assert world.dirty[entity] == Dirty()
    assert world.scheduling[entity] is None


def test_due_date_escape_cancels(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.selected[entity] = Selected()
    frame(system, world, resources, key="t")
    frame(system, world, resources, key="5")
    frame(system, world, resources, escape=True)
    assert world.scheduling[entity] is None
    assert world.dues[entity] is None
    frame(system, world, resources, key="t")
    frame(system, world, resources, enter=True)
    assert world.dues[entity] is None


def test_press_and_release_selects_and_clicks(setup):
    system, world, resources = setup
    a, b = world.spawn(), world.spawn()
    world.selected[a] = Selected()
    world.bounds[b] = Bounds(0.0, 0.0, 100.0, 30.0)
    frame(system, world, resources, mouse=Mouse((50.0, 10.0), True))
    assert world.selected[a] is None
    assert world.selected[b] == Selected()
    assert world.hovers[b] == Hover()
    assert world.clicks[b] is None
    frame(system, world, resources, mouse=Mouse((50.0, 10.0), False))
    assert world.clicks[b] == Click()
    frame(system, world, resources, mouse=Mouse((500.0, 500.0), False))
    assert world.clicks[b] is None
    assert world.hovers[b] is None


def test_icon_press_toggles_collapsed(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.bounds[entity] = Bounds(0.0, 0.0, 100.0, 30.0)
    world.children[entity] = Children([])
    frame(system, world, resources, mouse=Mouse((10.0, 10.0), True))
    assert world.collapsed[entity] == Collapsed()
    assert world.selected[entity] is None
    frame(system, world, resources, mouse=Mouse((10.0, 10.0), True))
    assert world.collapsed[entity] is None


def test_icon_area_without_children_is_ignored(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.bounds[entity] = Bounds(0.0, 0.0, 100.0, 30.0)
    frame(system, world, resources, mouse=Mouse((10.0, 10.0), True))
    assert world.hovers[entity] is None
    assert world.selected[entity] is None


def test_editing_entity_ignores_mouse(setup):
    system, world, resources = setup
    entity = world.spawn()
    world.bounds[entity] = Bounds(0.0, 0.0, 100.0, 30.0)
    world.editing[entity] = Editing()
    frame(system, world, resources, mouse=Mouse((50.0, 10.0), True))
    assert world.selected[entity] is None
    assert world.hovers[entity] is None


def test_button_click_spawns_create(setup):
    system, world, resources = setup
    button = world.spawn()
    world.bounds[button] = Bounds(0.0, 0.0, 100.0, 30.0)
    world.buttons[button] = Button()
    frame(system, world, resources, mouse=Mouse((50.0, 10.0), True))
    assert world.entity_count == 1
    frame(system, world, resources, mouse=Mouse((50.0, 10.0), False))
    assert world.entity_count == 2
    assert world.creates[1] == Create()


def test_state_is_per_instance():
    world, resources = World(), Resources()
    first, second = InteractSystem(), InteractSystem()
    frame(first, world, resources, key="/")
    frame(second, world, resources, key="x")
    assert resources.filter.text == ""
    frame(first, world, resources, key="x")
    assert resources.filter.text == "x"