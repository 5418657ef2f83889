from taskboard.app import App
from taskboard.components import Create
from taskboard.plugins import TaskPlugin, UiPlugin, UserPlugin


def _task_app():
    app = App()
    app.add(TaskPlugin())
    return app


def _tasks(world):
    return [
        entity
        for entity, text in enumerate(world.texts)
        if text is not None and text.value.startswith("Task ")
    ]


def test_task_plugin_creates_users_and_session():
    app = _task_app()
    names = [user.name for user in app.world.users if user is not None]
    assert names == ["User A", "User B"]
    assert app.world.users[app.resources.session.user].name == "User A"


def test_task_plugin_spawns_eight_entities():
    app = _task_app()
    assert app.world.entity_count == 8


def test_task_plugin_builds_master_detail_hierarchy():
    world = _task_app().world
    roots = [
        entity
        for entity in range(world.entity_count)
        if world.containers[entity] is not None and world.parents[entity] is None
    ]
    assert len(roots) == 1
    root = roots[0]
    assert world.bounds[root].width == 800.0
    assert world.bounds[root].height == 600.0
    master, detail = world.children[root].entities
    assert world.parents[master].entity == root
    assert world.parents[detail].entity == root
    assert world.styles[detail].color == "#e3e3e3"
    assert world.children[master].entities == _tasks(world)
    assert world.children[detail].entities == []


def test_task_texts_and_owners_alternate():
    app = _task_app()
    world = app.world
    tasks = _tasks(world)
    assert [world.texts[t].value for t in tasks] == ["Task 1", "Task 2", "Task 3"]
    owner_names = [world.users[world.owners[t].user].name for t in tasks]
    assert owner_names == ["User A", "User B", "User A"]


def test_task_plugin_registers_create_system():
    app = _task_app()
    command = app.world.spawn()
    app.world.creates[command] = Create()
    app.run()
    world = app.world
    assert world.creates[command] is None
    created = [e for e, t in enumerate(world.texts) if t is not None and t.value == "New Task"]
    assert len(created) == 1
    assert world.owners[created[0]].user == app.resources.session.user


def test_task_plugin_announces(capsys):
    _task_app()
    assert "Task Plugin loaded." in capsys.readouterr().out


def test_ui_plugin_filters_visibility():
    app = _task_app()
    app.add(UiPlugin())
    app.resources.filter.text = "Task 2"
    app.run()
    world = app.world
    visible = [world.texts[e].value for e in range(world.entity_count) if world.visible[e] is not None]
    assert visible == ["Task 2"]


def test_ui_plugin_announces(capsys):
    App().add(UiPlugin())
    assert "UI Plugin loaded." in capsys.readouterr().out


def test_user_plugin_adds_nothing(capsys):
    app = App().add(UserPlugin())
    assert app.world.entity_count == 0
    assert app.resources.session is None
    assert "User Plugin loaded." in capsys.readouterr().out