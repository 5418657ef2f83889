# taskboard

A small task board built on an entity-component-system core. Tasks, panels and
users are entities in a `taskboard.engine.World`; behaviour lives in systems
that a `taskboard.engine.Scheduler` runs once per frame, in the order they were
added; plugins bundle systems and starting data.

## Install

    pip install .

The window uses `pygame`; glyphs are rasterized with `pillow`.

## Run

    taskboard
    taskboard --font path/to/font.ttf

This opens an 800×600 window. The starting data, created by `TaskPlugin`, is
two users ("User A", the session user, and "User B"), a root panel holding a
master panel and a detail panel, and three sample tasks in the master panel
owned alternately by the two users. Each visible entity is drawn as a colored
box with its text and, for owned tasks, the owner's name. When a task is
selected, its details (text, status, due timestamp, owner) are drawn on the
detail panel.

Without `--font`, the font bundled with pygame is used. If the font cannot be
read, the command prints an error and exits with status 1. The window closes
when it is closed or Escape is pressed.

### Input handled in the window

| Input                         | Effect                                                          |
|-------------------------------|-----------------------------------------------------------------|
| Mouse over a task             | Highlights it                                                   |
| Left button down over a task  | Selects it                                                      |
| Releasing the button on it    | Clears the status of a task that has one                        |
| Left 24 px of an entity with children | Pressing toggles it collapsed                           |
| `e` (held) with a selection   | Starts editing the selected task                                |
| Typing while editing          | Appends the typed characters to the task's text                 |
| Enter                         | Finishes editing and ends due-date entry                        |
| Escape                        | Quits                                                           |

## Use as a library

    from taskboard.app import App
    from taskboard.plugins import TaskPlugin, UiPlugin, UserPlugin

    app = App()
    app.add(UserPlugin()).add(TaskPlugin()).add(UiPlugin())
    app.run()  # one frame without drawing

- `App.system(system)` registers a single system and returns the app.
- `App.run_with_framebuffer(framebuffer)` runs one frame that also draws into a
  `taskboard.resources.Framebuffer` (0xAARRGGBB pixels, row by row). Text is
  drawn only when the app was given a `taskboard.resources.FontResource`,
  e.g. `App(FontResource.load("font.ttf"))`.
- Input is fed through `app.resources`: `mouse.position`, `mouse.pressed`,
  and `keyboard.key`, `keyboard.chars`, `keyboard.enter`, `keyboard.escape`,
  `keyboard.backspace`, `keyboard.e`.

Setting `keyboard.key` for a frame drives the keys handled by
`taskboard.interaction.InteractSystem`:

| `keyboard.key` | Effect                                                                 |
|----------------|------------------------------------------------------------------------|
| `"n"`          | Create a "New Task", owned by the session user, child of the selection |
| `"d"`          | Delete the selected task and its whole subtree                         |
| `"t"`          | Start due-date entry; digit keys, backspace, Enter saves, Escape cancels |
| `"/"`          | Start search; letters, digits and spaces build the filter text         |
| `"s"`          | Toggle showing only tasks with a status                                |
| `"o"`          | Toggle showing only overdue tasks (due before `time.now`, with status) |
| `"u"`          | Toggle showing only tasks owned by the session user                    |

Custom systems subclass `taskboard.engine.System` and implement
`run(world, resources)`; plugins subclass `taskboard.engine.Plugin` and
implement `build(app)`.

`taskboard.layout.ContainerLayout` splits a container's bounds evenly among
its children along its `Flow` (column by default), honouring `Align` and
`Justify`, and recurses into nested containers. It is not registered by
`UiPlugin`; add it with `app.system(ContainerLayout())` if wanted.

## What it does not do

- The window never sets `keyboard.key`, so the single-key commands above
  (`n`, `d`, `t`, `/`, `s`, `o`, `u`) are available only through the library.
- Nothing is saved: `PersistSystem` only clears the changed marker on entities;
  tasks are lost when the program exits.
- `UiPlugin` registers `LayoutSystem`, which only keeps containers visible; it
  does not compute positions.

## Tests

    pip install ".[test]"
    pytest