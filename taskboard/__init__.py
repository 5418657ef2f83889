"""Entity-component-system task board with filtering, due dates, owners and a pygame window."""

__version__ = "0.1.0"
__all__ = [
    "app",
    "components",
    "engine",
    "filtering",
    "interaction",
    "layout",
    "plugins",
    "render",
    "resources",
    "tasks",
]