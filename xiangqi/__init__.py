"""Chinese chess window with menus, a board model and room-status networking."""

__version__ = "0.1.0"