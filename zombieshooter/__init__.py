"""Game logic, menus, audio and drawing for a top-down zombie shooter."""

__version__ = "0.1.0"