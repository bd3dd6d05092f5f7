"""A tiny version control system keeping snapshots in a .minigit directory."""

__version__ = "0.1.0"