"""gopen: open a path of a Git working tree on its hosting platform."""

__version__ = "0.3.0"
