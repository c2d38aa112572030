"""Runtime localization for plugin host components."""

__version__ = "0.1.0"
