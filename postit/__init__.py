"""Prioritised, checkable tasks, a TOML configuration file, usage pages and argument parsing."""

__version__ = "0.2.3"