"""Read, validate and number local-first issues and docs kept in a project's .centy directory."""

__version__ = "0.1.3"