"""Domain-driven design diagram building blocks, DOT rendering and a viewer command."""

__version__ = "0.4.1"