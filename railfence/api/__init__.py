"""API module for rail fence tools.

Functions defined here are the single source of truth for the CLI commands.
"""

__all__ = []
