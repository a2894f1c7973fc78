"""worldreboot - Regenerate game server worlds by emptying their folders."""

__version__ = "1.0.0"
