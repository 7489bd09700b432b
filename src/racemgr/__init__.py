"""Race simulation engine for a racing management game."""

__version__ = "0.1.0"
