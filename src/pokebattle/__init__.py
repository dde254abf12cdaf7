"""Battle-state tracking for a single creature across a tabletop combat session."""

__version__ = "0.1.0"
