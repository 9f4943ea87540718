"""English token filters: possessive removal and Krovetz-style stemming."""

__version__ = "0.1.0"
__all__ = ["possessive", "stem"]