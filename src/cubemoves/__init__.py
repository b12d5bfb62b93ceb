"""Face-turn move sequences for 3x3 twisty puzzles."""

__version__ = "0.1.0"
