"""Building blocks for a terminal summary of a Git repository."""

__version__ = "0.1.0"