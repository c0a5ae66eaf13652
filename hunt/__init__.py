"""Community photo scavenger hunt API."""

__version__ = "0.1.0"
