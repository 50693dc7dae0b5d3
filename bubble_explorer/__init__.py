"""bubble-explorer: browse and search Bubble.io app exports from the terminal."""

__version__ = "0.1.0"
