"""Building blocks for code generators: code building, imports, handler paths and generator interfaces."""

__version__ = "0.4.0"