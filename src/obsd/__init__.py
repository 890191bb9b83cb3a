"""obsd: scaffold and move notes in a PARA vault."""

__version__ = "1.0.0"
