"""patternctl — design pattern demonstrations behind one CLI."""

__version__ = "0.1.0"
