"""Notice Checker - dependency license policy checks and notice generation."""

__version__ = "0.1.0"
