"""VerseGraph: cross-reference graphs, verse navigation and conversation archives."""

__version__ = "1.0.0"
