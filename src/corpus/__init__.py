"""Corpus builder: panel layout and spacing engine for furniture carcasses."""

__version__ = "1.0.0"
