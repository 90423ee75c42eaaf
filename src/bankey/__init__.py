"""Bankey — account summary core for a mobile banking demo."""

__version__ = "0.1.0"
