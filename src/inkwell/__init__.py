# src/inkwell/__init__.py
"""Inkwell: moderated blogging and live chat backend."""

__version__ = "0.1.0"
