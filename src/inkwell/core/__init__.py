# src/inkwell/core/__init__.py
"""Core configuration, errors and security helpers."""
