"""Pydantic schemas for records and request bodies."""
