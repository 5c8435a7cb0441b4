"""Pydantic data model."""
