"""Configuration and exceptions."""
