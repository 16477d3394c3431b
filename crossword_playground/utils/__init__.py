"""Logging and text rendering helpers."""
