"""Shared logging, configuration and error helpers."""
