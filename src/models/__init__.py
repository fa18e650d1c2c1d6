"""Pydantic models for API payloads."""

from models.profile import Profile, ProfileRequest  # noqa: F401
