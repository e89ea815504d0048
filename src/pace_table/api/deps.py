"""Dependency injection for API routes."""

from functools import lru_cache

from ..services.preferences_service import PreferencesService


@lru_cache
def get_preferences_service() -> PreferencesService:
    """Get the preferences service instance."""
    return PreferencesService()
