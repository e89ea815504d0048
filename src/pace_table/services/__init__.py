"""Services composing the pace table and managing user preferences."""

from .table_service import (
    STATUS_MESSAGES,
    TableSession,
    build_table,
    list_distances,
    list_paces,
)
from .preferences_service import (
    InMemoryStore,
    KeyValueStore,
    PreferencesService,
    SqliteStore,
    UserPreferences,
)

__all__ = [
    "STATUS_MESSAGES",
    "TableSession",
    "build_table",
    "list_distances",
    "list_paces",
    "InMemoryStore",
    "KeyValueStore",
    "PreferencesService",
    "SqliteStore",
    "UserPreferences",
]
