"""User preferences service for the pace table.

Persists the settings a runner expects to find again on the next visit:
- Pace range (slowest pace, fastest pace, row interval)
- VMA, kept as the raw text the user typed
- Split interval for intermediate times
- Theme

Storage is an injected key-value store holding strings. The core table
computation never touches it.
"""

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Dict, Iterator, Literal, Optional, Protocol

from ..config import Settings, get_settings
from ..exceptions import PreferenceError
from ..models.pace_table import PaceRangeConfig

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]
THEMES = ("light", "dark")


class KeyValueStore(Protocol):
    """Minimal string store used for preferences."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store, used by default and in tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SqliteStore:
    """SQLite-backed store, one row per preference key."""

    def __init__(self, db_path: str | Path = "preferences.db"):
        self.db_path = Path(db_path)
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS preferences (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a database connection, committing on success."""
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[str]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM preferences WHERE key = ?", (key,)
            ).fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO preferences (key, value) VALUES (?, ?)",
                (key, value),
            )


@dataclass(frozen=True)
class UserPreferences:
    """User preferences data model."""

    max_pace_seconds: int
    min_pace_seconds: int
    pace_interval_seconds: int
    vma: str
    split_interval_meters: int
    theme: Theme = "light"

    @property
    def pace_config(self) -> PaceRangeConfig:
        return PaceRangeConfig(
            max_seconds=self.max_pace_seconds,
            min_seconds=self.min_pace_seconds,
            interval_seconds=self.pace_interval_seconds,
        )

    @property
    def vma_kmh(self) -> float:
        """VMA as a number; text that does not parse counts as 0."""
        try:
            return float(self.vma)
        except ValueError:
            return 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "max_pace_seconds": self.max_pace_seconds,
            "min_pace_seconds": self.min_pace_seconds,
            "pace_interval_seconds": self.pace_interval_seconds,
            "vma": self.vma,
            "split_interval_meters": self.split_interval_meters,
            "theme": self.theme,
        }


# Preference field -> store key
STORE_KEYS = {
    "max_pace_seconds": "pace_config_max_seconds",
    "min_pace_seconds": "pace_config_min_seconds",
    "pace_interval_seconds": "pace_config_interval",
    "vma": "user_vma",
    "split_interval_meters": "split_interval",
    "theme": "theme",
}

_INT_FIELDS = {"max_pace_seconds", "min_pace_seconds", "pace_interval_seconds", "split_interval_meters"}


def _parse(name: str, raw: str):
    """Convert a stored string to the field's type, raising PreferenceError."""
    if name in _INT_FIELDS:
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise PreferenceError(name, raw) from None
    if name == "theme":
        if raw not in THEMES:
            raise PreferenceError(name, raw)
        return raw
    return str(raw)


class PreferencesService:
    """Service for loading and saving pace table preferences.

    Values missing from the store fall back to the settings defaults. A
    stored value that no longer parses is logged and replaced by its default.
    """

    def __init__(self, store: Optional[KeyValueStore] = None, settings: Optional[Settings] = None):
        """Initialize the preferences service.

        Args:
            store: Key-value store to persist into. Defaults to a SQLite store
                at settings.preferences_db_path, or memory when unset.
            settings: Settings providing default values.
        """
        self._settings = settings or get_settings()
        if store is None:
            db_path = self._settings.preferences_db_path
            store = SqliteStore(db_path) if db_path else InMemoryStore()
        self._store = store

    def defaults(self) -> UserPreferences:
        s = self._settings
        return UserPreferences(
            max_pace_seconds=s.default_max_pace_seconds,
            min_pace_seconds=s.default_min_pace_seconds,
            pace_interval_seconds=s.default_pace_interval_seconds,
            vma=s.default_vma,
            split_interval_meters=s.default_split_interval_meters,
            theme=s.default_theme,
        )

    def get_preferences(self) -> UserPreferences:
        """Read every preference, falling back to defaults."""
        values = self.defaults().to_dict()
        for name, store_key in STORE_KEYS.items():
            raw = self._store.get(store_key)
            if raw is None:
                continue
            try:
                values[name] = _parse(name, raw)
            except PreferenceError as e:
                logger.warning(f"Ignoring stored preference: {e.message}")
        return UserPreferences(**values)

    def save_preferences(self, prefs: UserPreferences) -> UserPreferences:
        """Write every preference field to the store."""
        for f in fields(prefs):
            self._store.set(STORE_KEYS[f.name], str(getattr(prefs, f.name)))
        logger.debug(f"Saved preferences: {prefs.to_dict()}")
        return prefs

    def update_preferences(self, **changes) -> UserPreferences:
        """Validate and persist only the given fields.

        Raises:
            PreferenceError: If a field is unknown or a value does not parse.
        """
        parsed = {}
        for name, value in changes.items():
            if value is None:
                continue
            if name not in STORE_KEYS:
                raise PreferenceError(name, value)
            parsed[name] = _parse(name, str(value))

        current = self.get_preferences()
        if not parsed:
            return current

        updated = replace(current, **parsed)
        for name, value in parsed.items():
            self._store.set(STORE_KEYS[name], str(value))
        logger.info(f"Updated preferences: {sorted(parsed)}")
        return updated
