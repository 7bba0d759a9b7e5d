from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from config import PreferenceStore


logger = logging.getLogger(__name__)


class PreferenceNode(QObject):
    """A single persisted preference value plus its runtime enabled flag.

    Emits:
      - value_changed(object): whenever the value actually changes
      - enabled_changed(bool): whenever the enabled flag flips
      - user_changed(str, object): key and new value, for real user edits only
    """

    value_changed = Signal(object)
    enabled_changed = Signal(bool)
    user_changed = Signal(str, object)

    def __init__(
        self,
        store: PreferenceStore,
        key: str,
        default: Any,
        on_preference_changed: Optional[Callable[[Any], None]] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._key = key
        self._value = self._read(default)
        self._enabled = True
        # Storage is written on the first set even if nothing changed
        self._persisted = False
        self.on_preference_changed = on_preference_changed

    # --- API ---
    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_value(self, value: Any) -> bool:
        """Set the value, persisting it when it changes. Returns whether it changed."""
        changed = value != self._value
        if changed or not self._persisted:
            self._write(value)
            self._persisted = True
        self._value = value
        if changed:
            self.value_changed.emit(value)
        return changed

    def on_user_change(self, value: Any) -> None:
        """Apply a change requested through the UI."""
        if self.set_value(value):
            # The new value is already stored, so it is reported even if a rule fails
            try:
                if self.on_preference_changed is not None:
                    self.on_preference_changed(value)
            finally:
                self.user_changed.emit(self._key, value)

    def set_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._enabled:
            return
        self._enabled = enabled
        self.enabled_changed.emit(enabled)

    # --- internals ---
    def _read(self, default: Any) -> Any:
        raise NotImplementedError

    def _write(self, value: Any) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, value={self._value!r}, enabled={self._enabled})"


class SwitchPreference(PreferenceNode):
    """Boolean preference rendered as a switch."""

    def _read(self, default: bool) -> bool:
        return self._store.get_boolean(self._key, bool(default))

    def _write(self, value: bool) -> None:
        self._store.set_boolean(self._key, value)

    @property
    def checked(self) -> bool:
        return self._value

    def set_checked(self, value: bool) -> bool:
        return self.set_value(bool(value))

    def set_value(self, value: bool) -> bool:
        return super().set_value(bool(value))


class ListPreference(PreferenceNode):
    """String preference chosen from an ordered set of values."""

    def __init__(
        self,
        store: PreferenceStore,
        key: str,
        default: str,
        values: Sequence[str],
        entries: Sequence[str],
        on_preference_changed: Optional[Callable[[str], None]] = None,
        parent: QObject | None = None,
    ) -> None:
        if len(values) != len(entries):
            raise ValueError(
                f"'{key}' has {len(values)} values but {len(entries)} entries"
            )
        super().__init__(store, key, default, on_preference_changed, parent)
        self._values: Tuple[str, ...] = tuple(values)
        self._entries: Tuple[str, ...] = tuple(entries)

    @property
    def values(self) -> Tuple[str, ...]:
        return self._values

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def choices(self) -> Tuple[Tuple[str, str], ...]:
        """(value, label) pairs in display order."""
        return tuple(zip(self._values, self._entries))

    def entry_for(self, value: str) -> Optional[str]:
        try:
            return self._entries[self._values.index(value)]
        except ValueError:
            return None

    def set_value(self, value: str) -> bool:
        value = str(value)
        if value not in self._values:
            logger.warning("Value %r for '%s' is not one of %s", value, self._key, list(self._values))
        return super().set_value(value)

    def _read(self, default: str) -> str:
        return self._store.get_string(self._key, default)

    def _write(self, value: str) -> None:
        self._store.set_string(self._key, value)
