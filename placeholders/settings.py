"""Placeholder policy settings.

The two policy flags are owned by an external settings store and looked up
by name.  :class:`PolicySettings` is a frozen snapshot taken whenever a
policy decision is made, so a store that changes between removals is
honoured on the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Protocol

import structlog

from utils.config import default_config_path, load_yaml_config

log = structlog.get_logger(__name__)

ONLY_LOCKED = "only-locked"
USE_SLOTS = "use-slots"


class SettingsStore(Protocol):
    def get(self, name: str, default: Any = None) -> Any:
        ...


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in {"1", "true", "yes", "on"}:
            return True
        if token in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    log.warning("Ignoring non-boolean setting value", value=repr(value))
    return default


@dataclass(frozen=True)
class PolicySettings:
    """Snapshot of the placeholder policy flags."""

    only_locked: bool = False
    use_slots: bool = False

    @classmethod
    def from_store(cls, store: SettingsStore) -> "PolicySettings":
        return cls(
            only_locked=_as_bool(store.get(ONLY_LOCKED), False),
            use_slots=_as_bool(store.get(USE_SLOTS), False),
        )


class DictSettingsStore:
    """Settings held in a plain mapping; mutate ``values`` to change policy."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self.values: Dict[str, Any] = dict(values or {})

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value


class YamlSettingsStore:
    """Settings read from a YAML file (see ``config/placeholders.yaml``)."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else default_config_path()
        self.values: Dict[str, Any] = {}
        self.reload()

    def reload(self) -> None:
        self.values = load_yaml_config(self.path, "Placeholder settings")
        log.debug("Placeholder settings loaded", path=str(self.path), keys=sorted(self.values))

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)
