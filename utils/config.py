# utils/config.py
import os
from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

log = structlog.get_logger(__name__)

CONFIG_ENV = "BANK_PLACEHOLDERS_CONFIG"

# --- Paths relative to the project root ---
PROJECT_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_DIR / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "placeholders.yaml"


def default_config_path() -> Path:
    """Settings file to use: ``$BANK_PLACEHOLDERS_CONFIG`` or the bundled default."""
    override = os.getenv(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_FILE


def load_yaml_config(config_path: Path, config_name: str) -> Dict[str, Any]:
    """Loads a YAML mapping.

    A missing or empty file yields ``{}``.  Parse errors are logged and
    re-raised, as is a document whose top level is not a mapping.
    """
    if not config_path.is_file():
        log.warning(f"{config_name} config file not found, using defaults", path=str(config_path))
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(f"Error parsing YAML for {config_name}", path=str(config_path), error=str(e), exc_info=True)
        raise
    if config_data is None:
        log.warning(f"{config_name} config file is empty.", path=str(config_path))
        return {}
    if not isinstance(config_data, dict):
        log.error(f"{config_name} config must be a mapping", path=str(config_path), found=type(config_data).__name__)
        raise ValueError(f"{config_name} configuration must be a mapping: {config_path}")
    log.info(f"{config_name} config loaded", path=str(config_path))
    return config_data
