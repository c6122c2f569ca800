"""Configuration management for fifthtune."""

import copy
import json
import logging
import os

from .paths import config_dir, config_file, ensure_dir

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "tuning": {
        "reference_note": "A",
        "fifth_size": 700.0,  # 12EDO
        "precision": 3,  # decimal places when printing cents
    },
}


def get_config() -> dict:
    """Load configuration, creating default if needed."""
    ensure_dir(config_dir())
    cfg_file = config_file()

    if cfg_file.exists():
        try:
            with open(cfg_file) as f:
                config = json.load(f)
        except (json.JSONDecodeError, IOError):
            log.warning("Unreadable config %s; using defaults", cfg_file)
            return copy.deepcopy(DEFAULT_CONFIG)
        # Merge with defaults for any missing keys
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for key, value in config.items():
            if isinstance(value, dict) and key in merged:
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged
    else:
        log.debug("Writing default config to %s", cfg_file)
        save_config(DEFAULT_CONFIG)
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(config: dict) -> None:
    """Save configuration to file."""
    ensure_dir(config_dir())
    with open(config_file(), "w") as f:
        json.dump(config, f, indent=2)


def get_tuning_config() -> dict:
    """Get tuning defaults (env vars override config file)."""
    tuning = get_config().get("tuning", {})
    if not isinstance(tuning, dict):
        log.warning("Ignoring non-object 'tuning' section in config: %r", tuning)
        tuning = DEFAULT_CONFIG["tuning"]

    reference = os.environ.get("FIFTHTUNE_REFERENCE_NOTE") or tuning.get("reference_note")
    fifth_size = os.environ.get("FIFTHTUNE_FIFTH_SIZE") or tuning.get("fifth_size")

    return {
        "reference_note": (reference or "A").upper(),
        "fifth_size": float(fifth_size if fifth_size is not None else 700.0),
        "precision": int(tuning.get("precision", 3)),
    }
