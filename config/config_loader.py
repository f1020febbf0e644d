import json
import os
from datetime import datetime

from rich import print

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "input_file": "machine.in",
    "output_file": "machine.out",
    "output_directory": "logs/",
    "log_file_prefix": "translator_",
    "log_runs": True,
    "echo_config": False
}

# Expected types for validation
CONFIG_SCHEMA = {
    "input_file": str,
    "output_file": str,
    "output_directory": str,
    "log_file_prefix": str,
    "log_runs": bool,
    "echo_config": bool
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    unknown = sorted(set(config) - set(CONFIG_SCHEMA))
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    for key in ("input_file", "output_file"):
        if not config[key].strip():
            raise ValueError(f"Config key '{key}' must not be empty.")

def load_config(path=DEFAULT_CONFIG_PATH):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if config["echo_config"]:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config

def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
