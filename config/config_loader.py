import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "max_steps": 1000,
    "blank_symbol": "_",
    "trace_steps": 5,
    "trace_window": 3,
    "batch_size": 256,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
    "log_results": True,
    "exhausted_file": "pools/budget_exhausted.txt"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "blank_symbol": str,
    "trace_steps": int,
    "trace_window": int,
    "batch_size": int,
    "output_directory": str,
    "log_file_prefix": str,
    "log_results": bool,
    "exhausted_file": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    for key in ["max_steps", "trace_steps", "trace_window"]:
        if config[key] < 0:
            raise ValueError(f"Config key '{key}' must be non-negative, got {config[key]}.")
    if config["batch_size"] < 1:
        raise ValueError(f"Config key 'batch_size' must be positive, got {config['batch_size']}.")
    if len(config["blank_symbol"]) != 1:
        raise ValueError("Blank symbol must be a single character.")

def load_config(path="config/runtime_config.json", verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config

def save_config(config, path="config/runtime_config.json"):
    validate_config(config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
