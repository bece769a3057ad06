# rcli/config.py
"""
Simple settings persistence for rcli.
Settings saved as JSON in $RCLI_CONFIG_DIR, %APPDATA%/rcli/config.json (Windows)
or ~/.rcli/config.json (fallback). Command-line flags override these values.
"""

import os
import json
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "uppercase": True,
    "lowercase": True,
    "number": True,
    "symbol": True,
    "csv_format": "json",
    "csv_delimiter": ",",
}

def _appdata_dir() -> str:
    override = os.getenv("RCLI_CONFIG_DIR")
    if override:
        return override
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "rcli")
    return os.path.join(os.path.expanduser("~"), ".rcli")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, unknown keys dropped
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
