# passforge/config.py
"""
Default generation settings read from a JSON file.
Looked up in $PASSFORGE_CONFIG, else %APPDATA%/passforge/config.json (Windows)
or ~/.passforge/config.json. The file is only ever read here.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .settings import GenerationSettings

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 32,
    "amount": 15,
    "includeNumbers": True,
    "includeLowercase": True,
    "includeUppercase": True,
    "includeSymbols": False,
    "customSymbols": "",
    "noStartNumber": False,
    "noStartSymbol": False,
    "noSimilar": False,
    "noDuplicate": False,
    "noSequential": False,
}

ENV_VAR = "PASSFORGE_CONFIG"


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passforge")
    return os.path.join(os.path.expanduser("~"), ".passforge")


def config_path() -> str:
    return os.getenv(ENV_VAR) or os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("could not read config %s (%s); using defaults", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("config %s is not a JSON object; using defaults", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def load_settings(path: Optional[str] = None, **overrides: Any) -> GenerationSettings:
    """Settings from the config file, with keyword overrides applied on top."""
    cfg = load_config(path)
    cfg.update(overrides)
    return GenerationSettings.from_mapping(cfg)
