# config_manager.py - JSON config manager for the word index CLI

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_words": 0,  # 0 = list every word
    "show_percent": True,  # singleton share in the stats report
    "color": True,
    "log_path": "",  # empty = no log file
    "encoding": "utf-8",
}


class Config:
    def __init__(self, path="word_index.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        self.data.update({k: v for k, v in loaded.items() if k in DEFAULTS})

    def save(self):
        """Write the options back to `path`. In-memory configs (path=None) keep changes for the session only."""
        if not self.path:
            return False
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)
        return True

    def get(self, key):
        return self.data[key]

    def show(self, out=print):
        for k, v in self.data.items():
            out(f"{k:15} = {v}")

    def set(self, key, val):
        """Set an option, coercing to the default's type. Unknown keys raise KeyError."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        self.data[key] = kind(val)
        return self.save()
