"""
Runtime settings read from the environment.

Environment Variables:
    PURSUIT_LEDGER_PATH: Event log location - default: /tmp/pursuit/ledger-events.log
    PURSUIT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR - default: INFO
    PURSUIT_LOG_FORMAT: json, text - default: json
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_LEDGER_PATH = "/tmp/pursuit/ledger-events.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class Settings:
    ledger_path: str = DEFAULT_LEDGER_PATH
    log_level: str = "INFO"
    log_format: str = "json"

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Unknown levels fall back to INFO and unknown formats to json.
        """
        env = os.environ if env is None else env

        level = (env.get("PURSUIT_LOG_LEVEL") or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            level = "INFO"

        fmt = (env.get("PURSUIT_LOG_FORMAT") or "json").strip().lower()
        if fmt not in LOG_FORMATS:
            fmt = "json"

        return Settings(
            ledger_path=env.get("PURSUIT_LEDGER_PATH") or DEFAULT_LEDGER_PATH,
            log_level=level,
            log_format=fmt,
        )
