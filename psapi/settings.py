"""Client configuration: packaged YAML defaults overridden by environment variables."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

import yaml

DEFAULTS_PATH = pathlib.Path(__file__).with_name("defaults.yml")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    base_url: str
    timeout: float
    user_agent: str
    url_mode_prefix: str
    logging: bool = False
    account: str | None = None
    catalog: str | None = None


def load_settings(path: pathlib.Path | None = None) -> Settings:
    data = yaml.safe_load((path or DEFAULTS_PATH).read_text()) or {}
    logging_flag = os.environ.get("PSAPI_LOGGING")
    return Settings(
        base_url=os.environ.get("PSAPI_BASE_URL", data.get("base_url", "http://api.popshops.com/v3")),
        timeout=float(os.environ.get("PSAPI_TIMEOUT", data.get("timeout", 30.0))),
        user_agent=data.get("user_agent", "psapi-graph/1.0"),
        url_mode_prefix=os.environ.get("PSAPI_URL_MODE_PREFIX", data.get("url_mode_prefix", "psapi_")),
        logging=logging_flag.lower() in _TRUTHY if logging_flag is not None else bool(data.get("logging", False)),
        account=os.environ.get("PSAPI_ACCOUNT", data.get("account")),
        catalog=os.environ.get("PSAPI_CATALOG", data.get("catalog")),
    )
