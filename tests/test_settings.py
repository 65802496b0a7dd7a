import io
import logging
import re

from psapi.logs import disable_logging, enable_logging
from psapi.settings import load_settings

RFC822_LINE = re.compile(r"^\w{3}, \d{2} \w{3} \d{2} \d{2}:\d{2}:\d{2} [+-]\d{4} INFO: Logging enabled\.$")


def test_defaults_from_packaged_yaml(monkeypatch):
    for name in ("PSAPI_BASE_URL", "PSAPI_TIMEOUT", "PSAPI_URL_MODE_PREFIX", "PSAPI_LOGGING", "PSAPI_ACCOUNT", "PSAPI_CATALOG"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.base_url == "http://api.popshops.com/v3"
    assert settings.url_mode_prefix == "psapi_"
    assert settings.logging is False
    assert settings.account is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PSAPI_ACCOUNT", "d1lg0my9")
    monkeypatch.setenv("PSAPI_CATALOG", "dp4rtmme")
    monkeypatch.setenv("PSAPI_TIMEOUT", "5")
    monkeypatch.setenv("PSAPI_LOGGING", "yes")
    settings = load_settings()
    assert settings.account == "d1lg0my9"
    assert settings.catalog == "dp4rtmme"
    assert settings.timeout == 5.0
    assert settings.logging is True


def test_custom_yaml_file(monkeypatch, tmp_path):
    monkeypatch.delenv("PSAPI_BASE_URL", raising=False)
    monkeypatch.delenv("PSAPI_ACCOUNT", raising=False)
    path = tmp_path / "psapi.yml"
    path.write_text("base_url: http://localhost:8080/v3/\naccount: local\n")
    settings = load_settings(path)
    assert settings.base_url == "http://localhost:8080/v3/"
    assert settings.account == "local"
    assert settings.timeout == 30.0


def test_enable_logging_writes_rfc822_lines(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "UTC")
    stream = io.StringIO()
    enable_logging(stream=stream)
    try:
        logging.getLogger("psapi.call").error("Call aborted.")
    finally:
        disable_logging()
    lines = stream.getvalue().splitlines()
    assert RFC822_LINE.match(lines[0])
    assert lines[1].endswith("+0000 ERROR: Call aborted.")
    assert lines[2].endswith("INFO: Logging disabled.")
    assert len(lines) == 3
