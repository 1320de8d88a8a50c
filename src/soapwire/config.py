"""Configuration loader for soapwire."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML, YAMLError

from .errors import ConfigError
from .transport.executor import DEFAULT_TIMEOUT
from .transport.request_builder import ACCEPT, DEFAULT_HEADERS, USER_AGENT
from .utils.headers import merge_headers


@dataclass
class TransportConfig:
    """soapwire configuration."""

    # Default request headers
    user_agent: str = USER_AGENT
    accept: str = ACCEPT
    keep_alive: bool = False

    # Headers applied over the defaults on every call (name -> value)
    headers: dict[str, str] = field(default_factory=dict)

    # Executor settings
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    proxy: Optional[str] = None
    follow_redirects: bool = True

    def default_headers(self) -> dict[str, str]:
        """Return the header set the request builder starts from."""
        headers = dict(DEFAULT_HEADERS)
        headers["User-Agent"] = self.user_agent
        headers["Accept"] = self.accept
        if self.keep_alive:
            headers["Connection"] = "keep-alive"
        return headers

    def call_headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Configured per-call headers with extra applied on top."""
        return merge_headers(dict(self.headers), extra)

    def default_options(self) -> dict[str, Any]:
        return {"follow_redirects": self.follow_redirects}

    def create_client(self):
        """Build a SoapHttpClient wired with this configuration."""
        from .transport import HttpxExecutor, RequestBuilder, SoapHttpClient

        return SoapHttpClient(
            executor=HttpxExecutor(
                timeout=self.timeout,
                verify_ssl=self.verify_ssl,
                proxy=self.proxy,
            ),
            builder=RequestBuilder(
                default_headers=self.default_headers(),
                default_options=self.default_options(),
            ),
        )


CONFIG_SEARCH_PATHS = [
    "soapwire.yaml",
    "soapwire.yml",
    ".soapwire.yaml",
    ".soapwire.yml",
]

KNOWN_KEYS = {
    "user_agent", "accept", "keep_alive", "headers",
    "timeout", "verify_ssl", "proxy", "follow_redirects",
}

BOOL_KEYS = {"keep_alive", "verify_ssl", "follow_redirects"}
STR_KEYS = {"user_agent", "accept"}


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _read_yaml(config_path: Path) -> Any:
    yaml = YAML()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    # If there's a soapwire section, use its contents
    if isinstance(data, dict) and "soapwire" in data:
        data = data["soapwire"]
    return data


def _check_data(data: Any) -> list[str]:
    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors: list[str] = []
    for key in data:
        if key not in KNOWN_KEYS:
            errors.append(f"Unknown key: '{key}'")

    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            errors.append(f"'{key}' must be true or false, got: {data[key]}")

    if "timeout" in data:
        try:
            if float(data["timeout"]) <= 0:
                errors.append("'timeout' must be positive")
        except (ValueError, TypeError):
            errors.append(f"'timeout' must be a number, got: {data['timeout']}")

    if "headers" in data and not isinstance(data["headers"], dict):
        errors.append("'headers' must be a mapping (name: value)")

    return errors


def load_config(config_path: str | Path | None = None) -> TransportConfig:
    """Load configuration file.

    Without an explicit path the working directory is searched; a missing
    file then means defaults.

    Raises:
        ConfigError: If an explicit path does not exist, or the file is
            unreadable or invalid
    """
    config = TransportConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return config

    data = _read_yaml(config_path)
    if data is None:
        return config

    errors = _check_data(data)
    if errors:
        raise ConfigError(f"Invalid config {config_path}: " + "; ".join(errors))

    for key in STR_KEYS | BOOL_KEYS:
        if key in data:
            setattr(config, key, data[key] if key in BOOL_KEYS else str(data[key]))

    if "timeout" in data:
        config.timeout = float(data["timeout"])

    if "proxy" in data:
        config.proxy = str(data["proxy"]) if data["proxy"] else None

    if "headers" in data:
        config.headers = {str(k): str(v) for k, v in data["headers"].items()}

    return config
