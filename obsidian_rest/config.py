"""Configuration loading for the Local REST API connection."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

from obsidian_rest.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_API_HOST,
    DEFAULT_MCP_HOST,
    DEFAULT_MCP_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSPORT,
    ENV_FILE,
    TRANSPORTS,
)
from obsidian_rest.data_models import ApiConfiguration, TransportConfiguration

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# Environment variable -> key in the YAML config file
_ENV_KEYS = {
    "OBSIDIAN_API_KEY": "api_key",
    "OBSIDIAN_API_HOST": "api_host",
    "OBSIDIAN_VERIFY_SSL": "verify_ssl",
    "OBSIDIAN_CA_CERT": "ca_cert",
    "OBSIDIAN_TIMEOUT": "timeout",
}

_TRANSPORT_ENV_KEYS = {
    "OBSIDIAN_TRANSPORT": "transport",
    "OBSIDIAN_MCP_HOST": "mcp_host",
    "OBSIDIAN_MCP_PORT": "mcp_port",
}


def xdg_config_path() -> Path:
    """Return the per-user config file location, honouring ``XDG_CONFIG_HOME``."""
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML config file.

    Args:
        config_path: Location of the YAML file.

    Returns:
        The parsed mapping, or an empty dict when the file does not exist.

    Raises:
        ValueError: If the file exists but does not contain a mapping.
    """
    if not config_path.exists():
        logger.debug("Config file not found at %s", config_path)
        return {}

    logger.info("Loading config file %s", config_path)
    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping of settings")
    return raw_config


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got '{value}'")


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"timeout must be a number of seconds, got '{value}'") from exc
    if timeout <= 0:
        raise ValueError(f"timeout must be greater than 0, got {timeout}")
    return timeout


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"mcp_port must be an integer, got '{value}'") from exc
    if not 0 < port < 65536:
        raise ValueError(f"mcp_port must be between 1 and 65535, got {port}")
    return port


def _merge_settings(
    file_settings: Mapping[str, Any],
    environ: Mapping[str, str],
    env_keys: Mapping[str, str] = _ENV_KEYS,
) -> dict[str, Any]:
    """Overlay environment variables on top of config file values."""
    settings = {key: file_settings[key] for key in env_keys.values() if key in file_settings}
    for env_name, key in env_keys.items():
        value = environ.get(env_name)
        if value is not None and value != "":
            settings[key] = value
    return settings


def load_api_configuration(
    env_file: Path = ENV_FILE,
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ApiConfiguration:
    """Load the Local REST API connection settings.

    Sources, lowest precedence first: the YAML config file, the ``.env`` file,
    and the process environment. ``.env`` values never override variables that
    are already set in the environment.

    Args:
        env_file: Path of the dotenv file to load when present.
        config_path: YAML config file. Defaults to :func:`xdg_config_path`.
        environ: Environment mapping to read from. Defaults to ``os.environ``
            (after the dotenv file has been applied to it).

    Returns:
        A frozen :class:`ApiConfiguration`.

    Raises:
        ValueError: If the API key is missing or a setting is malformed.
    """
    if env_file.exists():
        logger.info("Loading environment file %s", env_file)
        load_dotenv(env_file, override=False)

    if config_path is None:
        config_path = xdg_config_path()
    if environ is None:
        environ = os.environ

    settings = _merge_settings(_read_config_file(config_path), environ)

    api_key = str(settings.get("api_key") or "").strip()
    if not api_key:
        raise ValueError(
            "OBSIDIAN_API_KEY is not set. Export it, add it to .env, "
            f"or set 'api_key' in {config_path}"
        )

    api_host = str(settings.get("api_host") or DEFAULT_API_HOST).strip().rstrip("/")

    ca_cert = settings.get("ca_cert")
    config = ApiConfiguration(
        api_key=api_key,
        api_host=api_host,
        verify_ssl=_parse_bool("verify_ssl", settings.get("verify_ssl", True)),
        ca_cert=Path(str(ca_cert)).expanduser() if ca_cert else None,
        timeout=_parse_timeout(settings.get("timeout", DEFAULT_TIMEOUT)),
    )

    if not config.verify_ssl:
        logger.warning("TLS certificate verification is disabled for %s", config.api_host)

    return config


def load_transport_configuration(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TransportConfiguration:
    """Load how the MCP server should be exposed.

    Reads ``OBSIDIAN_TRANSPORT``, ``OBSIDIAN_MCP_HOST`` and
    ``OBSIDIAN_MCP_PORT``, falling back to the ``transport``, ``mcp_host`` and
    ``mcp_port`` keys of the YAML config file. Call it after
    :func:`load_api_configuration` so values from ``.env`` are visible.

    Raises:
        ValueError: If the transport is unknown or the port is not a valid
            TCP port.
    """
    if config_path is None:
        config_path = xdg_config_path()
    if environ is None:
        environ = os.environ

    settings = _merge_settings(_read_config_file(config_path), environ, _TRANSPORT_ENV_KEYS)

    transport = str(settings.get("transport", DEFAULT_TRANSPORT)).strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(
            f"invalid transport: {transport}, must be one of {', '.join(TRANSPORTS)}"
        )

    return TransportConfiguration(
        transport=transport,
        host=str(settings.get("mcp_host") or DEFAULT_MCP_HOST).strip(),
        port=_parse_port(settings.get("mcp_port", DEFAULT_MCP_PORT)),
    )
