"""YAML host inventory loader and validator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from wakelan.core.address import ParseError, parse_eui48


class ConfigError(Exception):
    """Raised for invalid or missing configuration."""


@dataclass
class Host:
    """A named machine that can be woken."""

    name: str
    mac_address: str
    description: str = ""


def load_config(path: Path) -> Optional[dict[str, Any]]:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML config file

    Returns:
        Parsed configuration dictionary, or None if file is empty

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    with open(path) as f:
        result: Optional[dict[str, Any]] = yaml.safe_load(f)
        return result


def validate_config(config: dict[str, Any]) -> list[str]:
    """
    Validate a loaded configuration dictionary.

    Returns:
        List of validation error messages (empty list = valid)
    """
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config root must be a YAML mapping"]

    hosts = config.get("hosts")
    if not hosts:
        errors.append("'hosts' key is required and must be a non-empty list")
        return errors

    if not isinstance(hosts, list):
        errors.append("'hosts' must be a list")
        return errors

    seen: set[str] = set()
    for i, host in enumerate(hosts):
        prefix = f"hosts[{i}]"
        if not isinstance(host, dict):
            errors.append(f"{prefix}: must be a mapping")
            continue
        for field in ("name", "mac_address"):
            if not host.get(field):
                errors.append(f"{prefix}: missing required field '{field}'")
        name = host.get("name")
        if name and not isinstance(name, str):
            errors.append(f"{prefix}: 'name' must be a string")
        elif name:
            if name in seen:
                errors.append(f"{prefix}: duplicate host name '{name}'")
            seen.add(name)
        mac = host.get("mac_address")
        if mac:
            try:
                parse_eui48(str(mac))
            except ParseError as exc:
                errors.append(f"{prefix}: invalid mac_address '{mac}' ({exc})")

    return errors


def hosts_from_config(config: dict[str, Any]) -> list[Host]:
    """
    Construct a list of Host objects from a validated config dict.

    Raises:
        ConfigError: If the config does not validate
    """
    errors = validate_config(config)
    if errors:
        raise ConfigError("; ".join(errors))

    return [
        Host(
            name=str(raw["name"]),
            mac_address=str(raw["mac_address"]),
            description=raw.get("description", "") or "",
        )
        for raw in config["hosts"]
    ]
