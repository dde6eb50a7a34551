"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic_core import ValidationError

from webform.runtime.config.config_data import ConfigData

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(var_expr: str) -> str:
    # ${VAR:-default}: the default also covers a variable set to ""
    if ":-" in var_expr:
        var_name, default = var_expr.split(":-", 1)
        return os.getenv(var_name) or default

    # ${VAR:?message}
    if ":?" in var_expr:
        var_name, error_msg = var_expr.split(":?", 1)
        value = os.getenv(var_name)
        if value is None:
            raise ValueError(f"Required environment variable {var_name}: {error_msg}")
        return value

    # ${VAR}
    value = os.getenv(var_expr)
    if value is None:
        raise ValueError(f"Required environment variable {var_expr} not set")
    return value


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - default when the variable is unset or empty
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    return PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def substitute_config_values(node: Any) -> Any:
    """Substitute placeholders inside the string scalars of a parsed YAML tree.

    Substitution happens after parsing, so values such as passwords reach the
    models exactly as they were set: backslashes, quotes and strings that look
    like numbers or booleans are never reinterpreted as YAML. A scalar that is
    a single placeholder resolving to an empty string becomes ``None``, the
    same as an empty YAML value.
    """
    if isinstance(node, dict):
        return {key: substitute_config_values(value) for key, value in node.items()}
    if isinstance(node, list):
        return [substitute_config_values(item) for item in node]
    if isinstance(node, str) and PLACEHOLDER.search(node):
        value = substitute_env_vars(node)
        if value == "" and PLACEHOLDER.fullmatch(node):
            return None
        return value
    return node


def promote_environment_overrides(env_mode: str) -> list[str]:
    """Copy ``<ENV>_FOO`` variables onto ``FOO`` for the active environment.

    ``PRODUCTION_MYSQL_HOST`` therefore becomes ``MYSQL_HOST`` when the app
    runs with ``APP_ENVIRONMENT=production``. Returns the promoted names.
    """
    prefix = f"{env_mode.upper()}_"
    promoted = []
    for var_name, var_value in list(os.environ.items()):
        if not var_name.startswith(prefix):
            continue
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        promoted.append(new_var_name)
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)
    return promoted



def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed YAML with environment variables substituted

    Raises:
        ValueError: If required environment variables are missing
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path) as f:
        content = f.read()

    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading configuration for environment: {}", env_mode)

    promoted = promote_environment_overrides(env_mode)
    if promoted:
        # Names only; values may be credentials
        logger.info("Applying environment-specific overrides: {}", promoted)

    try:
        loaded = yaml.safe_load(content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        # Extract the 'config' section from the YAML structure
        config_data = substitute_config_values(loaded.get('config', {}))
        return ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
