"""Configuration management for data-api-client.

Validates client construction parameters and, for the CLI, resolves them
from TOML config files, environment variables and named profiles.

Precedence order for the CLI (highest to lowest):
1. CLI flags (--secret-arn, --resource-arn, --database, --region)
2. Environment variables (DATA_API_SECRET_ARN, DATA_API_RESOURCE_ARN, ...)
3. Named profile (--profile or DATA_API_PROFILE env var)
4. Config file default profile
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator

from data_api_client.core.exceptions import ConfigError
from data_api_client.core.models import ClientConfig

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "data-api" / "config.toml"

_ENV_VARS: dict[str, str] = {
    "DATA_API_SECRET_ARN": "secret_arn",
    "DATA_API_RESOURCE_ARN": "resource_arn",
    "DATA_API_DATABASE": "database",
    "AWS_REGION": "region",
}


def parse_client_config(params: Mapping[str, Any]) -> ClientConfig:
    """Validate construction parameters and build a ClientConfig.

    Fails before any transport is created so that a misconfigured client
    never reaches the network.
    """
    options = params.get("options")
    if options is None:
        options = {}
    elif not isinstance(options, Mapping):
        raise ConfigError("'options' must be a mapping")

    secret_arn = params.get("secret_arn")
    if not isinstance(secret_arn, str):
        raise ConfigError("'secret_arn' string value required")

    resource_arn = params.get("resource_arn")
    if not isinstance(resource_arn, str):
        raise ConfigError("'resource_arn' string value required")

    database = params.get("database")
    if database is not None and not isinstance(database, str):
        raise ConfigError("'database' must be a string")

    hydrate = params.get("hydrate_column_names")
    if hydrate is None:
        hydrate = True
    elif not isinstance(hydrate, bool):
        raise ConfigError("'hydrate_column_names' must be a boolean")

    return ClientConfig(
        secret_arn=secret_arn,
        resource_arn=resource_arn,
        database=database,
        hydrate_column_names=hydrate,
        options=dict(options),
    )


class Profile(BaseModel):
    secret_arn: str | None = None
    resource_arn: str | None = None
    database: str | None = None
    region: str | None = None
    endpoint_url: str | None = None
    hydrate_column_names: bool | None = None

    @field_validator("secret_arn", "resource_arn")
    @classmethod
    def validate_arn(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("arn:"):
            msg = f"Invalid ARN: '{v}'. Must start with 'arn:'"
            raise ValueError(msg)
        return v


class AppConfig(BaseModel):
    default_profile: str | None = None
    profiles: dict[str, Profile] = {}


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file.

    Returns default AppConfig if file doesn't exist.
    Raises ConfigError on malformed TOML or invalid config.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Malformed TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return AppConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid configuration in {config_path}: {e}"
        raise ConfigError(msg) from e


def resolve_config(
    config: AppConfig,
    profile_name: str | None = None,
    **cli_overrides: Any,
) -> ClientConfig:
    """Resolve a ClientConfig using the precedence chain.

    CLI > env > profile. region and endpoint_url end up in the boto3
    client options.
    """
    resolved: dict[str, Any] = {}

    effective_profile = profile_name
    if not effective_profile:
        effective_profile = os.environ.get("DATA_API_PROFILE")
    if not effective_profile:
        effective_profile = config.default_profile

    if effective_profile:
        if effective_profile not in config.profiles:
            available = (
                ", ".join(sorted(config.profiles.keys())) if config.profiles else "none"
            )
            msg = f"Unknown profile: '{effective_profile}'. Available profiles: {available}"
            raise ConfigError(msg)
        profile = config.profiles[effective_profile]
        for key in profile.model_fields_set:
            resolved[key] = getattr(profile, key)

    for env_var, field_name in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is not None:
            resolved[field_name] = value

    for key, value in cli_overrides.items():
        if value is not None:
            resolved[key] = value

    options: dict[str, Any] = {}
    region = resolved.pop("region", None)
    if region:
        options["region_name"] = region
    endpoint_url = resolved.pop("endpoint_url", None)
    if endpoint_url:
        options["endpoint_url"] = endpoint_url
    resolved["options"] = options

    return parse_client_config(resolved)
