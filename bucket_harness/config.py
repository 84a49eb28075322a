"""Configuration loading for the bucket harness.

Supports three configuration sources:
1. Environment variables (for CI/CD) - take priority
2. bucket_harness.json file (for local development)
3. Defaults: Google Cloud Storage with application-default credentials

Environment Variable Format:
    BUCKET_HARNESS_BACKEND=gcs|s3
    GOOGLE_CLOUD_PROJECT=my-project
    GOOGLE_APPLICATION_CREDENTIALS=/path/to/service-account.json
    BUCKET_HARNESS_ENDPOINT_URL=https://storage.googleapis.com
    BUCKET_HARNESS_ACCESS_KEY=xxx
    BUCKET_HARNESS_SECRET_KEY=xxx
    BUCKET_HARNESS_REGION=us-east-1
    BUCKET_HARNESS_ADDRESSING_STYLE=path|virtual
    BUCKET_HARNESS_TIMEOUT=60

For the GCS backend, STORAGE_EMULATOR_HOST is honoured as the endpoint
when BUCKET_HARNESS_ENDPOINT_URL is not set.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

DEFAULT_CONFIG_PATH = "bucket_harness.json"

BACKENDS = ("gcs", "s3")
ADDRESSING_STYLES = ("path", "virtual", "auto")

ENV_PREFIX = "BUCKET_HARNESS_"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class HarnessConfig:
    """Connection settings for the storage service."""

    backend: str = "gcs"
    project_id: Optional[str] = None
    credentials_file: Optional[str] = None
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region_name: str = "us-east-1"
    addressing_style: str = "path"
    timeout: float = 60.0


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout value: {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive, got {timeout}")
    return timeout


def validate(config: HarnessConfig) -> HarnessConfig:
    """Check a configuration for consistency.

    Args:
        config: The configuration to validate.

    Returns:
        The same configuration, for chaining.

    Raises:
        ConfigError: If the backend or addressing style is unknown, or the
                    S3 backend is missing credentials.
    """
    if config.backend not in BACKENDS:
        raise ConfigError(
            f"Unknown backend '{config.backend}'. Expected one of: {', '.join(BACKENDS)}"
        )

    if config.addressing_style not in ADDRESSING_STYLES:
        raise ConfigError(f"Unknown addressing style '{config.addressing_style}'")

    if config.backend == "s3":
        if not config.access_key_id:
            raise ConfigError("S3 backend requires an access key")
        if not config.secret_access_key:
            raise ConfigError("S3 backend requires a secret key")

    return config


def load_from_json(config_path: str) -> HarnessConfig:
    """Load the harness configuration from a JSON file.

    Args:
        config_path: Path to the JSON file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file doesn't exist, contains invalid JSON,
                    or holds unknown or invalid fields.
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")

    known = set(HarnessConfig.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config field(s): {', '.join(unknown)}")

    if "timeout" in data:
        data["timeout"] = _parse_timeout(data["timeout"])

    return validate(HarnessConfig(**data))


def load_from_env() -> HarnessConfig:
    """Load the harness configuration from environment variables.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If a variable holds an invalid value.
    """
    config = HarnessConfig(
        backend=os.environ.get(f"{ENV_PREFIX}BACKEND", "gcs").lower(),
        project_id=os.environ.get("GOOGLE_CLOUD_PROJECT"),
        credentials_file=os.environ.get("GOOGLE_APPLICATION_CREDENTIALS"),
        endpoint_url=os.environ.get(f"{ENV_PREFIX}ENDPOINT_URL"),
        access_key_id=os.environ.get(f"{ENV_PREFIX}ACCESS_KEY"),
        secret_access_key=os.environ.get(f"{ENV_PREFIX}SECRET_KEY"),
        region_name=os.environ.get(f"{ENV_PREFIX}REGION", "us-east-1"),
        addressing_style=os.environ.get(f"{ENV_PREFIX}ADDRESSING_STYLE", "path"),
    )

    if config.backend == "gcs" and not config.endpoint_url:
        config.endpoint_url = os.environ.get("STORAGE_EMULATOR_HOST")

    timeout = os.environ.get(f"{ENV_PREFIX}TIMEOUT")
    if timeout is not None:
        config.timeout = _parse_timeout(timeout)

    return validate(config)


def has_env_config() -> bool:
    """Check if any BUCKET_HARNESS_* environment variables exist."""
    return any(key.startswith(ENV_PREFIX) for key in os.environ)


def load_config(config_path: Optional[str] = None) -> HarnessConfig:
    """Load the harness configuration with environment priority.

    Priority order:
    1. Environment variables (if any BUCKET_HARNESS_* vars exist)
    2. The JSON config file
    3. Defaults (GCS, application-default credentials)

    Args:
        config_path: Path to a JSON config file. When given explicitly the
                    file must exist; the default path is optional.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the configuration is invalid, or an explicitly
                    requested file is missing.
    """
    if has_env_config():
        return load_from_env()

    if config_path is not None:
        return load_from_json(config_path)

    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_from_json(DEFAULT_CONFIG_PATH)

    # Plain GCS env vars still apply when nothing else is configured
    return load_from_env()
