"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECRETS_DIR = Path("/run/secrets")
DEFAULT_REQUEST_TIMEOUT = 10.0


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = SECRETS_DIR / secret_name

    if secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("Failed to read %s: %s", secret_file, e)
        else:
            if secret_value:
                logger.debug("Loaded %s from %s", secret_name, SECRETS_DIR)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment", env_var)
            return secret_value

    return None


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None


@dataclass
class Settings:
    """Connection settings for the Keycloak admin API."""
    base_url: str = "http://localhost:8080"
    username: str = "admin"
    password: str = ""
    realm: str = "master"
    client_id: str = "admin-cli"
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables and /run/secrets.

        Variables:
            KEYCLOAK_URL: Server base URL
            KEYCLOAK_ADMIN: Admin username
            KEYCLOAK_ADMIN_PASSWORD: Admin password (or /run/secrets/keycloak_admin_password)
            KEYCLOAK_ADMIN_REALM: Realm the admin authenticates against
            KEYCLOAK_ADMIN_CLIENT_ID: Client used for the password grant
            KEYCLOAK_REQUEST_TIMEOUT: Per-request timeout in seconds
            KEYCLOAK_VERIFY_SSL: Verify TLS certificates (default true)

        Raises:
            ConfigurationError: If no admin password can be found
        """
        password = _load_secret_from_file("keycloak_admin_password", "KEYCLOAK_ADMIN_PASSWORD")
        if not password:
            raise ConfigurationError(
                "KEYCLOAK_ADMIN_PASSWORD not found in /run/secrets or environment"
            )

        settings = cls(
            base_url=os.environ.get("KEYCLOAK_URL", cls.base_url).rstrip("/"),
            username=os.environ.get("KEYCLOAK_ADMIN", cls.username),
            password=password,
            realm=os.environ.get("KEYCLOAK_ADMIN_REALM", cls.realm),
            client_id=os.environ.get("KEYCLOAK_ADMIN_CLIENT_ID", cls.client_id),
            timeout=_env_float("KEYCLOAK_REQUEST_TIMEOUT", cls.timeout),
            verify=_env_flag("KEYCLOAK_VERIFY_SSL", cls.verify),
        )
        logger.info("Keycloak settings loaded; url=%s realm=%s", settings.base_url, settings.realm)
        return settings


def load_settings() -> Settings:
    """Load connection settings from the environment."""
    return Settings.from_env()


def optional_settings() -> Optional[Settings]:
    """Return settings when a password is configured, otherwise None."""
    try:
        return Settings.from_env()
    except ConfigurationError:
        return None
