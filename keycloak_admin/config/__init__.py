"""Configuration module for the Keycloak admin client."""
from .settings import Settings, load_settings, optional_settings

__all__ = ["Settings", "load_settings", "optional_settings"]
