"""Configuration module for the Authok management client."""
from .settings import ManagementSettings, load_settings

__all__ = ["ManagementSettings", "load_settings"]
