"""Configuration management for covserve.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides with the ``COVSERVE_`` prefix.
"""

from covserve.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
