"""Errors raised while loading settings; the CLI maps them to exit code 2."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A setting is present but unusable."""


class MissingConfigurationError(ConfigurationError):
    """A required setting is unset or blank."""
