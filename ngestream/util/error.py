"""Errors raised while bootstrapping the service."""


class UtilError(Exception):
    """Base error for config, logging and container setup."""


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")
