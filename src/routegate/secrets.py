"""Named secret resolution."""

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping


class SecretResolver(ABC):
    """Resolve secrets by name.

    Routes reference downstream credentials by name only, so every lookup of
    a dynamically named secret goes through a resolver.
    """

    @abstractmethod
    def resolve(self, name: str) -> str | None:
        """
        Look up a secret.

        Args:
            name: Secret name

        Returns:
            Secret value, or None if absent or empty
        """
        pass


class EnvironmentSecretResolver(SecretResolver):
    """Resolve secrets from process environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def resolve(self, name: str) -> str | None:
        value = self._environ.get(name)
        return value or None


class StaticSecretResolver(SecretResolver):
    """Resolve secrets from a fixed mapping."""

    def __init__(self, secrets: Mapping[str, str]):
        self._secrets = dict(secrets)

    def resolve(self, name: str) -> str | None:
        return self._secrets.get(name) or None
