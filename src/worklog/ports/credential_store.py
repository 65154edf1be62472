"""Credential storage interface."""

from typing import Protocol


class CredentialStore(Protocol):
    """Interface for a single stored secret, such as an API key."""

    def get(self) -> str:
        """Return the secret. Raises MissingCredentialError if absent."""
        ...

    def set(self, value: str) -> None:
        ...

    def exists(self) -> bool:
        ...

    def delete(self) -> None:
        ...
