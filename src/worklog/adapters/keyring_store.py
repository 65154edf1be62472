"""Keyring adapter - API key kept in the OS credential store."""

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from worklog.errors import CredentialError, MissingCredentialError

MISSING_KEY_MESSAGE = "OpenAI API key not found. Run 'worklog key set' first."


class KeyringCredentialStore:
    """
    OS keyring credential store.

    Implements CredentialStore protocol for a single service/account entry.
    """

    def __init__(self, service: str = "worklog-app", account: str = "openai_key"):
        self.service = service
        self.account = account

    def _lookup(self) -> str | None:
        try:
            return keyring.get_password(self.service, self.account)
        except KeyringError as e:
            raise CredentialError(f"Failed to access keyring: {e}") from e

    def get(self) -> str:
        """Return the stored key. Raises MissingCredentialError if absent."""
        value = self._lookup()
        if not value:
            raise MissingCredentialError(MISSING_KEY_MESSAGE)
        return value

    def set(self, value: str) -> None:
        try:
            keyring.set_password(self.service, self.account, value)
        except KeyringError as e:
            raise CredentialError(f"Failed to save API key: {e}") from e

    def exists(self) -> bool:
        """Check whether a key is stored, without exposing it.

        A keyring that can't be read counts as having no key.
        """
        try:
            return bool(self._lookup())
        except CredentialError:
            return False

    def delete(self) -> None:
        try:
            keyring.delete_password(self.service, self.account)
        except PasswordDeleteError as e:
            raise MissingCredentialError(MISSING_KEY_MESSAGE) from e
        except KeyringError as e:
            raise CredentialError(f"Failed to delete API key: {e}") from e
