"""
Credential verification strategies.

The identity service never compares passwords itself: it asks a verifier to
prepare a password for storage and to resolve a sign-in to a user id. The
default strategy stores and compares passwords verbatim; a hashing strategy
can replace it without touching the API layer.
"""

from abc import ABC, abstractmethod

from rentx.core.exceptions import CredentialError, UserNotFoundError
from rentx.db.store import Store


class CredentialVerifier(ABC):
    """Strategy for storing and checking passwords."""

    @abstractmethod
    def prepare(self, password: str) -> str:
        """Return the value persisted for a newly registered password."""

    @abstractmethod
    def verify(self, store: Store, email: str, password: str) -> int:
        """Return the id of the matching user or raise CredentialError."""


class PlainTextCredentialVerifier(CredentialVerifier):
    """Stores passwords as given and matches them by exact equality."""

    def prepare(self, password: str) -> str:
        return password

    def verify(self, store: Store, email: str, password: str) -> int:
        try:
            return store.find_user_by_credentials(email, password)
        except UserNotFoundError:
            # Wrong email and wrong password must look the same to the caller.
            raise CredentialError() from None
