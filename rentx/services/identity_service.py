"""
Registration and sign-in against the store.
"""

import logging
from typing import Optional

from rentx.core.exceptions import ConstraintViolationError, CredentialError, StoreError
from rentx.core.security import CredentialVerifier, PlainTextCredentialVerifier
from rentx.db.store import Store

logger = logging.getLogger(__name__)


class IdentityService:
    def __init__(self, store: Store, verifier: Optional[CredentialVerifier] = None):
        self.store = store
        self.verifier = verifier or PlainTextCredentialVerifier()

    def register(self, name: str, email: str, password: str) -> int:
        """
        Create a user and return its id.

        A duplicate email is not retried; the caller has to sign up again
        with a different address.
        """
        try:
            user_id = self.store.insert_user(name, email, self.verifier.prepare(password))
        except (ConstraintViolationError, StoreError) as exc:
            logger.error(f"Signup error: {exc.message}")
            raise exc.prefixed("Signup failed") from exc

        logger.info(f"Signup success for email: {email}")
        return user_id

    def authenticate(self, email: str, password: str) -> int:
        """Return the id of the user with these credentials."""
        try:
            user_id = self.verifier.verify(self.store, email, password)
        except (CredentialError, StoreError) as exc:
            logger.warning(f"Signin failed for: {email} Error: {exc.message}")
            raise CredentialError() from exc

        logger.info(f"Signin success for email: {email}")
        return user_id
