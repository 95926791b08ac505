"""
Business logic for the single user credential.

``CredentialService`` answers three questions: what the stored record
is, whether a username/password pair matches it, and what the logout
message for a user looks like.  It keeps no state between calls and
reloads the record from its store every time it needs it.
"""

import html
import logging
import math
from enum import Enum
from typing import Any, Optional

from ..core.exceptions import MissingInput
from ..core.security import secrets_match, verify_password
from ..core.storage import UserStore
from ..schemas.user import LoginResult, UserRecord

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Username and password are required"
LOGOUT_TEMPLATE = "<b>{username} successfully logged out.</b>"


def _is_blank(value: Any) -> bool:
    """Return True for values a login form treats as not supplied.

    ``None``, ``False``, ``""``, zero and NaN count as blank.  Any other
    value, including an empty list or object, counts as supplied.
    """
    if value is None or value is False:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return value == "" or (isinstance(value, (int, float)) and value == 0)


class ValidationOutcome(Enum):
    """Result of a credential check, valued by its user-facing message."""

    VALID = "User Is valid"
    USERNAME_MISMATCH = "User Name is invalid"
    PASSWORD_MISMATCH = "Password is invalid"

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID

    def to_result(self) -> LoginResult:
        return LoginResult(status=self.is_valid, message=self.value)


class CredentialService:
    """Validate credentials against the record held by ``store``.

    With ``password_hashing`` enabled the stored password is expected
    to be a PBKDF2 ``salthex$hashhex`` string produced by
    ``core.security.hash_password``; otherwise it is compared as plain
    text.
    """

    def __init__(self, store: UserStore, password_hashing: bool = False) -> None:
        self.store = store
        self.password_hashing = password_hashing

    def fetch_record(self) -> UserRecord:
        """Return the stored record, password included.

        Raises ``StorageUnavailable`` if the store cannot be read.
        """
        return self.store.load()

    def validate_credentials(
        self, username: Any, password: Any
    ) -> ValidationOutcome:
        """Check a username/password pair against the stored record.

        The checks run in a fixed order: presence of both inputs, then
        the username, then the password.  Missing input raises
        ``MissingInput`` before the store is consulted; an unreadable
        store raises ``StorageUnavailable``.  Values that are not strings
        never equal the stored strings and are reported as a mismatch.
        """
        missing = [name for name, value in (("username", username), ("password", password)) if _is_blank(value)]
        if missing:
            raise MissingInput(*missing)

        record = self.store.load()

        if not isinstance(username, str) or not secrets_match(username, record.username):
            logger.warning("Login rejected: unknown username %r", username)
            return ValidationOutcome.USERNAME_MISMATCH

        if not self._password_matches(password, record.password):
            logger.warning("Login rejected: wrong password for %r", username)
            return ValidationOutcome.PASSWORD_MISMATCH

        logger.info("Login accepted for %r", username)
        return ValidationOutcome.VALID

    def _password_matches(self, candidate: Any, stored: str) -> bool:
        if not isinstance(candidate, str):
            return False
        if self.password_hashing:
            return verify_password(candidate, stored)
        return secrets_match(candidate, stored)

    @staticmethod
    def format_logout_message(username: Optional[str]) -> str:
        """Return the HTML logout message for ``username``.

        The username is HTML‑escaped before being embedded.  No storage
        access happens here.
        """
        if not username:
            raise MissingInput("username")
        return LOGOUT_TEMPLATE.format(username=html.escape(username))
