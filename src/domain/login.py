"""Login domain service - credential check against stored digests."""

from dataclasses import dataclass

from .exceptions import WrongCredentials
from .hashing import digest
from .ports import UserStore
from .validation import Validator


@dataclass
class LoginService:
    """Domain service for password login."""

    validator: Validator
    user_store: UserStore

    def authenticate(self, identifier: str, password: str) -> bool:
        """
        Check an identifier/password pair.

        Unknown identifiers and wrong passwords raise the same error so
        responses cannot be used to enumerate accounts.

        Returns:
            True when a matching user exists

        Raises:
            InvalidIdentifier, InvalidPassword: On malformed input
            WrongCredentials: If no user matches
            StoreError: If the store fails
        """
        self.validator.validate_identifier(identifier)
        self.validator.validate_password(password)

        if not self.user_store.find_by_credentials(identifier, digest(password)):
            raise WrongCredentials()
        return True
