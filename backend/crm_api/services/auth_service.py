"""
Credential verification for the login endpoint

Stateless per-request check: no sessions, lockout or retries. A store
failure raises; only "no matching active user" returns None.
"""
import logging
from typing import Optional

from crm_api.core.config import settings
from crm_api.core.security import PasswordHasher
from crm_api.domain.user import User
from crm_api.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)


class CredentialVerifier:
    """Checks email/password pairs against the users table"""

    def __init__(
        self,
        repository: Optional[UserRepository] = None,
        hasher: Optional[PasswordHasher] = None
    ):
        self.repository = repository or UserRepository()
        self.hasher = hasher or PasswordHasher(settings.PASSWORD_HASH_SCHEME)

    def verify(self, email: Optional[str], password: Optional[str]) -> Optional[User]:
        """
        Authenticate a user

        Args:
            email: Submitted login email
            password: Submitted plaintext password

        Returns:
            The matching active User (last_login updated) or None

        Raises:
            psycopg2.Error: If the database cannot be queried
        """
        if not email or not password:
            return None

        user = self._find_user(email, password)
        if user is None:
            logger.info("Login rejected: no active user matches the credentials")
            return None

        # Separate statement; no transaction spans the lookup and this update
        self.repository.update_last_login(user.id)
        logger.info(f"User {user.id} logged in")
        return user

    def _find_user(self, email: str, password: str) -> Optional[User]:
        if self.hasher.is_deterministic:
            return self.repository.find_active_by_credentials(email, self.hasher.hash(password))

        user = self.repository.find_active_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            return None
        return user
