"""
Password digest policy

The users table stores unsalted hex MD5 digests, and login compares
digests inside the SQL query. That format is kept as the default so
existing accounts keep working. Deployments that can rehash their users
should switch PASSWORD_HASH_SCHEME to "bcrypt".
"""
import hashlib

from passlib.context import CryptContext


SUPPORTED_SCHEMES = ("md5", "bcrypt")

# Salted hashing for the bcrypt scheme
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def md5_digest(password: str) -> str:
    """Hex MD5 digest of a password (legacy stored format)"""
    return hashlib.md5(password.encode("utf-8"), usedforsecurity=False).hexdigest()


class PasswordHasher:
    """
    Turns plaintext passwords into values comparable with users.password_hash

    - md5: deterministic, so the digest can be matched directly in SQL
    - bcrypt: salted, so the stored hash has to be fetched and verified
    """

    def __init__(self, scheme: str = "md5"):
        if scheme not in SUPPORTED_SCHEMES:
            raise ValueError(
                f"Unsupported password hash scheme '{scheme}'. "
                f"Expected one of: {', '.join(SUPPORTED_SCHEMES)}"
            )
        self.scheme = scheme

    @property
    def is_deterministic(self) -> bool:
        return self.scheme == "md5"

    def hash(self, password: str) -> str:
        """Hash a password for storage"""
        if self.scheme == "md5":
            return md5_digest(password)
        return pwd_context.hash(password)

    def verify(self, password: str, stored_hash: str) -> bool:
        """Check a plaintext password against a stored hash"""
        if not stored_hash:
            return False
        if self.scheme == "md5":
            return md5_digest(password) == stored_hash
        try:
            return pwd_context.verify(password, stored_hash)
        except ValueError:
            # Not a bcrypt hash (e.g. a leftover MD5 digest)
            return False
