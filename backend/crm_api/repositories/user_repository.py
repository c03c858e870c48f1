"""
User Repository - Data Access Layer for dashboard users
"""
from typing import Optional

from crm_api.domain.user import User
from crm_api.core.database import get_db_cursor


class UserRepository:
    """
    Repository for User data access

    Only active users are ever returned; an inactive account looks
    exactly like a missing one.
    """

    @staticmethod
    def _map_row_to_user(row: dict) -> User:
        return User(
            id=row['user_id'],
            email=row['email'],
            full_name=row.get('full_name'),
            role=row.get('role'),
            avatar_initials=row.get('avatar_initials'),
            is_active=row.get('is_active', True),
            last_login=row.get('last_login'),
            password_hash=row.get('password_hash'),
        )

    def find_active_by_credentials(self, email: str, password_hash: str) -> Optional[User]:
        """
        Find an active user whose stored digest matches

        Args:
            email: Login email
            password_hash: Digest of the submitted password

        Returns:
            User or None if no active user matches both values
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT user_id, email, full_name, role, avatar_initials
                FROM users
                WHERE email = %s AND password_hash = %s AND is_active = TRUE
            """, (email, password_hash))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_user(row)

    def find_active_by_email(self, email: str) -> Optional[User]:
        """
        Find an active user by email, including the stored password hash

        Used when the hash is salted and has to be verified in Python.
        """
        with get_db_cursor() as cursor:
            cursor.execute("""
                SELECT user_id, email, full_name, role, avatar_initials, password_hash
                FROM users
                WHERE email = %s AND is_active = TRUE
            """, (email,))

            row = cursor.fetchone()
            if not row:
                return None

            return self._map_row_to_user(row)

    def update_last_login(self, user_id: int) -> None:
        """Stamp users.last_login with the current time"""
        with get_db_cursor() as cursor:
            cursor.execute(
                "UPDATE users SET last_login = CURRENT_TIMESTAMP WHERE user_id = %s",
                (user_id,)
            )
