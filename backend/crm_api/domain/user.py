"""
User Domain Model

Dashboard users allowed to log in.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class User(BaseModel):
    """
    User domain model

    Fields:
        id: users.user_id
        email: Login email (unique)
        full_name: Display name
        role: User role (single dashboard role today)
        avatar_initials: Initials shown in the avatar badge
        is_active: Only active users can log in
        last_login: Timestamp of the last successful login
        password_hash: Only loaded when the hash must be verified in Python
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Login email")
    full_name: Optional[str] = Field(None, description="Display name")
    role: Optional[str] = Field(None, description="User role")
    avatar_initials: Optional[str] = Field(None, description="Avatar initials")
    is_active: bool = Field(True, description="Whether the account can log in")
    last_login: Optional[datetime] = Field(None, description="Last successful login")
    password_hash: Optional[str] = Field(None, description="Stored password hash", exclude=True, repr=False)

    model_config = ConfigDict(from_attributes=True)

    def to_public_dict(self) -> dict:
        """User projection returned by the login endpoint"""
        return {
            "id": self.id,
            "email": self.email,
            "name": self.full_name,
            "role": self.role,
            "initials": self.avatar_initials,
        }
