"""
Pydantic models for user accounts.

``UserCreate`` and ``UserUpdate`` are request bodies; ``UserRead`` is
what the API returns.  Passwords are accepted on input but never
returned.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Maria Souza"])
    email: str = Field(..., max_length=255, examples=["maria@gymchain.com"])
    phone: Optional[str] = Field(None, max_length=30, examples=["+55 11 91234-5678"])
    birth_date: Optional[date] = Field(None, examples=["1990-04-12"])
    active: bool = Field(True, description="Only active users may log workouts")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("Email must look like name@domain")
        return v


class UserCreate(UserBase):
    """Schema for registering a user.  The password is hashed before storage."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserUpdate(UserBase):
    """Schema for ``PUT /users/{id}``.

    Only fields present in the request body are applied.  ``id`` and
    ``creation_date`` are accepted so clients can send back what they
    read, but they are ignored.  A non‑empty ``password`` replaces the
    stored one.
    """

    id: Optional[int] = None
    creation_date: Optional[datetime] = None
    password: Optional[str] = Field(None, examples=["newpassword"])


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    creation_date: datetime

    model_config = {
        "from_attributes": True,
    }
