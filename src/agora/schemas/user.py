"""User and session Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for registering a new account."""

    username: str = Field(..., min_length=1, description="Unique, case-sensitive username")
    password: str = Field(..., min_length=1, description="Account password")


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    username: str = Field(..., description="Username to log in as")
    password: str = Field(..., description="Password for the account")


class UsernameUpdate(BaseModel):
    """Schema for renaming the current user."""

    username: str = Field(..., min_length=1, description="New username")


class PasswordUpdate(BaseModel):
    """Schema for changing the current user's password."""

    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., min_length=1, alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)
