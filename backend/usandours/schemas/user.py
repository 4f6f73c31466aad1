"""
Pydantic schemas for User entity and authentication.
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime


class SessionUser(BaseModel):
    """Identity carried by a verified session token."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    email: str
    name: str
    couple_id: Optional[int] = Field(alias="coupleId")  # Required claim, may be null


class RegisterRequest(BaseModel):
    """Schema for registration. action is "create" (new room) or "join" (existing room)."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, max_length=20)
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    action: Optional[str] = None
    secret_code: Optional[str] = Field(None, alias="secretCode")


class LoginRequest(BaseModel):
    """Schema for user login."""
    email: str
    password: str


class UserSummary(BaseModel):
    """Public fields returned after login/registration."""
    name: str
    email: str

    class Config:
        from_attributes = True


class PartnerResponse(BaseModel):
    """Partner as shown on the couple page."""
    id: int
    name: str
    avatar: str = ""

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """Schema for the current user's profile."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    email: str
    avatar: str = ""
    couple_id: Optional[int] = Field(None, alias="coupleId")
    google_connected: bool = Field(False, alias="googleConnected")
    created_at: datetime = Field(alias="createdAt")


class AuthResponse(BaseModel):
    """Response for register/login. The token is also set as an httpOnly cookie."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    user: UserSummary
    secret_code: Optional[str] = Field(None, alias="secretCode")
    access_token: str
    token_type: str = "bearer"


class MeResponse(BaseModel):
    success: bool = True
    user: UserResponse


class GoogleStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    connected: bool
    has_refresh_token: bool = Field(alias="hasRefreshToken")
    has_access_token: bool = Field(alias="hasAccessToken")
    google_email: str = Field(alias="googleEmail")


class CloudinarySignatureResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    signature: str
    timestamp: int
    cloud_name: str = Field(alias="cloudName")
    api_key: str = Field(alias="apiKey")
