from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserCreate(BaseSchema):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    name: Optional[str] = None
    language: Optional[str] = "en"


class UserBase(UserCreate):
    """Stored user record; `password` holds the hash, never the raw value."""
    id: int
    created_at: datetime


class UserOut(BaseSchema):
    id: int
    username: str
    name: Optional[str] = None
    language: Optional[str] = "en"
    created_at: datetime


class LoginRequest(BaseSchema):
    username: str
    password: str


class TokenResponse(BaseSchema):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
