"""
Auth Models
Admin console login.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="Admin username")
    password: str = Field(..., min_length=1, description="Admin password")


class LoginResponse(BaseModel):
    authenticated: bool = True
    username: str
