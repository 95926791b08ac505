"""
Pydantic models for user data.

``UserRecord`` mirrors the JSON file on disk.  Unknown keys are kept
so that ``/profile`` returns the file verbatim.  Note that the record
is returned with its password, exactly as stored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """The single stored username/password pair."""

    model_config = ConfigDict(extra="allow")

    username: str = Field(..., example="admin")
    password: str = Field(..., example="secret")


class LoginRequest(BaseModel):
    """Body of ``POST /login``.

    Fields are untyped and optional so that any JSON value reaches the
    service: a missing field becomes its 400 response and a value of
    the wrong type a plain mismatch, never a framework validation
    error.
    """

    username: Any = Field(None, example="admin")
    password: Any = Field(None, example="secret")


class LoginResult(BaseModel):
    status: bool = Field(..., example=True)
    message: str = Field(..., example="User Is valid")


class ErrorResponse(BaseModel):
    error: str = Field(..., example="Failed to read user data")
