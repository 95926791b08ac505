"""
Application package initializer.

The API is split into a few small pieces: ``core`` holds settings,
logging, storage and security helpers, ``schemas`` the Pydantic
payloads, ``services`` the credential logic and ``api`` the routers
that expose it over HTTP.
"""

from .main import app  # noqa: F401
