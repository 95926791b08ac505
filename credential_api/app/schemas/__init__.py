"""
Pydantic schema definitions for API payloads.

Schemas describe both the stored user record and the request and
response bodies of the user endpoints.
"""
