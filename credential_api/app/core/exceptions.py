"""
Error taxonomy for the credential service.

Services raise these exceptions; the endpoint layer converts them
into HTTP responses.  A credential mismatch is not an error and is
reported as a ``ValidationOutcome`` instead.
"""


class CredentialError(ValueError):
    """Base class for errors raised by the credential service."""


class MissingInput(CredentialError):
    """A required field or query parameter was absent or empty."""

    def __init__(self, *fields: str) -> None:
        self.fields = fields
        super().__init__(f"Missing required input: {', '.join(fields)}")


class StorageUnavailable(CredentialError):
    """The user record could not be read or parsed."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"User record at {location} is unavailable: {reason}")
