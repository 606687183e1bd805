from __future__ import annotations


class PRDescError(Exception):
    """Base class for every failure the CLI reports and exits on."""


class InvalidInputError(PRDescError):
    pass


class MissingCredentialError(PRDescError):
    def __init__(self, variable: str):
        super().__init__(f"{variable} environment variable is required")
        self.variable = variable


class RemoteAPIError(PRDescError):
    """A GitHub or Gemini call failed; the message is the host's own."""

    def __init__(self, message: str, service: str = "github", status: int | None = None):
        super().__init__(message)
        self.service = service
        self.status = status


class GenerationParseError(PRDescError):
    pass
