"""
Pipeline error taxonomy.

  • FetchError      — a document (or catalog) could not be fetched
  • GatewayError    — the generative model endpoint failed
  • ParseError      — model output could not be decoded into the expected shape
  • ValidationError — a precondition failed before any external call
"""

from __future__ import annotations


class JobMatchError(Exception):
    """Base class for all pipeline errors."""


class FetchError(JobMatchError):
    """Remote resource unreachable or returned a non-success status."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class GatewayError(JobMatchError):
    """Non-success response (or transport failure) from the model endpoint."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(JobMatchError):
    """Model output was not decodable into the expected structure."""

    def __init__(self, message: str, *, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class ValidationError(JobMatchError):
    """A request precondition was not met."""
