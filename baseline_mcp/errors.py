"""
Error taxonomy for the Baseline MCP server.
Every failure below the dispatcher belongs to one of four kinds and renders
to a single line of readable text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    PARSE = "parse"


class BaselineError(Exception):
    """Base class for failures raised while serving a tool call."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def render(self) -> str:
        return self.message


class ConfigurationError(BaselineError):
    """No usable credential (or other startup setting) is configured."""
    kind = ErrorKind.CONFIGURATION


class ValidationError(BaselineError):
    """A tool argument is missing or has the wrong shape."""
    kind = ErrorKind.VALIDATION


class ParseError(BaselineError):
    """The upstream API answered with a body that is not valid JSON."""
    kind = ErrorKind.PARSE


class UpstreamError(BaselineError):
    """The upstream API answered with a non-success status, or not at all.

    Attributes:
        status: HTTP status code, or None when no response was received
        status_text: HTTP reason phrase
        body: Raw response body captured for diagnostics
    """
    kind = ErrorKind.UPSTREAM

    def __init__(
        self,
        status: Optional[int],
        status_text: str = "",
        body: str = "",
        message: Optional[str] = None,
    ):
        self.status = status
        self.status_text = status_text
        self.body = body
        if message is None:
            message = f"{status} {status_text} - Body: {body}"
        super().__init__(message)

    @classmethod
    def unreachable(cls, reason: str) -> "UpstreamError":
        """Build an error for a request that never got a response."""
        return cls(status=None, message=reason)

    def render(self) -> str:
        return f"API request failed: {self.message}"


class UnknownToolError(LookupError):
    """Routing failure: no handler is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
