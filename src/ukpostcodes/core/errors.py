from __future__ import annotations


class PostcodeError(Exception):
    """Base error for ukpostcodes. Carries the HTTP-style status and message."""

    status: int = 500

    def __init__(self, error: str, *, status: int | None = None) -> None:
        if status is not None:
            self.status = status
        self.error = error
        super().__init__(error)

    def to_dict(self) -> dict[str, object]:
        return {"status": self.status, "error": self.error}


class ValidationError(PostcodeError):
    """Raised when input validation fails. Never reaches the network."""

    status = 400


class TransportError(PostcodeError):
    """Raised when the request could not be delivered (DNS, TLS, connect, timeout)."""


class UpstreamError(PostcodeError):
    """Raised when postcodes.io answers with an error envelope."""


class DecodeError(PostcodeError):
    """Raised when a response body is not the JSON shape we expect."""
