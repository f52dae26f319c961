"""
Response collaborator for the catalog pages.

Pages only need two operations from the web layer: set a status code and
send a body. ``CapturedResponse`` implements both in memory so a page can
be served through any transport that returns a value.
"""

from typing import Any, Protocol, Self


class Response(Protocol):
    """What a page needs from the outgoing response."""

    def status(self, code: int) -> Self: ...

    def send(self, body: Any) -> None: ...


class CapturedResponse:
    """Records the status code and body a page sends."""

    def __init__(self, default_status: int = 200):
        self.status_code = default_status
        self.body: Any = None
        self.sent = False

    def status(self, code: int) -> "CapturedResponse":
        self.status_code = code
        return self

    def send(self, body: Any) -> None:
        self.body = body
        self.sent = True

    def to_dict(self) -> dict[str, Any]:
        return {"status_code": self.status_code, "body": self.body}
