"""
Helpers for testing what responses look like on the wire. Rendered bytes are
parsed back with httptools, so assertions are made on what a client would
actually receive, and not on what we think we have sent
"""

from typing import List, Optional, Tuple

from httptools import HttpResponseParser

from .entities import Headers, Response
from .settings import Settings
from .utils.httputils import render_http_response


class ParsedResponse:
    """
    Collects parser callbacks. Header pairs are kept exactly as they were
    received (names are not lower-cased), in the order they were received
    """

    def __init__(self):
        self.status: Optional[int] = None
        self.reason: str = ''
        self.http_version: Optional[str] = None
        self.headers: List[Tuple[str, str]] = []
        self.body: bytes = b''
        self.complete: bool = False

        self.parser: Optional[HttpResponseParser] = None

    def on_status(self, status: bytes):
        self.reason += status.decode('latin-1')

    def on_header(self, name: bytes, value: bytes):
        self.headers.append((name.decode('latin-1'), value.decode('latin-1')))

    def on_headers_complete(self):
        self.status = self.parser.get_status_code()
        self.http_version = self.parser.get_http_version()

    def on_body(self, body: bytes):
        self.body += body

    def on_message_complete(self):
        self.complete = True

    def header_values(self, name: str) -> List[str]:
        return [value for key, value in self.headers if key.lower() == name.lower()]

    def to_response(self) -> Response:
        return Response(self.status, Headers(self.headers), self.body)


def parse_response(raw: bytes) -> ParsedResponse:
    """
    Parses a single http response. If message has no length (no content-length
    and not chunked), it's considered to be finished by the end of raw

    May raise exceptions: httptools.HttpParserError
    """

    parsed = ParsedResponse()
    parsed.parser = HttpResponseParser(parsed)
    parsed.parser.feed_data(raw)

    return parsed


def roundtrip(response: Response, settings: Optional[Settings] = None) -> ParsedResponse:
    return parse_response(render_http_response(response, settings))
