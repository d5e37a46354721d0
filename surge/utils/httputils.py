import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Iterator, Optional, Union

from ..entities import Response
from ..exceptions import ResponseNotReadyError, InvalidHeaderValueError
from ..settings import Settings
from ..status_codes import status_codes
from .case_formatter import snake2camelcase
from .stringutils import make_sure_bytes

logger = logging.getLogger(__name__)

# responses with these codes must not have a body (RFC 9110, section 6.4.1)
BODILESS_CODES = {204, 304}


def http_date(moment: datetime) -> str:
    """
    Formats datetime as IMF-fixdate: Thu, 01 Jan 1970 00:00:00 GMT
    Naive datetime is considered to be in UTC already
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def format_headers(headers: Iterable) -> bytes:
    """
    May raise exceptions: InvalidHeaderValueError
    """

    lines = []

    for key, value in headers:
        try:
            lines.append(f'{snake2camelcase(key)}: {value}\r\n'.encode('latin-1'))
        except UnicodeEncodeError:
            raise InvalidHeaderValueError(key, value) from None

    return b''.join(lines)


def iter_chunked(chunks: Iterable[Union[bytes, str]]) -> Iterator[bytes]:
    """
    Frames every chunk for chunked transfer coding. Empty chunks are skipped,
    as zero-length chunk means end of the body for the client. The last frame
    is always the terminating one
    """

    for chunk in chunks:
        chunk = make_sure_bytes(chunk)

        if chunk:
            yield b'%x\r\n%s\r\n' % (len(chunk), chunk)

    yield b'0\r\n\r\n'


def slice_chunks(data: bytes, chunk_length: int = 4096) -> Iterator[bytes]:
    for offset in range(0, len(data), chunk_length):
        yield data[offset:offset + chunk_length]


def render_http_response(response: Response,
                         settings: Optional[Settings] = None) -> bytes:
    """
    A function for rendering responses into HTTP/1.x messages

    Arguments:
             response - a response to render. Its status must be set
             settings - protocol version, default headers and body-related
                        behaviour. Settings() is used if None

    Rules:
          - every value of a header becomes its own line, so cookies are never
            joined with commas
          - string body is encoded with utf-8, bytes are sent as they are
          - any other body is a producer of chunks. It's sent with chunked transfer
            coding, unless response sets content-length by itself
          - content-length is counted for strings and bytes if it's enabled in
            settings and response has no such a header
          - 1xx, 204 and 304 responses are sent without a body, whatever the
            response has in it
          - header values must be latin-1

    May raise exceptions: ResponseNotReadyError, InvalidHeaderValueError
    """

    settings = settings or Settings()

    if not response.status:
        raise ResponseNotReadyError('response status is not set')

    headers = response.headers

    for key, value in settings.default_headers.pairs():
        if key not in response.headers:
            headers = headers.add(key, value)

    body = response.body
    chunked = headers.first('transfer-encoding', '').lower() == 'chunked'

    if not _may_have_body(response.status):
        # clients read no body for 1xx, 204 and 304
        if body:
            logger.debug(f'dropping body of a response with status {response.status}')

        body = b''
        headers = headers.remove('transfer-encoding')
    elif isinstance(body, (str, bytes, bytearray)):
        body = make_sure_bytes(body)

        if chunked:
            body = b''.join(iter_chunked(slice_chunks(body, settings.chunk_length)))
        elif settings.count_content_length and 'content-length' not in headers:
            logger.debug(f'counted content-length={len(body)} for status {response.status}')
            headers = headers.set('content-length', str(len(body)))
    elif 'content-length' in headers and not chunked:
        body = b''.join(map(make_sure_bytes, body))
    else:
        if not chunked:
            logger.debug('body is a producer and content-length is not set; '
                         'falling back to chunked transfer coding')
            headers = headers.set('transfer-encoding', 'chunked')

        body = b''.join(iter_chunked(body))

    status_description = status_codes.get(response.status, 'UNKNOWN')

    return b'HTTP/%s %d %s\r\n%s\r\n%s' % (
        settings.protocol.encode(), response.status, status_description.encode(),
        format_headers(headers.pairs()), body
    )


def _may_have_body(code: int) -> bool:
    return code >= 200 and code not in BODILESS_CODES
