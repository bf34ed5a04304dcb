"""
Response Writer
Per-request response sink: collects headers, status and body during
rendering and builds the final Sanic HTTPResponse
"""
from typing import Optional

from sanic.compat import Header
from sanic.response import HTTPResponse

from sanic_render.defaults import (
    CONTENT_TYPE_HEADER,
    CONTENT_TYPE_TEXT,
    DEFAULT_SUCCESS_STATUS,
)
from sanic_render.logging import getLogger

logger = getLogger(__name__)


class ResponseWriter:
    """
    Collects response data for one request

    Headers may be changed until the status is written. The first
    write_header() call wins; writing body bytes without a status
    implies 200.

    Example:
        writer = ResponseWriter()
        writer.header()['Content-Type'] = 'text/plain'
        writer.write_header(201)
        writer.write(b'created')
        return writer.build()
    """

    def __init__(self):
        self._headers = Header()
        self._status: Optional[int] = None
        self._body = bytearray()

    def header(self) -> Header:
        """Mutable header collection"""
        return self._headers

    @property
    def status(self) -> Optional[int]:
        return self._status

    def write_header(self, status: int):
        """Record the response status (only once)"""
        if self._status is not None:
            logger.warning(
                "Superfluous write_header call",
                extra={'status': status, 'written_status': self._status}
            )
            return
        self._status = status

    def write(self, data: bytes) -> int:
        """Append body bytes, returning the number written"""
        if self._status is None:
            self.write_header(DEFAULT_SUCCESS_STATUS)
        self._body.extend(data)
        return len(data)

    def build(self) -> HTTPResponse:
        """Build the final Sanic HTTPResponse"""
        return HTTPResponse(
            body=bytes(self._body),
            status=self._status or DEFAULT_SUCCESS_STATUS,
            headers=Header(self._headers),
            content_type=None,
        )


def http_error(writer: ResponseWriter, message: str, status: int):
    """
    Reply with a plain-text error

    Sets a plain-text content type, writes the status and the message
    followed by a newline.
    """
    headers = writer.header()
    headers[CONTENT_TYPE_HEADER] = CONTENT_TYPE_TEXT
    headers['X-Content-Type-Options'] = 'nosniff'
    writer.write_header(status)
    writer.write(f'{message}\n'.encode('utf-8'))
