from typing import Any, Optional

from .entities import Response


class SurgeException(Exception):
    """
    Basic exception
    """

    pass


class CookieError(SurgeException):
    pass


class InvalidCookieNameError(CookieError, ValueError):
    """
    Exception that is being raised when a cookie name is empty or contains
    characters that are not allowed in a token (RFC 6265, section 4.1.1)
    """

    def __init__(self, name: str):
        self.name = name

        super(InvalidCookieNameError, self).__init__(f'invalid cookie name: {name!r}')


class UnknownStatusCodeError(SurgeException, LookupError):
    """
    Exception that is being raised when a status code is looked up in the
    table of registered codes, but is not there
    """

    def __init__(self, code: Any):
        self.code = code

        super(UnknownStatusCodeError, self).__init__(f'unknown status code: {code!r}')


class ResponseNotReadyError(SurgeException):
    """
    Exception that is being raised when trying to render a response which
    status is still unset (0)
    """


class InvalidHeaderValueError(SurgeException, ValueError):
    """
    Exception that is being raised when a header value can not be written
    on the wire, as header values are latin-1 only
    """

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

        super(InvalidHeaderValueError, self).__init__(
            f'header {name!r} has a value that is not latin-1: {value!r}'
        )


class HTTPError(SurgeException):
    """
    May be raised by application code to abort with an error response.
    Adapters catch it and send whatever to_response() returns

    Subclasses set the code on the class level, so the code argument
    becomes optional for them
    """

    code: int = 500

    def __init__(self,
                 code: Optional[int] = None,
                 body: str = '',
                 headers=(),
                 **kwargs):
        if code is not None:
            self.code = code

        self.body = body
        self.headers = headers

        # an additional stash for dynamic values
        # not very good choice, but may be useful in some cases
        for key, value in kwargs.items():
            setattr(self, key, value)

        super(HTTPError, self).__init__(kwargs.get('msg', ''))

    def to_response(self) -> Response:
        return Response(self.code, self.headers, self.body)


class HTTPBadRequest(HTTPError):
    code = 400


class HTTPNotFound(HTTPError):
    code = 404


class HTTPInternalServerError(HTTPError):
    code = 500
