"""
Everything for building responses: a constructor per registered status code,
status class predicates and helpers that return modified copies of a response

Constructors are named after reason phrases (see utils.case_formatter):

    from surge.response import ok, not_found

    ok('hello', [('content-type', 'text/plain')])
    not_found('nothing here')

None of the functions here changes a response it gets; a new one is
returned every time
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from .cookies import CookieAttributes, set_cookie_string, expired_cookie_string
from .entities import Headers, Response
from .exceptions import UnknownStatusCodeError
from .status_codes import status_codes
from .typehints import Body, HeadersInput, StatusCode
from .utils.case_formatter import phrase2snake

Constructor = Callable[..., Response]

# name: constructor, filled below for every code from status_codes
constructors: Dict[str, Constructor] = {}
_constructors_by_code: Dict[StatusCode, Constructor] = {}


def _make_constructor(code: StatusCode, phrase: str) -> Constructor:
    def constructor(body: Body = '', headers: HeadersInput = ()) -> Response:
        return Response(code, Headers(headers), body)

    constructor.__name__ = constructor.__qualname__ = phrase2snake(phrase)
    constructor.__doc__ = f'Returns a new {code} {phrase} response'
    constructor.status = code

    return constructor


for _code, _phrase in status_codes.items():
    _constructor = _make_constructor(_code, _phrase)
    constructors[_constructor.__name__] = _constructors_by_code[_code] = _constructor
    globals()[_constructor.__name__] = _constructor

del _code, _phrase, _constructor

ok.__doc__ = """
Returns a new 200 OK response

Arguments:
         body - a string, bytes or an iterable of bytes chunks. Empty by default
         headers - a mapping of header name to a value or a list of values,
                   or an iterable of (name, value) pairs. Names are case-insensitive

Every other status code has the same function, named after its reason phrase:
created(), not_found(), internal_server_error() and so on
"""


def constructor_for(code: StatusCode) -> Constructor:
    """
    Returns the constructor of a registered status code

    May raise exceptions: UnknownStatusCodeError
    """

    try:
        return _constructors_by_code[code]
    except (KeyError, TypeError):
        raise UnknownStatusCodeError(code) from None


def _status_in(response: Response, lower: int, upper: int) -> bool:
    code = response.status

    # bool is an int too, but True is not a status code
    if not isinstance(code, int) or isinstance(code, bool):
        return False

    return lower <= code < upper


def is_informational(response: Response) -> bool:
    return _status_in(response, 100, 200)


def is_success(response: Response) -> bool:
    return _status_in(response, 200, 300)


def is_redirect(response: Response) -> bool:
    return _status_in(response, 300, 400)


def is_client_error(response: Response) -> bool:
    return _status_in(response, 400, 500)


def is_server_error(response: Response) -> bool:
    return _status_in(response, 500, 600)


def set_header(response: Response, name: str, value: Any) -> Response:
    """
    Replaces all the values of a header. Value may be a string or a list of strings
    """

    return response.replace(headers=response.headers.set(name, value))


def add_header(response: Response, name: str, value: str) -> Response:
    return response.replace(headers=response.headers.add(name, value))


def set_cookie(response: Response, key: str, value: str,
               options: Optional[Union[CookieAttributes, Mapping[str, Any]]] = None) -> Response:
    """
    Adds a set-cookie header to the response. Cookies that were set before
    are kept, and setting the same key twice sends both of them: it's up to
    user agent which one wins

    Options are CookieAttributes or a mapping with the same keys: path, domain,
    expires, max_age, secure, http_only, same_site. Unknown keys are ignored

    May raise exceptions: InvalidCookieNameError
    """

    return add_header(response, 'set-cookie', set_cookie_string(key, value, options))


def expire_cookie(response: Response, key: str) -> Response:
    """
    Adds a set-cookie header, that will expire the cookie with the given key.
    Other headers of the response are kept

    NOTE: session cookies and cookies with a path other than / are not expired
    """

    return add_header(response, 'set-cookie', expired_cookie_string(key))
