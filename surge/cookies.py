"""
Set-Cookie serialization

Attributes are written in a fixed order: Path, Domain, Expires, Max-Age,
Secure, HttpOnly, SameSite. Only the cookie name is validated; the value is
written as it is given
"""

import logging
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from .exceptions import InvalidCookieNameError
from .utils.httputils import http_date

logger = logging.getLogger(__name__)

# RFC 2616 separators, that are not allowed in a token (cookie name)
SEPARATORS = frozenset('()<>@,;:\\"/[]?={} \t')
EXPIRED = 'Thu, 01 Jan 1970 00:00:00 GMT'


@dataclass(frozen=True)
class CookieAttributes:
    path: Optional[str] = field(default=None)
    domain: Optional[str] = field(default=None)
    expires: Optional[Union[datetime, str]] = field(default=None)
    max_age: Optional[int] = field(default=None)
    secure: bool = field(default=False)
    http_only: bool = field(default=False)
    same_site: Optional[str] = field(default=None)

    @classmethod
    def from_options(cls, options: Optional[Union['CookieAttributes', Mapping[str, Any]]]
                     ) -> 'CookieAttributes':
        """
        Options may be already CookieAttributes, a mapping or None. Mapping keys
        that are not attributes are ignored, so callers may pass options that
        were meant for a newer version without breaking
        """

        if options is None:
            return cls()

        if isinstance(options, CookieAttributes):
            return options

        known = {attribute.name for attribute in fields(cls)}
        unknown = set(options) - known

        if unknown:
            logger.debug('ignoring unknown cookie options: %s', ', '.join(sorted(map(repr, unknown))))

        return cls(**{key: value for key, value in options.items() if key in known})

    def render(self) -> str:
        parts = []

        if self.path is not None:
            parts.append(f'Path={self.path}')
        if self.domain is not None:
            parts.append(f'Domain={self.domain}')
        if self.expires is not None:
            expires = http_date(self.expires) if isinstance(self.expires, datetime) \
                else self.expires
            parts.append(f'Expires={expires}')
        if self.max_age is not None:
            parts.append(f'Max-Age={int(self.max_age)}')
        if self.secure:
            parts.append('Secure')
        if self.http_only:
            parts.append('HttpOnly')
        if self.same_site is not None:
            parts.append(f'SameSite={self.same_site}')

        return ''.join(f'; {part}' for part in parts)


def is_valid_name(name: str) -> bool:
    return bool(name) and all(
        32 < ord(char) < 127 and char not in SEPARATORS for char in name
    )


def set_cookie_string(name: str, value: str,
                      options: Optional[Union[CookieAttributes, Mapping[str, Any]]] = None
                      ) -> str:
    """
    Returns a value for Set-Cookie header: name=value[; Attr=Value]*[; Attr]*

    May raise exceptions: InvalidCookieNameError
    """

    if not is_valid_name(name):
        raise InvalidCookieNameError(name)

    return f'{name}={value}{CookieAttributes.from_options(options).render()}'


def expired_cookie_string(name: str) -> str:
    """
    Returns a value for Set-Cookie header, that makes user agent drop the
    cookie with root path. Session cookies are not expired this way
    """

    return f'{name}=; expires={EXPIRED}; path=/'
