import logging
from datetime import datetime, timezone, timedelta

import pytest

from surge.cookies import CookieAttributes, set_cookie_string
from surge.entities import Response
from surge.exceptions import InvalidCookieNameError, CookieError
from surge.response import ok, set_cookie, expire_cookie, set_header, add_header

EXPIRED = 'expires=Thu, 01 Jan 1970 00:00:00 GMT; path=/'


def test_cookies_are_appended_in_order():
    response = ok('hi', {'content-type': 'text/plain'})
    response = set_cookie(response, 'k', 'v')
    response = set_cookie(response, 'k2', 'v2')

    cookies = response.headers['set-cookie']

    assert len(cookies) == 2
    assert cookies[0].startswith('k=v')
    assert cookies[1].startswith('k2=v2')
    assert response.headers['content-type'] == ['text/plain']


def test_same_key_is_not_deduplicated():
    response = set_cookie(set_cookie(ok(), 'k', '1'), 'k', '2')

    assert response.headers['set-cookie'] == ['k=1', 'k=2']


def test_set_cookie_keeps_existing_cookies():
    response = Response(200, {'set-cookie': ['a=1']})

    assert set_cookie(response, 'b', '2').headers['set-cookie'] == ['a=1', 'b=2']


def test_set_cookie_does_not_change_original():
    response = ok()
    set_cookie(response, 'k', 'v')

    assert 'set-cookie' not in response.headers


def test_all_attributes():
    response = set_cookie(ok(), 'session', 'abc', {
        'path': '/',
        'domain': 'example.com',
        'expires': datetime(2030, 1, 1),
        'max_age': 3600,
        'secure': True,
        'http_only': True,
        'same_site': 'Strict',
    })

    assert response.headers['set-cookie'] == [
        'session=abc; Path=/; Domain=example.com; Expires=Tue, 01 Jan 2030 00:00:00 GMT; '
        'Max-Age=3600; Secure; HttpOnly; SameSite=Strict'
    ]


def test_attributes_object():
    attributes = CookieAttributes(path='/admin', http_only=True)

    assert set_cookie_string('k', 'v', attributes) == 'k=v; Path=/admin; HttpOnly'


def test_expires_is_converted_to_gmt():
    moment = datetime(2030, 1, 1, 3, 0, tzinfo=timezone(timedelta(hours=3)))

    assert set_cookie_string('k', 'v', {'expires': moment}) == \
        'k=v; Expires=Tue, 01 Jan 2030 00:00:00 GMT'


def test_expires_string_is_passed_as_is():
    assert set_cookie_string('k', 'v', {'expires': 'Wed, 21 Oct 2037 07:28:00 GMT'}) == \
        'k=v; Expires=Wed, 21 Oct 2037 07:28:00 GMT'


def test_false_flags_are_omitted():
    assert set_cookie_string('k', 'v', {'secure': False, 'http_only': False}) == 'k=v'


def test_unknown_options_are_ignored(caplog):
    caplog.set_level(logging.DEBUG, logger='surge.cookies')

    assert set_cookie_string('k', 'v', {'path': '/', 'priority': 'High'}) == 'k=v; Path=/'
    assert 'priority' in caplog.text


def test_unknown_options_of_any_type_are_ignored(caplog):
    caplog.set_level(logging.DEBUG, logger='surge.cookies')

    response = set_cookie(ok(), 'k', 'v', {'path': '/', 1: 'x', None: 'y'})

    assert response.headers['set-cookie'] == ['k=v; Path=/']
    assert caplog.messages == ['ignoring unknown cookie options: 1, None']


@pytest.mark.parametrize('name', ['', 'a b', 'a;b', 'a=b', 'a,b', 'a"b', 'ключ', 'a\tb', 'a\x00'])
def test_invalid_names(name):
    with pytest.raises(InvalidCookieNameError) as exc_info:
        set_cookie(ok(), name, 'v')

    assert exc_info.value.name == name
    assert isinstance(exc_info.value, CookieError)
    assert isinstance(exc_info.value, ValueError)


def test_expire_cookie_appends_expired_cookie():
    response = expire_cookie(ok(), 'a')

    assert response.headers['set-cookie'] == ['a=; ' + EXPIRED]


def test_expire_cookie_keeps_other_headers():
    response = Response(200, {'x-custom': ['1'], 'set-cookie': ['a=1']})
    expired = expire_cookie(response, 'a')

    # headers other than set-cookie must survive expiring a cookie
    assert expired.headers.get('x-custom') == ['1'], \
        'expire_cookie dropped headers that are not set-cookie'
    assert expired.headers['set-cookie'] == ['a=1', 'a=; ' + EXPIRED]
    assert response.headers['set-cookie'] == ['a=1']


def test_set_header_replaces_values():
    response = Response(200, [('vary', 'accept'), ('vary', 'cookie')])

    assert set_header(response, 'Vary', 'origin').headers['vary'] == ['origin']
    assert response.headers['vary'] == ['accept', 'cookie']


def test_add_header_appends_value():
    response = add_header(ok(headers={'vary': 'accept'}), 'vary', 'cookie')

    assert response.headers['vary'] == ['accept', 'cookie']
