from surge.entities import Response
from surge.exceptions import (HTTPError, HTTPBadRequest, HTTPNotFound,
                              HTTPInternalServerError, SurgeException)
from surge.response import is_client_error, is_server_error


def test_subclasses_have_codes():
    assert HTTPBadRequest().to_response().status == 400
    assert is_client_error(HTTPNotFound().to_response())
    assert is_server_error(HTTPInternalServerError().to_response())


def test_to_response():
    error = HTTPNotFound(body='nope', headers={'content-type': 'text/plain'})

    assert error.to_response() == Response(404, {'content-type': 'text/plain'}, 'nope')


def test_code_argument():
    error = HTTPError(429, msg='slow down', retry_after=10)

    assert error.to_response().status == 429
    assert error.retry_after == 10
    assert str(error) == 'slow down'
    assert isinstance(error, SurgeException)


def test_default_code():
    assert HTTPError().to_response().status == 500


def test_kwargs_stash_is_per_instance():
    error = HTTPInternalServerError(details='db is down')

    assert error.details == 'db is down'
    assert not hasattr(HTTPInternalServerError(), 'details')
    assert not hasattr(HTTPInternalServerError(), 'traceback')
