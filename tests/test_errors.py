import pytest

from tinyhttpd.errors import BadRequestError, EndpointNotFoundError, ServerError


def test_message_is_kept_and_shown():
    error = ServerError("Malformed request message")
    assert error.message == "Malformed request message"
    assert str(error) == "Malformed request message"


@pytest.mark.parametrize("cls", [BadRequestError, EndpointNotFoundError])
def test_subclasses_are_server_errors_with_message(cls):
    error = cls("No endpoint found for URI /x")
    assert isinstance(error, ServerError)
    assert error.message == "No endpoint found for URI /x"
    assert str(error) == "No endpoint found for URI /x"


def test_bad_request_is_not_endpoint_not_found():
    error = BadRequestError("Malformed request message")
    assert not isinstance(error, EndpointNotFoundError)
    assert error.message == "Malformed request message"


def test_args_hold_the_message():
    error = EndpointNotFoundError("missing")
    assert error.args == ("missing",)