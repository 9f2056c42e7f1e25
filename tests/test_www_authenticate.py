import pytest

from fbgraph_client.exceptions import FacebookException, HeaderParseError
from fbgraph_client.www_authenticate import format_www_authenticate, parse_www_authenticate


def test_parses_type_and_message():
    exc = parse_www_authenticate(
        'OAuth "Facebook Platform" "invalid_token" "The access token is invalid"'
    )

    assert exc == FacebookException("invalid_token", "The access token is invalid")
    assert exc.type == "invalid_token"
    assert exc.message == "The access token is invalid"


def test_backslash_escapes_next_character():
    exc = parse_www_authenticate(r'OAuth "Facebook Platform" "a\"b" "c\\d\x"')

    assert exc.type == 'a"b'
    assert exc.message == "c\\dx"


def test_empty_strings_are_allowed():
    exc = parse_www_authenticate('OAuth "Facebook Platform" "" ""')
    assert (exc.type, exc.message) == ("", "")


def test_trailing_text_is_ignored():
    exc = parse_www_authenticate('OAuth "Facebook Platform" "t" "m", realm="x"')
    assert (exc.type, exc.message) == ("t", "m")


@pytest.mark.parametrize(
    "header",
    [
        'Bearer realm="example"',
        'OAuth "Facebook" "t" "m"',
        'oauth "Facebook Platform" "t" "m"',
        'OAuth "Facebook Platform" "t" "m',
        'OAuth "Facebook Platform" "t',
        'OAuth "Facebook Platform" "t""m"',
        'OAuth "Facebook Platform" "t"  "m"',
        'OAuth "Facebook Platform" t "m"',
        'OAuth "Facebook Platform" "t"',
        'OAuth "Facebook Platform" "t" "m\\',
        "",
    ],
)
def test_incomplete_headers_fail(header):
    with pytest.raises(HeaderParseError):
        parse_www_authenticate(header)


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        ("invalid_token", "The access token is invalid"),
        ("OAuthException", 'Error validating "access token"'),
        ("x", "back\\slash and \\\"both\\\""),
    ],
)
def test_formatted_headers_parse_back(error_type, message):
    exc = parse_www_authenticate(format_www_authenticate(error_type, message))
    assert (exc.type, exc.message) == (error_type, message)


def test_parse_records_status_code():
    exc = parse_www_authenticate('OAuth "Facebook Platform" "t" "m"', status_code=401)
    assert exc.status_code == 401
