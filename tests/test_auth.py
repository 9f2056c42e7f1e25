import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from fbgraph_client.auth import AccessToken, AppAccessToken, Credentials, UserAccessToken


def test_credentials_prepend_id_and_secret():
    creds = Credentials("123", "s3cret")

    assert creds.contribute([("a", "b")]) == [
        ("client_id", "123"),
        ("client_secret", "s3cret"),
        ("a", "b"),
    ]


def test_token_prepends_access_token():
    token = UserAccessToken("tok")

    assert token.contribute([("a", "b"), ("c", "d")]) == [
        ("access_token", "tok"),
        ("a", "b"),
        ("c", "d"),
    ]


def test_contribute_leaves_input_untouched():
    params = [("a", "b")]
    AppAccessToken("tok").contribute(params)
    assert params == [("a", "b")]


def test_secrets_are_hidden_from_repr():
    assert "s3cret" not in repr(Credentials("123", "s3cret"))
    assert "tok-value" not in repr(UserAccessToken("tok-value"))
    assert "tok-value" not in repr(AppAccessToken("tok-value"))


def test_token_kinds_are_distinct():
    user = UserAccessToken("same")
    app = AppAccessToken("same")

    assert user.kind == "user"
    assert app.kind == "app"
    assert user != app
    assert not isinstance(user, AppAccessToken)


def test_base_token_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AccessToken("tok")


def test_tokens_are_immutable():
    token = UserAccessToken("tok")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.token = "other"  # type: ignore[misc]


def test_expiry_is_advisory():
    now = datetime(2013, 1, 5, tzinfo=timezone.utc)

    assert UserAccessToken("tok").is_expired(now) is False
    assert UserAccessToken("tok", expires=now - timedelta(seconds=1)).is_expired(now) is True
    assert UserAccessToken("tok", expires=now + timedelta(hours=1)).is_expired(now) is False


def test_expiry_compares_naive_values_as_utc():
    expires = datetime(2013, 1, 5, 12, 0)
    now = datetime(2013, 1, 5, 13, 0, tzinfo=timezone(timedelta(hours=2)))

    assert AppAccessToken("tok", expires=expires).is_expired(now) is False
