from datetime import datetime, timezone

import pytest

from fbgraph_client import Action, GraphClient, arg
from fbgraph_client.auth import AppAccessToken, UserAccessToken
from fbgraph_client.exceptions import ConfigurationError, UnexpectedResponseError

GRAPH = "https://graph.facebook.com"


def build_client(app_namespace: str | None = "cookbook") -> GraphClient:
    return GraphClient(app_namespace=app_namespace)


def test_get_object_with_fields(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{GRAPH}/4", json={"id": "4", "name": "Mark"})

    result = client.objects.get("4", fields=["id", "name"])

    assert result["name"] == "Mark"
    assert matcher.last_request.url == f"{GRAPH}/4?fields=id%2Cname"


def test_post_object_returns_id(requests_mock):
    client = build_client()
    matcher = requests_mock.post(f"{GRAPH}/me/feed", json={"id": "4_123"})

    object_id = client.objects.post("/me/feed", [arg("message", "hi")], token=UserAccessToken("u"))

    assert object_id == "4_123"
    assert matcher.last_request.url == f"{GRAPH}/me/feed?access_token=u&message=hi"


def test_post_object_numeric_id(requests_mock):
    client = build_client()
    requests_mock.post(f"{GRAPH}/me/feed", json={"id": 99})

    assert client.objects.post("/me/feed", [], token=UserAccessToken("u")) == "99"


def test_post_without_id_is_unexpected(requests_mock):
    client = build_client()
    requests_mock.post(f"{GRAPH}/me/feed", json={"ok": True})

    with pytest.raises(UnexpectedResponseError):
        client.objects.post("/me/feed", [], token=UserAccessToken("u"))


@pytest.mark.parametrize("body", [True, {"success": True}])
def test_delete_object(requests_mock, body):
    client = build_client()
    requests_mock.delete(f"{GRAPH}/4_123", json=body)

    assert client.objects.delete("4_123", token=UserAccessToken("u")) is True


def test_exists_uses_head_check(requests_mock):
    client = build_client()
    requests_mock.head(f"{GRAPH}/gone", status_code=404)

    assert client.objects.exists("gone") is False


def test_create_action_posts_to_namespace(requests_mock):
    client = build_client()
    matcher = requests_mock.post(f"{GRAPH}/me/cookbook:cook", json={"id": "777"})
    when = datetime(2013, 1, 5, 8, 30, tzinfo=timezone.utc)

    action_id = client.opengraph.create_action(
        "cook",
        [arg("recipe", "http://example.com/cookie.html"), arg("when", when)],
        UserAccessToken("u"),
    )

    assert action_id == "777"
    assert matcher.last_request.url == (
        f"{GRAPH}/me/cookbook:cook?access_token=u"
        "&recipe=http%3A%2F%2Fexample.com%2Fcookie.html&when=20130105T0830Z"
    )


def test_create_action_requires_user_token():
    client = build_client()
    with pytest.raises(TypeError):
        client.opengraph.create_action("cook", [], AppAccessToken("app"))  # type: ignore[arg-type]


def test_create_action_requires_namespace():
    client = build_client(app_namespace=None)
    with pytest.raises(ConfigurationError):
        client.opengraph.create_action("cook", [], UserAccessToken("u"))


@pytest.mark.parametrize(
    "name",
    ["", "co ok", "cook/eat", "cuisiné", "a:b", "cook?x", "a&b", "a#b", "a\tb", "cook!", "a+b"],
)
def test_invalid_action_names_rejected(name):
    with pytest.raises(ValueError):
        Action(name)


@pytest.mark.parametrize("name", ["cook", "og.likes", "eat_now", "re-heat", "Bake2"])
def test_valid_action_names_accepted(name):
    assert str(Action(name)) == name
