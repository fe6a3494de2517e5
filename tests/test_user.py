from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from twitterusers.user import (
    BearerAuthorizer,
    HTTPError,
    TweetErrorResponse,
    User,
    UserTimeline,
)
from twitterusers.user_obj import UserField
from twitterusers.user_params import UserFieldOptions, UserFollowOptions, UserTimelineOpts

HOST = "https://www.go-twitter.com"


@pytest.fixture
def client():
    return User(authorizer=BearerAuthorizer(token="token"), client=requests.Session(), host=HOST)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def _call(rsps, index=0):
    request = rsps.calls[index].request
    parts = urlsplit(request.url)
    return request, parts.path, {k: v[0] for k, v in parse_qs(parts.query).items()}


def test_bearer_authorizer_adds_header():
    request = requests.Request("GET", HOST)
    BearerAuthorizer(token="token").add(request)
    assert request.headers["Authorization"] == "Bearer token"


def test_lookup_single_id(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/1000000001",
        json={
            "data": {"id": "1000000001", "name": "Dev", "username": "dev", "pinned_tweet_id": "1"},
            "includes": {"tweets": [{"id": "1", "text": "hello"}]},
        },
    )
    result = client.lookup(["1000000001"], UserFieldOptions(user_fields=[UserField.USER_NAME]))
    request, path, query = _call(mocked)
    assert path == "/2/users/1000000001"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Authorization"] == "Bearer token"
    assert query == {"user.fields": "username"}
    assert list(result) == ["1000000001"]
    assert result["1000000001"].user.user_name == "dev"
    assert result["1000000001"].tweet == {"id": "1", "text": "hello"}


def test_lookup_many_ids_matches_pinned(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users",
        json={
            "data": [
                {"id": "10", "name": "a", "username": "a", "pinned_tweet_id": "7"},
                {"id": "20", "name": "b", "username": "b"},
            ],
            "includes": {"tweets": [{"id": "7", "text": "pinned"}]},
        },
    )
    result = client.lookup(["10", "20"])
    _, path, query = _call(mocked)
    assert path == "/2/users"
    assert query["ids"] == "10,20"
    assert result["10"].tweet == {"id": "7", "text": "pinned"}
    assert result["20"].tweet is None
    assert result["20"].to_dict()["user"]["username"] == "b"


def test_lookup_requires_ids(client):
    with pytest.raises(ValueError, match="id is required"):
        client.lookup([])


def test_lookup_too_many_ids(client):
    with pytest.raises(ValueError, match="greater than max 100"):
        client.lookup([str(i) for i in range(101)])


def test_lookup_username_single_and_many(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/by/username/someone",
        json={"data": {"id": "5", "username": "someone"}},
    )
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/by",
        json={"data": [{"id": "5", "username": "someone"}, {"id": "6", "username": "other"}]},
    )
    single = client.lookup_username(["someone"])
    many = client.lookup_username(["someone", "other"])
    _, path, _ = _call(mocked, 0)
    assert path == "/2/users/by/username/someone"
    _, path, query = _call(mocked, 1)
    assert path == "/2/users/by"
    assert query["usernames"] == "someone,other"
    assert single["5"].user.user_name == "someone"
    assert sorted(many) == ["5", "6"]


def test_lookup_username_requires_names(client):
    with pytest.raises(ValueError):
        client.lookup_username([])


def test_error_response_decoded(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/1",
        status=400,
        json={"title": "Invalid Request", "detail": "bad id", "errors": [{"message": "bad"}]},
    )
    with pytest.raises(TweetErrorResponse) as info:
        client.lookup(["1"])
    assert info.value.status_code == 400
    assert info.value.title == "Invalid Request"
    assert info.value.errors == [{"message": "bad"}]


def test_undecodable_error_is_http_error(client, mocked):
    mocked.add(responses.GET, f"{HOST}/2/users/1", status=503, body="down")
    with pytest.raises(HTTPError) as info:
        client.lookup(["1"])
    assert info.value.status_code == 503
    assert info.value.url == f"{HOST}/2/users/1"


def test_lookup_following(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/42/following",
        json={
            "data": [{"id": "1", "username": "x"}],
            "meta": {"result_count": 1, "next_token": "abc"},
            "errors": [{"title": "partial"}],
        },
    )
    result = client.lookup_following("42", UserFollowOptions(max_results=10, pagination_token="p1"))
    _, path, query = _call(mocked)
    assert path == "/2/users/42/following"
    assert query == {"max_results": "10", "pagination_token": "p1"}
    assert list(result.lookups) == ["1"]
    assert result.meta.result_count == 1
    assert result.meta.next_token == "abc"
    assert result.errors == [{"title": "partial"}]


def test_lookup_followers_without_meta(client, mocked):
    mocked.add(
        responses.GET, f"{HOST}/2/users/42/followers", json={"data": [{"id": "3"}]}
    )
    result = client.lookup_followers("42")
    _, path, _ = _call(mocked)
    assert path == "/2/users/42/followers"
    assert result.meta is None
    assert result.to_dict()["lookups"]["3"]["user"]["id"] == "3"


@pytest.mark.parametrize("max_results", [-1, 1001])
def test_follow_max_results_out_of_range(client, max_results):
    with pytest.raises(ValueError, match="between 1-1000"):
        client.lookup_followers("42", UserFollowOptions(max_results=max_results))


def test_follow_requires_id(client):
    with pytest.raises(ValueError, match="user id must be present"):
        client.lookup_following("")


def test_tweets_timeline(client, mocked):
    mocked.add(
        responses.GET,
        f"{HOST}/2/users/42/tweets",
        json={
            "data": [{"id": "100", "text": "first"}],
            "includes": {"users": [{"id": "42", "username": "me"}]},
            "meta": {"oldest_id": "100", "newest_id": "100", "result_count": 1},
        },
    )
    timeline = client.tweets("42", UserTimelineOpts(max_results=5))
    _, path, query = _call(mocked)
    assert path == "/2/users/42/tweets"
    assert query == {"max_results": "5"}
    assert timeline.tweets == [{"id": "100", "text": "first"}]
    assert timeline.includes.users[0].user_name == "me"
    assert timeline.meta.result_count == 1


def test_mentions_timeline(client, mocked):
    mocked.add(
        responses.GET, f"{HOST}/2/users/42/mentions", json={"data": [], "meta": {}}
    )
    timeline = client.mentions("42")
    _, path, _ = _call(mocked)
    assert path == "/2/users/42/mentions"
    assert timeline.tweets == []
    assert timeline.includes is None


def test_timeline_max_results_out_of_range(client):
    with pytest.raises(ValueError):
        client.tweets("42", UserTimelineOpts(max_results=101))


def test_timeline_requires_id(client):
    with pytest.raises(ValueError, match="timeline tweets"):
        client.mentions("")


def test_timeline_round_trip():
    timeline = UserTimeline.from_dict(
        {
            "data": [{"id": "1"}],
            "includes": {"users": [{"id": "2", "username": "u"}], "polls": "p"},
            "errors": [{"title": "t"}],
            "meta": {"next_token": "n", "result_count": 1},
        }
    )
    assert UserTimeline.from_dict(timeline.to_dict()) == timeline


def test_timeline_polls_must_be_string():
    with pytest.raises(ValueError):
        UserTimeline.from_dict({"includes": {"polls": [1]}})