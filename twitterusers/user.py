"""Client for the Twitter v2 user lookup, follow and timeline endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import requests

from twitterusers.user_obj import UserObj
from twitterusers.user_params import UserFieldOptions, UserFollowOptions, UserTimelineOpts

USER_LOOKUP_ENDPOINT = "2/users"
USER_NAME_LOOKUP_ENDPOINT = "2/users/by/username"
USER_NAMES_LOOKUP_ENDPOINT = "2/users/by"
USER_FOLLOWING_LOOKUP_ENDPOINT = "2/users/{id}/following"
USER_FOLLOWERS_LOOKUP_ENDPOINT = "2/users/{id}/followers"
USER_TIMELINE_TWEETS_ENDPOINT = "2/users/{id}/tweets"
USER_TIMELINE_MENTIONS_ENDPOINT = "2/users/{id}/mentions"
USER_ID = "{id}"
USER_MAX_IDS = 100
USER_MAX_NAMES = 100


class Authorizer(ABC):
    """Adds authorization to an outgoing HTTP request."""

    @abstractmethod
    def add(self, request: requests.Request) -> None:
        """Add the authorization to the request."""


@dataclass
class BearerAuthorizer(Authorizer):
    """Authorizes requests with a bearer token."""

    token: str

    def add(self, request: requests.Request) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"


class HTTPError(Exception):
    """A non-success HTTP response whose body could not be decoded."""

    def __init__(self, status: str, status_code: int, url: str) -> None:
        super().__init__(f"twitter http error: {status} {url}")
        self.status = status
        self.status_code = status_code
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "status_code": self.status_code, "url": self.url}


class TweetErrorResponse(Exception):
    """An error response returned by the API."""

    def __init__(
        self,
        title: str = "",
        detail: str = "",
        type: str = "",
        errors: list[dict[str, Any]] | None = None,
        status_code: int = 0,
    ) -> None:
        super().__init__(f"twitter response error: {status_code} {title} {detail}".rstrip())
        self.title = title
        self.detail = detail
        self.type = type
        self.errors = list(errors or [])
        self.status_code = status_code

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], status_code: int) -> "TweetErrorResponse":
        return cls(
            title=data.get("title") or "",
            detail=data.get("detail") or "",
            type=data.get("type") or "",
            errors=list(data.get("errors") or []),
            status_code=status_code,
        )


@dataclass
class UserLookup:
    """A user together with its pinned tweet, if one was included."""

    user: UserObj
    tweet: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"user": self.user.to_dict(), "tweet": self.tweet}


@dataclass
class UserFollowMeta:
    """Paging metadata of the following and followers lookups."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserFollowMeta":
        data = data or {}
        return cls(
            result_count=int(data.get("result_count") or 0),
            previous_token=data.get("previous_token") or "",
            next_token=data.get("next_token") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "result_count": self.result_count,
            "previous_token": self.previous_token,
            "next_token": self.next_token,
        }


@dataclass
class UserFollowLookup:
    """The result of a following or followers lookup."""

    lookups: dict[str, UserLookup] = field(default_factory=dict)
    meta: UserFollowMeta | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lookups": {key: value.to_dict() for key, value in self.lookups.items()},
            "meta": self.meta.to_dict() if self.meta is not None else None,
            "errors": list(self.errors),
        }


@dataclass
class UserTimelineIncludes:
    """Optional objects returned with a timeline."""

    medias: list[dict[str, Any]] = field(default_factory=list)
    users: list[UserObj] = field(default_factory=list)
    tweets: list[dict[str, Any]] = field(default_factory=list)
    places: list[dict[str, Any]] = field(default_factory=list)
    polls: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserTimelineIncludes":
        data = data or {}
        polls = data.get("polls")
        if polls is not None and not isinstance(polls, str):
            raise ValueError("user timeline includes: polls must be a string")
        return cls(
            medias=list(data.get("media") or []),
            users=[UserObj.from_dict(u) for u in data.get("users") or []],
            tweets=list(data.get("tweets") or []),
            places=list(data.get("places") or []),
            polls=polls or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "media": list(self.medias),
            "users": [u.to_dict() for u in self.users],
            "tweets": list(self.tweets),
            "places": list(self.places),
            "polls": self.polls,
        }


@dataclass
class UserTimelineMeta:
    """Metadata of a timeline response."""

    oldest_id: str = ""
    newest_id: str = ""
    result_count: int = 0
    next_token: str = ""
    previous_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserTimelineMeta":
        data = data or {}
        return cls(
            oldest_id=data.get("oldest_id") or "",
            newest_id=data.get("newest_id") or "",
            result_count=int(data.get("result_count") or 0),
            next_token=data.get("next_token") or "",
            previous_token=data.get("previous_token") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "oldest_id": self.oldest_id,
            "newest_id": self.newest_id,
            "result_count": self.result_count,
            "next_token": self.next_token,
            "previous_token": self.previous_token,
        }


@dataclass
class UserTimeline:
    """The response of the user tweet or mention timeline."""

    tweets: list[dict[str, Any]] = field(default_factory=list)
    includes: UserTimelineIncludes | None = None
    errors: list[dict[str, Any]] = field(default_factory=list)
    meta: UserTimelineMeta = field(default_factory=UserTimelineMeta)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserTimeline":
        data = data or {}
        includes = data.get("includes")
        return cls(
            tweets=list(data.get("data") or []),
            includes=UserTimelineIncludes.from_dict(includes) if includes is not None else None,
            errors=list(data.get("errors") or []),
            meta=UserTimelineMeta.from_dict(data.get("meta")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": list(self.tweets),
            "includes": self.includes.to_dict() if self.includes is not None else None,
            "errors": list(self.errors),
            "meta": self.meta.to_dict(),
        }


def _decode_object(response: requests.Response, what: str) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:
        raise ValueError(f"{what} decode error {exc}") from exc
    if not isinstance(body, dict):
        raise ValueError(f"{what} decode error: response is not an object")
    return body


def _parse_lookup(body: Mapping[str, Any]) -> dict[str, UserLookup]:
    data = body.get("data")
    if data is not None and not isinstance(data, dict):
        raise ValueError("user lookup decode error: data is not an object")
    user = UserObj.from_dict(data)
    tweets = (body.get("includes") or {}).get("tweets") or []
    return {user.id: UserLookup(user=user, tweet=tweets[0] if tweets else None)}


def _parse_lookups(body: Mapping[str, Any]) -> dict[str, UserLookup]:
    data = body.get("data") or []
    if not isinstance(data, list):
        raise ValueError("user lookup decode error: data is not a list")
    pinned = {t.get("id", ""): t for t in (body.get("includes") or {}).get("tweets") or []}
    lookups: dict[str, UserLookup] = {}
    for raw in data:
        user = UserObj.from_dict(raw)
        lookups[user.id] = UserLookup(user=user, tweet=pinned.get(user.pinned_tweet_id))
    return lookups


@dataclass
class User:
    """Access to the Twitter v2 user endpoints."""

    authorizer: Authorizer
    client: requests.Session = field(default_factory=requests.Session)
    host: str = "https://api.twitter.com"

    def _get(self, url: str, params: Mapping[str, str]) -> requests.Response:
        request = requests.Request(
            "GET", url, headers={"Accept": "application/json"}, params=dict(params)
        )
        self.authorizer.add(request)
        response = self.client.send(self.client.prepare_request(request))
        if response.status_code != 200:
            try:
                body = response.json()
            except ValueError:
                body = None
            if not isinstance(body, dict):
                raise HTTPError(
                    status=f"{response.status_code} {response.reason}".strip(),
                    status_code=response.status_code,
                    url=response.request.url or url,
                )
            raise TweetErrorResponse.from_dict(body, response.status_code)
        return response

    def _by_keys(
        self,
        keys: Sequence[str],
        single_ep: str,
        multi_ep: str,
        param: str,
        field_opts: UserFieldOptions | None,
    ) -> dict[str, UserLookup]:
        params = (field_opts or UserFieldOptions()).query()
        if len(keys) == 1:
            ep = f"{single_ep}/{keys[0]}"
        else:
            ep = multi_ep
            params[param] = ",".join(keys)
        response = self._get(f"{self.host}/{ep}", params)
        body = _decode_object(response, "user lookup")
        return _parse_lookup(body) if len(keys) == 1 else _parse_lookups(body)

    def lookup(
        self, ids: Sequence[str], field_opts: UserFieldOptions | None = None
    ) -> dict[str, UserLookup]:
        """Look up users by their ids."""
        ids = list(ids)
        if not ids:
            raise ValueError("user lookup an id is required")
        if len(ids) > USER_MAX_IDS:
            raise ValueError(f"user lookup: ids {len(ids)} is greater than max {USER_MAX_IDS}")
        return self._by_keys(ids, USER_LOOKUP_ENDPOINT, USER_LOOKUP_ENDPOINT, "ids", field_opts)

    def lookup_username(
        self, usernames: Sequence[str], field_opts: UserFieldOptions | None = None
    ) -> dict[str, UserLookup]:
        """Look up users by their user names."""
        usernames = list(usernames)
        if not usernames:
            raise ValueError("user lookup name is required")
        if len(usernames) > USER_MAX_NAMES:
            raise ValueError(
                f"user lookup: names {len(usernames)} is greater than max {USER_MAX_NAMES}"
            )
        return self._by_keys(
            usernames,
            USER_NAME_LOOKUP_ENDPOINT,
            USER_NAMES_LOOKUP_ENDPOINT,
            "usernames",
            field_opts,
        )

    def _follow(
        self, endpoint: str, id: str, follow_opts: UserFollowOptions | None
    ) -> UserFollowLookup:
        follow_opts = follow_opts or UserFollowOptions()
        if not id:
            raise ValueError("user id must be present for following lookup")
        if follow_opts.max_results < 0 or follow_opts.max_results > 1000:
            raise ValueError(
                "user max results for following lookup must be between 1-1000: "
                f"{follow_opts.max_results}"
            )
        url = f"{self.host}/{endpoint}".replace(USER_ID, id)
        body = _decode_object(self._get(url, follow_opts.query()), "user lookup response")
        meta = body.get("meta")
        return UserFollowLookup(
            lookups=_parse_lookups(body),
            meta=UserFollowMeta.from_dict(meta) if meta is not None else None,
            errors=list(body.get("errors") or []),
        )

    def lookup_following(
        self, id: str, follow_opts: UserFollowOptions | None = None
    ) -> UserFollowLookup:
        """Return the users that a user follows."""
        return self._follow(USER_FOLLOWING_LOOKUP_ENDPOINT, id, follow_opts)

    def lookup_followers(
        self, id: str, follow_opts: UserFollowOptions | None = None
    ) -> UserFollowLookup:
        """Return the followers of a user."""
        return self._follow(USER_FOLLOWERS_LOOKUP_ENDPOINT, id, follow_opts)

    def _timeline(
        self, endpoint: str, id: str, tweet_opts: UserTimelineOpts | None
    ) -> UserTimeline:
        tweet_opts = tweet_opts or UserTimelineOpts()
        if not id:
            raise ValueError("user id must be present for timeline tweets")
        if tweet_opts.max_results < 0 or tweet_opts.max_results > 100:
            raise ValueError(
                "user max results for timeline tweets must be between 1-1000: "
                f"{tweet_opts.max_results}"
            )
        url = f"{self.host}/{endpoint}".replace(USER_ID, id)
        body = _decode_object(self._get(url, tweet_opts.query()), "user tweet timeline response")
        return UserTimeline.from_dict(body)

    def tweets(self, id: str, tweet_opts: UserTimelineOpts | None = None) -> UserTimeline:
        """Return the tweet timeline of a user."""
        return self._timeline(USER_TIMELINE_TWEETS_ENDPOINT, id, tweet_opts)

    def mentions(self, id: str, tweet_opts: UserTimelineOpts | None = None) -> UserTimeline:
        """Return the mention timeline of a user."""
        return self._timeline(USER_TIMELINE_MENTIONS_ENDPOINT, id, tweet_opts)