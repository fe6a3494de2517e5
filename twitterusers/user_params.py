"""Query options for the user endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Sequence

from twitterusers.user_obj import UserField, user_field_strings


def _join(values: Sequence[Any]) -> str:
    return ",".join(v.value if isinstance(v, Enum) else str(v) for v in values)


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.replace(microsecond=0)
    if moment.utcoffset() == timedelta(0):
        return moment.strftime("%Y-%m-%dT%H:%M:%SZ")
    return moment.isoformat()


@dataclass
class UserFieldOptions:
    """Field options for user lookups."""

    expansions: Sequence[Any] = field(default_factory=list)
    tweet_fields: Sequence[Any] = field(default_factory=list)
    user_fields: Sequence[UserField | str] = field(default_factory=list)

    def query(self) -> dict[str, str]:
        """Return the query parameters these options add."""
        params: dict[str, str] = {}
        if self.expansions:
            params["expansions"] = _join(self.expansions)
        if self.tweet_fields:
            params["tweet.fields"] = _join(self.tweet_fields)
        if self.user_fields:
            params["user.fields"] = ",".join(user_field_strings(self.user_fields))
        return params


@dataclass
class UserFollowOptions:
    """Options for the following and followers lookups."""

    expansions: Sequence[Any] = field(default_factory=list)
    tweet_fields: Sequence[Any] = field(default_factory=list)
    user_fields: Sequence[UserField | str] = field(default_factory=list)
    max_results: int = 0
    pagination_token: str = ""

    def query(self) -> dict[str, str]:
        """Return the query parameters these options add."""
        params: dict[str, str] = {}
        if self.expansions:
            params["expansions"] = _join(self.expansions)
        if self.tweet_fields:
            params["tweet.fields"] = _join(self.tweet_fields)
        if self.user_fields:
            params["user.fields"] = ",".join(user_field_strings(self.user_fields))
        if self.max_results > 0:
            params["max_results"] = str(self.max_results)
        if self.pagination_token:
            params["pagination_token"] = self.pagination_token
        return params


@dataclass
class UserTimelineOpts:
    """Options for the user tweet and mention timelines."""

    excludes: Sequence[Any] = field(default_factory=list)
    expansions: Sequence[Any] = field(default_factory=list)
    media_fields: Sequence[Any] = field(default_factory=list)
    place_fields: Sequence[Any] = field(default_factory=list)
    poll_fields: Sequence[Any] = field(default_factory=list)
    tweet_fields: Sequence[Any] = field(default_factory=list)
    user_fields: Sequence[UserField | str] = field(default_factory=list)
    since_id: str = ""
    until_id: str = ""
    pagination_token: str = ""
    max_results: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None

    def query(self) -> dict[str, str]:
        """Return the query parameters these options add."""
        params: dict[str, str] = {}
        if self.excludes:
            params["exclude"] = _join(self.excludes)
        if self.tweet_fields:
            params["tweet.fields"] = _join(self.tweet_fields)
        if self.user_fields:
            params["user.fields"] = ",".join(user_field_strings(self.user_fields))
        if self.media_fields:
            params["media.fields"] = _join(self.media_fields)
        if self.place_fields:
            params["place.fields"] = _join(self.place_fields)
        if self.poll_fields:
            params["poll.fields"] = _join(self.poll_fields)
        if self.expansions:
            params["expansions"] = _join(self.expansions)
        if self.since_id:
            params["since_id"] = self.since_id
        if self.until_id:
            params["until_id"] = self.until_id
        if self.max_results > 0:
            params["max_results"] = str(self.max_results)
        if self.pagination_token:
            params["pagination_token"] = self.pagination_token
        if self.end_time is not None:
            params["end_time"] = _rfc3339(self.end_time)
        if self.start_time is not None:
            params["start_time"] = _rfc3339(self.start_time)
        return params