"""User account objects and the user fields that can be requested."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping


class UserField(str, Enum):
    """Twitter user account metadata fields."""

    CREATED_AT = "created_at"
    DESCRIPTION = "description"
    ENTITIES = "entities"
    ID = "id"
    LOCATION = "location"
    NAME = "name"
    PINNED_TWEET_ID = "pinned_tweet_id"
    PROFILE_IMAGE_URL = "profile_image_url"
    PROTECTED = "protected"
    PUBLIC_METRICS = "public_metrics"
    URL = "url"
    USER_NAME = "username"
    VERIFIED = "verified"
    WITHHELD = "withheld"

    def __str__(self) -> str:
        return self.value


def user_field_strings(fields: Iterable[UserField | str]) -> list[str]:
    """Return the wire names of the given user fields."""
    return [UserField(f).value for f in fields]


@dataclass
class UserMetricsObj:
    """Activity counts for a user."""

    followers: int = 0
    following: int = 0
    tweets: int = 0
    listed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserMetricsObj":
        data = data or {}
        return cls(
            followers=int(data.get("followers_count") or 0),
            following=int(data.get("following_count") or 0),
            tweets=int(data.get("tweet_count") or 0),
            listed=int(data.get("listed_count") or 0),
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "followers_count": self.followers,
            "following_count": self.following,
            "tweet_count": self.tweets,
            "listed_count": self.listed,
        }


@dataclass
class UserObj:
    """Metadata describing a Twitter user account."""

    id: str = ""
    name: str = ""
    user_name: str = ""
    created_at: str = ""
    description: str = ""
    entities: dict[str, Any] = field(default_factory=dict)
    location: str = ""
    pinned_tweet_id: str = ""
    profile_image_url: str = ""
    protected: bool = False
    public_metrics: UserMetricsObj = field(default_factory=UserMetricsObj)
    url: str = ""
    verified: bool = False
    withheld: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "UserObj":
        data = data or {}
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            user_name=data.get("username") or "",
            created_at=data.get("created_at") or "",
            description=data.get("description") or "",
            entities=dict(data.get("entities") or {}),
            location=data.get("location") or "",
            pinned_tweet_id=data.get("pinned_tweet_id") or "",
            profile_image_url=data.get("profile_image_url") or "",
            protected=bool(data.get("protected", False)),
            public_metrics=UserMetricsObj.from_dict(data.get("public_metrics")),
            url=data.get("url") or "",
            verified=bool(data.get("verified", False)),
            withheld=dict(data.get("withheld") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "username": self.user_name,
            "created_at": self.created_at,
            "description": self.description,
            "entities": dict(self.entities),
            "location": self.location,
            "pinned_tweet_id": self.pinned_tweet_id,
            "profile_image_url": self.profile_image_url,
            "protected": self.protected,
            "public_metrics": self.public_metrics.to_dict(),
            "url": self.url,
            "verified": self.verified,
            "withheld": dict(self.withheld),
        }