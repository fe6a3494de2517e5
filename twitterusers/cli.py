"""Command line access to the user lookup, follow and timeline endpoints."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Sequence

import requests

from twitterusers.user import (
    BearerAuthorizer,
    HTTPError,
    TweetErrorResponse,
    User,
    UserLookup,
)
from twitterusers.user_obj import UserField
from twitterusers.user_params import UserFieldOptions, UserFollowOptions, UserTimelineOpts

DEFAULT_HOST = "https://api.twitter.com"

_Handler = Callable[[User, argparse.Namespace], list[Any]]


def _lookups_dict(lookups: dict[str, UserLookup]) -> dict[str, Any]:
    return {key: value.to_dict() for key, value in lookups.items()}


def _user_lookup(user: User, args: argparse.Namespace) -> list[Any]:
    opts = UserFieldOptions(expansions=["pinned_tweet_id"])
    return [_lookups_dict(user.lookup(args.ids.split(","), opts))]


def _username_lookup(user: User, args: argparse.Namespace) -> list[Any]:
    opts = UserFieldOptions(expansions=["pinned_tweet_id"])
    return [_lookups_dict(user.lookup_username(args.names.split(","), opts))]


def _follow_opts() -> UserFollowOptions:
    return UserFollowOptions(
        expansions=["pinned_tweet_id"],
        tweet_fields=["context_annotations"],
    )


def _followers(user: User, args: argparse.Namespace) -> list[Any]:
    result = user.lookup_followers(args.id, _follow_opts())
    meta = result.meta.to_dict() if result.meta is not None else None
    return [_lookups_dict(result.lookups), meta]


def _following(user: User, args: argparse.Namespace) -> list[Any]:
    result = user.lookup_following(args.id, _follow_opts())
    meta = result.meta.to_dict() if result.meta is not None else None
    return [_lookups_dict(result.lookups), meta]


def _timeline_opts() -> UserTimelineOpts:
    return UserTimelineOpts(
        tweet_fields=[
            "created_at",
            "author_id",
            "conversation_id",
            "public_metrics",
            "context_annotations",
        ],
        user_fields=[UserField.USER_NAME],
        expansions=["author_id"],
        max_results=5,
    )


def _timeline_output(timeline: Any) -> list[Any]:
    body = timeline.to_dict()
    meta = body.pop("meta")
    return [body, meta]


def _tweet_timeline(user: User, args: argparse.Namespace) -> list[Any]:
    return _timeline_output(user.tweets(args.user_id, _timeline_opts()))


def _mention_timeline(user: User, args: argparse.Namespace) -> list[Any]:
    return _timeline_output(user.mentions(args.user_id, _timeline_opts()))


def _add_command(
    subparsers: Any,
    name: str,
    help_text: str,
    handler: _Handler,
    banner: str,
    error_label: str,
    flag: str,
    dest: str,
    flag_help: str,
) -> None:
    sub = subparsers.add_parser(name, help=help_text)
    sub.add_argument(flag, dest=dest, default="", help=flag_help)
    sub.set_defaults(handler=handler, banner=banner, error_label=error_label)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per endpoint."""
    parser = argparse.ArgumentParser(
        prog="twitterusers", description="Query the Twitter v2 user endpoints."
    )
    parser.add_argument("--token", default="", help="twitter API token")
    parser.add_argument("--host", default=DEFAULT_HOST, help="API host")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_command(
        subparsers, "user-lookup", "look up users by id", _user_lookup,
        "Callout to user lookup callout", "user lookup error",
        "--ids", "ids", "user ids",
    )
    _add_command(
        subparsers, "username-lookup", "look up users by user name", _username_lookup,
        "Callout to user lookup callout", "user lookup error",
        "--names", "names", "user names",
    )
    _add_command(
        subparsers, "user-followers-lookup", "look up a user's followers", _followers,
        "Callout to user followers lookup callout", "user followers lookup error",
        "--id", "id", "user id",
    )
    _add_command(
        subparsers, "user-following-lookup", "look up whom a user follows", _following,
        "Callout to user following lookup callout", "user following lookup error",
        "--id", "id", "user id",
    )
    _add_command(
        subparsers, "user-tweet-timeline", "a user's tweet timeline", _tweet_timeline,
        "Callout to tweet user tweet timeline callout", "user tweet timeline error",
        "--user_id", "user_id", "user id",
    )
    _add_command(
        subparsers, "user-mention-timeline", "a user's mention timeline", _mention_timeline,
        "Callout to tweet user mention timeline callout", "user mention timeline error",
        "--user_id", "user_id", "user id",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool; return the process exit status."""
    args = build_parser().parse_args(argv)
    user = User(authorizer=BearerAuthorizer(token=args.token), host=args.host)

    print(args.banner)
    try:
        documents = args.handler(user, args)
    except (ValueError, HTTPError, TweetErrorResponse, requests.RequestException) as exc:
        print(f"{args.error_label}: {exc}", file=sys.stderr)
        return 1

    for document in documents:
        print(json.dumps(document, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())