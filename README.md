# twitterusers

A small client for the user endpoints of the Twitter v2 API, with a command
line tool on top. It covers:

- looking up users by id or by username (one, or up to 100 at once),
- listing the accounts a user follows and the accounts following a user,
- reading a user's tweet timeline and mention timeline.

## Installation

```
pip install twitterusers
```

The only runtime dependency is `requests`.

## Library use

The entry point is the `User` dataclass in `twitterusers.user`. It holds:

- `authorizer` – an `Authorizer` whose `add(request)` decorates each outgoing
  `requests.Request`; the bundled `BearerAuthorizer(token=...)` sets an
  `Authorization: Bearer <token>` header;
- `client` – a `requests.Session` (a new one by default);
- `host` – the API host, `https://api.twitter.com` by default.

```python
from twitterusers.user import BearerAuthorizer, User
from twitterusers.user_obj import UserField
from twitterusers.user_params import UserFieldOptions

api = User(authorizer=BearerAuthorizer(token="token"))
found = api.lookup(["2244994945"], UserFieldOptions(user_fields=[UserField.DESCRIPTION]))
for user_id, entry in found.items():
    print(user_id, entry.user.user_name, entry.tweet)
```

Its methods send `GET` requests with `Accept: application/json`:

| Method | Endpoint | Returns |
| --- | --- | --- |
| `lookup(ids, field_opts)` | `2/users/{id}` for one id, `2/users?ids=...` for several | `dict[str, UserLookup]` |
| `lookup_username(usernames, field_opts)` | `2/users/by/username/{name}` for one, `2/users/by?usernames=...` for several | `dict[str, UserLookup]` |
| `lookup_following(id, follow_opts)` | `2/users/{id}/following` | `UserFollowLookup` |
| `lookup_followers(id, follow_opts)` | `2/users/{id}/followers` | `UserFollowLookup` |
| `tweets(id, tweet_opts)` | `2/users/{id}/tweets` | `UserTimeline` |
| `mentions(id, tweet_opts)` | `2/users/{id}/mentions` | `UserTimeline` |

The options argument may be left out or passed as `None`.

### Results

- `UserLookup` pairs a `UserObj` (`user`) with its pinned tweet (`tweet`), a
  plain dict or `None`. Lookup results are keyed by user id; for a multi-user
  lookup the pinned tweet is matched on `pinned_tweet_id`, for a single user
  it is the first included tweet.
- `UserFollowLookup` holds `lookups`, `meta` (a `UserFollowMeta` with
  `result_count`, `previous_token`, `next_token`, or `None`) and `errors`.
- `UserTimeline` holds `tweets`, `includes` (a `UserTimelineIncludes` with
  `medias`, `users`, `tweets`, `places`, `polls`, or `None`), `errors` and
  `meta` (a `UserTimelineMeta` with `oldest_id`, `newest_id`, `result_count`,
  `next_token`, `previous_token`).

`UserObj` and `UserMetricsObj` in `twitterusers.user_obj` have `from_dict()`
and `to_dict()`, using the API's JSON field names. The result classes have
`to_dict()` for JSON output.

### Query options

The option dataclasses in `twitterusers.user_params` each have a `query()`
method returning the query parameters they add; empty values are left out.

- `UserFieldOptions` – `expansions`, `tweet_fields`, `user_fields`;
- `UserFollowOptions` – the same plus `max_results` and `pagination_token`;
- `UserTimelineOpts` – `excludes`, `expansions`, `media_fields`,
  `place_fields`, `poll_fields`, `tweet_fields`, `user_fields`, `since_id`,
  `until_id`, `pagination_token`, `max_results`, and `start_time` /
  `end_time` as `datetime` values, sent in RFC 3339 form (naive times are
  taken as UTC; UTC times end in `Z`).

User fields are named by the `UserField` enum; `user_field_strings()` turns a
list of them into their wire names. Other field lists take plain strings or
enum members and are joined with commas.

### Errors

- Invalid arguments raise `ValueError` before any request is sent: no ids or
  names, more than 100 of them, an empty user id, `max_results` outside
  0–1000 for the follow lookups or outside 0–100 for the timelines.
- A non-200 response raises `TweetErrorResponse` (`title`, `detail`, `type`,
  `errors`, `status_code`) when its body is a JSON object, and `HTTPError`
  (`status`, `status_code`, `url`) otherwise.
- A 200 response whose body cannot be decoded raises `ValueError`.

## Command line

The `twitterusers` command calls one endpoint per sub-command and prints a
banner line followed by the result as indented JSON. The global options
`--token` (bearer token) and `--host` (default `https://api.twitter.com`) come
before the sub-command.

| Sub-command | Flag | Output |
| --- | --- | --- |
| `user-lookup` | `--ids` (comma separated) | users keyed by id |
| `username-lookup` | `--names` (comma separated) | users keyed by id |
| `user-followers-lookup` | `--id` | users, then meta |
| `user-following-lookup` | `--id` | users, then meta |
| `user-tweet-timeline` | `--user_id` | timeline, then meta |
| `user-mention-timeline` | `--user_id` | timeline, then meta |

The lookups request the `pinned_tweet_id` expansion; the follow lookups also
request `context_annotations`; the timelines request five tweets with
creation time, author, conversation, public metrics and context annotations,
expanded with author user names.

```
twitterusers --token token user-lookup --ids 2244994945,6253282
twitterusers --help
```

On failure the error is printed to standard error and the command exits
with status 1.

## What this package does not do

It covers the user endpoints only. It does not post, delete or look up
tweets, manage lists, blocks, mutes, follows or retweets, or read the
streaming endpoints. Tweets, media, places and error entries are returned as
plain dicts rather than typed objects, and there is no automatic paging:
pass the returned `next_token` back as `pagination_token` yourself.

## Running the tests

```
pip install "twitterusers[test]"
pytest
```