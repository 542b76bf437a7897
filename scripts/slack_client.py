"""Slack Web API wrapper: find a channel by name, post a message."""

from typing import NamedTuple

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError as SdkApiError
from slack_sdk.errors import SlackClientError

DEFAULT_TIMEOUT = 10
PAGE_LIMIT = 200


class SlackError(Exception):
    pass


class SlackApiError(SlackError):
    def __init__(self, method: str, error: str):
        super().__init__(f"{method}: {error}")
        self.method = method
        self.error = error


class ChannelNotFound(SlackError):
    def __init__(self, name: str):
        super().__init__(f"No such channel name: {name}")
        self.name = name


class Channel(NamedTuple):
    id: str
    name: str


def _wrap(method: str, e: Exception) -> SlackApiError:
    if isinstance(e, SdkApiError) and e.response is not None:
        return SlackApiError(method, e.response.get("error", "unknown_error"))
    return SlackApiError(method, str(e))


class SlackClient:
    def __init__(self, token: str, timeout: int = DEFAULT_TIMEOUT):
        self.web = WebClient(token=token, timeout=timeout)

    def find_channel_by_name(self, name: str) -> Channel:
        """Page through conversations.list until a channel called `name` turns up."""
        cursor = None
        while True:
            params = {
                "types": "public_channel,private_channel",
                "exclude_archived": True,
                "limit": PAGE_LIMIT,
            }
            if cursor:
                params["cursor"] = cursor
            try:
                resp = self.web.conversations_list(**params)
            except (SlackClientError, OSError) as e:
                raise _wrap("conversations.list", e) from e

            for ch in resp.get("channels") or []:
                if ch.get("name") == name:
                    return Channel(ch["id"], ch["name"])
            cursor = (resp.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                raise ChannelNotFound(name)

    def post_message(self, channel_id: str, text: str):
        try:
            return self.web.chat_postMessage(channel=channel_id, text=text)
        except (SlackClientError, OSError) as e:
            raise _wrap("chat.postMessage", e) from e
