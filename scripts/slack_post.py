#!/usr/bin/env python3
"""Post a single message to a Slack channel by name."""

import argparse
import functools
import sys
from collections.abc import Callable, Mapping
from typing import NamedTuple

from dotenv import find_dotenv, load_dotenv

from slack_client import SlackClient, SlackError
from slack_token import CredentialError, resolve_token

print = functools.partial(print, flush=True)


class Options(NamedTuple):
    channel: str = ""
    message: str = ""


def parse_args(argv: list[str] | None = None) -> Options:
    parser = argparse.ArgumentParser(description="Post a message to a Slack channel")
    parser.add_argument("--channel", default="", help="Name of the channel to send the message to without a '#'")
    parser.add_argument("--message", default="", help="Message to be sent to the Slack channel")
    args = parser.parse_args(argv)
    return Options(channel=args.channel, message=args.message)


def fail(msg: str) -> int:
    print(msg, file=sys.stderr)
    return 1


def run(
    options: Options,
    env: Mapping[str, str] | None = None,
    client_factory: Callable[[str], SlackClient] | None = None,
) -> int:
    """Resolve the token, look up the channel and post. Returns the exit code."""
    if client_factory is None:
        client_factory = SlackClient

    try:
        token = resolve_token(env)
    except CredentialError as e:
        return fail(f"Error looking up token: {e}")

    client = client_factory(token.strip())
    if not options.channel:
        return fail("No channel provided. Please re-run and supply a channel name")
    try:
        channel = client.find_channel_by_name(options.channel)
    except SlackError as e:
        return fail(f"Error finding channel: {e}")

    if not options.message:
        return fail("No message provided. Please re-run and supply a message to post")
    try:
        client.post_message(channel.id, options.message)
    except SlackError:
        return fail("Error sending message to channel")

    print("Success")
    return 0


def main(argv: list[str] | None = None):
    load_dotenv(find_dotenv(usecwd=True))
    options = parse_args(argv)
    sys.exit(run(options))


if __name__ == "__main__":
    main()
