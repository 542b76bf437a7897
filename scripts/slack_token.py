"""Slack token lookup: SLACK_TOKEN, falling back to ~/.slack_token."""

import os
from collections.abc import Mapping

TOKEN_ENV_VAR = "SLACK_TOKEN"
TOKEN_FILENAME = ".slack_token"

# Slack tokens are ~51 characters; leave headroom for longer formats.
MAX_TOKEN_BYTES = 100


class CredentialError(Exception):
    default_message = "could not resolve Slack token"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NoHomeDirectory(CredentialError):
    default_message = "could not lookup home directory by environment variable"


class TokenFileMissing(CredentialError):
    default_message = f"could not find {TOKEN_FILENAME} file"


class TokenFileUnreadable(CredentialError):
    default_message = f"issue opening {TOKEN_FILENAME} file in known location"


class EmptyOrUnreadableToken(CredentialError):
    default_message = f"issue reading from {TOKEN_FILENAME} file"


def token_path(home: str) -> str:
    return os.path.join(home, TOKEN_FILENAME)


def read_token_file(path: str) -> str:
    """Return what a single read of at most MAX_TOKEN_BYTES yields from path.

    Whitespace is left alone; callers strip it.
    """
    try:
        f = open(path, "rb")
    except FileNotFoundError:
        raise TokenFileMissing() from None
    except OSError as e:
        raise TokenFileUnreadable() from e

    with f:
        try:
            data = f.read(MAX_TOKEN_BYTES)
        except OSError as e:
            raise EmptyOrUnreadableToken() from e

    if not data:
        raise EmptyOrUnreadableToken()
    return data.decode("utf-8", errors="replace")


def resolve_token(env: Mapping[str, str] | None = None) -> str:
    """Return the Slack token.

    SLACK_TOKEN wins and is returned verbatim. Otherwise HOME must be set and
    $HOME/.slack_token is read once.
    """
    if env is None:
        env = os.environ

    token = env.get(TOKEN_ENV_VAR)
    if token:
        return token

    home = env.get("HOME")
    if not home:
        raise NoHomeDirectory()

    return read_token_file(token_path(home))
