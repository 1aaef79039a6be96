"""
Turn what the user typed on the command line into the account and the host to ask.
"""

from typing import NamedTuple

from wfquery.errors import MissingHostError, UsageError


class ResolvedAccount(NamedTuple):
    """
    The account to look up, as user@host, and the host whose WebFinger endpoint to query.
    """
    account: str
    hostname: str


def resolve_account(account: str | None, hostname: str | None = None) -> ResolvedAccount:
    """
    Normalize the positional account argument and the optional --hostname flag.

    A single leading '@' is removed. The host part of the account is whatever follows
    its last '@', as the local part may itself contain '@'. If the account has no host
    part, hostname is appended to it. If hostname is given, it is always the host
    that gets queried, even if the account names a different one.
    """
    if not account:
        raise UsageError()

    if account[0] == '@':
        account = account[1:]

    at = account.rfind('@')
    if at < 0:
        if not hostname:
            raise MissingHostError(account)
        account = f'{ account }@{ hostname }'

    elif not hostname:
        hostname = account[at+1:]
        if not hostname:
            raise MissingHostError(account)

    return ResolvedAccount(account, hostname)
