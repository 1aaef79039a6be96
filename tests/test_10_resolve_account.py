"""
Test turning command-line input into the account and host to query.
"""

import pytest

from wfquery.account import ResolvedAccount, resolve_account
from wfquery.errors import MissingHostError, UsageError


def test_full_account():
    assert resolve_account('alice@example.com') == ResolvedAccount('alice@example.com', 'example.com')


def test_leading_at_stripped():
    assert resolve_account('@alice@example.com') == resolve_account('alice@example.com')


def test_leading_at_stripped_only_once():
    account, hostname = resolve_account('@@alice@example.com')
    assert account == '@alice@example.com'
    assert hostname == 'example.com'


@pytest.mark.parametrize('user', ['bob', 'b.o.b', 'bob_1'])
def test_bare_user_with_hostname(user: str):
    assert resolve_account(user, 'example.org') == (f'{ user }@example.org', 'example.org')


@pytest.mark.parametrize('user', ['bob', '@bob', 'example.com'])
def test_bare_user_without_hostname(user: str):
    with pytest.raises(MissingHostError, match='Missing host in account'):
        resolve_account(user)


def test_host_is_after_last_at():
    account, hostname = resolve_account('first@second@example.net')
    assert account == 'first@second@example.net'
    assert hostname == 'example.net'


def test_hostname_flag_wins_over_account_suffix():
    account, hostname = resolve_account('alice@example.com', 'other.example')
    assert account == 'alice@example.com'
    assert hostname == 'other.example'


def test_empty_host_part():
    with pytest.raises(MissingHostError):
        resolve_account('alice@')


@pytest.mark.parametrize('account', [None, ''])
def test_no_account(account):
    with pytest.raises(UsageError) as e:
        resolve_account(account, 'example.com')
    assert str(e.value) == 'Usage: webfinger <acct>'
