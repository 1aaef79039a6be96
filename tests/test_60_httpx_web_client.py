"""
Test the httpx-backed WebClient, using httpx's mock transport instead of the network.
"""

import httpx
import pytest

from wfquery.errors import TransportError
from wfquery.web import HttpxWebClient


def test_get():
    seen : list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            headers={ 'Content-Type': 'application/jrd+json; charset=utf-8' },
            content=b'{"subject":"acct:alice@example.com"}'
        )

    pair = HttpxWebClient(transport=httpx.MockTransport(handler)).http_get(
            'https://example.com/.well-known/webfinger?resource=acct%3Aalice%40example.com')

    assert len(seen) == 1
    assert seen[0].method == 'GET'
    assert seen[0].url.params['resource'] == 'acct:alice@example.com'
    assert seen[0].headers['user-agent'].startswith('webfinger-query/')

    assert pair.response.http_status == 200
    assert pair.response.reason == 'OK'
    assert pair.response.content_type() == 'application/jrd+json; charset=utf-8'
    assert pair.response.payload_charset() == 'utf-8'
    assert pair.response.payload == b'{"subject":"acct:alice@example.com"}'


def test_error_status_is_a_response():
    client = HttpxWebClient(transport=httpx.MockTransport(lambda request: httpx.Response(500)))
    pair = client.http_get('https://example.com/.well-known/webfinger?resource=acct%3Aa%40example.com')

    assert pair.response.http_status == 500
    assert pair.response.reason == 'Internal Server Error'
    assert not pair.response.is_success()


def test_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == 'example.com':
            return httpx.Response(301, headers={ 'Location': 'https://social.example.com/.well-known/webfinger' })
        return httpx.Response(200, content=b'{}')

    pair = HttpxWebClient(transport=httpx.MockTransport(handler)).http_get('https://example.com/.well-known/webfinger')
    assert pair.response.http_status == 200


def test_connection_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError('Name or service not known', request=request)

    with pytest.raises(TransportError) as e:
        HttpxWebClient(transport=httpx.MockTransport(handler)).http_get('https://nowhere.example/.well-known/webfinger')

    assert e.value.http_status is None
    assert 'Name or service not known' in str(e.value)
