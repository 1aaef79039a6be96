"""
Fixtures that stand in for the network.
"""

import json

import pytest
from multidict import MultiDict

from wfquery.web import HttpRequest, HttpRequestResponsePair, HttpResponse, WebClient


class CannedWebClient(WebClient):
    """
    Answers every request with the same response, and remembers what was asked.
    """
    def __init__(self, response: HttpResponse):
        self.response = response
        self.requests : list[HttpRequest] = []


    def http(self, request: HttpRequest) -> HttpRequestResponsePair:
        self.requests.append(request)
        return HttpRequestResponsePair(request, self.response)


def jrd_response(body, http_status: int = 200, reason: str = 'OK') -> HttpResponse:
    payload = body if isinstance(body, bytes) else json.dumps(body).encode('utf-8')
    headers = MultiDict({ 'content-type': 'application/jrd+json' })
    return HttpResponse(http_status, reason, headers, payload)


@pytest.fixture
def canned():
    """
    Factory for a CannedWebClient answering with the given body and status.
    """
    def make(body=b'', http_status: int = 200, reason: str = 'OK') -> CannedWebClient:
        return CannedWebClient(jrd_response(body, http_status, reason))
    return make
