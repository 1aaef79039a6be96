"""
The HTTP exchange underneath a WebFinger query, and the clients that can perform it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx
from multidict import MultiDict

from wfquery.errors import TransportError
from wfquery.reporting import trace
from wfquery.utils import WFQUERY_VERSION

_HEADERS = {
    "User-Agent": f"webfinger-query/{ WFQUERY_VERSION }",
    "Accept": "application/jrd+json, application/json"
}


@dataclass
class HttpRequest:
    """
    Captures an HTTP request.
    """
    uri: str
    method: str = 'GET'
    headers: dict[str,str] = field(default_factory=lambda: dict(_HEADERS))


@dataclass
class HttpResponse:
    """
    Captures the response of an HTTP request.
    """
    http_status : int
    reason : str = ''
    response_headers: MultiDict = field(default_factory=MultiDict) # keys are lowercased
    payload : bytes | None = None


    def content_type(self) -> str | None:
        return self.response_headers.get('content-type')


    def payload_charset(self) -> str | None:
        content_type = self.content_type()
        tag = 'charset='
        if content_type and content_type.find(tag) >= 0:
            return content_type[ content_type.find(tag)+len(tag) : ].split(';')[0].strip().strip('"')
        return None


    def is_success(self) -> bool:
        return 200 <= self.http_status < 300


@dataclass
class HttpRequestResponsePair:
    request: HttpRequest
    response: HttpResponse


class WebClient(ABC):
    """
    Something that can perform an HTTP request. Swap in a different one to talk to
    something other than the network.
    """
    @abstractmethod
    def http(self, request: HttpRequest) -> HttpRequestResponsePair:
        """
        Perform the request and return it together with the response. Any HTTP status
        is a response; only failing to obtain one at all raises.
        """
        ...


    def http_get(self, uri: str) -> HttpRequestResponsePair:
        """
        Convenience function for performing an HTTP GET request.
        """
        return self.http(HttpRequest(uri))


class HttpxWebClient(WebClient):
    """
    Performs HTTP requests over the network with httpx. Follows redirects and verifies
    TLS certificates, with httpx's default timeouts.
    """
    def __init__(self, transport: httpx.BaseTransport | None = None):
        self._transport = transport


    # Python 3.12 @override
    def http(self, request: HttpRequest) -> HttpRequestResponsePair:
        trace( f'Performing HTTP { request.method } on { request.uri }')

        try:
            with httpx.Client(follow_redirects=True, transport=self._transport) as httpx_client:
                httpx_request = httpx.Request(request.method, request.uri, headers=request.headers)
                httpx_response = httpx_client.send(httpx_request)
                payload = httpx_response.read()

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(request.uri, None, str(e) or type(e).__name__) from e

        response_headers : MultiDict = MultiDict()
        for key, value in httpx_response.headers.items():
            response_headers.add(key.lower(), value)

        ret = HttpRequestResponsePair(
            request,
            HttpResponse(httpx_response.status_code, httpx_response.reason_phrase, response_headers, payload)
        )
        trace( f'HTTP query returns { ret.response.http_status } { ret.response.reason }')
        return ret
