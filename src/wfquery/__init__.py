"""
Command-line WebFinger client.
"""

from wfquery.account import ResolvedAccount, resolve_account
from wfquery.errors import MissingHostError, ParseError, TransportError, UsageError, WebFingerQueryError
from wfquery.formatting import format_jrd, format_sorted_entries
from wfquery.jrd import Jrd, Link
from wfquery.web import HttpRequest, HttpRequestResponsePair, HttpResponse, HttpxWebClient, WebClient
from wfquery.webfinger import WebFingerClient, construct_webfinger_uri_for

__all__ = [
    "ResolvedAccount",
    "resolve_account",
    "WebFingerQueryError",
    "UsageError",
    "MissingHostError",
    "TransportError",
    "ParseError",
    "Jrd",
    "Link",
    "format_jrd",
    "format_sorted_entries",
    "HttpRequest",
    "HttpResponse",
    "HttpRequestResponsePair",
    "WebClient",
    "HttpxWebClient",
    "WebFingerClient",
    "construct_webfinger_uri_for",
]
