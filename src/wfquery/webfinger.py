"""
Performing the WebFinger query.
"""

from urllib.parse import quote

from wfquery.errors import TransportError
from wfquery.jrd import Jrd
from wfquery.reporting import info, trace
from wfquery.web import WebClient

WELL_KNOWN_PATH = '/.well-known/webfinger'


def construct_webfinger_uri_for(account: str, hostname: str, rels: list[str] | None = None) -> str:
    """
    Construct the URI to GET in order to look up account at hostname, optionally
    asking the server to restrict the returned links to rels.
    """
    uri = f"https://{ hostname }{ WELL_KNOWN_PATH }?resource={ quote('acct:' + account, safe='') }"
    if rels:
        for rel in rels:
            uri += f"&rel={ quote(rel, safe='') }"
    return uri


class WebFingerClient:
    """
    Looks up accounts using a WebClient to perform the HTTP request.
    """
    def __init__(self, web_client: WebClient):
        self._web_client = web_client


    def query(self, account: str, hostname: str, rels: list[str] | None = None) -> Jrd | None:
        """
        Look up account (user@host) at hostname.
        return: the JRD, or None if the server does not know the account (HTTP 404)
        raise TransportError: if the server responded with any other unsuccessful status
        raise ParseError: if the server's response was not JSON
        """
        uri = construct_webfinger_uri_for(account, hostname, rels)
        info('Querying', uri)

        pair = self._web_client.http_get(uri)
        response = pair.response

        if response.http_status == 404:
            trace('Not found:', account)
            return None

        if not response.is_success():
            raise TransportError(uri, response.http_status, response.reason)

        return Jrd.parse(response.payload or b'', response.payload_charset())
