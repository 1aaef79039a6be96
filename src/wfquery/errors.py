"""
Errors reported to the user. Each one ends the invocation with exit code 1.
"""


class WebFingerQueryError(RuntimeError):
    """
    Base class of all errors raised while resolving, fetching or decoding.
    """


class UsageError(WebFingerQueryError):
    """
    Raised when no account was given on the command line.
    """
    def __init__(self, msg: str = 'Usage: webfinger <acct>'):
        super().__init__(msg)


class MissingHostError(WebFingerQueryError):
    """
    Raised when neither the account nor --hostname determine the WebFinger host.
    """
    def __init__(self, account: str):
        super().__init__('Missing host in account')
        self.account = account


class TransportError(WebFingerQueryError):
    """
    Raised when the WebFinger server answered with an unsuccessful HTTP status other
    than 404, or could not be reached at all. In the latter case, http_status is None.
    """
    def __init__(self, uri: str, http_status: int | None, reason: str | None = None):
        super().__init__(uri, http_status, reason)
        self.uri = uri
        self.http_status = http_status
        self.reason = reason


    def __str__(self):
        if self.http_status is None:
            return f'Request failed: { self.uri }: { self.reason }'
        return f'Request failed with status: { self.http_status } { self.reason or "" }'.rstrip()


class ParseError(WebFingerQueryError):
    """
    Raised when the body of a successful WebFinger response is not valid JSON.
    """
    def __init__(self, msg: str):
        super().__init__(f'Invalid JSON in WebFinger response: { msg }')
