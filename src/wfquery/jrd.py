"""
JSON Resource Descriptor (JRD), as returned by a WebFinger server.
See RFC 6415 and RFC 7033, section 4.4.
"""

from dataclasses import dataclass, field
from typing import Any

import msgspec

from wfquery.errors import ParseError


@dataclass(frozen=True)
class Link:
    """
    A link in a JRD.
    """
    rel: str                                           # the relation type
    href: str | None = None                            # the target URI
    type: str | None = None                            # media type of the target resource
    titles: dict[str, str | None] | None = None        # language tag or "und" -> title
    properties: dict[str, str | None] | None = None    # property URI -> value or null


@dataclass(frozen=True)
class Jrd:
    """
    The JRD that the server claims to have returned. No attempt is made to validate it:
    members of the wrong shape are treated as if they were not there. The JSON value
    as decoded is kept, so it can be emitted again unchanged.
    """
    subject: str
    aliases: list[str] | None = None
    properties: dict[str, str | None] | None = None
    links: list[Link] | None = None
    raw: Any = field(default=None, compare=False, repr=False)


    def as_json_string(self) -> str:
        """
        The JRD as compact JSON, the way the server sent it.
        """
        return msgspec.json.encode(self.raw).decode('utf-8')


    @staticmethod
    def parse(payload: bytes | str, charset: str | None = None) -> 'Jrd':
        """
        Decode a WebFinger response body. Raises ParseError only if it is not JSON at all.
        """
        if isinstance(payload, bytes):
            payload = _decode_text(payload, charset)
        try:
            data = msgspec.json.decode(payload)
        except msgspec.DecodeError as e:
            raise ParseError(str(e)) from e
        return Jrd.from_json(data)


    @staticmethod
    def from_json(data: Any) -> 'Jrd':
        if not isinstance(data, dict):
            return Jrd('', raw=data)

        links = None
        if isinstance(data.get('links'), list):
            links = [ _link_from_json(link) for link in data['links'] if isinstance(link, dict) ]

        return Jrd(
            _str_or(data.get('subject'), ''),
            _str_list_or_none(data.get('aliases')),
            _str_dict_or_none(data.get('properties')),
            links,
            raw=data
        )


def _link_from_json(data: dict[str, Any]) -> Link:
    return Link(
        _str_or(data.get('rel'), ''),
        _str_or(data.get('href'), None),
        _str_or(data.get('type'), None),
        _str_dict_or_none(data.get('titles')),
        _str_dict_or_none(data.get('properties'))
    )


def _str_or(value: Any, default: str | None) -> str | None:
    return value if isinstance(value, str) else default


def _str_list_or_none(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [ v for v in value if isinstance(v, str) ]


def _str_dict_or_none(value: Any) -> dict[str, str | None] | None:
    if not isinstance(value, dict):
        return None
    return { k: v for k, v in value.items() if v is None or isinstance(v, str) }


def _decode_text(payload: bytes, charset: str | None) -> str:
    # Unknown charsets are read as UTF-8, and undecodable bytes become U+FFFD
    try:
        return payload.decode(charset or 'utf-8', errors='replace')
    except LookupError:
        return payload.decode('utf-8', errors='replace')
