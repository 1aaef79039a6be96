"""
Render a JRD as text for humans.
"""

import locale

from wfquery.jrd import Jrd


def format_jrd(jrd: Jrd) -> str:
    """
    Format the JRD as a YAML-like block of text. Aliases and links are kept in the order
    the server returned them; properties and titles are sorted by name.
    """
    ret = f'subject: { jrd.subject }\n'

    if jrd.aliases:
        ret += '\naliases:\n'
        for alias in jrd.aliases:
            ret += f'- { alias }\n'

    if jrd.properties:
        ret += '\nproperties:\n'
        ret += format_sorted_entries(jrd.properties)

    if jrd.links:
        ret += '\nlinks:\n'
        for link in jrd.links:
            ret += f'- rel: { link.rel }\n'
            if link.href:
                ret += f'  href: { link.href }\n'
            if link.type:
                ret += f'  type: { link.type }\n'
            if link.titles is not None:
                ret += '  titles:\n'
                ret += format_sorted_entries(link.titles, 1)
            # Unlike the top-level properties, shown even if empty
            if link.properties is not None:
                ret += '  properties:\n'
                ret += format_sorted_entries(link.properties, 1)

    return ret


def format_sorted_entries(entries: dict[str, str | None], level: int = 0) -> str:
    """
    One "- name: value" line per entry, sorted by name using the collation of the
    current locale, and indented by two spaces per level.
    """
    indent = '  ' * level
    ret = ''
    for key in sorted(entries, key=_collation_key):
        value = entries[key]
        ret += f'{ indent }- { key }: { "null" if value is None else value }\n'
    return ret


def _collation_key(key: str) -> tuple[str, str]:
    # strxfrm cannot handle NUL, which JSON strings may contain
    return (locale.strxfrm(key.replace('\0', '')), key)
