"""
Utility functions
"""

import importlib.metadata


def _version(default_version="0.0.0"):
    try:
        return importlib.metadata.version("webfinger-query")
    except importlib.metadata.PackageNotFoundError:
        return default_version

WFQUERY_VERSION = _version()
