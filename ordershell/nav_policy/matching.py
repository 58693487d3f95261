"""Shared hostname matching helpers."""

from __future__ import annotations

import urllib.parse
from typing import Iterable


def host_of(url: str) -> str:
    """Return the lower-cased hostname of ``url``, or ``""`` when it has none."""
    try:
        parsed = urllib.parse.urlsplit(str(url or "").strip())
        return (parsed.hostname or "").lower()
    except ValueError:
        return ""


def matches_suffix(host: str, needle: str) -> bool:
    """Loose partner-domain match: equality or plain substring containment.

    This is not a strict suffix test. ``pay.kuriersoft.ch`` matches
    ``kuriersoft.ch`` but so does ``kuriersoft.ch.evil.com``.
    """
    host_norm = str(host or "").strip().lower()
    needle_norm = str(needle or "").strip().lower()
    if not host_norm or not needle_norm:
        return False
    if host_norm == needle_norm:
        return True
    return needle_norm in host_norm


def matches_any(host: str, needles: Iterable[str]) -> bool:
    return any(matches_suffix(host, needle) for needle in needles or ())


def host_in_allow_list(host: str, allow_list: Iterable[str]) -> bool:
    host_norm = str(host or "").strip().lower()
    if not host_norm:
        return False
    return host_norm in {str(entry).strip().lower() for entry in allow_list or ()}
