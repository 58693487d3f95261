"""Shared navigation policy semantics used by the shell and its tooling."""

from .classify import DEFAULT_RULES, PolicyVerdict, RuleSet, check_handoff_mode, classify, is_external_app
from .matching import host_in_allow_list, host_of, matches_any, matches_suffix
from .taxonomy import (
    ALLOW,
    EXTERNAL_APP_HOSTS,
    EXTERNAL_HANDOFF,
    HANDOFF_CONSERVATIVE,
    HANDOFF_MODES,
    HANDOFF_PERMISSIVE,
    ORIGIN_CONFIGURED,
    ORIGIN_DEFAULT,
    ORIGIN_EXTERNAL_APP,
    ORIGIN_PAYMENT,
    ORIGIN_PLATFORM,
    PAYMENT_HOSTS,
    PLATFORM_DOMAINS,
)

__all__ = [
    "classify",
    "check_handoff_mode",
    "is_external_app",
    "PolicyVerdict",
    "RuleSet",
    "DEFAULT_RULES",
    "host_of",
    "host_in_allow_list",
    "matches_any",
    "matches_suffix",
    "ALLOW",
    "EXTERNAL_HANDOFF",
    "HANDOFF_CONSERVATIVE",
    "HANDOFF_PERMISSIVE",
    "HANDOFF_MODES",
    "ORIGIN_CONFIGURED",
    "ORIGIN_PLATFORM",
    "ORIGIN_PAYMENT",
    "ORIGIN_EXTERNAL_APP",
    "ORIGIN_DEFAULT",
    "PLATFORM_DOMAINS",
    "PAYMENT_HOSTS",
    "EXTERNAL_APP_HOSTS",
]
