"""Navigation verdicts for URLs requested by the embedded page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .matching import host_in_allow_list, host_of, matches_any
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


@dataclass(frozen=True)
class RuleSet:
    platform_domains: Tuple[str, ...] = PLATFORM_DOMAINS
    payment_hosts: Tuple[str, ...] = PAYMENT_HOSTS
    external_app_hosts: Tuple[str, ...] = EXTERNAL_APP_HOSTS


DEFAULT_RULES = RuleSet()


@dataclass(frozen=True)
class PolicyVerdict:
    verdict: str
    origin: str
    host: str

    @property
    def allowed(self) -> bool:
        return self.verdict == ALLOW


def check_handoff_mode(mode: str) -> str:
    value = str(mode or "").strip().lower()
    if value not in HANDOFF_MODES:
        raise ValueError(f"invalid externalHandoffMode: {mode!r} (expected one of {', '.join(HANDOFF_MODES)})")
    return value


def is_external_app(url: str, rules: RuleSet = DEFAULT_RULES) -> bool:
    return matches_any(host_of(url), rules.external_app_hosts)


def classify(
    url: str,
    allow_list: Iterable[str],
    *,
    rules: RuleSet = DEFAULT_RULES,
    handoff_mode: str = HANDOFF_PERMISSIVE,
) -> PolicyVerdict:
    """Decide whether ``url`` renders inside the app or is handed off.

    External-app hosts are checked first so that an allow-list entry can never
    trap an app-store or social link inside the surface. The remaining rules
    apply in order: configured allow-list, platform domains, payment
    providers, then the ``handoff_mode`` default for unknown hosts.
    """
    mode = check_handoff_mode(handoff_mode)
    host = host_of(url)

    if matches_any(host, rules.external_app_hosts):
        return PolicyVerdict(EXTERNAL_HANDOFF, ORIGIN_EXTERNAL_APP, host)
    if host_in_allow_list(host, allow_list):
        return PolicyVerdict(ALLOW, ORIGIN_CONFIGURED, host)
    if matches_any(host, rules.platform_domains):
        return PolicyVerdict(ALLOW, ORIGIN_PLATFORM, host)
    if matches_any(host, rules.payment_hosts):
        return PolicyVerdict(ALLOW, ORIGIN_PAYMENT, host)

    if mode == HANDOFF_CONSERVATIVE:
        return PolicyVerdict(EXTERNAL_HANDOFF, ORIGIN_DEFAULT, host)
    return PolicyVerdict(ALLOW, ORIGIN_DEFAULT, host)
