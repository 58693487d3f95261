"""Navigation policy engine driving the embedded surface.

Every navigation the page attempts is checked twice: before it starts
(``on_request``) and after it commits (``on_navigated``), because a redirect
chain that started on an allowed host can end on an external one. Popups and
hand-offs of non-external URLs go through ``route`` so the app only ever has one
navigable surface.

The surface is duck-typed and needs ``go_back()``, ``stop_loading()`` and
``inject_script(text)``.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Iterable, Optional

from ordershell.nav_policy.classify import DEFAULT_RULES, PolicyVerdict, RuleSet, check_handoff_mode, classify
from ordershell.nav_policy.taxonomy import HANDOFF_PERMISSIVE, ORIGIN_DEFAULT

from .inject import build_chrome_script, navigation_script
from .models import (
    EVENT_EXTERNAL_LINK,
    EVENT_INTERNAL_NAVIGATION,
    EVENT_MESSAGE,
    EVENT_NAVIGATION,
    PHASE_LOADED,
    PHASE_LOADING,
    AppEvent,
    EngineState,
    NavigationEvent,
    RequestEvent,
)


def _ignore_event(event: AppEvent) -> None:
    return None


class NavigationPolicyEngine:
    def __init__(
        self,
        surface,
        *,
        allow_list: Iterable[str],
        open_external: Callable[[str], Any],
        handoff_mode: str = HANDOFF_PERMISSIVE,
        disable_zoom: bool = True,
        on_event: Optional[Callable[[AppEvent], Any]] = None,
        rules: RuleSet = DEFAULT_RULES,
        stderr=None,
    ) -> None:
        self.surface = surface
        self.allow_list = tuple(str(h).strip().lower() for h in allow_list)
        self.handoff_mode = check_handoff_mode(handoff_mode)
        self.rules = rules
        self.state = EngineState()
        self._open_external = open_external
        self._on_event = on_event or _ignore_event
        self._stderr = stderr
        self._lock = threading.Lock()
        self._chrome_script = build_chrome_script(disable_zoom, external_app_hosts=rules.external_app_hosts)

    def _log(self, msg: str) -> None:
        if self._stderr is not None:
            print(msg, file=self._stderr)

    def _emit(self, event_type: str, payload=None) -> None:
        self._on_event(AppEvent(event_type, payload))

    def classify(self, url: str) -> PolicyVerdict:
        return classify(url, self.allow_list, rules=self.rules, handoff_mode=self.handoff_mode)

    def _hand_off(self, url: str) -> None:
        try:
            self._open_external(url)
        except Exception as exc:
            self._log(f"External open failed for {url}: {exc}")
        self._emit(EVENT_EXTERNAL_LINK, {"url": url})

    def route(self, url: str) -> bool:
        """Send ``url`` to the external opener or load it in the current surface.

        Returns True when the URL was handed off.
        """
        verdict = self.classify(url)
        if not verdict.allowed:
            self._hand_off(url)
            return True
        self.surface.inject_script(navigation_script(url))
        self._emit(EVENT_INTERNAL_NAVIGATION, {"url": url})
        return False

    def on_request(self, event: RequestEvent) -> bool:
        verdict = self.classify(event.url)
        if not verdict.allowed:
            with self._lock:
                self.state.loading = False
            # Surfaces may report the aborted load from inside stop_loading().
            self.surface.stop_loading()
            self._hand_off(event.url)
            return False

        if verdict.origin == ORIGIN_DEFAULT:
            self._log(f"Loading URL in surface: {event.url}")
        with self._lock:
            self.state.loading = True
            self.state.phase = PHASE_LOADING
        return True

    def on_navigated(self, event: NavigationEvent) -> None:
        with self._lock:
            self.state.loading = False
            self.state.phase = PHASE_LOADED
            self.state.can_go_back = bool(event.can_go_back)

        verdict = self.classify(event.url)
        if not verdict.allowed:
            self.surface.stop_loading()
            self._hand_off(event.url)
            return
        self._emit(EVENT_NAVIGATION, {"url": event.url, "canGoBack": bool(event.can_go_back)})

    def on_page_loaded(self) -> None:
        self.surface.inject_script(self._chrome_script)

    def on_open_popup(self, url: str) -> None:
        self.route(url)

    def on_message(self, data) -> None:
        self._emit(EVENT_MESSAGE, data)

    def request_go_back(self) -> bool:
        with self._lock:
            can_go_back = self.state.can_go_back
        if not can_go_back:
            return False
        self.surface.go_back()
        return True
