"""Data models for embedded-surface events and shell state."""

from dataclasses import dataclass, field
from typing import Any, Optional

PHASE_IDLE = "idle"
PHASE_LOADING = "loading"
PHASE_LOADED = "loaded"

EVENT_NAVIGATION = "navigation"
EVENT_EXTERNAL_LINK = "externalLink"
EVENT_INTERNAL_NAVIGATION = "internalNavigation"
EVENT_MESSAGE = "message"


@dataclass(frozen=True)
class RequestEvent:
    url: str


@dataclass(frozen=True)
class NavigationEvent:
    url: str
    can_go_back: bool = False


@dataclass
class EngineState:
    loading: bool = False
    can_go_back: bool = False
    connected: bool = True
    phase: str = PHASE_IDLE


@dataclass(frozen=True)
class AppEvent:
    type: str
    payload: Optional[Any] = field(default=None)
