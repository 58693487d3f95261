"""Shell configuration: defaults, file loading and derived values."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List

from ordershell.nav_policy.classify import check_handoff_mode
from ordershell.nav_policy.matching import host_of
from ordershell.nav_policy.taxonomy import HANDOFF_PERMISSIVE

DEFAULT_CONFIG_PATH = Path(
    os.environ.get("ORDERSHELL_CONFIG_PATH", "~/.config/ordershell/config.json")
).expanduser()

DEFAULT_CFG: Dict = {
    "startUrl": "https://pizzamadeinitaly.kuriersoft.ch/",
    "allowList": [],
    "appName": "",
    "disableZoom": True,
    "externalHandoffMode": HANDOFF_PERMISSIVE,
}

# Known storefront hosts and their display names; anything else uses the first host label.
KNOWN_APP_NAMES = (
    ("pizzafulmine", "Pizzafulmine"),
    ("roemerhof", "Römerhof"),
    ("römerhof", "Römerhof"),
    ("pizzamadeinitaly", "Pizza Made in Italy"),
)
FALLBACK_APP_NAME = "Restaurant"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on", "y"}


def merge_cfg(file_cfg: Dict | None, override_cfg: Dict | None) -> Dict:
    merged = dict(DEFAULT_CFG)
    if file_cfg:
        merged.update(file_cfg)
    if override_cfg:
        merged.update(override_cfg)
    return merged


def load_cfg(p: Path) -> dict:
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object: {p}")
    return data


def env_overrides() -> Dict:
    out: Dict = {}
    start_url = os.environ.get("ORDERSHELL_START_URL", "").strip()
    if start_url:
        out["startUrl"] = start_url
    mode = os.environ.get("ORDERSHELL_HANDOFF_MODE", "").strip()
    if mode:
        out["externalHandoffMode"] = mode
    if os.environ.get("ORDERSHELL_DISABLE_ZOOM") is not None:
        out["disableZoom"] = _env_flag("ORDERSHELL_DISABLE_ZOOM", default=True)
    return out


def derive_allowed_hosts(start_url: str) -> List[str]:
    """Allow-list for a storefront: its host and the ``www.`` twin.

    Platform and payment hosts stay out of the list; the classifier trusts them
    through its own rules, which keeps their ``platform``/``payment`` origin.
    """
    base_host = host_of(start_url)
    if not base_host:
        return []
    hosts = [base_host]
    if not base_host.startswith("www."):
        hosts.append(f"www.{base_host}")
    return hosts


def derive_app_name(start_url: str) -> str:
    host = host_of(start_url)
    if not host:
        return FALLBACK_APP_NAME
    for needle, name in KNOWN_APP_NAMES:
        if needle in host:
            return name
    return host.split(".")[0] or FALLBACK_APP_NAME


def resolve_cfg(cfg: Dict) -> Dict:
    """Validate once and fill in derived keys; the result is not re-checked at runtime."""
    out = dict(cfg)
    start_url = str(out.get("startUrl") or "").strip()
    if not start_url:
        raise ValueError("startUrl must be set")
    out["startUrl"] = start_url
    out["externalHandoffMode"] = check_handoff_mode(out.get("externalHandoffMode", HANDOFF_PERMISSIVE))
    disable_zoom = out.get("disableZoom", True)
    if not isinstance(disable_zoom, bool):
        raise ValueError(f"disableZoom must be true or false, got {disable_zoom!r}")
    out["disableZoom"] = disable_zoom

    allow_list = out.get("allowList") or []
    if isinstance(allow_list, str) or not isinstance(allow_list, (list, tuple)):
        raise ValueError("allowList must be a list of hostnames")
    allow_list = [str(h).strip().lower() for h in allow_list if str(h).strip()]
    out["allowList"] = allow_list or derive_allowed_hosts(start_url)

    if not str(out.get("appName") or "").strip():
        out["appName"] = derive_app_name(start_url)
    return out


def load_shell_cfg(path: Path | None = None) -> Dict:
    """Load, merge and resolve config; a missing default file means built-in defaults."""
    file_cfg: Dict = {}
    if path is not None:
        file_cfg = load_cfg(path)
    elif DEFAULT_CONFIG_PATH.exists():
        file_cfg = load_cfg(DEFAULT_CONFIG_PATH)
    return resolve_cfg(merge_cfg(file_cfg, env_overrides()))
