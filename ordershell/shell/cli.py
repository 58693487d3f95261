#!/usr/bin/env python3
"""Inspect the navigation policy of a shell deployment.

Commands:
- check URL...   classify URLs against the resolved allow-list
- script         print the page script injected on every load
- config         print the resolved configuration

Env:
- ORDERSHELL_CONFIG_PATH  config JSON (default ~/.config/ordershell/config.json)
- ORDERSHELL_START_URL, ORDERSHELL_HANDOFF_MODE, ORDERSHELL_DISABLE_ZOOM override it.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ordershell.nav_policy.classify import classify
from ordershell.shell.config import load_shell_cfg
from ordershell.shell.inject import build_chrome_script

VERBOSE = False
USAGE = "usage: ordershell [--config PATH] [--verbose] [--json] {check URL...|script [--allow-zoom]|config}"
COMMANDS = {"check", "script", "config"}


def log(msg: str) -> None:
    if not VERBOSE:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[ordershell] {ts} {msg}", file=sys.stderr)


def _parse(argv: List[str]) -> Optional[dict]:
    opts = {"config": None, "verbose": False, "json": False, "allow_zoom": False, "command": None, "args": []}
    args = list(argv[1:])
    idx = 0
    while idx < len(args):
        arg = args[idx]
        if arg in ("-v", "--verbose"):
            opts["verbose"] = True
        elif arg == "--json":
            opts["json"] = True
        elif arg == "--allow-zoom":
            opts["allow_zoom"] = True
        elif arg == "--config":
            if idx + 1 >= len(args):
                return None
            idx += 1
            opts["config"] = args[idx]
        elif arg.startswith("--config="):
            opts["config"] = arg.split("=", 1)[1]
        elif arg.startswith("-"):
            return None
        elif opts["command"] is None:
            if arg not in COMMANDS:
                return None
            opts["command"] = arg
        else:
            opts["args"].append(arg)
        idx += 1
    if opts["command"] is None:
        return None
    if opts["command"] == "check" and not opts["args"]:
        return None
    if opts["command"] != "check" and opts["args"]:
        return None
    return opts


def _check(cfg: dict, urls: List[str], as_json: bool) -> int:
    rows = []
    for url in urls:
        verdict = classify(url, cfg["allowList"], handoff_mode=cfg["externalHandoffMode"])
        log(f"{url} -> {verdict.verdict} ({verdict.origin})")
        rows.append({"url": url, "host": verdict.host, "verdict": verdict.verdict, "origin": verdict.origin})
    if as_json:
        print(json.dumps(rows, indent=2))
        return 0
    for row in rows:
        print(f"{row['verdict']}\t{row['origin']}\t{row['host'] or '-'}\t{row['url']}")
    return 0


def main(argv: List[str]) -> int:
    global VERBOSE
    opts = _parse(argv)
    if opts is None:
        print(USAGE, file=sys.stderr)
        return 2
    VERBOSE = opts["verbose"]

    config_path = Path(opts["config"]).expanduser() if opts["config"] else None
    try:
        cfg = load_shell_cfg(config_path)
    except (OSError, ValueError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 3
    log(f"start={cfg['startUrl']} mode={cfg['externalHandoffMode']} allow={len(cfg['allowList'])} hosts")

    command = opts["command"]
    if command == "check":
        return _check(cfg, opts["args"], opts["json"])
    if command == "script":
        disable_zoom = cfg["disableZoom"] and not opts["allow_zoom"]
        print(build_chrome_script(disable_zoom))
        return 0
    print(json.dumps(cfg, indent=2, ensure_ascii=False))
    return 0


def run() -> int:
    return main(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
