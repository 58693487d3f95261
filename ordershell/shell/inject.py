"""Script text injected into the embedded page."""

from __future__ import annotations

import json
from typing import Iterable

from ordershell.nav_policy.taxonomy import EXTERNAL_APP_HOSTS

VIEWPORT_LOCKED = "width=device-width,initial-scale=1,maximum-scale=1,user-scalable=no"
VIEWPORT_ZOOMABLE = "width=device-width,initial-scale=1"

CHROME_CSS = (
    "html, body {"
    " margin: 0 !important;"
    " padding: 0 !important;"
    " overflow-x: hidden !important;"
    " -webkit-user-select: none !important;"
    " -webkit-touch-callout: none !important;"
    " -webkit-tap-highlight-color: transparent !important; }"
    " .browser-nav, .url-bar, .address-bar { display: none !important; }"
    " * { -webkit-overflow-scrolling: touch !important; outline: none !important; }"
)

_SCRIPT_TEMPLATE = """(function(){
  if (window.__ordershellChrome) { return true; }
  window.__ordershellChrome = true;

  var m = document.querySelector('meta[name=viewport]');
  if (!m) {
    m = document.createElement('meta');
    m.name = 'viewport';
    document.head.appendChild(m);
  }
  m.setAttribute('content', %(viewport)s);

  var style = document.createElement('style');
  style.textContent = %(css)s;
  document.head.appendChild(style);

  document.addEventListener('contextmenu', function(e) { e.preventDefault(); return false; });
  document.addEventListener('selectstart', function(e) { e.preventDefault(); return false; });

  var externalApps = %(external_hosts)s;
  function isExternalApp(href) {
    var host = '';
    try { host = new URL(href).hostname.toLowerCase(); } catch (err) { return false; }
    return externalApps.some(function(domain) { return host.indexOf(domain) !== -1; });
  }

  document.addEventListener('click', function(e) {
    var target = e.target;
    while (target && target.tagName !== 'A') { target = target.parentElement; }
    if (!target || !target.href) { return; }
    if (isExternalApp(target.href)) { return; }
    e.preventDefault();
    window.location.href = target.href;
    return false;
  }, true);

  return true;
})();
"""


def build_chrome_script(
    disable_zoom: bool = True,
    *,
    external_app_hosts: Iterable[str] = EXTERNAL_APP_HOSTS,
) -> str:
    """Build the one-shot page script that makes the site feel native.

    The script is guarded by a window flag, so injecting it twice into the same
    document is a no-op. Anchor clicks to anything but an external-app host are
    turned into same-surface location changes; those then arrive as ordinary
    navigation requests and pass through the policy engine.
    """
    viewport = VIEWPORT_LOCKED if disable_zoom else VIEWPORT_ZOOMABLE
    return _SCRIPT_TEMPLATE % {
        "viewport": json.dumps(viewport),
        "css": json.dumps(CHROME_CSS),
        "external_hosts": json.dumps([str(h).strip().lower() for h in external_app_hosts]),
    }


def navigation_script(url: str) -> str:
    return f"window.location.href = {json.dumps(str(url))};\ntrue;"
