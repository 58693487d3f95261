"""Reachability tracking and the offline banner shown above the surface.

Connectivity never influences navigation verdicts. When the platform sensor is
missing or fails, the shell assumes it is online until told otherwise.
"""

from __future__ import annotations

from typing import Callable, List, Optional

OFFLINE_TEXT = "No internet connection"
RETRY_TEXT = "Try again"


def _reading(value) -> bool:
    # None means the sensor cannot tell yet.
    return True if value is None else bool(value)


class ConnectivityMonitor:
    def __init__(self, sensor=None, *, state=None, stderr=None) -> None:
        self._sensor = sensor
        self._state = state
        self._stderr = stderr
        self._listeners: List[Callable[[bool], None]] = []
        self._remove_sensor_listener: Optional[Callable[[], None]] = None
        self.connected = True
        self._attach()

    def _log(self, msg: str) -> None:
        if self._stderr is not None:
            print(msg, file=self._stderr)

    def _attach(self) -> None:
        if self._sensor is None:
            return
        try:
            self._remove_sensor_listener = self._sensor.add_listener(self._on_sensor_change)
        except Exception as exc:
            self._log(f"Reachability sensor unavailable, assuming online: {exc}")

    def _on_sensor_change(self, is_connected) -> None:
        self._set(_reading(is_connected))

    def _set(self, value: bool) -> None:
        changed = value != self.connected
        self.connected = value
        if self._state is not None:
            self._state.connected = value
        if not changed:
            return
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, on_change: Callable[[bool], None]) -> Callable[[], None]:
        self._listeners.append(on_change)

        def unsubscribe() -> None:
            if on_change in self._listeners:
                self._listeners.remove(on_change)

        return unsubscribe

    def recheck(self) -> bool:
        if self._sensor is None:
            return self.connected
        try:
            value = _reading(self._sensor.fetch())
        except Exception as exc:
            self._log(f"Reachability check failed, keeping last state: {exc}")
            return self.connected
        self._set(value)
        return value

    def close(self) -> None:
        self._listeners.clear()
        remove = self._remove_sensor_listener
        self._remove_sensor_listener = None
        if remove is None:
            return
        try:
            remove()
        except Exception as exc:
            self._log(f"Reachability sensor detach failed: {exc}")


class OfflineBanner:
    """View model for the banner with a manual retry action."""

    text = OFFLINE_TEXT
    retry_text = RETRY_TEXT

    def __init__(self, monitor: ConnectivityMonitor) -> None:
        self._monitor = monitor
        self.visible = not monitor.connected
        self._unsubscribe = monitor.subscribe(self._on_change)

    def _on_change(self, connected: bool) -> None:
        self.visible = not connected

    def retry(self) -> bool:
        connected = self._monitor.recheck()
        self.visible = not connected
        return connected

    def close(self) -> None:
        self._unsubscribe()
