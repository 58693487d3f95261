"""Pytest configuration for shared fixtures, markers and policy validation."""

from pathlib import Path

import pytest

from tests.security_policy import POLICIES


class FakeSurface:
    def __init__(self):
        self.calls = []

    def go_back(self):
        self.calls.append(("go_back",))

    def stop_loading(self):
        self.calls.append(("stop_loading",))

    def inject_script(self, text):
        self.calls.append(("inject_script", text))

    def names(self):
        return [call[0] for call in self.calls]


class FakeSensor:
    def __init__(self, connected=True):
        self.value = connected
        self.listener = None
        self.removed = False

    def add_listener(self, callback):
        self.listener = callback

        def remove():
            self.removed = True
            self.listener = None

        return remove

    def push(self, connected):
        self.value = connected
        if self.listener is not None:
            self.listener(connected)

    def fetch(self):
        return self.value


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def sensor():
    return FakeSensor()


@pytest.fixture
def opened():
    return []


@pytest.fixture
def events():
    return []


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "policy(policy_id): map a test to a navigation security policy ID from tests/security_policy.py",
    )


REGISTRY_TEST_FILE = "test_security_policy_registry.py"


def _requires_policy_marker(item) -> bool:
    # Every behavioural test under a security/ directory cites the policy it guards.
    path = Path(str(getattr(item, "path", None) or getattr(item, "fspath", "")))
    return path.parent.name == "security" and path.name != REGISTRY_TEST_FILE


def pytest_collection_modifyitems(config, items):
    known_ids = set(POLICIES)
    for item in items:
        policy_markers = list(item.iter_markers(name="policy"))

        if _requires_policy_marker(item) and not policy_markers:
            raise pytest.UsageError(
                f"Missing policy marker on {item.nodeid}. "
                "Security tests must declare @pytest.mark.policy('NAV-xxx')."
            )

        for marker in policy_markers:
            if marker.kwargs or len(marker.args) != 1:
                raise pytest.UsageError(
                    f"Invalid policy marker on {item.nodeid}. Use @pytest.mark.policy('NAV-xxx')."
                )
            policy_id = marker.args[0]
            if policy_id not in known_ids:
                raise pytest.UsageError(
                    f"Unknown policy id '{policy_id}' on {item.nodeid}. "
                    "Add it to tests/security_policy.py."
                )
