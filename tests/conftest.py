"""Shared fixtures for idle_logout tests."""

from types import SimpleNamespace

import pytest
from django.core.cache import caches

from idle_logout.conf import reset_caches
from idle_logout.guard import SessionGuard
from idle_logout.policy import IdlePolicy, PolicyProvider
from idle_logout.stores import ActivityStore
from idle_logout.tracker import ActivityTracker


class DictStore(ActivityStore):
    """In-memory store that also counts writes."""

    def __init__(self):
        self.data = {}
        self.writes = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.writes += 1
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


class FixedPolicyProvider(PolicyProvider):
    def __init__(self, **kwargs):
        self.policy = IdlePolicy(**kwargs)

    def get_policy(self):
        return self.policy


@pytest.fixture(autouse=True)
def fresh_guard():
    """Drop the process-wide guard and cached records around every test."""
    reset_caches()
    caches["default"].clear()
    yield
    reset_caches()
    caches["default"].clear()


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def make_tracker(store):
    def _make(**policy):
        return ActivityTracker(store, FixedPolicyProvider(**policy))
    return _make


@pytest.fixture
def make_guard(store):
    def _make(login_url="/login/", **policy):
        provider = FixedPolicyProvider(**policy)
        return SessionGuard(ActivityTracker(store, provider), provider, login_url)
    return _make


@pytest.fixture
def principal():
    return SimpleNamespace(pk=7)
