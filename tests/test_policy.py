"""Idle policy - clamping, providers per scope, provider selection."""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError

from idle_logout.models import IdlePolicySetting
from idle_logout.policy import (
    IdlePolicy,
    SettingsPolicyProvider,
    StoredPolicyProvider,
    build_policy,
    clamp_max_idle_seconds,
    get_policy_provider,
)
from idle_logout.stores import StoreUnavailable


@pytest.mark.parametrize("value, expected", [
    (60, 60),
    (61, 61),
    (7200, 7200),
    ("900", 900),
    (120.0, 120),
    (59, 3600),
    (0, 3600),
    (-10, 3600),
    (None, 3600),
    ("soon", 3600),
    (90.5, 3600),
    (True, 3600),
])
def test_clamp_max_idle_seconds(value, expected):
    assert clamp_max_idle_seconds(value) == expected


def test_build_policy_defaults():
    assert build_policy() == IdlePolicy(3600, "You have been logged out due to inactivity.", False)


def test_build_policy_empty_message_falls_back():
    assert build_policy(600, "", 1).idle_message == "You have been logged out due to inactivity."
    assert build_policy(600, "", 1).silent_logout is True


class TestSettingsProvider:
    def test_reads_settings(self, settings):
        settings.IDLE_LOGOUT = {"MAX_IDLE_SECONDS": 900, "IDLE_MESSAGE": "Bye", "SILENT_LOGOUT": True}
        assert SettingsPolicyProvider().get_policy() == IdlePolicy(900, "Bye", True)

    def test_clamps_too_small(self, settings):
        settings.IDLE_LOGOUT = {"MAX_IDLE_SECONDS": 5}
        assert SettingsPolicyProvider().get_policy().max_idle_seconds == 3600

    def test_missing_setting_uses_defaults(self, settings):
        del settings.IDLE_LOGOUT
        assert SettingsPolicyProvider().get_policy() == IdlePolicy()


@pytest.mark.django_db
class TestStoredProvider:
    def test_falls_back_without_row(self, settings):
        settings.IDLE_LOGOUT = {"MAX_IDLE_SECONDS": 120}
        assert StoredPolicyProvider("site").get_policy().max_idle_seconds == 120

    def test_reads_row_for_scope(self):
        IdlePolicySetting.objects.create(scope="site", max_idle_seconds=300, idle_message="site", silent_logout=False)
        IdlePolicySetting.objects.create(scope="network", max_idle_seconds=600, idle_message="net", silent_logout=True)

        assert StoredPolicyProvider("site").get_policy() == IdlePolicy(300, "site", False)
        assert StoredPolicyProvider("network").get_policy() == IdlePolicy(600, "net", True)

    def test_row_is_clamped_on_save(self):
        row = IdlePolicySetting.objects.create(scope="site", max_idle_seconds=10)
        row.refresh_from_db()
        assert row.max_idle_seconds == 3600

    def test_database_failure_is_store_unavailable(self, monkeypatch):
        class BrokenManager:
            def filter(self, **kwargs):
                raise DatabaseError("database is down")

        monkeypatch.setattr(IdlePolicySetting, "objects", BrokenManager())
        with pytest.raises(StoreUnavailable) as exc:
            StoredPolicyProvider("network").get_policy()
        assert isinstance(exc.value.__cause__, DatabaseError)

    def test_change_is_visible_on_next_read(self):
        provider = StoredPolicyProvider("site")
        row = IdlePolicySetting.objects.create(scope="site", max_idle_seconds=300)
        assert provider.get_policy().max_idle_seconds == 300
        row.max_idle_seconds = 900
        row.save()
        assert provider.get_policy().max_idle_seconds == 900


class TestProviderSelection:
    def test_settings_scope(self, settings):
        settings.IDLE_LOGOUT = {"POLICY_SCOPE": "settings"}
        assert isinstance(get_policy_provider(), SettingsPolicyProvider)

    @pytest.mark.parametrize("scope", ["site", "network", " Network "])
    def test_stored_scopes(self, settings, scope):
        settings.IDLE_LOGOUT = {"POLICY_SCOPE": scope}
        provider = get_policy_provider()
        assert isinstance(provider, StoredPolicyProvider)
        assert provider.scope == scope.strip().lower()

    def test_unknown_scope(self, settings):
        settings.IDLE_LOGOUT = {"POLICY_SCOPE": "galaxy"}
        with pytest.raises(ImproperlyConfigured):
            get_policy_provider()
