"""Tests for account disablement and reactivation."""

from datetime import date, datetime

import pytest

from fitcoach.core import lifecycle
from fitcoach.core.errors import AccountDisabled, InvalidInput
from fitcoach.models.account import AccountState


class TestDisable:
    """Tests for lifecycle.disable."""

    def test_temporary_disable(self, client_account):
        """A duration records the disable date and the period."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1), 30)

        assert disabled.active is False
        assert disabled.disabled_at == date(2024, 1, 1)
        assert disabled.disabled_duration_days == 30
        assert disabled.state == AccountState.TEMPORARILY_DISABLED

    def test_permanent_disable(self, client_account):
        """Without a duration no date is recorded."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1))

        assert disabled.active is False
        assert disabled.disabled_at is None
        assert disabled.disabled_duration_days is None
        assert disabled.state == AccountState.PERMANENTLY_DISABLED

    def test_original_is_untouched(self, client_account):
        """Disabling returns a new record."""
        lifecycle.disable(client_account, date(2024, 1, 1), 5)

        assert client_account.active is True
        assert client_account.disabled_at is None

    def test_datetime_today_is_stored_as_date(self, client_account):
        """The disable date has day granularity."""
        disabled = lifecycle.disable(client_account, datetime(2024, 1, 1, 18, 30), 2)

        assert disabled.disabled_at == date(2024, 1, 1)

    def test_already_disabled_keeps_original_date(self, client_account):
        """Disabling twice does not refresh the disable date."""
        first = lifecycle.disable(client_account, date(2024, 1, 1), 30)
        second = lifecycle.disable(first, date(2024, 1, 10), 5)

        assert second is first
        assert second.disabled_at == date(2024, 1, 1)
        assert second.disabled_duration_days == 30

    @pytest.mark.parametrize("days", [0, -3, 1.5, "7", True])
    def test_invalid_duration(self, client_account, days):
        """Only positive whole day counts are accepted."""
        with pytest.raises(InvalidInput):
            lifecycle.disable(client_account, date(2024, 1, 1), days)

    def test_invalid_duration_rejected_before_state_check(self, client_account):
        """A bad duration is refused even for a disabled account."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1))

        with pytest.raises(InvalidInput):
            lifecycle.disable(disabled, date(2024, 1, 2), 0)


class TestReactivate:
    """Tests for lifecycle.reactivate."""

    def test_clears_disable_data(self, client_account):
        """Reactivation returns to ACTIVE with nothing left over."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1), 30)
        active = lifecycle.reactivate(disabled)

        assert active.active is True
        assert active.disabled_at is None
        assert active.disabled_duration_days is None
        assert active.state == AccountState.ACTIVE

    def test_reactivate_active_account(self, client_account):
        """Reactivating an active account is a no-op on its fields."""
        active = lifecycle.reactivate(client_account)

        assert active.active is True
        assert active.disabled_at is None


class TestReactivationDate:
    """Tests for reactivation date and auto-reactivation eligibility."""

    def test_reactivation_date(self, client_account):
        """Reactivation happens N calendar days after the disable date."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 25), 10)

        assert lifecycle.reactivation_date(disabled) == date(2024, 2, 4)

    def test_no_reactivation_date_when_permanent(self, client_account):
        """Permanent disablement has no reactivation date."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1))

        assert lifecycle.reactivation_date(disabled) is None

    def test_no_reactivation_date_when_active(self, client_account):
        """Active accounts have no reactivation date."""
        assert lifecycle.reactivation_date(client_account) is None

    def test_eligibility(self, client_account):
        """Eligible from the reactivation date on, not before."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1), 30)

        assert not lifecycle.is_eligible_for_auto_reactivation(disabled, date(2024, 1, 30))
        assert lifecycle.is_eligible_for_auto_reactivation(disabled, date(2024, 1, 31))
        assert lifecycle.is_eligible_for_auto_reactivation(disabled, datetime(2024, 2, 5, 8, 0))

    def test_permanent_never_eligible(self, client_account):
        """Permanently disabled accounts are never reactivated automatically."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1))

        assert not lifecycle.is_eligible_for_auto_reactivation(disabled, date(2030, 1, 1))

    def test_active_never_eligible(self, client_account):
        """Active accounts are not eligible."""
        assert not lifecycle.is_eligible_for_auto_reactivation(client_account, date(2030, 1, 1))


class TestLoginGate:
    """Tests for the login check."""

    def test_active_account_passes(self, client_account):
        """Active accounts may log in."""
        assert lifecycle.can_login(client_account)
        assert lifecycle.check_login(client_account) is client_account

    def test_temporary_disable_reports_date(self, client_account):
        """The refusal carries the reactivation date."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1), 30)

        with pytest.raises(AccountDisabled) as exc_info:
            lifecycle.check_login(disabled)

        assert exc_info.value.reactivation_date == date(2024, 1, 31)
        assert not exc_info.value.is_permanent
        assert "2024-01-31" in str(exc_info.value)

    def test_permanent_disable_reports_contact_coach(self, client_account):
        """Permanent refusals point the user to their coach."""
        disabled = lifecycle.disable(client_account, date(2024, 1, 1))

        with pytest.raises(AccountDisabled) as exc_info:
            lifecycle.check_login(disabled)

        assert exc_info.value.is_permanent
        assert "Contact your coach" in str(exc_info.value)
