"""Tests for role and ownership rules."""

from dataclasses import replace

import pytest

from fitcoach.core import policy
from fitcoach.core.errors import Unauthorized
from fitcoach.models.workout import Workout


class TestAccountRules:
    """Tests for account management rules."""

    def test_coach_manages_users(self, coach, client_account):
        """Coaches may create, disable, reactivate and delete accounts."""
        assert policy.can_manage_users(coach)
        assert policy.can_disable(coach, client_account)
        assert policy.can_reactivate(coach, client_account)
        assert policy.can_delete(coach, client_account)

    def test_any_coach_may_disable_any_account(self, coach):
        """Coach authority is not limited to linked clients."""
        other_coach = replace(coach, id="coach-2", email="other@example.com")

        assert policy.can_disable(coach, other_coach)

    def test_client_cannot_manage_users(self, coach, client_account):
        """Clients have no account management rights."""
        other = replace(client_account, id="client-2", email="c2@example.com")

        assert not policy.can_manage_users(client_account)
        assert not policy.can_disable(client_account, other)
        assert not policy.can_reactivate(client_account, other)
        assert not policy.can_delete(client_account, coach)

    def test_profile_is_self_only(self, coach, client_account):
        """Only the owner edits a profile, coaches included."""
        assert policy.can_edit_profile(client_account, client_account)
        assert not policy.can_edit_profile(coach, client_account)


class TestGoalRules:
    """Tests for goal ownership."""

    def test_owner(self, client_account, sample_goal):
        assert policy.can_view_goal(client_account, sample_goal)
        assert policy.can_edit_goal(client_account, sample_goal)

    def test_coach_cannot_see_client_goal(self, coach, sample_goal):
        """Goals are private to their owner."""
        assert not policy.can_view_goal(coach, sample_goal)
        assert not policy.can_edit_goal(coach, sample_goal)


class TestWorkoutRules:
    """Tests for workout rules."""

    def test_only_coaches_create(self, coach, client_account):
        assert policy.can_create_workout(coach)
        assert not policy.can_create_workout(client_account)

    def test_private_workout_visible_to_author(self, coach, client_account):
        """Private workouts are hidden from everyone but their author."""
        workout = Workout(name="Secret", coach_id=coach.id, is_public=False)

        assert policy.can_view_workout(coach, workout)
        assert not policy.can_view_workout(client_account, workout)

    def test_public_workout_visible_to_all(self, client_account):
        workout = Workout(name="Open", coach_id="coach-9")

        assert policy.can_view_workout(client_account, workout)


class TestAuthorize:
    """Tests for authorize."""

    def test_allowed(self, coach):
        """Nothing happens when allowed."""
        policy.authorize(True, "do things", coach)

    def test_refused(self, client_account):
        """Refusal names the action and the caller."""
        with pytest.raises(Unauthorized) as exc_info:
            policy.authorize(policy.can_manage_users(client_account), "create accounts", client_account)

        assert exc_info.value.caller_id == "client-1"
        assert str(exc_info.value) == "Not allowed to create accounts"

