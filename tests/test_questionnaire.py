"""Tests for the interactive account questionnaire."""

import asyncio

import pytest

from fitcoach.clients import questionnaire
from fitcoach.clients.questionnaire import AccountQuestionnaire
from fitcoach.models.account import Role


class FakeQuestion:
    """Stands in for a questionary prompt."""

    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


@pytest.fixture
def answer_with(monkeypatch):
    """Feed canned answers to the text and select prompts, in order."""

    def install(texts, role):
        pending = list(texts)
        monkeypatch.setattr(questionnaire.questionary, "text", lambda *a, **kw: FakeQuestion(pending.pop(0)))
        monkeypatch.setattr(questionnaire.questionary, "select", lambda *a, **kw: FakeQuestion(role))

    return install


class TestAccountQuestionnaire:
    """Tests for AccountQuestionnaire."""

    def test_collect(self, answer_with):
        """Answers are stripped and returned."""
        answer_with([" Alex ", "Moreau", "alex@example.com "], Role.CLIENT)

        answers = asyncio.run(AccountQuestionnaire().collect_new_account())

        assert answers.first_name == "Alex"
        assert answers.email == "alex@example.com"
        assert answers.role == Role.CLIENT

    def test_abort(self, answer_with):
        """Ctrl-C on any prompt cancels the whole questionnaire."""
        answer_with(["Alex", None], Role.CLIENT)

        assert asyncio.run(AccountQuestionnaire().collect_new_account()) is None

    def test_required(self):
        assert questionnaire._required("  ") == "This field is required"
        assert questionnaire._required("x") is True
