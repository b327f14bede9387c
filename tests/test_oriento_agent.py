"""Unit tests for the Oriento answering agent."""

import pytest
from unittest.mock import patch, MagicMock

from oriento.agents.oriento_agent.oriento_agent import OrientoAgent

SETTINGS = {
    "model": "gpt-4o-mini",
    "temperature": 0.3,
    "base_url": None,
    "timeout": 10.0,
    "max_retries": 0,
}


# ── Helpers ────────────────────────────────────────────────────────────────────

def _make_mock_response(content) -> MagicMock:
    """Build a minimal mock that looks like an OpenAI ChatCompletion response."""
    mock_response = MagicMock()
    mock_response.choices[0].message.content = content
    return mock_response


def _make_client(content="Answer.") -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create.return_value = _make_mock_response(content)
    return mock_client


# ── Tests ──────────────────────────────────────────────────────────────────────

class TestAnswer:

    def test_returns_model_content(self):
        text = "Break-even is the point where revenue covers total costs."
        agent = OrientoAgent(SETTINGS, client=_make_client(text))
        assert agent.answer("What is break-even?") == text

    def test_question_sent_unstripped_as_user_message(self):
        client = _make_client()
        OrientoAgent(SETTINGS, client=client).answer("  What is an ETF?  ")

        messages = client.chat.completions.create.call_args.kwargs["messages"]
        user_messages = [m for m in messages if m["role"] == "user"]
        assert user_messages == [{"role": "user", "content": "  What is an ETF?  "}]

    def test_system_prompt_included(self):
        client = _make_client()
        OrientoAgent(SETTINGS, client=client).answer("What is a margin?")

        messages = client.chat.completions.create.call_args.kwargs["messages"]
        system_messages = [m for m in messages if m["role"] == "system"]
        assert len(system_messages) == 1
        assert "Oriento" in system_messages[0]["content"]

    def test_model_and_temperature_from_settings(self):
        client = _make_client()
        OrientoAgent(SETTINGS, client=client).answer("q")

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.3

    def test_empty_question_is_sent(self):
        client = _make_client("")
        assert OrientoAgent(SETTINGS, client=client).answer("") == ""
        client.chat.completions.create.assert_called_once()

    def test_missing_content_raises(self):
        agent = OrientoAgent(SETTINGS, client=_make_client(None))
        with pytest.raises(ValueError):
            agent.answer("What is leverage?")

    def test_provider_error_propagates(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = TimeoutError("request timed out")
        with pytest.raises(TimeoutError):
            OrientoAgent(SETTINGS, client=client).answer("q")

    @patch("oriento.agents.oriento_agent.oriento_agent.get_client")
    def test_client_built_lazily_once(self, mock_get_client):
        mock_get_client.return_value = _make_client()
        agent = OrientoAgent(SETTINGS)
        mock_get_client.assert_not_called()

        agent.answer("one")
        agent.answer("two")
        mock_get_client.assert_called_once_with(SETTINGS)


class TestGetClient:

    def test_raises_without_api_key(self, monkeypatch):
        from oriento.agents.oriento_agent.client import get_client

        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(EnvironmentError):
            get_client(SETTINGS)

    @patch("oriento.agents.oriento_agent.client.OpenAI")
    def test_passes_settings_to_openai(self, mock_openai, monkeypatch):
        from oriento.agents.oriento_agent.client import get_client

        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        settings = dict(SETTINGS, base_url="https://example.test/v1/")
        get_client(settings)
        mock_openai.assert_called_once_with(
            api_key="sk-test",
            base_url="https://example.test/v1/",
            timeout=10.0,
            max_retries=0,
        )
