from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from pomorise.llm.client import LLMClient, LLMError, parse_json_object


@pytest.fixture
def mock_genai():
    with patch("pomorise.llm.client.genai") as genai:
        yield genai


@pytest.fixture
def groq_client():
    return MagicMock()


@pytest.fixture
def llm_client(settings, groq_client, mock_genai):
    return LLMClient(settings, groq_client=groq_client)


def _groq_response(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def test_parse_json_object_plain_and_fenced():
    assert parse_json_object('{"a": 1}') == {"a": 1}
    assert parse_json_object('```json\n{"a": 1}\n```') == {"a": 1}


@pytest.mark.parametrize("raw", [None, "", "   ", "not json", "[1, 2]"])
def test_parse_json_object_rejects_bad_input(raw):
    with pytest.raises(ValueError):
        parse_json_object(raw)


def test_client_configures_google_key(settings, groq_client, mock_genai):
    LLMClient(settings, groq_client=groq_client)
    mock_genai.configure.assert_called_once_with(api_key="test-google-key")


def test_generate_action_json_uses_fixed_model_and_json_mode(llm_client, groq_client):
    groq_client.chat.completions.create.return_value = _groq_response(
        '{"type": "tasks", "action": "add", "text": "buy milk"}'
    )

    data = llm_client.generate_action_json("prompt", "system")

    assert data == {"type": "tasks", "action": "add", "text": "buy milk"}
    kwargs = groq_client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "llama-3.3-70b-versatile"
    assert kwargs["temperature"] == 0.0
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"][0] == {"role": "system", "content": "system"}
    assert kwargs["messages"][1] == {"role": "user", "content": "prompt"}


def test_generate_action_json_is_called_once_on_failure(llm_client, groq_client):
    groq_client.chat.completions.create.side_effect = RuntimeError("connection reset")

    with pytest.raises(LLMError) as exc_info:
        llm_client.generate_action_json("prompt", "system")

    assert exc_info.value.provider == "groq"
    assert groq_client.chat.completions.create.call_count == 1


def test_generate_action_json_rejects_non_json(llm_client, groq_client):
    groq_client.chat.completions.create.return_value = _groq_response("Sure! Here is your task.")

    with pytest.raises(LLMError):
        llm_client.generate_action_json("prompt", "system")


def test_generate_insights_json(llm_client, mock_genai):
    model = mock_genai.GenerativeModel.return_value
    model.generate_content.return_value = SimpleNamespace(text='{"insights": {"story": "s"}}')

    data = llm_client.generate_insights_json("prompt", "system")

    assert data == {"insights": {"story": "s"}}
    mock_genai.GenerativeModel.assert_called_once_with(
        model_name="gemini-2.0-flash", system_instruction="system"
    )
    call = model.generate_content.call_args
    assert call.args == ("prompt",)
    assert call.kwargs["request_options"] == {"timeout": 5.0}
    mock_genai.types.GenerationConfig.assert_called_once_with(
        temperature=0.7, max_output_tokens=1024, response_mime_type="application/json"
    )


def test_generate_insights_json_wraps_provider_errors(llm_client, mock_genai):
    mock_genai.GenerativeModel.return_value.generate_content.side_effect = TimeoutError("timed out")

    with pytest.raises(LLMError) as exc_info:
        llm_client.generate_insights_json("prompt", "system")

    assert exc_info.value.provider == "google"
