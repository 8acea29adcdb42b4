"""
Completion gateway tests.

Run with: pytest tests/test_completion.py -v
"""
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from agents.completion import CompletionGateway, _response_text
from errors import BackendError


def test_complete_returns_model_text():
    gateway = CompletionGateway(llm=FakeListChatModel(responses=["Hello there"]))

    assert gateway.complete("Say hello") == "Hello there"


def test_complete_sends_prompt_as_user_message(gateway, scripted_llm):
    scripted_llm.responses.append("ok")

    gateway.complete("The prompt text")

    assert scripted_llm.prompts == ["The prompt text"]


def test_backend_exception_becomes_backend_error(gateway, scripted_llm):
    scripted_llm.responses.append(ConnectionError("unreachable"))

    with pytest.raises(BackendError) as excinfo:
        gateway.complete("prompt")

    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_empty_response_is_backend_error(gateway, scripted_llm):
    scripted_llm.responses.append("   ")

    with pytest.raises(BackendError):
        gateway.complete("prompt")


def test_no_retry_after_failure(gateway, scripted_llm):
    scripted_llm.responses.extend([RuntimeError("500"), "second"])

    with pytest.raises(BackendError):
        gateway.complete("prompt")

    assert scripted_llm.responses == ["second"]


def test_response_text_flattens_content_blocks():
    content = [
        {"type": "text", "text": "Part one. "},
        {"type": "tool_use", "id": "x"},
        {"type": "text", "text": "Part two."},
    ]

    assert _response_text(content) == "Part one. Part two."
