from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from jobmatch.errors import GatewayError
from jobmatch.services import llm_service
from jobmatch.services.llm_service import EMPTY_COMPLETION, GENERATION_FAILED, LLMGateway


class _UpstreamError(Exception):
    """Shaped like LiteLLM's mapped HTTP errors."""

    def __init__(self, status_code, message):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage={"total_tokens": 12},
    )


@pytest.fixture
def gateway():
    return LLMGateway(api_key="sk-test", model="gpt-4-turbo", timeout=12.5, num_retries=1)


@pytest.fixture
def fake_acompletion(monkeypatch):
    mock = AsyncMock(return_value=_completion('{"ok": true}'))
    monkeypatch.setattr(llm_service, "acompletion", mock)
    return mock


def test_build_request_merges_prompt_config(gateway):
    request = gateway.build_request("cv_extractor", [{"role": "user", "content": "hi"}])

    assert request.model == "gpt-4-turbo"
    assert request.temperature == 0.3
    assert request.max_tokens == 500
    assert request.messages[0].role == "user"


def test_build_request_overrides_win(gateway):
    request = gateway.build_request("cv_extractor", [{"role": "user", "content": "hi"}], temperature=0.0, max_tokens=5)
    assert request.temperature == 0.0
    assert request.max_tokens == 5


async def test_complete_sends_chat_payload(gateway, fake_acompletion):
    request = gateway.build_request(
        "job_matcher",
        [{"role": "system", "content": "sys"}, {"role": "user", "content": "match me"}],
    )

    content = await gateway.complete(request)

    assert content == '{"ok": true}'
    kwargs = fake_acompletion.await_args.kwargs
    assert kwargs["model"] == "gpt-4-turbo"
    assert kwargs["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "match me"},
    ]
    assert kwargs["max_tokens"] == 300
    assert kwargs["temperature"] == 0.7
    assert kwargs["api_key"] == "sk-test"
    assert kwargs["timeout"] == 12.5
    assert kwargs["num_retries"] == 1
    assert "api_base" not in kwargs


async def test_complete_uses_custom_endpoint(fake_acompletion):
    gateway = LLMGateway(api_key="k", model="m", api_base="https://llm.internal/v1")
    await gateway.complete(gateway.build_request("cover_letter", [{"role": "user", "content": "x"}]))
    assert fake_acompletion.await_args.kwargs["api_base"] == "https://llm.internal/v1"


async def test_complete_raises_gateway_error_with_status(gateway, monkeypatch):
    monkeypatch.setattr(
        llm_service, "acompletion", AsyncMock(side_effect=_UpstreamError(429, "rate limited"))
    )

    with pytest.raises(GatewayError) as exc_info:
        await gateway.complete(gateway.build_request("interview_questions", [{"role": "user", "content": "x"}]))

    assert exc_info.value.status_code == 429
    assert exc_info.value.body == "rate limited"


async def test_timeout_is_a_gateway_error(gateway, monkeypatch):
    monkeypatch.setattr(llm_service, "acompletion", AsyncMock(side_effect=TimeoutError("timed out")))

    with pytest.raises(GatewayError) as exc_info:
        await gateway.complete(gateway.build_request("cv_extractor", [{"role": "user", "content": "x"}]))

    assert exc_info.value.status_code is None


async def test_complete_returns_empty_string_without_choices(gateway, monkeypatch):
    monkeypatch.setattr(llm_service, "acompletion", AsyncMock(return_value=SimpleNamespace(choices=[])))
    assert await gateway.complete(gateway.build_request("cv_extractor", [{"role": "user", "content": "x"}])) == ""


async def test_generate_text_returns_sentinel_on_failure(gateway, monkeypatch):
    monkeypatch.setattr(llm_service, "acompletion", AsyncMock(side_effect=_UpstreamError(500, "server error")))

    text = await gateway.generate_text(gateway.build_request("cover_letter", [{"role": "user", "content": "x"}]))

    assert text == GENERATION_FAILED == "Error generating content."


async def test_generate_text_flags_empty_completion(gateway, monkeypatch):
    monkeypatch.setattr(llm_service, "acompletion", AsyncMock(return_value=_completion(None)))

    text = await gateway.generate_text(gateway.build_request("resume_tailor", [{"role": "user", "content": "x"}]))

    assert text == EMPTY_COMPLETION


async def test_generate_text_passes_content_through(gateway, fake_acompletion):
    fake_acompletion.return_value = _completion("Dear Hiring Manager, ...")
    text = await gateway.generate_text(gateway.build_request("cover_letter", [{"role": "user", "content": "x"}]))
    assert text.startswith("Dear Hiring Manager")
