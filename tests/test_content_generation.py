import io
import json
from unittest.mock import MagicMock, patch
from urllib import error

import pytest

from articlebot.domain.models import Candidate
from articlebot.errors import GenerationError
from articlebot.services.content_generation import OpenAIArticleGenerator


def _http_response(payload: dict) -> MagicMock:
    response = MagicMock()
    response.__enter__.return_value.read.return_value = json.dumps(payload).encode("utf-8")
    return response


def _sent_payload(mock_urlopen: MagicMock, call_index: int = 0) -> dict:
    req = mock_urlopen.call_args_list[call_index].args[0]
    return json.loads(req.data.decode("utf-8"))


def test_generate_returns_one_candidate_per_choice() -> None:
    generator = OpenAIArticleGenerator(api_key="sk-test", candidate_count=3)
    reply = {
        "choices": [
            {"finish_reason": "stop", "message": {"content": '{"error": false}'}},
            {"finish_reason": "content_filter", "message": {"content": None}},
            {"finish_reason": "stop", "message": {"content": None}},
        ]
    }
    with patch(
        "articlebot.services.content_generation.request.urlopen",
        return_value=_http_response(reply),
    ) as mock_urlopen:
        candidates = generator._generate_sync("prompt text")

    assert candidates == (
        Candidate(text_parts=('{"error": false}',)),
        Candidate(filtered=True),
        Candidate(),
    )
    sent = _sent_payload(mock_urlopen)
    assert sent["n"] == 3
    assert sent["model"] == "gpt-4o-mini"
    assert sent["messages"][-1] == {"role": "user", "content": "prompt text"}


def test_generate_falls_back_when_model_is_unavailable() -> None:
    generator = OpenAIArticleGenerator(api_key="sk-test", model="gpt-missing", fallback_models=("gpt-4o",))
    not_found = error.HTTPError(
        "https://api.openai.com/v1/chat/completions",
        404,
        "Not Found",
        hdrs=None,
        fp=io.BytesIO(b'{"error": {"code": "model_not_found"}}'),
    )
    reply = {"choices": [{"finish_reason": "stop", "message": {"content": "{}"}}]}
    with patch(
        "articlebot.services.content_generation.request.urlopen",
        side_effect=[not_found, _http_response(reply)],
    ) as mock_urlopen:
        candidates = generator._generate_sync("prompt")

    assert candidates == (Candidate.from_text("{}"),)
    assert _sent_payload(mock_urlopen, 1)["model"] == "gpt-4o"


def test_generate_raises_generation_error_on_network_failure() -> None:
    generator = OpenAIArticleGenerator(api_key="sk-test", fallback_models=())
    with patch(
        "articlebot.services.content_generation.request.urlopen",
        side_effect=error.URLError("connection refused"),
    ):
        with pytest.raises(GenerationError):
            generator._generate_sync("prompt")


def test_generate_rejects_envelope_without_choices() -> None:
    generator = OpenAIArticleGenerator(api_key="sk-test")
    with patch(
        "articlebot.services.content_generation.request.urlopen",
        return_value=_http_response({"object": "error"}),
    ):
        with pytest.raises(GenerationError):
            generator._generate_sync("prompt")
