import pytest

from app.modules.plant_ai.domain.gateways.inference_gateway import InferenceMessage, InferenceRequest
from app.modules.plant_ai.infrastructure.external.openai_client import (
    OpenAIInferenceClient,
    is_placeholder_key,
)
from app.shared.core.exceptions import AIConfigurationError, APIAuthenticationError
from app.shared.infrastructure.external_apis.api_client import APIClient
from tests.fakes import FakeResponse, FakeSession

COMPLETION = {
    "id": "chatcmpl-1",
    "model": "gpt-4o-2024-08-06",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "{\"species\": \"Ficus\"}"}}],
    "usage": {"prompt_tokens": 800, "completion_tokens": 40, "total_tokens": 840},
}

REQUEST = InferenceRequest(
    model="gpt-4o",
    messages=[InferenceMessage(role="user", content="identifica", image_url="https://x/y.jpg", image_detail="low")],
    max_tokens=300,
    temperature=0.1,
    json_mode=True,
)


def make_client(session, api_key="sk-live"):
    api_client = APIClient(base_url="https://api.openai.com/v1", api_key=api_key, api_name="openai", session=session)
    return OpenAIInferenceClient(api_key=api_key, api_client=api_client)


@pytest.mark.parametrize("key", [None, "", "   ", "demo-openai-key", "your-openai-key", "YOUR_KEY_HERE", "sk-placeholder"])
def test_placeholder_keys(key):
    assert is_placeholder_key(key) is True


def test_real_looking_key():
    assert is_placeholder_key("sk-proj-abc123") is False


@pytest.mark.parametrize("key", [None, "demo-openai-key"])
async def test_unconfigured_key_fails_before_network(key):
    session = FakeSession()
    client = make_client(session, api_key=key)

    with pytest.raises(AIConfigurationError):
        await client.complete(REQUEST)
    assert session.calls == []


async def test_complete_sends_payload_and_parses_result():
    session = FakeSession(FakeResponse(200, body=COMPLETION))
    result = await make_client(session).complete(REQUEST)

    assert result.content == "{\"species\": \"Ficus\"}"
    assert result.total_tokens == 840
    assert result.model == "gpt-4o-2024-08-06"

    payload = session.calls[0]["json"]
    assert session.calls[0]["url"] == "https://api.openai.com/v1/chat/completions"
    assert payload["model"] == "gpt-4o"
    assert payload["response_format"] == {"type": "json_object"}
    assert payload["messages"][0]["content"][0] == {"type": "text", "text": "identifica"}
    assert payload["messages"][0]["content"][1]["image_url"] == {"url": "https://x/y.jpg", "detail": "low"}


async def test_text_only_payload_has_no_response_format():
    session = FakeSession(FakeResponse(200, body=COMPLETION))
    request = InferenceRequest(
        model="gpt-4o-mini",
        messages=[InferenceMessage(role="system", content="Eres una planta"), InferenceMessage(role="user", content="hola")],
        max_tokens=150,
        temperature=0.7,
    )

    await make_client(session).complete(request)

    payload = session.calls[0]["json"]
    assert "response_format" not in payload
    assert payload["messages"] == [
        {"role": "system", "content": "Eres una planta"},
        {"role": "user", "content": "hola"},
    ]


async def test_provider_errors_propagate():
    session = FakeSession(FakeResponse(401, text="invalid key"))

    with pytest.raises(APIAuthenticationError):
        await make_client(session).complete(REQUEST)


@pytest.mark.parametrize("response,content,tokens", [
    ({}, None, None),
    ({"choices": []}, None, None),
    ({"choices": [{"message": {"content": None}}], "usage": {}}, None, None),
    ({"choices": [{"message": {"content": 42}}], "usage": {"total_tokens": "12"}}, None, None),
    ({"choices": [{"message": {"content": "hola"}}], "usage": {"total_tokens": 12}}, "hola", 12),
])
def test_parse_response(response, content, tokens):
    result = OpenAIInferenceClient._parse_response(response)

    assert result.content == content
    assert result.total_tokens == tokens


async def test_close_closes_transport():
    session = FakeSession()
    client = make_client(session)

    await client.close()

    assert client.api_client.session is None


def test_message_with_several_images():
    message = InferenceMessage(
        role="user",
        content="compara",
        image_url="https://x/old.jpg",
        extra_image_urls=("https://x/new.jpg",),
        image_detail="high",
    )

    assert message.to_payload()["content"] == [
        {"type": "text", "text": "compara"},
        {"type": "image_url", "image_url": {"url": "https://x/old.jpg", "detail": "high"}},
        {"type": "image_url", "image_url": {"url": "https://x/new.jpg", "detail": "high"}},
    ]
