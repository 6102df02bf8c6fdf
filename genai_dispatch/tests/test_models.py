"""Request/response value objects."""

from __future__ import annotations

import pytest

from genai_dispatch.base.adapter_kind import AdapterKind
from genai_dispatch.base.models import (
    CaptureOptions,
    ChatRequest,
    ContentPart,
    Endpoint,
    ImageRequest,
    ImageResponse,
    Message,
    ModelIden,
    Usage,
)


def test_image_request_builders_and_payload():
    req = ImageRequest.from_prompt("a red fox").with_n(2).with_size("1024x1024").with_quality("hd").with_style("vivid")
    assert req.to_payload() == {"prompt": "a red fox", "n": 2, "size": "1024x1024", "quality": "hd", "style": "vivid"}
    assert ImageRequest.from_prompt("p").to_payload() == {"prompt": "p"}
    assert req.with_response_format("b64_json").response_format == "b64_json"
    assert req.response_format is None


def test_usage_from_counts():
    assert Usage.from_counts(3, 4).to_dict() == {"prompt_tokens": 3, "completion_tokens": 4, "total_tokens": 7}
    assert Usage.from_counts("5", None).to_dict() == {"prompt_tokens": 5, "completion_tokens": None, "total_tokens": None}
    assert Usage.from_counts(-1, True, 9).to_dict() == {"prompt_tokens": None, "completion_tokens": None, "total_tokens": 9}
    assert Usage.from_counts().is_empty()


def test_usage_from_openai_accepts_input_output_names():
    usage = Usage.from_openai({"input_tokens": 10, "output_tokens": 0})
    assert (usage.prompt_tokens, usage.completion_tokens, usage.total_tokens) == (10, 0, 10)
    assert Usage.from_openai(None).is_empty()


@pytest.mark.parametrize(
    "name, wire",
    [
        ("gpt-4o", "gpt-4o"),
        ("openai::gpt-4o", "gpt-4o"),
        ("google::gemini-1.5-pro", "gemini-1.5-pro"),
        ("acme::model", "acme::model"),
    ],
)
def test_wire_name_strips_known_namespace(name, wire):
    assert ModelIden(AdapterKind.OPENAI, name).wire_name == wire


def test_content_part_to_dict():
    assert ContentPart.from_text("hi").to_dict() == {"type": "text", "text": "hi"}
    part = ContentPart.from_image_base64("QUJD", "image/jpeg")
    assert part.is_image() and part.source.is_base64
    assert part.to_dict() == {
        "type": "image",
        "content_type": "image/jpeg",
        "source": {"kind": "base64", "value": "QUJD"},
    }


def test_message_text_or_joined():
    msg = Message(role="user", content=[ContentPart.from_text("a"), ContentPart.from_image_url("https://x")])
    assert msg.is_structured()
    assert msg.text_or_joined() == "a\n[image]"


def test_system_text_combines_sources():
    req = ChatRequest(messages=[Message.system("be brief"), Message.user("hi")], system="you are helpful")
    assert req.system_text() == "you are helpful\n\nbe brief"
    assert [m.role for m in req.non_system_messages()] == ["user"]
    assert ChatRequest.from_user("hi").system_text() is None


def test_image_response_helpers():
    iden = ModelIden(AdapterKind.OPENAI, "dall-e-3")
    empty = ImageResponse(images=[], model_iden=iden)
    assert empty.first_image() is None
    res = ImageResponse(images=[ContentPart.from_image_url("https://a"), ContentPart.from_image_url("https://b")], model_iden=iden)
    assert res.first_image().source.value == "https://a"
    copy = res.all_images()
    copy.pop()
    assert len(res.images) == 2
    assert res.to_dict()["model_iden"] == {"adapter_kind": "openai", "model_name": "dall-e-3"}


def test_endpoint_headers_are_read_only():
    ep = Endpoint.from_url("  https://x/v1?api-version=1 ", {"X-A": "1"})
    assert ep.base_url == "https://x/v1?api-version=1"
    with pytest.raises(TypeError):
        ep.headers["X-B"] = "2"  # type: ignore[index]


def test_capture_all():
    opts = CaptureOptions.capture_all()
    assert opts.capture_raw_body and opts.capture_usage and opts.capture_tools
    assert not CaptureOptions().capture_raw_body
