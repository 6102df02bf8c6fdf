"""Model resolution: ordered rules, totality, determinism, immutability."""

from __future__ import annotations

import pytest

from genai_dispatch.base.adapter_kind import AdapterKind
from genai_dispatch.base.resolver import DEFAULT_KIND, ModelResolver, PrefixRule


@pytest.mark.parametrize(
    "model, kind",
    [
        ("gpt-4o", AdapterKind.OPENAI),
        ("gpt-4o-mini", AdapterKind.OPENAI),
        ("o3-mini", AdapterKind.OPENAI),
        ("dall-e-3", AdapterKind.OPENAI),
        ("gpt-image-1", AdapterKind.OPENAI),
        ("text-embedding-3-small", AdapterKind.OPENAI),
        ("claude-3-5-sonnet-latest", AdapterKind.ANTHROPIC),
        ("command-r-plus", AdapterKind.COHERE),
        ("embed-english-v3.0", AdapterKind.COHERE),
        ("gemini-2.0-flash", AdapterKind.GEMINI),
        ("grok-3", AdapterKind.XAI),
        ("deepseek-chat", AdapterKind.DEEPSEEK),
        ("llama-3.1-8b-instant", AdapterKind.GROQ),
        ("text-embedding-004", AdapterKind.GEMINI),
        ("llama3.2:3b", AdapterKind.OLLAMA),
    ],
)
def test_default_rules(model, kind):
    assert ModelResolver().resolve(model) is kind


@pytest.mark.parametrize("model", ["", " ", "???", "x" * 1000, "模型", "::", "a::b::c"])
def test_resolve_is_total(model):
    assert isinstance(ModelResolver().resolve(model), AdapterKind)


def test_resolve_is_deterministic():
    r = ModelResolver()
    models = ["gpt-4o", "claude-3-haiku", "mystery", "azure_openai::d1"]
    first = [r.resolve(m) for m in models]
    for _ in range(5):
        assert [r.resolve(m) for m in models] == first


def test_same_prefix_routes_to_same_adapter():
    r = ModelResolver()
    assert r.resolve("gpt-4o") is r.resolve("gpt-4o-2024-08-06") is r.resolve("gpt-4.1-nano")


def test_registry_wins_over_prefix():
    # "text-embedding-004" starts with an OpenAI prefix but is a Gemini model
    assert ModelResolver().resolve("text-embedding-004") is AdapterKind.GEMINI


def test_registry_wins_over_namespace():
    r = ModelResolver(registry={"openai::special": AdapterKind.OLLAMA})
    assert r.resolve("openai::special") is AdapterKind.OLLAMA


def test_namespace_forces_adapter():
    r = ModelResolver()
    assert r.resolve("azure_openai::my-deployment") is AdapterKind.AZURE_OPENAI
    assert r.resolve("azure::gpt-4o") is AdapterKind.AZURE_OPENAI
    assert r.resolve("groq::gpt-oss-20b") is AdapterKind.GROQ


def test_unknown_namespace_falls_through_to_prefix_and_default():
    r = ModelResolver()
    assert r.resolve("nope::gpt-4o") is DEFAULT_KIND
    assert r.resolve("gpt::x") is AdapterKind.OPENAI


def test_unmatched_uses_default():
    assert ModelResolver().resolve("mistral:7b") is AdapterKind.OLLAMA
    assert ModelResolver(default=AdapterKind.OPENAI).resolve("mistral:7b") is AdapterKind.OPENAI


def test_prefix_rules_first_match_wins():
    rules = (
        PrefixRule(AdapterKind.GROQ, ("gpt-oss",)),
        PrefixRule(AdapterKind.OPENAI, ("gpt",)),
    )
    r = ModelResolver(prefix_rules=rules)
    assert r.resolve("gpt-oss-120b") is AdapterKind.GROQ
    assert r.resolve("gpt-4o") is AdapterKind.OPENAI


def test_with_registry_returns_new_resolver():
    base = ModelResolver()
    extended = base.with_registry({"my-model": AdapterKind.ANTHROPIC})
    assert extended.resolve("my-model") is AdapterKind.ANTHROPIC
    assert base.resolve("my-model") is AdapterKind.OLLAMA
    assert "llama-3.1-8b-instant" in extended.registry


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ModelResolver().registry["x"] = AdapterKind.OPENAI  # type: ignore[index]


def test_resolve_iden_keeps_name_and_strips_wire_namespace():
    iden = ModelResolver().resolve_iden("azure_openai::d1")
    assert iden.adapter_kind is AdapterKind.AZURE_OPENAI
    assert iden.model_name == "azure_openai::d1"
    assert iden.wire_name == "d1"
    plain = ModelResolver().resolve_iden("gpt-4o")
    assert plain.wire_name == "gpt-4o"


def test_adapter_kind_from_name():
    assert AdapterKind.from_name("OpenAI") is AdapterKind.OPENAI
    assert AdapterKind.from_name("google") is AdapterKind.GEMINI
    assert AdapterKind.from_name("grok") is AdapterKind.XAI
    assert AdapterKind.from_name("bogus") is None
