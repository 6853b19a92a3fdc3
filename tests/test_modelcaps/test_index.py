"""Tests for CapabilityIndex and CapabilityRegistry."""
from __future__ import annotations

import threading

import pytest

from modelcaps.catalog import AVAILABLE_MODELS
from modelcaps.errors import CatalogError, DuplicateModelError, MissingFieldError
from modelcaps.index import CapabilityIndex, CapabilityRegistry, load_index
from modelcaps.types import ModelCapability, ModelOutputFormat, ModelProvider


def _model(**overrides) -> ModelCapability:
    defaults = dict(
        description="OpenAI gpt-4o",
        provider=ModelProvider.OPENAI,
        model_name="gpt-4o",
        model_id="openai/gpt-4o",
        max_tokens=128000,
        max_output_tokens=16384,
        reserved_output_tokens=16384,
        default_max_convo_tokens=10000,
        api_key_env_var="OPENAI_API_KEY",
        base_url="https://api.openai.com/v1",
        preferred_output_format=ModelOutputFormat.TOOL_CALL_JSON,
    )
    defaults.update(overrides)
    return ModelCapability(**defaults)


# ---------------------------------------------------------------------------
# CapabilityIndex
# ---------------------------------------------------------------------------


class TestCapabilityIndex:
    def test_single_record_scenario(self) -> None:
        record = _model()
        index = CapabilityIndex.build([record])
        found = index.lookup("openai", "openai/gpt-4o")
        assert found is record
        assert found.effective_input_limit == 111616
        assert index.lookup("openai", "nonexistent") is None

    def test_lookup_with_enum_provider(self) -> None:
        index = CapabilityIndex.build([_model()])
        assert index.lookup(ModelProvider.OPENAI, "openai/gpt-4o") is not None

    def test_lookup_is_exact(self) -> None:
        index = CapabilityIndex.build([_model()])
        assert index.lookup("openai", "openai/gpt-4") is None
        assert index.lookup("openai", "OPENAI/GPT-4O") is None
        assert index.lookup("openrouter", "openai/gpt-4o") is None

    def test_unknown_provider_misses(self) -> None:
        index = CapabilityIndex.build([_model()])
        assert index.lookup("openai/openai", "gpt-4o") is None
        assert index.lookup("nope", "openai/gpt-4o") is None
        assert index.lookup("", "openai/gpt-4o") is None

    def test_joined_key_is_not_a_lookup_key(self) -> None:
        # "openai" + "openai/gpt-4o" and "openai/openai" + "gpt-4o" join to
        # the same display string but only the first pair exists
        index = CapabilityIndex.build([_model()])
        assert index.lookup("openai", "openai/gpt-4o") is not None
        assert index.lookup("openai/openai", "gpt-4o") is None
        assert ("openai/openai", "gpt-4o") not in index

    def test_container_protocol(self) -> None:
        a = _model()
        b = _model(model_id="openai/gpt-4o-mini", model_name="gpt-4o-mini")
        index = CapabilityIndex.build([a, b])
        assert len(index) == 2
        assert list(index) == [a, b]
        assert index.models == (a, b)
        assert ("openai", "openai/gpt-4o-mini") in index
        assert (ModelProvider.OPENAI, "openai/gpt-4o") in index
        assert "openai/openai/gpt-4o-mini" not in index
        assert index.keys() == ["openai/openai/gpt-4o", "openai/openai/gpt-4o-mini"]

    def test_list_models_by_provider(self) -> None:
        a = _model()
        b = _model(provider=ModelProvider.OPENROUTER)
        index = CapabilityIndex.build([a, b])
        assert index.list_models() == [a, b]
        assert index.list_models("openrouter") == [b]

    def test_build_rejects_missing_field(self) -> None:
        with pytest.raises(MissingFieldError):
            CapabilityIndex.build([_model(max_output_tokens=0)])

    def test_build_rejects_duplicate_key(self) -> None:
        with pytest.raises(DuplicateModelError):
            CapabilityIndex.build([_model(), _model(description="again")])

    def test_build_rejects_unknown_provider(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            CapabilityIndex.build([_model(provider="openai/openai")])
        assert exc_info.value.rule == "check_known_provider"

    def test_string_provider_accepted(self) -> None:
        record = _model(provider="openai")
        index = CapabilityIndex.build([record])
        assert index.lookup(ModelProvider.OPENAI, "openai/gpt-4o") is record

    def test_constructor_validates(self) -> None:
        with pytest.raises(DuplicateModelError):
            CapabilityIndex([_model(), _model(description="again")])
        with pytest.raises(MissingFieldError):
            CapabilityIndex([_model(base_url="")])

    def test_mapping_is_read_only(self) -> None:
        index = CapabilityIndex.build([_model()])
        with pytest.raises(TypeError):
            index._by_key["x"] = _model()  # type: ignore[index]

    def test_build_accepts_generator(self) -> None:
        index = CapabilityIndex.build(m for m in [_model()])
        assert len(index) == 1


# ---------------------------------------------------------------------------
# load_index
# ---------------------------------------------------------------------------


class TestLoadIndex:
    def test_indexes_whole_catalog(self) -> None:
        index = load_index()
        assert len(index) == len(AVAILABLE_MODELS)

    def test_round_trip_every_record(self) -> None:
        index = load_index()
        for m in AVAILABLE_MODELS:
            found = index.lookup(m.provider, m.model_id)
            assert found is not None
            assert found.to_dict() == m.to_dict()

    def test_same_model_id_across_providers(self) -> None:
        index = load_index()
        direct = index.lookup("openai", "openai/gpt-4o")
        routed = index.lookup("openrouter", "openai/gpt-4o")
        assert direct is not None and routed is not None
        assert direct.base_url != routed.base_url

    def test_each_call_builds_fresh_index(self) -> None:
        assert load_index() is not load_index()

    def test_custom_models(self) -> None:
        index = load_index([_model(provider=ModelProvider.CUSTOM)])
        assert index.keys() == ["custom/openai/gpt-4o"]


# ---------------------------------------------------------------------------
# CapabilityRegistry
# ---------------------------------------------------------------------------


class TestCapabilityRegistry:
    def test_defaults_to_builtin_catalog(self) -> None:
        registry = CapabilityRegistry()
        assert len(registry) == len(AVAILABLE_MODELS)

    def test_register_adds_model(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        custom = _model(provider=ModelProvider.CUSTOM, model_id="local/llama")
        registry.register(custom)
        assert registry.lookup("custom", "local/llama") is custom
        assert len(registry) == 2

    def test_register_publishes_new_snapshot(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        before = registry.snapshot()
        after = registry.register(_model(model_id="openai/new"))
        assert registry.snapshot() is after
        assert before is not after
        assert len(before) == 1

    def test_register_duplicate_rejected(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        with pytest.raises(DuplicateModelError):
            registry.register(_model(description="again"))
        assert len(registry) == 1

    def test_register_unknown_provider_rejected(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        with pytest.raises(CatalogError):
            registry.register(_model(provider="openai/openai", model_id="gpt-4o"))
        assert len(registry) == 1

    def test_register_many_is_atomic(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        good = _model(model_id="openai/good")
        bad = _model(model_id="openai/bad", base_url="")
        with pytest.raises(CatalogError):
            registry.register_many([good, bad])
        assert registry.lookup("openai", "openai/good") is None

    def test_concurrent_registration(self) -> None:
        registry = CapabilityRegistry(CapabilityIndex.build([_model()]))
        errors: list[Exception] = []

        def worker(n: int) -> None:
            try:
                registry.register(_model(model_id=f"openai/variant-{n}"))
            except Exception as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(registry) == 21
        for i in range(20):
            assert registry.lookup("openai", f"openai/variant-{i}") is not None
