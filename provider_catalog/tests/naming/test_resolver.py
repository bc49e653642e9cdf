"""Resolution driver over whole catalogs."""

from __future__ import annotations

import httpx

from provider_catalog.naming import (
    DisplayNameGenerator,
    NameResolver,
    RecordingNotifier,
    cache_key,
    group_by_id,
    resolve_all,
)


def test_group_by_id_preserves_first_seen_order(make_model):
    models = [
        make_model("b"),
        make_model("a", provider="x"),
        make_model("b", provider="y"),
        make_model("a", provider="z"),
    ]
    groups = group_by_id(models)
    assert list(groups) == ["b", "a"]  # nosec B101 - asserts are appropriate in unit tests
    assert [m.provider for m in groups["a"]] == ["x", "z"]  # nosec B101


def test_singletons_and_groups_are_dispatched(cache, make_model, make_generator):
    single = make_model("claude-3-5-haiku")
    openai = make_model("gpt-4", provider="openai")
    azure = make_model("gpt-4", provider="azure")
    gen = make_generator(name="Claude 3.5 Haiku", reply="[1] -> GPT-4 (OpenAI)\n[2] -> GPT-4 (Azure)")

    names = NameResolver(cache, gen, RecordingNotifier()).resolve_all([openai, single, azure])

    assert names == {  # nosec B101
        cache_key(openai): "GPT-4 (OpenAI)",
        cache_key(single): "Claude 3.5 Haiku",
        cache_key(azure): "GPT-4 (Azure)",
    }
    assert gen.single_calls == ["claude-3-5-haiku"]  # nosec B101
    assert [[m.provider for m in call] for call in gen.group_calls] == [["openai", "azure"]]  # nosec B101
    assert cache.stats() == 3  # nosec B101


def test_unreachable_service_yields_identifier_and_no_cache_entry(cache, make_model):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    generator = DisplayNameGenerator("dn-key", client=httpx.Client(transport=httpx.MockTransport(handler)))
    model = make_model("deepseek-chat")
    notifier = RecordingNotifier()

    names = resolve_all([model], store=cache, generator=generator, notifier=notifier)

    assert names == {cache_key(model): "deepseek-chat"}  # nosec B101
    assert cache.stats() == 0  # nosec B101
    assert len(notifier.messages) == 1 and "(unavailable)" in notifier.messages[0]  # nosec B101


def test_second_run_is_served_from_cache(cache, make_model, make_generator):
    models = [make_model("gpt-4", provider="openai"), make_model("gpt-4", provider="azure")]
    first = make_generator(reply="[1] -> GPT-4 (OpenAI)\n[2] -> GPT-4 (Azure)")
    resolve_all(models, store=cache, generator=first, notifier=RecordingNotifier())

    second = make_generator(reply="[1] -> Changed")
    names = resolve_all(models, store=cache, generator=second, notifier=RecordingNotifier())

    assert sorted(names.values()) == ["GPT-4 (Azure)", "GPT-4 (OpenAI)"]  # nosec B101
    assert second.group_calls == []  # nosec B101
