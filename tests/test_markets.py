import asyncio

from prolink.modules.markets.services.market import (
    get_user_market_ids,
    get_user_professions,
    list_markets,
)


def _seed_catalog(store):
    store.seed(
        "markets",
        {"id": 3, "name": "Tecnología"},
        {"id": 1, "name": "Finanzas"},
        {"id": 2, "name": "Salud"},
    )
    store.seed(
        "professions",
        {"id": 10, "name": "Desarrollo web", "market_id": 3},
        {"id": 11, "name": "Contabilidad", "market_id": 1},
        {"id": 12, "name": "Enfermería", "market_id": 2},
    )


def test_markets_are_listed_by_name(store):
    _seed_catalog(store)

    markets = asyncio.run(list_markets(store))

    assert [m.name for m in markets] == ["Finanzas", "Salud", "Tecnología"]
    assert [m.id for m in markets] == [1, 2, 3]


def test_user_market_ids_are_the_onboarding_selection(store):
    store.seed(
        "user_markets",
        {"user_id": "ana", "market_id": 3},
        {"user_id": "ana", "market_id": 1},
        {"user_id": "bruno", "market_id": 2},
    )

    assert sorted(asyncio.run(get_user_market_ids(store, "ana"))) == [1, 3]
    assert asyncio.run(get_user_market_ids(store, "nadie")) == []


def test_professions_resolve_through_user_links(store):
    _seed_catalog(store)
    store.seed(
        "user_professions",
        {"user_id": "ana", "profession_id": 10},
        {"user_id": "ana", "profession_id": 11},
        {"user_id": "bruno", "profession_id": 12},
    )

    professions = asyncio.run(get_user_professions(store, "ana"))

    assert [(p.id, p.name) for p in professions] == [(11, "Contabilidad"), (10, "Desarrollo web")]
    assert store.calls == [("select", "user_professions"), ("select", "professions")]


def test_user_without_professions_reads_links_only(store):
    _seed_catalog(store)

    assert asyncio.run(get_user_professions(store, "ana")) == []
    assert store.calls == [("select", "user_professions")]
