"""
🧪 test_catalog_fetcher.py - unit-тести для CatalogFetcher

Перевіряє:
- Один запит з batch_size=5 для регіону
- Прапорець loading на час запиту та після будь-якого завершення
- Збій: лог, попередній список зберігається, виняток назовні не йде
- Застарілий результат (старе покоління) відкидається
"""

import asyncio
import logging

import httpx
import pytest
from prometheus_client import REGISTRY

from checkout_upsell.domain.locale.region_resolver import RegionCode
from checkout_upsell.errors.custom_errors import CatalogFetchError
from checkout_upsell.upsell.catalog_fetcher import CatalogFetcher
from checkout_upsell.upsell.state import UpsellFlags


def _failures() -> float:
    return REGISTRY.get_sample_value("upsell_catalog_fetch_total", {"outcome": "failure"}) or 0.0


@pytest.mark.asyncio
async def test_fetch_stores_candidates_and_requests_batch_of_five(catalog_cls, offer_factory):
    offers = [offer_factory(f"P{i}", f"V{i}") for i in range(1, 8)]
    catalog = catalog_cls(offers)
    flags = UpsellFlags()
    fetcher = CatalogFetcher(catalog, flags)

    result = await fetcher.fetch(RegionCode.DE)

    assert catalog.calls == [(RegionCode.DE, 5)]
    assert [o.id for o in result] == ["P1", "P2", "P3", "P4", "P5"]
    assert fetcher.candidates == result
    assert fetcher.last_region is RegionCode.DE
    assert flags.loading is False


@pytest.mark.asyncio
async def test_loading_is_true_while_request_in_flight(catalog_cls, offer_factory):
    catalog = catalog_cls([offer_factory("P1", "V1")])
    catalog.gate = asyncio.Event()
    flags = UpsellFlags()
    seen = []
    fetcher = CatalogFetcher(catalog, flags, on_change=lambda: seen.append(flags.loading))

    task = asyncio.create_task(fetcher.fetch(RegionCode.US))
    await asyncio.sleep(0)
    assert flags.loading is True

    catalog.gate.set()
    await task
    assert flags.loading is False
    assert seen == [True, False]


@pytest.mark.parametrize("error", [
    CatalogFetchError("boom"),
    httpx.ConnectError("refused"),
    RuntimeError("unexpected"),
])
@pytest.mark.asyncio
async def test_failure_is_logged_and_swallowed(caplog, catalog_cls, error):
    catalog = catalog_cls(error=error)
    flags = UpsellFlags()
    fetcher = CatalogFetcher(catalog, flags)
    before = _failures()

    with caplog.at_level(logging.ERROR, logger="checkout_upsell"):
        result = await fetcher.fetch(RegionCode.US)

    assert result == ()
    assert flags.loading is False
    assert "не вдався" in caplog.text
    assert _failures() == before + 1


@pytest.mark.asyncio
async def test_failure_keeps_previous_candidates(catalog_cls, offer_factory):
    catalog = catalog_cls([offer_factory("P1", "V1")])
    fetcher = CatalogFetcher(catalog, UpsellFlags())
    await fetcher.fetch(RegionCode.US)

    catalog.error = CatalogFetchError("down")
    result = await fetcher.fetch(RegionCode.CA)

    assert [o.id for o in result] == ["P1"]


@pytest.mark.asyncio
async def test_empty_result_is_stored(catalog_cls, offer_factory):
    catalog = catalog_cls([offer_factory("P1", "V1")])
    fetcher = CatalogFetcher(catalog, UpsellFlags())
    await fetcher.fetch(RegionCode.US)

    catalog.offers = []
    assert await fetcher.fetch(RegionCode.US) == ()


@pytest.mark.asyncio
async def test_non_purchasable_candidates_are_dropped(catalog_cls, offer_factory):
    catalog = catalog_cls([offer_factory("P1"), offer_factory("P2", "V2")])
    fetcher = CatalogFetcher(catalog, UpsellFlags())
    assert [o.id for o in await fetcher.fetch(RegionCode.US)] == ["P2"]


@pytest.mark.asyncio
async def test_stale_response_does_not_override_newer_one(offer_factory):
    gates = {RegionCode.US: asyncio.Event(), RegionCode.FR: asyncio.Event()}
    results = {
        RegionCode.US: [offer_factory("US1", "VU1")],
        RegionCode.FR: [offer_factory("FR1", "VF1")],
    }

    class RegionalCatalog:
        async def fetch_offers(self, region, first):
            await gates[region].wait()
            return results[region]

    flags = UpsellFlags()
    fetcher = CatalogFetcher(RegionalCatalog(), flags)

    old = asyncio.create_task(fetcher.fetch(RegionCode.US))
    await asyncio.sleep(0)
    new = asyncio.create_task(fetcher.fetch(RegionCode.FR))
    await asyncio.sleep(0)

    gates[RegionCode.FR].set()
    await new
    assert [o.id for o in fetcher.candidates] == ["FR1"]
    assert flags.loading is False

    gates[RegionCode.US].set()
    await old
    assert [o.id for o in fetcher.candidates] == ["FR1"]
    assert flags.loading is False


@pytest.mark.asyncio
async def test_cancellation_propagates(catalog_cls):
    catalog = catalog_cls()
    catalog.gate = asyncio.Event()
    flags = UpsellFlags()
    fetcher = CatalogFetcher(catalog, flags)

    task = asyncio.create_task(fetcher.fetch(RegionCode.US))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert flags.loading is False


def test_batch_size_must_be_positive(catalog_cls):
    with pytest.raises(ValueError):
        CatalogFetcher(catalog_cls(), UpsellFlags(), batch_size=0)
