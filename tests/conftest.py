# tests/conftest.py
import asyncio
import sys
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

# Додаємо src в sys.path, щоб працював імпорт "checkout_upsell.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from checkout_upsell.config.config_service import ConfigService  # noqa: E402
from checkout_upsell.domain.locale.region_resolver import RegionCode  # noqa: E402
from checkout_upsell.domain.offers.entities import Money, OfferCandidate, PurchasableUnit  # noqa: E402
from checkout_upsell.domain.offers.interfaces import MutationOutcome  # noqa: E402


def make_offer(
    offer_id: str,
    unit_id: Optional[str] = None,
    amount: str = "10.00",
    currency: str = "USD",
    *,
    title: Optional[str] = None,
    image_url: Optional[str] = None,
) -> OfferCandidate:
    units = () if unit_id is None else (PurchasableUnit(unit_id, Money(Decimal(amount), currency)),)
    return OfferCandidate(id=offer_id, title=title or f"Product {offer_id}", image_url=image_url, units=units)


class FakeCatalog:
    """Каталог у пам'яті: записує виклики, може чекати на gate або падати."""

    def __init__(self, offers: Sequence[OfferCandidate] = (), error: Optional[Exception] = None) -> None:
        self.offers = list(offers)
        self.error = error
        self.gate: Optional[asyncio.Event] = None
        self.calls: List[Tuple[RegionCode, int]] = []

    async def fetch_offers(self, region: RegionCode, first: int) -> Sequence[OfferCandidate]:
        self.calls.append((region, first))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.offers)[:first]


class FakeOrderService:
    """Сервіс мутації у пам'яті з керованим результатом."""

    def __init__(self, outcome: Optional[MutationOutcome] = None) -> None:
        self.outcome = outcome or MutationOutcome.success()
        self.error: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None
        self.calls: List[Tuple[str, int]] = []

    async def add_line(self, merchandise_id: str, quantity: int) -> MutationOutcome:
        self.calls.append((merchandise_id, quantity))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def offer_factory():
    return make_offer


@pytest.fixture
def fake_catalog():
    return FakeCatalog()


@pytest.fixture
def fake_order_service():
    return FakeOrderService()


@pytest.fixture
def fresh_config(monkeypatch):
    """Свіжий ConfigService без змінних оточення Storefront."""
    monkeypatch.delenv("STOREFRONT_API_URL", raising=False)
    monkeypatch.delenv("STOREFRONT_ACCESS_TOKEN", raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def catalog_cls():
    return FakeCatalog


@pytest.fixture
def order_service_cls():
    return FakeOrderService
