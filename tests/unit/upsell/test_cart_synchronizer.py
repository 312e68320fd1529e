"""
🧪 test_cart_synchronizer.py - unit-тести для CartSynchronizer та OrderSnapshotFeed

Перевіряє:
- Явну підписку/відписку на знімки замовлення
- Перерахунок вибору при кожному новому знімку
- Ідемпотентність перерахунку з незмінними входами
"""

from checkout_upsell.domain.offers.entities import OrderLine
from checkout_upsell.upsell.cart_synchronizer import CartSynchronizer
from checkout_upsell.upsell.order_snapshot import OrderSnapshotFeed


def test_feed_publishes_to_subscribers():
    feed = OrderSnapshotFeed([OrderLine("V1")])
    received = []
    unsubscribe = feed.subscribe(received.append)

    feed.publish([OrderLine("V2")])
    assert received == [(OrderLine("V2"),)]
    assert feed.lines == (OrderLine("V2"),)

    unsubscribe()
    unsubscribe()
    feed.publish([])
    assert len(received) == 1
    assert feed.subscriber_count == 0


def test_recompute_uses_current_candidates_and_order(offer_factory):
    candidates = [offer_factory("P1", "V1"), offer_factory("P2", "V2")]
    feed = OrderSnapshotFeed([OrderLine("V1")])
    sync = CartSynchronizer(feed, lambda: candidates)

    selection = sync.recompute()

    assert selection is candidates[1]
    assert sync.available == (candidates[1],)


def test_order_change_triggers_recompute_only_when_attached(offer_factory):
    candidates = [offer_factory("P1", "V1"), offer_factory("P2", "V2")]
    feed = OrderSnapshotFeed()
    changes = []
    sync = CartSynchronizer(feed, lambda: candidates, on_change=lambda: changes.append(1))
    sync.recompute()
    assert sync.selection is candidates[0]

    feed.publish([OrderLine("V1")])
    assert sync.selection is candidates[0]                               # ще не підписані

    sync.attach()
    sync.attach()
    assert feed.subscriber_count == 1
    feed.publish([OrderLine("V1")])
    assert sync.selection is candidates[1]

    feed.publish([OrderLine("V1"), OrderLine("V2")])
    assert sync.selection is None

    feed.publish([])                                                     # покупець прибрав товари
    assert sync.selection is candidates[0]

    sync.detach()
    assert not sync.attached
    feed.publish([OrderLine("V1")])
    assert sync.selection is candidates[0]
    assert len(changes) == 4


def test_recompute_is_idempotent(offer_factory):
    candidates = [offer_factory("P1", "V1"), offer_factory("P2", "V2")]
    feed = OrderSnapshotFeed([OrderLine("V2")])
    sync = CartSynchronizer(feed, lambda: candidates)

    first = sync.recompute()
    assert all(sync.recompute() is first for _ in range(5))
