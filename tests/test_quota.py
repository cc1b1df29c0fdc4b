"""
Tests for the usage store, entitlement resolution and the daily gate.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

from auth.entitlements import resolve_entitlement
from auth.quota import EntitlementGate, InMemoryUsageStore, UsageKey
from domain.models import Admitted, Rejected

PRO_KEY = "GOOD_SELLER_2025"
NOON = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestEntitlement:
    def test_exact_key_is_pro(self):
        ent = resolve_entitlement(PRO_KEY, PRO_KEY)
        assert ent.is_pro is True
        assert ent.daily_limit == 999

    def test_other_keys_are_free(self):
        for key in ("", "good_seller_2025", PRO_KEY + " ", None):
            ent = resolve_entitlement(key, PRO_KEY)
            assert ent.is_pro is False
            assert ent.daily_limit == 5

    def test_empty_pro_key_never_matches(self):
        assert resolve_entitlement("", "").is_pro is False

    def test_zero_limit_is_not_treated_as_unset(self):
        assert resolve_entitlement("", PRO_KEY, free_limit=0).daily_limit == 0
        assert resolve_entitlement(PRO_KEY, PRO_KEY, pro_limit=0).daily_limit == 0

    def test_none_limit_uses_policy_default(self):
        assert resolve_entitlement("", PRO_KEY, free_limit=None).daily_limit == 5
        assert resolve_entitlement(PRO_KEY, PRO_KEY, pro_limit=None).daily_limit == 999


class TestUsageKey:
    def test_day_is_utc_date(self):
        # 2025-03-01 23:30 at UTC-5 is already 2025-03-02 in UTC
        local = datetime(2025, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert UsageKey.for_client("c1", local) == UsageKey("c1", "2025-03-02")

    def test_naive_datetime_is_treated_as_utc(self):
        assert UsageKey.for_client("c1", datetime(2025, 3, 1, 0, 0)).day == "2025-03-01"

    def test_missing_client_is_anon(self):
        assert UsageKey.for_client(None, NOON).client_id == "anon"

    def test_str(self):
        assert str(UsageKey("c1", "2025-03-01")) == "usage:c1:2025-03-01"


class TestInMemoryUsageStore:
    def test_absent_key_reads_zero(self):
        store = InMemoryUsageStore()
        assert store.get(UsageKey("c1", "2025-03-01")) == 0
        assert len(store) == 0

    def test_increment_and_get(self):
        store = InMemoryUsageStore()
        key = UsageKey("c1", "2025-03-01")
        assert store.increment_and_get(key) == 1
        assert store.increment_and_get(key) == 2
        assert store.get(key) == 2
        assert store.get(UsageKey("c2", "2025-03-01")) == 0

    def test_increment_if_below_stops_at_limit(self):
        store = InMemoryUsageStore()
        key = UsageKey("c1", "2025-03-01")
        assert store.increment_if_below(key, 2) == (True, 1)
        assert store.increment_if_below(key, 2) == (True, 2)
        assert store.increment_if_below(key, 2) == (False, 2)
        assert store.get(key) == 2

    def test_increment_if_below_without_limit(self):
        store = InMemoryUsageStore()
        key = UsageKey("c1", "2025-03-01")
        for expected in range(1, 11):
            assert store.increment_if_below(key) == (True, expected)

    def test_only_counts_are_kept_per_key(self):
        store = InMemoryUsageStore()
        for i in range(50):
            store.increment_if_below(UsageKey(f"c{i}", "2025-03-01"), 5)
        assert len(store) == 50
        assert set(vars(store)) == {"_counts", "_lock"}

    def test_concurrent_increments_are_not_lost(self):
        store = InMemoryUsageStore()
        key = UsageKey("c1", "2025-03-01")
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: store.increment_and_get(key), range(200)))
        assert store.get(key) == 200


class TestEntitlementGate:
    def test_free_tier_admits_five_then_rejects(self, gate):
        decisions = [gate.admit("", "c1", NOON) for _ in range(7)]

        assert all(isinstance(d, Admitted) for d in decisions[:5])
        assert [d.used for d in decisions[:5]] == [1, 2, 3, 4, 5]
        for d in decisions[5:]:
            assert isinstance(d, Rejected)
            assert d.used == 5
            assert d.limit == 5
            assert d.is_pro is False

    def test_rejection_does_not_increment(self, gate, store):
        for _ in range(10):
            gate.admit("", "c1", NOON)
        assert store.get(UsageKey("c1", "2025-03-01")) == 5

    def test_pro_is_never_rejected(self, gate):
        decisions = [gate.admit(PRO_KEY, "c1", NOON) for _ in range(30)]
        assert all(isinstance(d, Admitted) for d in decisions)
        assert [d.used for d in decisions] == list(range(1, 31))
        assert all(d.limit == 999 and d.is_pro for d in decisions)

    def test_new_day_resets(self, gate):
        for _ in range(5):
            gate.admit("", "c1", NOON)
        assert isinstance(gate.admit("", "c1", NOON), Rejected)

        next_day = NOON + timedelta(days=1)
        d = gate.admit("", "c1", next_day)
        assert isinstance(d, Admitted)
        assert d.used == 1

    def test_clients_are_isolated(self, gate):
        for _ in range(5):
            gate.admit("", "c1", NOON)
        d = gate.admit("", "c2", NOON)
        assert isinstance(d, Admitted)
        assert d.used == 1

    def test_missing_client_shares_anon_bucket(self, gate, store):
        gate.admit("", None, NOON)
        gate.admit("", "", NOON)
        assert store.get(UsageKey("anon", "2025-03-01")) == 2

    def test_zero_free_limit_rejects_first_call(self, store):
        gate = EntitlementGate(store, PRO_KEY, free_limit=0)
        d = gate.admit("", "c1", NOON)
        assert isinstance(d, Rejected)
        assert d.used == 0
        assert d.limit == 0

    def test_long_distinct_client_ids_get_separate_counts(self, gate):
        for _ in range(3):
            gate.admit("", "a" * 201, NOON)
        d = gate.admit("", "b" * 201, NOON)
        assert isinstance(d, Admitted)
        assert d.used == 1

    def test_concurrent_requests_cannot_exceed_limit(self):
        store = InMemoryUsageStore()
        gate = EntitlementGate(store, PRO_KEY, free_limit=5)
        barrier = threading.Barrier(16)

        def _call(_):
            barrier.wait()
            return gate.admit("", "c1", NOON)

        with ThreadPoolExecutor(max_workers=16) as pool:
            decisions = list(pool.map(_call, range(16)))

        admitted = [d for d in decisions if isinstance(d, Admitted)]
        assert len(admitted) == 5
        assert sorted(d.used for d in admitted) == [1, 2, 3, 4, 5]
        assert store.get(UsageKey("c1", "2025-03-01")) == 5
