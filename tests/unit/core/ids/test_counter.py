"""Tests for the counter client id issuer."""

from __future__ import annotations

import threading

import pytest

from wellcheck.core.ids import ClientIdIssuer
from wellcheck.core.ids.counter import CounterClientIdIssuer


class TestCounterClientIdIssuer:
    def test_first_id_is_start_plus_one(self):
        issuer = CounterClientIdIssuer()
        assert issuer.next_id() == "0001"
        assert issuer.next_id() == "0002"
        assert issuer.last_issued == 2

    def test_custom_start_and_width(self):
        issuer = CounterClientIdIssuer(start=41, width=6)
        assert issuer.next_id() == "000042"

    def test_wide_values_not_truncated(self):
        issuer = CounterClientIdIssuer(start=9999, width=4)
        assert issuer.next_id() == "10000"

    def test_satisfies_protocol(self):
        assert isinstance(CounterClientIdIssuer(), ClientIdIssuer)

    @pytest.mark.parametrize("kwargs", [{"start": -1}, {"width": 0}])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            CounterClientIdIssuer(**kwargs)

    def test_concurrent_ids_are_unique(self):
        issuer = CounterClientIdIssuer()
        issued: list[str] = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                value = issuer.next_id()
                with lock:
                    issued.append(value)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(issued) == 400
        assert len(set(issued)) == 400
        assert issuer.last_issued == 400
