from __future__ import annotations

import json
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from train_search.domain.models import Criterion, TimeOfDay
from train_search.domain.store import load_store
from train_search.engine import (
    as_criterion,
    available_criteria,
    find_trains,
    matches,
    sort_key_for,
    top,
)
from train_search.exceptions import ConfigurationError


def _store(trains):
    return load_store(json.dumps(trains))


def _ids(records):
    return [record.train_id for record in records]


def test_price_ranks_cheapest_first(sample_store):
    assert _ids(find_trains(sample_store, 10, 20, Criterion.PRICE)) == [2, 1]


def test_arrival_time_ranks_earliest_first(sample_store):
    assert _ids(find_trains(sample_store, 10, 20, Criterion.ARRIVAL_TIME)) == [1, 2]


def test_departure_time_ranks_earliest_first(sample_store):
    assert _ids(find_trains(sample_store, 10, 20, Criterion.DEPARTURE_TIME)) == [1, 2]


def test_no_match_on_arrival_station_is_empty(sample_store):
    assert find_trains(sample_store, 10, 99, Criterion.PRICE) == []


def test_empty_store_is_empty_result():
    assert find_trains(_store([]), 1, 2, Criterion.PRICE) == []


def test_direction_matters(sample_store):
    assert _ids(find_trains(sample_store, 20, 10, Criterion.PRICE)) == [5]


def test_equal_prices_keep_store_order(train_factory):
    store = _store(
        [
            train_factory(3, price=40.0),
            train_factory(9, price=45.0),
            train_factory(4, price=40.0),
        ]
    )
    assert _ids(find_trains(store, 10, 20, Criterion.PRICE)) == [3, 4, 9]


def test_equal_times_keep_store_order(train_factory):
    store = _store(
        [
            train_factory(8, arrival_time="12:00:00"),
            train_factory(7, arrival_time="06:00:00"),
            train_factory(6, arrival_time="12:00:00"),
        ]
    )
    assert _ids(find_trains(store, 10, 20, Criterion.ARRIVAL_TIME)) == [7, 8, 6]


def test_times_compare_by_clock_value_only(train_factory):
    store = _store(
        [
            train_factory(1, departure_time="23:59:59"),
            train_factory(2, departure_time="00:00:01"),
            train_factory(3, departure_time="12:00:00"),
        ]
    )
    assert _ids(find_trains(store, 10, 20, Criterion.DEPARTURE_TIME)) == [2, 3, 1]


def test_self_loop_pair_matches(train_factory):
    store = _store([train_factory(1, departure=5, arrival=5), train_factory(2, departure=5, arrival=6)])
    assert _ids(find_trains(store, 5, 5, Criterion.PRICE)) == [1]


def test_negative_prices_sort_normally(train_factory):
    store = _store([train_factory(1, price=0.0), train_factory(2, price=-10.0)])
    assert _ids(find_trains(store, 10, 20, Criterion.PRICE)) == [2, 1]


def test_results_are_store_objects_and_store_untouched(sample_store):
    before = list(sample_store)
    results = find_trains(sample_store, 10, 20, Criterion.PRICE)
    assert results[0] is sample_store[1]
    assert list(sample_store) == before


def test_filter_is_exact_and_complete():
    rng = random.Random(7)
    trains = [
        {
            "trainId": i,
            "departureStationId": rng.randint(1, 4),
            "arrivalStationId": rng.randint(1, 4),
            "price": float(rng.randint(1, 5)),
            "arrivalTime": f"{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00",
            "departureTime": f"{rng.randint(0, 23):02d}:00:00",
        }
        for i in range(300)
    ]
    store = _store(trains)
    for dep in range(1, 5):
        for arr in range(1, 5):
            for criterion in Criterion:
                results = find_trains(store, dep, arr, criterion)
                expected = [r for r in store if matches(r, dep, arr)]
                assert all(matches(r, dep, arr) for r in results)
                assert sorted(_ids(results)) == sorted(_ids(expected))
                key = sort_key_for(criterion)
                # Stable: equal keys appear in store order.
                assert results == sorted(expected, key=key)
                assert find_trains(store, dep, arr, criterion) == results


def test_concurrent_queries_share_store(sample_store):
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(
            pool.map(lambda _: _ids(find_trains(sample_store, 10, 20, Criterion.PRICE)), range(20))
        )
    assert all(ids == [2, 1] for ids in results)


def test_sort_key_for_each_criterion(sample_store):
    record = sample_store[0]
    assert sort_key_for(Criterion.PRICE)(record) == 50.0
    assert sort_key_for(Criterion.ARRIVAL_TIME)(record) == TimeOfDay(9, 0, 0)
    assert sort_key_for(Criterion.DEPARTURE_TIME)(record) == TimeOfDay(8, 0, 0)


def test_sort_key_for_rejects_unknown_names():
    with pytest.raises(ConfigurationError, match="unsupported criteria"):
        sort_key_for("cheapest")


def test_criterion_names_are_accepted(sample_store):
    assert _ids(find_trains(sample_store, 10, 20, "price")) == [2, 1]
    assert _ids(find_trains(sample_store, 10, 20, "arrival-time")) == [1, 2]
    assert as_criterion("departure-time") is Criterion.DEPARTURE_TIME
    assert as_criterion(Criterion.PRICE) is Criterion.PRICE


def test_available_criteria_sorted():
    assert available_criteria() == ["arrival-time", "departure-time", "price"]


def test_top_truncates_without_failing_on_short_results(train_factory):
    store = _store([train_factory(i, price=float(10 - i)) for i in range(5)])
    results = find_trains(store, 10, 20, Criterion.PRICE)
    assert _ids(top(results, 3)) == [4, 3, 2]
    assert _ids(top(results[:2], 3)) == [4, 3]
    assert top([], 3) == []


@pytest.mark.parametrize("n", [0, -1])
def test_top_rejects_non_positive_n(n):
    with pytest.raises(ConfigurationError):
        top([], n)
