"""Tests for chronological sorting."""
from app.services.sorting import sort_by_date


def test_sorts_ascending(make_movement):
    late, early, middle = make_movement(1, 20, 1), make_movement(2, 5, 1), make_movement(3, 10, 1)

    assert sort_by_date([late, early, middle]) == [early, middle, late]


def test_does_not_mutate_input(make_balance):
    balances = [make_balance(31, 1), make_balance(1, 1)]
    original = list(balances)

    result = sort_by_date(balances)

    assert balances == original
    assert result is not balances


def test_is_stable_for_equal_dates(make_movement):
    first, second, third = make_movement(1, 10, 1), make_movement(2, 10, 2), make_movement(3, 10, 3)

    assert sort_by_date([first, second, third]) == [first, second, third]
    assert sort_by_date([third, first, second]) == [third, first, second]


def test_is_idempotent(make_movement, make_balance):
    movements = sort_by_date([make_movement(1, 20, 1), make_movement(2, 3, 1), make_movement(3, 9, 1)])
    balances = sort_by_date([make_balance(31, 1), make_balance(1, 1), make_balance(15, 1)])

    assert sort_by_date(movements) == movements
    assert sort_by_date(balances) == balances


def test_accepts_custom_key():
    items = [{"when": 3}, {"when": 1}, {"when": 2}]

    assert sort_by_date(items, key=lambda i: i["when"]) == [{"when": 1}, {"when": 2}, {"when": 3}]


def test_empty_input():
    assert sort_by_date([]) == []
