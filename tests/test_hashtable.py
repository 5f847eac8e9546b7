import itertools

import pytest

from jugsearch.hashtable import (
    HASH_TABLE_BASED_SIZE,
    MAX_KEY_SIZE,
    HashTable,
    KeyTooLongError,
    hash_key,
    is_prime,
    next_prime,
    state_key,
)
from jugsearch.problem import State


def test_state_key_documented_example():
    assert state_key(State((5, 2))) == "5,2"


def test_state_key_three_jugs_max_width_fits():
    key = state_key(State((99, 99, 99)))
    assert key.split(",") == ["99", "99", "99"]
    assert len(key) < MAX_KEY_SIZE


def test_state_key_too_long():
    with pytest.raises(KeyTooLongError):
        state_key(State((10**6, 10**6)))


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 29, 97])
def test_primes(p):
    assert is_prime(p)


@pytest.mark.parametrize("n", [0, 1, 4, 9, 15, 25, 100])
def test_non_primes(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", [0, 1, 2, 14, 25, 50, 90])
def test_next_prime_is_smallest_prime_not_below(n):
    p = next_prime(n)
    assert p >= n
    assert is_prime(p)
    assert not any(is_prime(k) for k in range(n, p))


def test_next_prime_of_prime_is_itself():
    assert next_prime(97) == 97


@pytest.mark.parametrize("key", ["0,0", "5,3", "4,1", "8,5,3", "a"])
def test_hash_in_range(key):
    for size in (2, 29, 59):
        assert 0 <= hash_key(key, size) < size


def test_new_table_size_is_prime():
    table = HashTable(HASH_TABLE_BASED_SIZE)
    assert is_prime(table.size)
    assert table.size >= HASH_TABLE_BASED_SIZE
    assert len(table) == 0


def test_insert_and_contains():
    table = HashTable()
    table.insert(State((5, 2)))
    assert State((5, 2)) in table
    assert State((2, 5)) not in table
    assert len(table) == 1


def test_growth_keeps_all_keys():
    table = HashTable()
    start = table.size
    states = [State(levels) for levels in itertools.product(range(9), range(6))]
    for state in states:
        table.insert(state)
    assert len(table) == len(states)
    assert table.size > start
    assert is_prime(table.size)
    assert all(state in table for state in states)
    assert State((9, 9)) not in table


def test_resize_preserves_contents():
    table = HashTable(5)
    for state in (State((1, 0)), State((0, 1)), State((3, 3))):
        table.insert(state)
    table.resize(40)
    assert table.size == next_prime(40)
    assert len(table) == 3
    assert State((3, 3)) in table


def test_describe_lists_every_key():
    table = HashTable()
    table.insert(State((5, 2)))
    table.insert(State((0, 3)))
    text = table.describe()
    lines = text.splitlines()
    assert lines[0] == f"HASH TABLE IS (Size = {table.size}, Count = 2 ): "
    assert sorted(line.split(" --> ")[1] for line in lines[1:]) == ["0,3", "5,2"]


def test_contains_rejects_non_state():
    table = HashTable()
    table.insert_key("5,2")
    assert "5,2" not in table
    assert State((5, 2)) in table