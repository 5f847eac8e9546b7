"""Open-addressing hash table of state keys, used as the explored set."""

from __future__ import annotations

from typing import Optional

from .problem import State

HASH_TABLE_BASED_SIZE = 25
HASH_TABLE_INCREASING_RATE = 70
MAX_KEY_SIZE = 12
_HASH_BASE = 151


class KeyTooLongError(ValueError):
    """A state's key does not fit in MAX_KEY_SIZE characters."""


class HashTableFullError(RuntimeError):
    """Every slot of the table is taken."""


def state_key(state: State) -> str:
    """Comma-separated jug levels, e.g. levels (5, 2) give "5,2"."""
    key = ",".join(str(level) for level in state.jug_levels)
    if len(key) >= MAX_KEY_SIZE:
        raise KeyTooLongError(f"key {key!r} exceeds MAX_KEY_SIZE ({MAX_KEY_SIZE})")
    return key


def is_prime(x: int) -> bool:
    if x < 2:
        return False
    return all(x % i for i in range(2, x // 2 + 1))


def next_prime(x: int) -> int:
    """The smallest prime not below ``x``."""
    while not is_prime(x):
        x += 1
    return x


def hash_key(key: str, size: int) -> int:
    """Polynomial string hash reduced modulo ``size``."""
    value = 0
    length = len(key)
    for i, ch in enumerate(key):
        value = (value + pow(_HASH_BASE, length - (i + 1)) * ord(ch)) % size
    return value


class HashTable:
    """Linear-probing set of state keys that grows past 70% load."""

    def __init__(self, size: int = HASH_TABLE_BASED_SIZE) -> None:
        self.size = next_prime(size)
        self.count = 0
        self._slots: list[Optional[str]] = [None] * self.size

    def __len__(self) -> int:
        return self.count

    def __contains__(self, state: object) -> bool:
        if not isinstance(state, State):
            return False
        key = state_key(state)
        first = index = hash_key(key, self.size)
        while self._slots[index] is not None:
            if self._slots[index] == key:
                return True
            index = (index + 1) % self.size
            if index == first:
                return False
        return False

    def insert(self, state: State) -> None:
        self.insert_key(state_key(state))

    def insert_key(self, key: str) -> None:
        if self.count * 100 // self.size > HASH_TABLE_INCREASING_RATE:
            self.resize(self.size * 2)
        if self.count == self.size:
            raise HashTableFullError("hash table is full")
        index = hash_key(key, self.size)
        while self._slots[index] is not None:
            index = (index + 1) % self.size
        self._slots[index] = key
        self.count += 1

    def resize(self, size: int) -> None:
        """Rehash every key into a table of ``next_prime(size)`` slots."""
        bigger = HashTable(size)
        for key in self._slots:
            if key is not None:
                bigger.insert_key(key)
        self.size, self.count, self._slots = bigger.size, bigger.count, bigger._slots

    def describe(self) -> str:
        lines = [f"HASH TABLE IS (Size = {self.size}, Count = {self.count} ): "]
        lines.extend(
            f"[{i}] --> {key}" for i, key in enumerate(self._slots) if key is not None
        )
        return "\n".join(lines)