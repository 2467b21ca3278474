"""Separate-chaining hash table driven by a user comparison and hash function."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

_LBNSLOTS_MIN = 6
_LDFACT_MAX_NUMER = 1
_LDFACT_MAX_DENOM = 1


def _max_entries(nslots: int) -> int:
    return nslots // _LDFACT_MAX_DENOM * _LDFACT_MAX_NUMER


@dataclass(slots=True)
class _Cell:
    key: Any
    value: Any


@dataclass(frozen=True)
class HashTableStats:
    """Health report of a hash table."""

    nslots: int
    nentries: int
    ldfactmax: float
    ldfactcurr: float
    maxlen: int
    postheo: float
    poscurr: float


class HashTable:
    """Table of key/value references with separate chaining.

    Keys are compared with ``compar(a, b)``, which returns 0 when the keys
    are equal, and pre-hashed with ``hashfun(key)``, which returns a
    non-negative integer. The number of slots is a power of two, starting at
    64 and doubling whenever the load factor would exceed 1.
    """

    def __init__(
        self,
        compar: Callable[[Any, Any], int],
        hashfun: Callable[[Any], int],
    ) -> None:
        self._compar = compar
        self._hashfun = hashfun
        self._slots: list[list[_Cell]] = []
        self._lbnslots = 0
        self._count = 0

    def _index(self, key: Any, lbnslots: int) -> int:
        return self._hashfun(key) % (1 << lbnslots)

    def _find(self, key: Any) -> tuple[list[_Cell] | None, int]:
        """Return the chain the key belongs to and its position, or -1."""
        if not self._slots:
            return None, -1
        chain = self._slots[self._index(key, self._lbnslots)]
        for pos, cell in enumerate(chain):
            if self._compar(key, cell.key) == 0:
                return chain, pos
        return chain, -1

    def _enlarge(self) -> None:
        lbm = _LBNSLOTS_MIN if not self._slots else self._lbnslots + 1
        new_slots: list[list[_Cell]] = [[] for _ in range(1 << lbm)]
        # Each new chain is fed by a single old chain, so order is kept.
        for chain in self._slots:
            for cell in chain:
                new_slots[self._index(cell.key, lbm)].append(cell)
        self._slots = new_slots
        self._lbnslots = lbm

    def add(self, key: Any, value: Any) -> Any:
        """Associate value with key.

        Returns the previous value if the key was present, else ``value``.
        Raises ValueError if ``value`` is None.
        """
        if value is None:
            raise ValueError("value must not be None")
        chain, pos = self._find(key)
        if chain is not None and pos >= 0:
            old = chain[pos].value
            chain[pos].value = value
            return old
        if self._count >= _max_entries(len(self._slots)):
            self._enlarge()
        self._slots[self._index(key, self._lbnslots)].append(_Cell(key, value))
        self._count += 1
        return value

    def remove(self, key: Any) -> Any:
        """Remove key and return its value, or None if it is absent."""
        chain, pos = self._find(key)
        if chain is None or pos < 0:
            return None
        cell = chain.pop(pos)
        self._count -= 1
        return cell.value

    def search(self, key: Any) -> Any:
        """Return the value associated with key, or None if it is absent."""
        chain, pos = self._find(key)
        if chain is None or pos < 0:
            return None
        return chain[pos].value

    def __len__(self) -> int:
        return self._count

    def get_stats(self) -> HashTableStats:
        """Compute a health report of the table."""
        m = len(self._slots)
        n = self._count
        lengths = [len(chain) for chain in self._slots]
        maxlen = max(lengths, default=0)
        s = sum(f * (f + 1) / 2.0 for f in lengths)
        r = n / m if m else math.nan
        return HashTableStats(
            nslots=m,
            nentries=n,
            ldfactmax=_LDFACT_MAX_NUMER / _LDFACT_MAX_DENOM,
            ldfactcurr=r,
            maxlen=maxlen,
            postheo=0.0 if n == 0 else 1.0 + (r - 1.0 / m) / 2.0,
            poscurr=s / n if n else math.nan,
        )

    def fprint_stats(self, stream: TextIO | None = None) -> None:
        """Write the health report to a text stream (standard output by default)."""
        out = sys.stdout if stream is None else stream
        hts = self.get_stats()
        rows = [
            ("n.slots", str(hts.nslots)),
            ("n.entries", str(hts.nentries)),
            ("ld.fact.max", f"{hts.ldfactmax:f}"),
            ("ld.fact.curr", f"{hts.ldfactcurr:f}"),
            ("max.len", str(hts.maxlen)),
            ("pos.theo", f"{hts.postheo:f}"),
            ("pos.curr", f"{hts.poscurr:f}"),
        ]
        out.write("--- Info: Hashtable stats\n")
        for name, value in rows:
            out.write(f"{name:>12}\t{value}\n")