"""A holdall: a list of references with ordered traversal helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterator


class Holdall:
    """Collection of arbitrary references.

    New references are inserted at the head, so traversal visits them from
    the most recently put to the first one put. References are stored as
    given, without any check of their value.
    """

    def __init__(self) -> None:
        self._refs: deque[Any] = deque()

    def put(self, ref: Any) -> None:
        """Insert ref into the holdall."""
        self._refs.appendleft(ref)

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._refs)

    def apply(self, fun: Callable[[Any], int]) -> int:
        """Call fun(ref) on each reference in order.

        Stops at the first non-zero result and returns it; returns 0 otherwise.
        """
        for ref in self._refs:
            result = fun(ref)
            if result != 0:
                return result
        return 0

    def apply_context(
        self,
        context: Any,
        fun1: Callable[[Any, Any], Any],
        fun2: Callable[[Any, Any], int],
    ) -> int:
        """Call fun2(ref, fun1(context, ref)) on each reference in order.

        Stops at the first non-zero result and returns it; returns 0 otherwise.
        """
        for ref in self._refs:
            result = fun2(ref, fun1(context, ref))
            if result != 0:
                return result
        return 0

    def apply_context2(
        self,
        context1: Any,
        fun1: Callable[[Any, Any], Any],
        context2: Any,
        fun2: Callable[[Any, Any, Any], int],
    ) -> int:
        """Call fun2(context2, ref, fun1(context1, ref)) on each reference in order.

        Stops at the first non-zero result and returns it; returns 0 otherwise.
        """
        for ref in self._refs:
            result = fun2(context2, ref, fun1(context1, ref))
            if result != 0:
                return result
        return 0