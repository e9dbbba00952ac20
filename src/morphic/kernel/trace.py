"""Runtime trace infrastructure for law checks.

A Trace captures which instance was checked, which laws were evaluated,
over how many cases, with what outcome and how long each took. It never
influences the outcome of a check. Events form a flat list; the
check/law nesting is reconstructed on demand via as_tree().
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event: a check opening or closing, or one law."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects evidence while law checks run.

    A check is opened with check(), and each law inside it with law().
    Both are context managers yielding an info dict that the caller fills
    in; the event is recorded when the block exits, even on error.

    Performance guarantees:
    - Trace disabled → records nothing, spans still yield a scratch dict
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open_checks: list[int] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Append an event and return its id, or None when disabled.

        Without an explicit parent_id the innermost open check is the parent.
        """
        if not self.enabled:
            return None
        if parent_id is None and self._open_checks:
            parent_id = self._open_checks[-1]
        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=dict(info or {}),
                duration_ms=duration_ms,
            )
        )
        return event_id

    @contextmanager
    def check(self, instance: str) -> Iterator[dict[str, Any]]:
        """Span around one check of an instance.

        Records check_begin on entry and check_end on exit. The yielded
        dict becomes check_end's info; its outcome stays "error" unless
        the caller sets it, i.e. when the check raised.
        """
        begin_id = self.record("check_begin", info={"instance": instance})
        if begin_id is not None:
            self._open_checks.append(begin_id)
        info: dict[str, Any] = {"outcome": "error", "cases": 0}
        start_time = time.perf_counter()
        try:
            yield info
        finally:
            if begin_id is not None:
                self._open_checks.pop()
            self.record(
                "check_end",
                info=info,
                parent_id=begin_id,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )

    @contextmanager
    def law(self, name: str) -> Iterator[dict[str, Any]]:
        """Timed span around the evaluation of a single law."""
        info: dict[str, Any] = {"law": name, "cases": 0, "outcome": "error"}
        start_time = time.perf_counter()
        try:
            yield info
        finally:
            self.record("law", info=info, duration_ms=(time.perf_counter() - start_time) * 1000)

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find(self, action: str) -> list[Evidence]:
        """All events recorded under the given action name."""
        return [ev for ev in self._events if ev.action == action]

    def violations(self) -> list[Evidence]:
        """Law events whose outcome was a failure."""
        return [ev for ev in self.find("law") if ev.info.get("outcome") == "fail"]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent_id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open_checks.clear()
