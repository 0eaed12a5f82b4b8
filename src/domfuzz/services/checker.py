"""StatusChecker — bounded-concurrency liveness checks on one event loop.

A feeder task pulls candidates from the (synchronous) pipeline, acquires a
semaphore slot, and spawns one check task per candidate. Check tasks post
their results to a queue; the consuming async generator is the single
aggregator and the only writer of :class:`CheckProgress`.

Each candidate gets exactly one attempt bounded by ``per_check_timeout``.
Timeouts and resolver failures become statuses and never abort the run.
Closing the result stream cancels the feeder and every in-flight check.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from domfuzz.domain.errors import ErrorKind, NetworkTimeoutError
from domfuzz.domain.models import Candidate, CheckResult
from domfuzz.domain.types import CheckStatus, Classification

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    """Anything that can classify a registrable domain name."""

    async def resolve(self, name: str, timeout: float) -> Classification: ...


@dataclass
class CheckProgress:
    """Completed/total counters, updated only by the aggregator."""

    completed: int = 0
    total: int = 0


_SUBMITTED = object()
_DONE = object()


class StatusChecker:
    """Resolve candidates under an ``asyncio.Semaphore(concurrency_limit)``."""

    def __init__(
        self,
        resolver: Resolver,
        *,
        concurrency_limit: int,
        per_check_timeout: float,
        preserve_order: bool = False,
        on_progress: Callable[[CheckProgress], None] | None = None,
    ) -> None:
        if concurrency_limit <= 0:
            raise ValueError("concurrency_limit must be positive")
        self.resolver = resolver
        self.concurrency_limit = concurrency_limit
        self.per_check_timeout = per_check_timeout
        self.preserve_order = preserve_order
        self.on_progress = on_progress
        self.progress = CheckProgress()

    async def _check_one(
        self,
        index: int,
        candidate: Candidate,
        queue: asyncio.Queue,
        slots: asyncio.Semaphore,
    ) -> None:
        name = candidate.domain.registrable.name
        timeout = self.per_check_timeout
        try:
            classification = await asyncio.wait_for(self.resolver.resolve(name, timeout), timeout)
            result = CheckResult(candidate, CheckStatus.from_classification(classification))
        except (TimeoutError, NetworkTimeoutError):
            result = CheckResult(candidate, CheckStatus.TIMED_OUT, ErrorKind.NETWORK_TIMEOUT.value)
        except Exception as exc:
            logger.debug("Status check failed for %s", name, exc_info=True)
            result = CheckResult(candidate, CheckStatus.ERROR, f"{ErrorKind.RESOLUTION_FAILURE.value}: {exc}")
        finally:
            slots.release()
        queue.put_nowait((index, result))

    async def _feed(
        self,
        candidates: Iterable[Candidate],
        queue: asyncio.Queue,
        tasks: set[asyncio.Task],
    ) -> None:
        slots = asyncio.Semaphore(self.concurrency_limit)
        try:
            for index, candidate in enumerate(candidates):
                await slots.acquire()
                task = asyncio.create_task(self._check_one(index, candidate, queue, slots))
                tasks.add(task)
                task.add_done_callback(tasks.discard)
                queue.put_nowait(_SUBMITTED)
            if tasks:
                await asyncio.gather(*tasks)
        finally:
            queue.put_nowait(_DONE)

    def _notify(self) -> None:
        if self.on_progress is not None:
            self.on_progress(self.progress)

    async def check(self, candidates: Iterable[Candidate]) -> AsyncIterator[CheckResult]:
        """Yield a terminal :class:`CheckResult` for every candidate.

        Completion order by default; submission order with ``preserve_order``.
        Consume with ``contextlib.aclosing`` so early exit cancels checks.
        """
        self.progress = progress = CheckProgress()
        queue: asyncio.Queue = asyncio.Queue()
        tasks: set[asyncio.Task] = set()
        feeder = asyncio.create_task(self._feed(candidates, queue, tasks))
        buffered: dict[int, CheckResult] = {}
        next_index = 0
        try:
            while True:
                item = await queue.get()
                if item is _DONE:
                    break
                if item is _SUBMITTED:
                    progress.total += 1
                    self._notify()
                    continue
                index, result = item
                progress.completed += 1
                self._notify()
                if not self.preserve_order:
                    yield result
                    continue
                buffered[index] = result
                while next_index in buffered:
                    yield buffered.pop(next_index)
                    next_index += 1
            await feeder
        finally:
            pending = [feeder, *tasks]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
