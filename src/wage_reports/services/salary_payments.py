"""Salary payment feed.

Salary payments come from an external store and may arrive after the other
ledgers. The feed distinguishes three situations:

- not yet available: nothing has been delivered (``snapshot()`` is None)
- loading: a fetch is in flight
- loaded: ``data`` holds the last delivered collection

Consumers compute with ``data`` (empty until delivered) and subscribe to be
told when it changes.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import Callable

from wage_reports.reconciliation.types import SalaryPayment

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Iterable[SalaryPayment]]]
Subscriber = Callable[["SalaryPaymentFeed"], None]


class SalaryPaymentFeed:
    """Holds ``{data, loading, error}`` for the salary payment collection."""

    def __init__(self, collection: str = "salaryPayments") -> None:
        self.collection = collection
        self._data: tuple[SalaryPayment, ...] = ()
        self._loaded = False
        self._loading = False
        self._error: Exception | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def data(self) -> tuple[SalaryPayment, ...]:
        return self._data

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def error(self) -> Exception | None:
        return self._error

    def snapshot(self) -> tuple[SalaryPayment, ...] | None:
        """Delivered payments, or None if nothing has arrived yet."""
        return self._data if self._loaded else None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback. Returns an unsubscribe function.

        The HTTP API reads the feed per request and does not subscribe. This
        hook is for callers that embed the feed and keep derived state,
        such as a cached set of reports to recompute on delivery.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set(self, payments: Iterable[SalaryPayment]) -> None:
        """Deliver a collection directly."""
        self._data = tuple(payments)
        self._loaded = True
        self._loading = False
        self._error = None
        self._notify()

    async def load(self, fetcher: Fetcher) -> None:
        """Fetch the collection and deliver it.

        A failed fetch keeps the previous data and records the error. A
        cancelled fetch keeps the previous data and clears ``loading``.
        """
        self._loading = True
        self._notify()
        try:
            payments = tuple(await fetcher())
        except asyncio.CancelledError:
            logger.info("Load of %s cancelled", self.collection)
            self._stop_loading()
            raise
        except Exception as e:
            logger.exception("Failed to load %s", self.collection)
            self._error = e
            self._stop_loading()
            return

        logger.info("Loaded %s: %d payments", self.collection, len(payments))
        self.set(payments)

    def _stop_loading(self) -> None:
        self._loading = False
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Salary payment subscriber %r failed", callback)
