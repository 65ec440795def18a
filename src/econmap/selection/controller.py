"""Selection controller for the shared "current year".

The map and chart views both render the year held here. The slider (or the
HTTP layer standing in for it) is the only writer; views subscribe and are
notified synchronously whenever the year changes.

Re-entrancy: an observer that calls ``set_year`` or ``refresh`` while its
own notification is being delivered gets ``ReentrantUpdate``. Calls from
other threads are serialized and wait for the running fan-out to finish.
"""

from __future__ import annotations

import logging
import numbers
import threading
from typing import Callable, Iterable

logger = logging.getLogger(__name__)

YearObserver = Callable[[int], None]


class InvalidYear(ValueError):
    """Raised when a requested year is not one of the valid years."""

    def __init__(self, year: object, valid_years: Iterable[int]):
        self.year = year
        self.valid_years = tuple(valid_years)
        super().__init__(
            f"Year {year!r} is not available "
            f"(valid years: {self.valid_years[0]}-{self.valid_years[-1]})"
        )


class ReentrantUpdate(RuntimeError):
    """Raised when an observer tries to change the year during notification."""

    pass


class ObserverError(RuntimeError):
    """Raised after a fan-out in which one or more observers failed.

    Attributes:
        year: Year that was being delivered.
        failures: (observer, exception) pairs in notification order.
    """

    def __init__(self, year: int, failures: list[tuple[YearObserver, Exception]]):
        self.year = year
        self.failures = failures
        super().__init__(f"{len(failures)} observer(s) failed while notifying year {year}")


class Subscription:
    """Handle returned by SelectionController.subscribe()."""

    def __init__(self, controller: SelectionController, observer: YearObserver):
        self._controller = controller
        self.observer = observer
        self.active = True

    def unsubscribe(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        self._controller.unsubscribe(self)


class SelectionController:
    """Holds the current year and fans changes out to observers.

    Args:
        valid_years: Non-empty ordered sequence of selectable years.
        initial_year: Starting year. Falls back to the last valid year when
            omitted or not one of valid_years.

    Raises:
        ValueError: If valid_years is empty.
    """

    def __init__(self, valid_years: Iterable[int], initial_year: int | None = None):
        # Collapse duplicates, keep caller order
        years = tuple(dict.fromkeys(int(year) for year in valid_years))
        if not years:
            raise ValueError("valid_years must not be empty")

        self._valid_years = years
        self._valid_set = frozenset(years)

        if initial_year is not None and not self.is_valid(initial_year):
            logger.warning(
                f"Initial year {initial_year} not available, falling back to {years[-1]}"
            )
            initial_year = None
        self._year: int = years[-1] if initial_year is None else int(initial_year)

        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()
        self._notifying_thread: int | None = None

    @property
    def current_year(self) -> int:
        """Currently selected year."""
        return self._year

    @property
    def valid_years(self) -> tuple[int, ...]:
        return self._valid_years

    @property
    def observer_count(self) -> int:
        return len(self._subscriptions)

    def is_valid(self, year: object) -> bool:
        """True for an integer (not bool) that is one of valid_years."""
        # 2018.0 and True compare equal to ints but are not years
        if isinstance(year, bool) or not isinstance(year, numbers.Integral):
            return False
        return year in self._valid_set

    def subscribe(self, observer: YearObserver) -> Subscription:
        """Register an observer called with the new year on every change.

        Args:
            observer: Callable taking the selected year.

        Returns:
            Subscription handle; call unsubscribe() on it to stop.
        """
        subscription = Subscription(self, observer)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription. Unknown or inactive handles are ignored."""
        subscription.active = False
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def set_year(self, year: int) -> None:
        """Select a year and notify every observer once, in order.

        Validation happens before any state changes, so a rejected year
        leaves both the state and the views untouched.

        Args:
            year: Year to select.

        Raises:
            InvalidYear: If year is not one of valid_years.
            ReentrantUpdate: If called from inside an observer callback.
            ObserverError: If any observer raised; the new year is kept.
        """
        self._check_not_notifying()

        if not self.is_valid(year):
            raise InvalidYear(year, self._valid_years)

        with self._lock:
            self._year = int(year)
            self._notify(self._year)

    def refresh(self) -> None:
        """Notify every observer with the current year without changing it.

        Raises:
            ReentrantUpdate: If called from inside an observer callback.
            ObserverError: If any observer raised.
        """
        self._check_not_notifying()

        with self._lock:
            self._notify(self._year)

    def _check_not_notifying(self) -> None:
        if self._notifying_thread == threading.get_ident():
            raise ReentrantUpdate(
                f"Cannot change the selected year while notifying year {self._year}"
            )

    def _notify(self, year: int) -> None:
        """Deliver year to a snapshot of the current subscriptions.

        Must be called with the lock held.
        """
        failures: list[tuple[YearObserver, Exception]] = []
        subscriptions = list(self._subscriptions)

        self._notifying_thread = threading.get_ident()
        try:
            for subscription in subscriptions:
                # Unsubscribed by an earlier observer in this fan-out
                if not subscription.active:
                    continue
                try:
                    subscription.observer(year)
                except Exception as e:
                    logger.exception(f"Observer {subscription.observer!r} failed for year {year}")
                    failures.append((subscription.observer, e))
        finally:
            self._notifying_thread = None

        logger.debug(f"Notified {len(subscriptions)} observer(s) of year {year}")

        if failures:
            raise ObserverError(year, failures)
