"""Navigator holding the selected month of the spending dashboard."""

from collections.abc import Callable
from datetime import date

from src.domain.models import TimeWindowCursor
from src.domain.services.dates import cursor_for, month_label, shift_month
from src.domain.services.validation import is_valid_month


CursorListener = Callable[[TimeWindowCursor], None]


class TimeWindowNavigator:
    """Own the (year, month) cursor shared by every spending view.

    The four navigation methods are the only way to move the cursor.
    Listeners are called synchronously after each effective change.
    """

    def __init__(self, today: Callable[[], date] | None = None) -> None:
        """Initialize the navigator on the current calendar month.

        Args:
            today: Optional clock returning the current date.
        """
        self._today = today or date.today
        self._cursor = cursor_for(self._today())
        self._listeners: list[CursorListener] = []

    @property
    def cursor(self) -> TimeWindowCursor:
        return self._cursor

    @property
    def month_label(self) -> str:
        return month_label(self._cursor)

    @property
    def is_current_month(self) -> bool:
        """Return True when the cursor is on today's month."""
        return self._cursor == cursor_for(self._today())

    def previous_month(self) -> TimeWindowCursor:
        """Move the cursor one month back."""
        year, month = self._cursor.year, self._cursor.month
        if month == 0:
            month = 11
            year -= 1
        else:
            month -= 1
        return self._move(TimeWindowCursor(year=year, month=month))

    def next_month(self) -> TimeWindowCursor:
        """Move the cursor one month forward."""
        year, month = self._cursor.year, self._cursor.month
        if month == 11:
            month = 0
            year += 1
        else:
            month += 1
        return self._move(TimeWindowCursor(year=year, month=month))

    def reset_to_current(self) -> TimeWindowCursor:
        """Move the cursor to the calendar month of the clock."""
        return self._move(cursor_for(self._today()))

    def select_month(self, year: int, month: int) -> TimeWindowCursor:
        """Move the cursor to an explicit month.

        Args:
            year: Calendar year.
            month: Zero-based month index.

        Returns:
            TimeWindowCursor: The new cursor.

        Raises:
            ValueError: If ``month`` is outside 0..11.
        """
        if not is_valid_month(month):
            raise ValueError(f"Month must be between 0 and 11, got {month!r}")
        return self._move(TimeWindowCursor(year=year, month=month))

    def available_months(self, count: int = 24) -> list[TimeWindowCursor]:
        """Return the last ``count`` months up to today, newest first."""
        current = cursor_for(self._today())
        return [shift_month(current, -offset) for offset in range(count)]

    def subscribe(self, listener: CursorListener) -> Callable[[], None]:
        """Register a cursor listener.

        Args:
            listener: Callable receiving the new cursor.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _move(self, cursor: TimeWindowCursor) -> TimeWindowCursor:
        if cursor == self._cursor:
            return cursor
        self._cursor = cursor
        for listener in list(self._listeners):
            listener(cursor)
        return cursor


__all__ = ["TimeWindowNavigator", "CursorListener"]
