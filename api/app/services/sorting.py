from operator import attrgetter
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

by_date = attrgetter("date")


def sort_by_date(items: Iterable[T], key: Callable[[T], object] = by_date) -> list[T]:
    """Return a new list ordered by ascending date. Ties keep their input order."""
    return sorted(items, key=key)
