"""Punch fetch strategies used by the report service.

Both return ``{date: [PunchEvent, ...]}`` for every date of the requested
range, so the classification code never knows how the events were loaded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import date
from typing import Dict, List

from ..common.datetime_utils import day_bounds, iter_dates
from ..core.enums import FetchStrategy
from ..employees.model import Employee
from ..punches.model import PunchEvent
from ..punches.repository import PunchEventRepository

EventsByDate = Dict[date, List[PunchEvent]]


class PunchFetcher(ABC):
    def __init__(self, punches: PunchEventRepository):
        self._punches = punches

    @abstractmethod
    def fetch(self, employee: Employee, start: date, end: date) -> EventsByDate:
        raise NotImplementedError


class SequentialPunchFetcher(PunchFetcher):
    """One repository round trip per employee per date."""

    def fetch(self, employee: Employee, start: date, end: date) -> EventsByDate:
        result: EventsByDate = {}
        for day in iter_dates(start, end):
            day_start, day_end = day_bounds(day)
            result[day] = list(self._punches.list_for_employee(employee.emp_code, day_start, day_end))
        return result


class BatchedPunchFetcher(PunchFetcher):
    """One repository round trip per employee for the whole range."""

    def fetch(self, employee: Employee, start: date, end: date) -> EventsByDate:
        range_start, _ = day_bounds(start)
        _, range_end = day_bounds(end)

        grouped: dict[date, list[PunchEvent]] = defaultdict(list)
        for event in self._punches.list_for_employee(employee.emp_code, range_start, range_end):
            grouped[event.timestamp.date()].append(event)
        return {day: grouped.get(day, []) for day in iter_dates(start, end)}


def build_fetcher(strategy: str | FetchStrategy, punches: PunchEventRepository) -> PunchFetcher:
    if not isinstance(strategy, FetchStrategy):
        strategy = FetchStrategy(str(strategy).strip().lower())
    if strategy == FetchStrategy.BATCHED:
        return BatchedPunchFetcher(punches)
    return SequentialPunchFetcher(punches)
