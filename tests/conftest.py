"""
공용 테스트 픽스처
"""
from typing import Dict, Iterable, List, Optional

import pytest

from core.domain.calendar_date import WEEKEND_DAYS, CalendarDate, DayOfWeek
from core.domain.models import DateIndicator
from core.ports.calendar_ports import DateInfoProvider
from core.services.calendar_items_generator import CalendarItemsGenerator
from core.services.calendar_window import CalendarWindow


class StubDateInfoProvider(DateInfoProvider):
    """집합으로 응답을 지정하는 테스트용 제공자"""

    def __init__(
        self,
        today: Optional[CalendarDate] = None,
        selected: Iterable[CalendarDate] = (),
        out_of_range: Iterable[CalendarDate] = (),
        unselectable: Iterable[CalendarDate] = (),
        indicators: Optional[Dict[CalendarDate, List[DateIndicator]]] = None,
    ):
        self.today = today
        self.selected = set(selected)
        self.out_of_range = set(out_of_range)
        self.unselectable = set(unselectable)
        self.indicators = indicators or {}

    def is_today(self, date):
        return date == self.today

    def is_date_selected(self, date):
        return date in self.selected

    def is_date_out_of_range(self, date):
        return date in self.out_of_range

    def is_date_selectable(self, date):
        return date not in self.unselectable

    def is_weekend(self, date):
        return date.day_of_week in WEEKEND_DAYS

    def get_date_indicators(self, date):
        return self.indicators.get(date, [])


@pytest.fixture
def date_info_provider():
    return StubDateInfoProvider(today=CalendarDate(2024, 6, 15))


@pytest.fixture
def generator(date_info_provider):
    """월요일 시작 생성기"""
    return CalendarItemsGenerator(DayOfWeek.MONDAY, date_info_provider)


@pytest.fixture
def window(generator):
    """2024년 6월 ~ 7월이 로드된 창"""
    calendar_window = CalendarWindow()
    calendar_window.reset(
        generator.generate_calendar_items(CalendarDate(2024, 6, 1), CalendarDate(2024, 7, 31))
    )
    return calendar_window
