"""
기본 날짜 정보 제공자
"""
from typing import Callable, Optional, Sequence

from core.domain.calendar_date import WEEKEND_DAYS, CalendarDate
from core.domain.dates_range import NullableDatesRange
from core.domain.models import DateIndicator
from core.ports.calendar_ports import DateInfoProvider

DateSelectionFilter = Callable[[CalendarDate], bool]


class DefaultDateInfoProvider(DateInfoProvider):
    """
    캘린더 서비스의 현재 상태를 조회 함수로 전달받아 응답하는 제공자

    선택 여부는 활성 선택 전략으로 위임되며, 제공자는 전략을 소유하지 않습니다.
    """

    def __init__(
        self,
        is_date_selected: Callable[[CalendarDate], bool],
        min_max_dates_range: Callable[[], NullableDatesRange],
        date_selection_filter: Callable[[], Optional[DateSelectionFilter]],
        date_indicators: Callable[[CalendarDate], Sequence[DateIndicator]],
        today: Optional[CalendarDate] = None,
    ):
        self._is_date_selected = is_date_selected
        self._min_max_dates_range = min_max_dates_range
        self._date_selection_filter = date_selection_filter
        self._date_indicators = date_indicators
        self.today = today or CalendarDate.today()

    def is_today(self, date: CalendarDate) -> bool:
        return date == self.today

    def is_date_selected(self, date: CalendarDate) -> bool:
        return self._is_date_selected(date)

    def is_date_out_of_range(self, date: CalendarDate) -> bool:
        return self._min_max_dates_range().is_date_out_of_range(date)

    def is_date_selectable(self, date: CalendarDate) -> bool:
        selection_filter = self._date_selection_filter()
        if selection_filter is None:
            return True
        return bool(selection_filter(date))

    def is_weekend(self, date: CalendarDate) -> bool:
        return date.day_of_week in WEEKEND_DAYS

    def get_date_indicators(self, date: CalendarDate) -> Sequence[DateIndicator]:
        return self._date_indicators(date)
