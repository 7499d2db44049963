"""
초기 표시 구간 계산 어댑터
"""
from typing import Optional

from config import config
from core.domain.calendar_date import CalendarDate
from core.domain.dates_range import DatesRange
from core.domain.exceptions import InvalidConfigurationError
from core.ports.utility_ports import DisplayedRangeCalculatorPort


class DisplayedRangeCalculator(DisplayedRangeCalculatorPort):
    """
    기준 날짜 주변의 표시 구간 계산 구현

    비즈니스 룰:
    - 기준 월 앞뒤로 months_per_page 개월씩 (월 경계로 맞춤)
    - 최소/최대 날짜가 있으면 그 안으로 자름
    - 기준 날짜가 경계 밖이면 경계로 당겨서 최소 한 달은 항상 포함
    """

    def __init__(self, months_per_page: Optional[int] = None):
        if months_per_page is None:
            months_per_page = config.MONTHS_PER_PAGE
        if months_per_page < 1:
            raise InvalidConfigurationError(f"페이지 크기는 1 이상이어야 합니다: {months_per_page}")
        self.months_per_page = months_per_page

    def calculate(
        self,
        initial_date: CalendarDate,
        min_date: Optional[CalendarDate] = None,
        max_date: Optional[CalendarDate] = None,
    ) -> DatesRange:
        """표시 구간 계산"""
        anchor = initial_date
        if min_date is not None and anchor < min_date:
            anchor = min_date
        if max_date is not None and anchor > max_date:
            anchor = max_date

        date_from = anchor.minus_months(self.months_per_page).month_beginning()
        date_to = anchor.plus_months(self.months_per_page).month_end()

        if min_date is not None:
            date_from = max(date_from, min_date)
        if max_date is not None:
            date_to = min(date_to, max_date)

        return DatesRange(date_from=date_from, date_to=date_to)
