"""
캘린더 그리드 아이템 생성 서비스
"""
from typing import List

from core.domain.calendar_date import CalendarDate, DayOfWeek
from core.domain.models import CalendarItem, DateItem, EmptyItem, MonthItem
from core.ports.calendar_ports import DateInfoProvider

DAYS_IN_WEEK = 7


class CalendarItemsGenerator:
    """
    날짜 구간을 주 단위로 정렬된 캘린더 아이템 목록으로 변환

    월마다 다음 순서로 생성합니다:
    1. MonthItem (월 헤더)
    2. 첫 주 앞쪽 EmptyItem (1일의 요일까지)
    3. 날짜별 DateItem
    4. 마지막 주 뒤쪽 EmptyItem (헤더 제외 셀 수가 7의 배수가 되도록)

    내부 상태가 없으므로 같은 인자와 같은 provider 상태에 대해 항상 같은 결과를 냅니다.
    """

    def __init__(self, first_day_of_week: DayOfWeek, date_info_provider: DateInfoProvider):
        self.first_day_of_week = DayOfWeek.of(first_day_of_week)
        self.date_info_provider = date_info_provider

    def generate_calendar_items(
        self, date_from: CalendarDate, date_to: CalendarDate
    ) -> List[CalendarItem]:
        """
        date_from 이 속한 월부터 date_to 가 속한 월까지 아이템 생성

        Args:
            date_from: 시작 날짜 (월 경계일 필요 없음)
            date_to: 끝 날짜 (월 경계일 필요 없음)

        Returns:
            List[CalendarItem]: 시간 순서의 아이템 목록 (date_from > date_to 이면 빈 목록)
        """
        items: List[CalendarItem] = []
        if date_from > date_to:
            return items

        month = date_from.month_beginning()
        last_month = date_to.month_beginning()

        while month <= last_month:
            items.extend(self.generate_month_items(month))
            month = month.plus_months(1)

        return items

    def generate_month_items(self, month_date: CalendarDate) -> List[CalendarItem]:
        """한 달 분량의 아이템 생성"""
        first_day = month_date.month_beginning()
        days_in_month = first_day.days_in_month

        leading = self.leading_empty_count(first_day)
        trailing = (-(leading + days_in_month)) % DAYS_IN_WEEK

        items: List[CalendarItem] = [MonthItem(date=first_day)]
        items.extend(EmptyItem() for _ in range(leading))
        items.extend(
            self.create_date_item(CalendarDate(first_day.year, first_day.month, day))
            for day in range(1, days_in_month + 1)
        )
        items.extend(EmptyItem() for _ in range(trailing))
        return items

    def leading_empty_count(self, first_day: CalendarDate) -> int:
        """1일 앞에 들어갈 빈 칸 수 (0~6)"""
        return (first_day.day_of_week - self.first_day_of_week) % DAYS_IN_WEEK

    def create_date_item(self, date: CalendarDate) -> DateItem:
        """provider 의 현재 응답으로 날짜 셀 플래그 계산"""
        provider = self.date_info_provider
        return DateItem(
            date=date,
            is_today=provider.is_today(date),
            is_selected=provider.is_date_selected(date),
            is_selectable=(
                not provider.is_date_out_of_range(date)
                and provider.is_date_selectable(date)
            ),
            is_weekend=provider.is_weekend(date),
            indicators=tuple(provider.get_date_indicators(date)),
        )
