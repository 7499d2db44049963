"""
DataFrame 매퍼 구현
"""
from typing import Dict, List, Optional, Sequence

import pandas as pd

from core.domain.calendar_date import DayOfWeek
from core.domain.models import CalendarItem, DateItem, EmptyItem, MonthItem
from core.ports.data_ports import DataMapperPort

DAYS_IN_WEEK = 7


class DataFrameMapper(DataMapperPort):
    """
    캘린더 아이템 목록을 월별 DataFrame (주 x 요일)으로 변환하는 어댑터
    """

    # 요일 약어 (DayOfWeek 값 순서)
    DAY_ABBR = {
        DayOfWeek.SUNDAY: "Sun",
        DayOfWeek.MONDAY: "Mon",
        DayOfWeek.TUESDAY: "Tue",
        DayOfWeek.WEDNESDAY: "Wed",
        DayOfWeek.THURSDAY: "Thu",
        DayOfWeek.FRIDAY: "Fri",
        DayOfWeek.SATURDAY: "Sat",
    }

    # 셀 표시 기호
    SELECTED_MARK = "*"
    TODAY_MARK = "@"
    UNSELECTABLE_MARK = "~"
    INDICATOR_MARK = "+"

    def __init__(self, first_day_of_week: DayOfWeek = DayOfWeek.MONDAY):
        self.first_day_of_week = DayOfWeek.of(first_day_of_week)

    def weekday_columns(self) -> List[str]:
        """주의 첫 요일부터 시작하는 요일 컬럼명"""
        start = int(self.first_day_of_week) - 1
        order = [DayOfWeek((start + i) % DAYS_IN_WEEK + 1) for i in range(DAYS_IN_WEEK)]
        return [self.DAY_ABBR[day] for day in order]

    def to_dataframes(self, items: Sequence[CalendarItem]) -> Dict[str, pd.DataFrame]:
        """{'YYYY-MM': DataFrame} 변환 (시간 순서 유지)"""
        result: Dict[str, pd.DataFrame] = {}
        month_key: Optional[str] = None
        cells: List[str] = []

        for item in items:
            if isinstance(item, MonthItem):
                if month_key is not None:
                    result[month_key] = self._to_frame(cells)
                month_key = f"{item.date.year:04d}-{item.date.month:02d}"
                cells = []
            elif isinstance(item, DateItem):
                if month_key is None:
                    month_key = f"{item.date.year:04d}-{item.date.month:02d}"
                cells.append(self.format_cell(item))
            elif isinstance(item, EmptyItem):
                cells.append("")

        if month_key is not None:
            result[month_key] = self._to_frame(cells)

        return result

    def _to_frame(self, cells: List[str]) -> pd.DataFrame:
        # 7의 배수가 아니면 (불완전한 월) 빈 칸으로 채움
        padding = (-len(cells)) % DAYS_IN_WEEK
        cells = cells + [""] * padding
        weeks = [cells[i:i + DAYS_IN_WEEK] for i in range(0, len(cells), DAYS_IN_WEEK)]
        return pd.DataFrame(weeks, columns=self.weekday_columns())

    def format_cell(self, item: DateItem) -> str:
        """날짜 셀 표시 문자열 (예: '*15@')"""
        text = str(item.date.day)
        if item.is_selected:
            text = self.SELECTED_MARK + text
        if item.is_today:
            text += self.TODAY_MARK
        if item.indicators:
            text += self.INDICATOR_MARK
        if not item.is_selectable:
            text = self.UNSELECTABLE_MARK + text
        return text
