"""
캘린더 코어가 사용하는 외부 협력자 포트
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from core.domain.calendar_date import CalendarDate
from core.domain.models import DateIndicator


class DateInfoProvider(ABC):
    """
    날짜별 상태 질의 인터페이스

    코어는 이 객체를 소유하지 않고 동기적으로 호출만 합니다.
    호출 사이에 답이 바뀔 수 있습니다 (예: 선택 필터 교체).
    """

    @abstractmethod
    def is_today(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def is_date_selected(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def is_date_out_of_range(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def is_date_selectable(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def is_weekend(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def get_date_indicators(self, date: CalendarDate) -> Sequence[DateIndicator]:
        ...


class DatePositionsPort(ABC):
    """
    날짜 -> 표시 위치 조회 인터페이스 (선택 전략이 무효화 위치를 계산할 때 사용)
    """

    @abstractmethod
    def find_date_position(self, date: CalendarDate) -> Optional[int]:
        """날짜 셀 위치, 창 밖이면 None"""

    @abstractmethod
    def find_date_positions(
        self, date_from: CalendarDate, date_to: CalendarDate
    ) -> List[int]:
        """[date_from, date_to] 구간에 속하면서 창 안에 있는 날짜 셀 위치들"""
