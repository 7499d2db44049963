"""
유틸리티 포트 (로깅, 표시 구간 계산)
"""
from abc import ABC, abstractmethod
from typing import Optional

from core.domain.calendar_date import CalendarDate
from core.domain.dates_range import DatesRange


class LoggerPort(ABC):
    """로거 인터페이스"""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def warning(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...


class DisplayedRangeCalculatorPort(ABC):
    """초기 표시 구간 계산 인터페이스"""

    @abstractmethod
    def calculate(
        self,
        initial_date: CalendarDate,
        min_date: Optional[CalendarDate] = None,
        max_date: Optional[CalendarDate] = None,
    ) -> DatesRange:
        """기준 날짜의 월을 포함하는 표시 구간 계산"""
