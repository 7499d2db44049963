# src/core/domain/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from core.domain.calendar_date import CalendarDate


class SelectionMode(Enum):
    """
    날짜 선택 모드
    """
    NONE = "NONE"           # 선택 불가
    SINGLE = "SINGLE"       # 한 번에 하나의 날짜
    MULTIPLE = "MULTIPLE"   # 여러 날짜 (다시 누르면 해제)
    RANGE = "RANGE"         # 시작~끝 구간 (세 번째 선택 시 새 구간 시작)


@dataclass(frozen=True)
class DateIndicator:
    """
    특정 날짜에 표시할 색상 표시자
    """
    date: CalendarDate
    color: str


@dataclass(frozen=True)
class MonthItem:
    """
    월 헤더 (해당 월의 1일)
    """
    date: CalendarDate


@dataclass(frozen=True)
class DateItem:
    """
    날짜 셀

    플래그는 생성/갱신 시점에 DateInfoProvider 로부터 계산되며 저장되지 않습니다.
    """
    date: CalendarDate
    is_today: bool = False
    is_selected: bool = False
    is_selectable: bool = True
    is_weekend: bool = False
    indicators: Tuple[DateIndicator, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class EmptyItem:
    """
    7열 그리드를 맞추기 위한 빈 칸 (상호작용 없음)
    """


CalendarItem = Union[MonthItem, DateItem, EmptyItem]


@dataclass(frozen=True)
class ScrollUpdate:
    """
    스크롤 처리 결과

    prepended 만큼 기존 위치가 뒤로 밀렸으므로
    호출자는 스크롤 기준 위치를 그만큼 보정해야 합니다.
    """
    prepended: int = 0
    appended: int = 0
