"""
날짜 구간 값 객체
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, Optional

from core.domain.calendar_date import CalendarDate
from core.domain.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class DatesRange:
    """
    양 끝을 포함하는 닫힌 날짜 구간 (date_from <= date_to)

    두 값이 모두 None 인 인스턴스는 "아직 아무것도 로드되지 않음"을 뜻하는
    빈 구간이며 DatesRange.empty() 로만 만듭니다.
    """
    date_from: Optional[CalendarDate]
    date_to: Optional[CalendarDate]

    def __post_init__(self):
        if (self.date_from is None) != (self.date_to is None):
            raise InvalidConfigurationError("구간의 시작/끝은 함께 지정해야 합니다")
        if self.date_from is not None and self.date_from > self.date_to:
            raise InvalidConfigurationError(
                f"구간 시작이 끝보다 늦습니다: {self.date_from} > {self.date_to}"
            )

    @classmethod
    def empty(cls) -> "DatesRange":
        return cls(None, None)

    @property
    def is_empty(self) -> bool:
        return self.date_from is None

    def __iter__(self) -> Iterator[Optional[CalendarDate]]:
        # date_from, date_to = dates_range
        return iter((self.date_from, self.date_to))

    def contains(self, date: CalendarDate) -> bool:
        if self.is_empty:
            return False
        return date.is_between(self.date_from, self.date_to)

    def with_from(self, date_from: CalendarDate) -> "DatesRange":
        return replace(self, date_from=date_from)

    def with_to(self, date_to: CalendarDate) -> "DatesRange":
        return replace(self, date_to=date_to)

    def to_dict(self) -> Optional[Dict[str, str]]:
        if self.is_empty:
            return None
        return {"from": str(self.date_from), "to": str(self.date_to)}

    @classmethod
    def from_dict(cls, data: Any) -> "DatesRange":
        if data is None:
            return cls.empty()
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"구간 형식이 잘못되었습니다: {data!r}")
        return cls(CalendarDate.parse(data["from"]), CalendarDate.parse(data["to"]))


@dataclass(frozen=True)
class NullableDatesRange:
    """
    선택적 최소/최대 경계

    어느 쪽이든 None 이면 그 방향으로는 제한이 없습니다.
    """
    date_from: Optional[CalendarDate] = None
    date_to: Optional[CalendarDate] = None

    def __iter__(self) -> Iterator[Optional[CalendarDate]]:
        return iter((self.date_from, self.date_to))

    def is_date_out_of_range(self, date: CalendarDate) -> bool:
        """존재하는 경계를 벗어났을 때만 True"""
        if self.date_from is not None and date < self.date_from:
            return True
        if self.date_to is not None and date > self.date_to:
            return True
        return False

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "from": str(self.date_from) if self.date_from else None,
            "to": str(self.date_to) if self.date_to else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "NullableDatesRange":
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"경계 형식이 잘못되었습니다: {data!r}")
        date_from = data.get("from")
        date_to = data.get("to")
        return cls(
            date_from=CalendarDate.parse(date_from) if date_from else None,
            date_to=CalendarDate.parse(date_to) if date_to else None,
        )
