"""
날짜 값 객체 (일 단위)
"""
import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import IntEnum

from core.domain.exceptions import InvalidConfigurationError


class DayOfWeek(IntEnum):
    """
    요일 (java.util.Calendar 와 동일한 번호 체계)

    주의 첫 요일 설정값은 이 7개 값만 허용됩니다.
    """
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def of(cls, value) -> "DayOfWeek":
        """숫자(1~7) 또는 요일 이름으로 DayOfWeek 생성"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                value = int(name)
            elif name in cls.__members__:
                return cls[name]
            else:
                raise InvalidConfigurationError(f"잘못된 요일 값입니다: {value}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigurationError(f"잘못된 요일 값입니다: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise InvalidConfigurationError(f"잘못된 요일 값입니다: {value}")

    @classmethod
    def from_weekday(cls, weekday: int) -> "DayOfWeek":
        """date.weekday() (월=0 ~ 일=6) 값을 변환"""
        return cls((weekday + 1) % 7 + 1)


WEEKEND_DAYS = (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    불변 날짜 값 (연, 월, 일)

    비교/정렬은 (year, month, day) 튜플 기준이며
    항상 실제 존재하는 날짜만 표현합니다.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationError(
                f"존재하지 않는 날짜입니다: {self.year}-{self.month}-{self.day} ({e})"
            )

    # ------------------------------------------------------------------
    # 생성
    # ------------------------------------------------------------------
    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """'YYYY-MM-DD' 형식 문자열 파싱"""
        try:
            return cls.from_date(date.fromisoformat(str(text).strip()))
        except ValueError:
            raise InvalidConfigurationError(
                f"날짜 형식이 잘못되었습니다 (YYYY-MM-DD): {text}"
            )

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.to_date().isoformat()

    # ------------------------------------------------------------------
    # 파생 속성
    # ------------------------------------------------------------------
    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.from_weekday(self.to_date().weekday())

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def month_beginning(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def month_end(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, self.days_in_month)

    # ------------------------------------------------------------------
    # 연산
    # ------------------------------------------------------------------
    def plus_months(self, months: int) -> "CalendarDate":
        """
        월 단위 덧셈

        대상 월에 같은 일자가 없으면 그 달의 마지막 날로 맞춥니다 (1/31 + 1개월 = 2/28).
        """
        index = self.year * 12 + (self.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        last_day = calendar.monthrange(year, month)[1]
        return CalendarDate(year, month, min(self.day, last_day))

    def minus_months(self, months: int) -> "CalendarDate":
        return self.plus_months(-months)

    def plus_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def months_between(self, other: "CalendarDate") -> int:
        """self 에서 other 까지 넘어가는 월 경계 수 (부호 있음)"""
        return (other.year - self.year) * 12 + (other.month - self.month)

    def is_same_month(self, other: "CalendarDate") -> bool:
        return self.year == other.year and self.month == other.month

    def is_between(self, date_from: "CalendarDate", date_to: "CalendarDate") -> bool:
        """date_from <= self <= date_to (양 끝 포함)"""
        return date_from <= self <= date_to
