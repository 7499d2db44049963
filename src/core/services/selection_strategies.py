"""
날짜 선택 전략 (NONE / SINGLE / MULTIPLE / RANGE)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Set

from core.domain.calendar_date import CalendarDate
from core.domain.exceptions import InvalidConfigurationError
from core.domain.models import SelectionMode
from core.ports.calendar_ports import DateInfoProvider, DatePositionsPort

BUNDLE_SINGLE_DATE = "selection.single.date"
BUNDLE_MULTIPLE_DATES = "selection.multiple.dates"
BUNDLE_RANGE_FROM = "selection.range.from"
BUNDLE_RANGE_TO = "selection.range.to"


def _parse_date(value: Any) -> CalendarDate:
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"저장된 날짜 형식이 잘못되었습니다: {value!r}")
    return CalendarDate.parse(value)


class DateSelectionStrategy(ABC):
    """
    선택 전략 공통 인터페이스

    on_date_selected 는 선택 상태를 바꾸고 다시 그려야 하는 위치 집합을 반환합니다.
    범위를 벗어났거나 선택 불가인 날짜는 상태 변경 없이 빈 집합을 반환합니다.
    """

    def __init__(
        self,
        date_positions: DatePositionsPort,
        date_info_provider: DateInfoProvider,
    ):
        self.date_positions = date_positions
        self.date_info_provider = date_info_provider

    def on_date_selected(self, date: CalendarDate) -> Set[int]:
        if not self.can_select(date):
            return set()
        return self._select(date)

    def can_select(self, date: CalendarDate) -> bool:
        provider = self.date_info_provider
        return not provider.is_date_out_of_range(date) and provider.is_date_selectable(date)

    def _positions_of(self, *dates: Optional[CalendarDate]) -> Set[int]:
        positions = set()
        for date in dates:
            if date is None:
                continue
            position = self.date_positions.find_date_position(date)
            if position is not None:
                positions.add(position)
        return positions

    @abstractmethod
    def _select(self, date: CalendarDate) -> Set[int]:
        ...

    @abstractmethod
    def is_date_selected(self, date: CalendarDate) -> bool:
        ...

    @abstractmethod
    def get_selected_dates(self) -> List[CalendarDate]:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def save_selected_dates(self, bundle: Dict[str, Any]) -> None:
        """선택 상태를 bundle 에 기록"""

    @abstractmethod
    def restore_selected_dates(self, bundle: Mapping[str, Any]) -> None:
        """
        bundle 에서 선택 상태 복원

        값이 없으면 빈 선택으로 남고, 형식이 잘못되면 InvalidConfigurationError
        """


class NoDateSelectionStrategy(DateSelectionStrategy):
    """선택 불가 모드"""

    def __init__(
        self,
        date_positions: Optional[DatePositionsPort] = None,
        date_info_provider: Optional[DateInfoProvider] = None,
    ):
        super().__init__(date_positions, date_info_provider)

    def on_date_selected(self, date: CalendarDate) -> Set[int]:
        return set()

    def _select(self, date: CalendarDate) -> Set[int]:
        return set()

    def is_date_selected(self, date: CalendarDate) -> bool:
        return False

    def get_selected_dates(self) -> List[CalendarDate]:
        return []

    def clear(self) -> None:
        pass

    def save_selected_dates(self, bundle: Dict[str, Any]) -> None:
        pass

    def restore_selected_dates(self, bundle: Mapping[str, Any]) -> None:
        pass


class SingleDateSelectionStrategy(DateSelectionStrategy):
    """
    단일 선택

    새 날짜를 고르면 이전 날짜는 해제되고,
    이미 선택된 날짜를 다시 고르면 해제됩니다.
    """

    def __init__(self, date_positions: DatePositionsPort, date_info_provider: DateInfoProvider):
        super().__init__(date_positions, date_info_provider)
        self.selected_date: Optional[CalendarDate] = None

    def _select(self, date: CalendarDate) -> Set[int]:
        previous = self.selected_date
        if previous == date:
            self.selected_date = None
            return self._positions_of(date)

        self.selected_date = date
        return self._positions_of(previous, date)

    def is_date_selected(self, date: CalendarDate) -> bool:
        return self.selected_date == date

    def get_selected_dates(self) -> List[CalendarDate]:
        return [self.selected_date] if self.selected_date else []

    def clear(self) -> None:
        self.selected_date = None

    def save_selected_dates(self, bundle: Dict[str, Any]) -> None:
        bundle[BUNDLE_SINGLE_DATE] = str(self.selected_date) if self.selected_date else None

    def restore_selected_dates(self, bundle: Mapping[str, Any]) -> None:
        self.selected_date = None
        value = bundle.get(BUNDLE_SINGLE_DATE)
        if value is not None:
            self.selected_date = _parse_date(value)


class MultipleDateSelectionStrategy(DateSelectionStrategy):
    """
    다중 선택 (선택 순서 유지, 다시 고르면 해제)
    """

    def __init__(self, date_positions: DatePositionsPort, date_info_provider: DateInfoProvider):
        super().__init__(date_positions, date_info_provider)
        # dict 를 삽입 순서가 유지되는 집합으로 사용
        self.selected_dates: Dict[CalendarDate, None] = {}

    def _select(self, date: CalendarDate) -> Set[int]:
        if date in self.selected_dates:
            del self.selected_dates[date]
        else:
            self.selected_dates[date] = None
        return self._positions_of(date)

    def is_date_selected(self, date: CalendarDate) -> bool:
        return date in self.selected_dates

    def get_selected_dates(self) -> List[CalendarDate]:
        return list(self.selected_dates)

    def clear(self) -> None:
        self.selected_dates.clear()

    def save_selected_dates(self, bundle: Dict[str, Any]) -> None:
        bundle[BUNDLE_MULTIPLE_DATES] = [str(date) for date in self.selected_dates]

    def restore_selected_dates(self, bundle: Mapping[str, Any]) -> None:
        self.selected_dates.clear()
        values = bundle.get(BUNDLE_MULTIPLE_DATES)
        if values is None:
            return
        if not isinstance(values, list):
            raise InvalidConfigurationError(f"저장된 선택 목록 형식이 잘못되었습니다: {values!r}")
        restored = [_parse_date(value) for value in values]
        self.selected_dates.update((date, None) for date in restored)


class RangeDateSelectionStrategy(DateSelectionStrategy):
    """
    구간 선택

    상태 전이: 비어있음 -> 시작만 선택 -> 시작/끝 선택 -> (새 시작만 선택)
    세 번째 선택은 기존 구간을 지우고 새 구간을 시작합니다 (확장하지 않음).
    """

    def __init__(self, date_positions: DatePositionsPort, date_info_provider: DateInfoProvider):
        super().__init__(date_positions, date_info_provider)
        self.date_from: Optional[CalendarDate] = None
        self.date_to: Optional[CalendarDate] = None

    def _select(self, date: CalendarDate) -> Set[int]:
        date_from, date_to = self.date_from, self.date_to

        # 1. 비어있음 -> 시작 선택
        if date_from is None:
            self.date_from = date
            return self._positions_of(date)

        # 2. 시작만 선택된 상태
        if date_to is None:
            if date == date_from:
                self.date_from = None
                return self._positions_of(date)

            self.date_from, self.date_to = min(date_from, date), max(date_from, date)
            return set(self.date_positions.find_date_positions(self.date_from, self.date_to))

        # 3. 구간 선택 상태 -> 기존 구간 해제 후 새 시작
        invalidated = set(self.date_positions.find_date_positions(date_from, date_to))
        self.date_from, self.date_to = date, None
        return invalidated | self._positions_of(date)

    def is_date_selected(self, date: CalendarDate) -> bool:
        if self.date_from is None:
            return False
        if self.date_to is None:
            return date == self.date_from
        return date.is_between(self.date_from, self.date_to)

    def get_selected_dates(self) -> List[CalendarDate]:
        return [date for date in (self.date_from, self.date_to) if date is not None]

    def clear(self) -> None:
        self.date_from = None
        self.date_to = None

    def save_selected_dates(self, bundle: Dict[str, Any]) -> None:
        bundle[BUNDLE_RANGE_FROM] = str(self.date_from) if self.date_from else None
        bundle[BUNDLE_RANGE_TO] = str(self.date_to) if self.date_to else None

    def restore_selected_dates(self, bundle: Mapping[str, Any]) -> None:
        self.clear()
        value_from = bundle.get(BUNDLE_RANGE_FROM)
        value_to = bundle.get(BUNDLE_RANGE_TO)

        if value_from is None:
            if value_to is not None:
                raise InvalidConfigurationError("구간 끝만 저장되어 있습니다")
            return

        date_from = _parse_date(value_from)
        date_to = _parse_date(value_to) if value_to is not None else None
        if date_to is not None and date_to < date_from:
            raise InvalidConfigurationError(f"저장된 구간 순서가 잘못되었습니다: {date_from} > {date_to}")

        self.date_from, self.date_to = date_from, date_to


def create_selection_strategy(
    mode: SelectionMode,
    date_positions: DatePositionsPort,
    date_info_provider: DateInfoProvider,
) -> DateSelectionStrategy:
    """선택 모드에 맞는 새 전략 생성 (모드 변경 시 항상 새로 만듦)"""
    strategies = {
        SelectionMode.NONE: NoDateSelectionStrategy,
        SelectionMode.SINGLE: SingleDateSelectionStrategy,
        SelectionMode.MULTIPLE: MultipleDateSelectionStrategy,
        SelectionMode.RANGE: RangeDateSelectionStrategy,
    }
    return strategies[SelectionMode(mode)](date_positions, date_info_provider)
