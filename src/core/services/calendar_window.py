"""
표시 중인 캘린더 아이템 창 관리
"""
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from core.domain.calendar_date import CalendarDate
from core.domain.dates_range import DatesRange
from core.domain.models import CalendarItem, DateItem, MonthItem
from core.ports.calendar_ports import DatePositionsPort

# 한 달 헤더 이후 최대 셀 수 (빈 칸 6 + 날짜 31 + 빈 칸 6)
_MAX_MONTH_CELLS = 43


class CalendarWindow(DatePositionsPort):
    """
    스크롤 뷰를 받치는 연속된 아이템 목록

    - reset: 전체 교체
    - prepend: 앞쪽에 페이지 추가 (기존 위치는 추가된 개수만큼 뒤로 밀림)
    - append: 뒤쪽에 페이지 추가 (기존 위치 변화 없음)

    월 위치는 오프셋 기준 인덱스로 보관하므로 prepend 시 전체를 다시 계산하지 않습니다.
    """

    def __init__(self):
        self._items: List[CalendarItem] = []
        self._month_index: Dict[Tuple[int, int], int] = {}
        self._offset = 0

    # ------------------------------------------------------------------
    # 변경
    # ------------------------------------------------------------------
    def reset(self, items: Sequence[CalendarItem]) -> None:
        """전체 아이템 교체 (이전 위치 정보는 모두 무효)"""
        self._items = list(items)
        self._month_index = {}
        self._offset = 0
        self._index_items(self._items, start=0)

    def prepend(self, items: Sequence[CalendarItem]) -> int:
        """
        현재 첫 아이템 앞에 추가

        Returns:
            int: 추가된 아이템 수 (기존 위치의 이동량)
        """
        items = list(items)
        if not items:
            return 0

        self._items[0:0] = items
        self._offset += len(items)
        self._index_items(items, start=0)
        return len(items)

    def append(self, items: Sequence[CalendarItem]) -> int:
        """현재 마지막 아이템 뒤에 추가"""
        items = list(items)
        if not items:
            return 0

        start = len(self._items)
        self._items.extend(items)
        self._index_items(items, start=start)
        return len(items)

    def refresh(
        self,
        positions: Iterable[int],
        item_factory: Callable[[CalendarDate], DateItem],
    ) -> None:
        """지정 위치의 날짜 셀을 다시 생성 (플래그 재계산)"""
        for position in positions:
            item = self.get_item_at(position)
            if isinstance(item, DateItem):
                self._items[position] = item_factory(item.date)

    def refresh_all(self, item_factory: Callable[[CalendarDate], DateItem]) -> None:
        self.refresh(range(len(self._items)), item_factory)

    def _index_items(self, items: Sequence[CalendarItem], start: int) -> None:
        for i, item in enumerate(items):
            raw_position = start + i - self._offset
            if isinstance(item, MonthItem):
                self._month_index[(item.date.year, item.date.month)] = raw_position
            elif isinstance(item, DateItem):
                # 헤더 없이 시작하는 월은 첫 날짜 셀 위치를 사용
                self._month_index.setdefault((item.date.year, item.date.month), raw_position)

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[CalendarItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def get_item_at(self, position: int) -> Optional[CalendarItem]:
        """범위 밖이면 None"""
        if 0 <= position < len(self._items):
            return self._items[position]
        return None

    def find_month_position(self, date: CalendarDate) -> Optional[int]:
        """date 가 속한 월의 헤더 위치, 창에 없으면 None"""
        raw_position = self._month_index.get((date.year, date.month))
        if raw_position is None:
            return None
        return raw_position + self._offset

    def find_date_position(self, date: CalendarDate) -> Optional[int]:
        month_position = self.find_month_position(date)
        if month_position is None:
            return None

        end = min(len(self._items), month_position + _MAX_MONTH_CELLS + 1)
        for position in range(month_position, end):
            item = self._items[position]
            if isinstance(item, DateItem) and item.date == date:
                return position
        return None

    def find_date_positions(
        self, date_from: CalendarDate, date_to: CalendarDate
    ) -> List[int]:
        positions: List[int] = []
        if not self._items or date_from > date_to:
            return positions

        window_range = self.dates_range
        if window_range.is_empty:
            return positions
        date_from = max(date_from, window_range.date_from)
        date_to = min(date_to, window_range.date_to)
        if date_from > date_to:
            return positions

        month = date_from.month_beginning()
        while month <= date_to:
            month_position = self.find_month_position(month)
            if month_position is not None:
                end = min(len(self._items), month_position + _MAX_MONTH_CELLS + 1)
                for position in range(month_position, end):
                    item = self._items[position]
                    if isinstance(item, DateItem) and item.date.is_same_month(month):
                        if item.date.is_between(date_from, date_to):
                            positions.append(position)
                    elif isinstance(item, MonthItem) and not item.date.is_same_month(month):
                        break
            month = month.plus_months(1)

        return positions

    @property
    def dates_range(self) -> DatesRange:
        """창이 포함하는 날짜 구간 (첫 월의 1일 ~ 마지막 날짜 셀)"""
        first = next(
            (item.date for item in self._items if isinstance(item, (MonthItem, DateItem))),
            None,
        )
        last = next(
            (item.date for item in reversed(self._items) if isinstance(item, DateItem)),
            None,
        )
        if first is None or last is None:
            return DatesRange.empty()
        return DatesRange(first.month_beginning(), last)
