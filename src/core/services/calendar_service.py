"""
캘린더 위젯 로직 서비스 (설정, 스크롤 페이징, 날짜 선택, 상태 저장/복원)
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set

from core.domain.calendar_date import CalendarDate, DayOfWeek
from core.domain.dates_range import DatesRange, NullableDatesRange
from core.domain.exceptions import InvalidConfigurationError
from core.domain.models import (
    DateIndicator,
    DateItem,
    MonthItem,
    ScrollUpdate,
    SelectionMode,
)
from core.ports.utility_ports import DisplayedRangeCalculatorPort, LoggerPort
from core.services.calendar_items_generator import CalendarItemsGenerator
from core.services.calendar_window import CalendarWindow
from core.services.date_info_provider import DateSelectionFilter, DefaultDateInfoProvider
from core.services.selection_strategies import (
    DateSelectionStrategy,
    NoDateSelectionStrategy,
    create_selection_strategy,
)

BUNDLE_SELECTION_MODE = "calendar.selection_mode"
BUNDLE_DISPLAY_DATE_RANGE = "calendar.display_date_range"
BUNDLE_LIMIT_DATE_RANGE = "calendar.limit_date_range"
BUNDLE_DISPLAYED_DATE = "calendar.displayed_date"
BUNDLE_FIRST_DAY_OF_WEEK = "calendar.first_day_of_week"
BUNDLE_SHOW_YEAR_SELECTION_VIEW = "calendar.show_year_selection_view"


class CalendarService:
    """
    캘린더 위젯 오케스트레이션

    원칙:
    - 스크롤/클릭 이벤트를 받아 창 페이징과 선택 전략으로 전달
    - 선택 변경 시 무효화된 위치의 날짜 셀만 다시 생성
    - 저장 상태에는 구간/모드/선택만 보관하고 셀 플래그는 복원 시 다시 계산
    """

    def __init__(
        self,
        window: CalendarWindow,
        range_calculator: DisplayedRangeCalculatorPort,
        logger: LoggerPort,
        months_per_page: int = 6,
        first_day_of_week: DayOfWeek = DayOfWeek.MONDAY,
        today: Optional[CalendarDate] = None,
    ):
        if months_per_page < 1:
            raise InvalidConfigurationError(f"페이지 크기는 1 이상이어야 합니다: {months_per_page}")

        self.window = window
        self.range_calculator = range_calculator
        self.logger = logger
        self.months_per_page = months_per_page

        self.displayed_dates_range = DatesRange.empty()
        self.min_max_dates_range = NullableDatesRange()
        self.displayed_date: Optional[CalendarDate] = None
        self.show_year_selection_view = True

        self.on_date_click_listener: Optional[Callable[[CalendarDate], None]] = None
        self.on_date_long_click_listener: Optional[Callable[[CalendarDate], None]] = None

        self._date_selection_filter: Optional[DateSelectionFilter] = None
        self._dates_indicators: List[DateIndicator] = []
        self._grouped_dates_indicators: Dict[CalendarDate, List[DateIndicator]] = {}
        self._initialized_with_setup = False

        self.date_info_provider = DefaultDateInfoProvider(
            is_date_selected=lambda date: self.selection_strategy.is_date_selected(date),
            min_max_dates_range=lambda: self.min_max_dates_range,
            date_selection_filter=lambda: self._date_selection_filter,
            date_indicators=self.get_date_indicators,
            today=today,
        )

        self.selection_mode = SelectionMode.NONE
        self.selection_strategy: DateSelectionStrategy = NoDateSelectionStrategy()
        self._set_first_day_of_week(first_day_of_week)

    # ------------------------------------------------------------------
    # 설정
    # ------------------------------------------------------------------
    def setup_calendar(
        self,
        initial_date: Optional[CalendarDate] = None,
        min_date: Optional[CalendarDate] = None,
        max_date: Optional[CalendarDate] = None,
        selection_mode: SelectionMode = SelectionMode.NONE,
        selected_dates: Sequence[CalendarDate] = (),
        first_day_of_week: Optional[DayOfWeek] = None,
        show_year_selection_view: bool = True,
    ) -> None:
        """
        캘린더 초기 설정

        모든 인자를 먼저 검증하고, 하나라도 잘못되면 InvalidConfigurationError 를 던지며
        아무 상태도 바꾸지 않습니다.

        Args:
            initial_date: 처음 표시할 날짜 (기본값: 오늘)
            min_date: 최소 날짜 (포함, None 이면 제한 없음)
            max_date: 최대 날짜 (포함, None 이면 제한 없음)
            selection_mode: 선택 모드
            selected_dates: 초기 선택 날짜 (범위 밖/선택 불가 날짜는 조용히 건너뜀)
            first_day_of_week: 주의 첫 요일 (기본값: 서비스 생성 시 값)
            show_year_selection_view: 연도 선택 바 표시 여부
        """
        # 1. 검증 (상태 변경 없음)
        self._require_date("initialDate", initial_date)
        self._require_date("minDate", min_date)
        self._require_date("maxDate", max_date)
        if min_date is not None and max_date is not None and min_date > max_date:
            raise InvalidConfigurationError(
                f"minDate 는 maxDate 보다 앞이어야 합니다: minDate={min_date}, maxDate={max_date}"
            )
        first_day = DayOfWeek.of(
            first_day_of_week if first_day_of_week is not None else self.first_day_of_week
        )
        mode = self._parse_selection_mode(selection_mode)
        selected_dates = list(selected_dates or ())
        self._validate_selected_dates(mode, selected_dates)

        initial_date = initial_date or self.date_info_provider.today

        # 2. 적용
        self.min_max_dates_range = NullableDatesRange(date_from=min_date, date_to=max_date)
        self._set_selection_mode(mode)
        self._set_first_day_of_week(first_day)
        self.show_year_selection_view = bool(show_year_selection_view)
        self.displayed_date = initial_date

        self._apply_selected_dates(selected_dates)

        self.displayed_dates_range = self.range_calculator.calculate(
            initial_date, min_date, max_date
        )
        self._generate_calendar_items(self.displayed_dates_range)
        self.move_to_date(initial_date)

        self._initialized_with_setup = True
        self.logger.info(
            f"📅 캘린더 설정 완료: 표시 구간 {self.displayed_dates_range.date_from} ~ "
            f"{self.displayed_dates_range.date_to}, 모드 {mode.value}, "
            f"아이템 {len(self.window)}개"
        )

    def _parse_selection_mode(self, selection_mode: Any) -> SelectionMode:
        try:
            if isinstance(selection_mode, str):
                return SelectionMode(selection_mode.strip().upper())
            return SelectionMode(selection_mode)
        except ValueError:
            raise InvalidConfigurationError(f"잘못된 선택 모드입니다: {selection_mode!r}")

    def _validate_selected_dates(
        self,
        mode: SelectionMode,
        selected_dates: Sequence[CalendarDate],
        allow_empty: bool = False,
    ) -> None:
        """
        선택 모드와 선택 날짜 개수 검증

        - NONE: 지정 불가
        - SINGLE: 최대 1개
        - RANGE: 정확히 2개 (allow_empty 이면 빈 목록 허용)
        """
        for date in selected_dates:
            self._require_date("selectedDates", date, optional=False)

        if not selected_dates and (allow_empty or mode != SelectionMode.RANGE):
            return

        if mode == SelectionMode.NONE:
            raise InvalidConfigurationError("선택 모드가 NONE 일 때는 선택 날짜를 지정할 수 없습니다")
        if mode == SelectionMode.SINGLE and len(selected_dates) > 1:
            raise InvalidConfigurationError("선택 모드가 SINGLE 일 때는 하나의 날짜만 지정할 수 있습니다")
        if mode == SelectionMode.RANGE and len(selected_dates) != 2:
            raise InvalidConfigurationError(
                "선택 모드가 RANGE 일 때는 시작/끝 두 날짜를 지정해야 합니다"
            )

    @staticmethod
    def _require_date(name: str, value: Any, optional: bool = True) -> None:
        if value is None and optional:
            return
        if not isinstance(value, CalendarDate):
            raise InvalidConfigurationError(
                f"{name} 은 CalendarDate 여야 합니다: {value!r} ({type(value).__name__})"
            )

    def _apply_selected_dates(self, selected_dates: Iterable[CalendarDate]) -> None:
        for date in selected_dates:
            # 범위 밖/선택 불가 날짜는 전략 내부에서 무시됨
            self.selection_strategy.on_date_selected(date)

    def _set_selection_mode(self, mode: SelectionMode) -> None:
        self.selection_mode = mode
        self.selection_strategy = create_selection_strategy(
            mode, self.window, self.date_info_provider
        )

    def _set_first_day_of_week(self, first_day_of_week: DayOfWeek) -> None:
        self.first_day_of_week = DayOfWeek.of(first_day_of_week)
        self.items_generator = CalendarItemsGenerator(
            self.first_day_of_week, self.date_info_provider
        )

    # ------------------------------------------------------------------
    # 이동 / 페이징
    # ------------------------------------------------------------------
    def move_to_date(self, date: CalendarDate) -> Optional[int]:
        """
        특정 날짜의 월로 이동

        최소/최대 경계 월을 벗어나면 아무것도 하지 않습니다.

        Returns:
            Optional[int]: 해당 월 헤더 위치 (이동하지 않으면 None)
        """
        min_date, max_date = self.min_max_dates_range
        if (min_date is not None and date < min_date.month_beginning()) or (
            max_date is not None and date > max_date.month_end()
        ):
            self.logger.info(f"⚠️  경계 밖 날짜로 이동 무시: {date}")
            return None

        if not self.window.dates_range.contains(date):
            self.displayed_dates_range = self.range_calculator.calculate(
                date, min_date, max_date
            )
            self._generate_calendar_items(self.displayed_dates_range)

        position = self.window.find_month_position(date)
        if position is not None:
            self.displayed_date = date
        return position

    def on_scrolled(self, first_visible_position: int, last_visible_position: int) -> ScrollUpdate:
        """
        스크롤 이벤트 처리

        마지막 아이템이 보이면 다음 페이지, 첫 아이템이 보이면 이전 페이지를 로드합니다.
        """
        appended = 0
        prepended = 0

        if last_visible_position + 1 >= len(self.window):
            appended = self.load_next_page()

        if first_visible_position == 0:
            prepended = self.load_previous_page()

        if self.show_year_selection_view:
            item = self.window.get_item_at(first_visible_position + prepended)
            if isinstance(item, (DateItem, MonthItem)):
                self.displayed_date = item.date

        return ScrollUpdate(prepended=prepended, appended=appended)

    def load_previous_page(self) -> int:
        """
        표시 구간 앞쪽으로 최대 한 페이지 로드

        Returns:
            int: 앞에 추가된 아이템 수
        """
        if self.displayed_dates_range.is_empty:
            return 0

        min_date = self.min_max_dates_range.date_from
        displayed_from = self.displayed_dates_range.date_from
        if min_date is not None and min_date.months_between(displayed_from) <= 0:
            return 0

        generate_to = displayed_from.minus_months(1).month_end()
        months = self.months_per_page
        if min_date is not None:
            months = min(months, min_date.months_between(generate_to) + 1)

        generate_from = generate_to.minus_months(months - 1).month_beginning()
        if min_date is not None:
            generate_from = max(generate_from, min_date)

        items = self.items_generator.generate_calendar_items(generate_from, generate_to)
        added = self.window.prepend(items)
        self.displayed_dates_range = self.displayed_dates_range.with_from(generate_from)

        self.logger.info(f"⬆️  이전 {months}개월 로드: {generate_from} ~ {generate_to}")
        return added

    def load_next_page(self) -> int:
        """
        표시 구간 뒤쪽으로 최대 한 페이지 로드

        Returns:
            int: 뒤에 추가된 아이템 수
        """
        if self.displayed_dates_range.is_empty:
            return 0

        max_date = self.min_max_dates_range.date_to
        displayed_to = self.displayed_dates_range.date_to
        if max_date is not None and displayed_to.months_between(max_date) <= 0:
            return 0

        generate_from = displayed_to.plus_months(1).month_beginning()
        months = self.months_per_page
        if max_date is not None:
            months = min(months, generate_from.months_between(max_date) + 1)

        generate_to = generate_from.plus_months(months - 1).month_end()
        if max_date is not None:
            generate_to = min(generate_to, max_date)

        items = self.items_generator.generate_calendar_items(generate_from, generate_to)
        added = self.window.append(items)
        self.displayed_dates_range = self.displayed_dates_range.with_to(generate_to)

        self.logger.info(f"⬇️  다음 {months}개월 로드: {generate_from} ~ {generate_to}")
        return added

    def _generate_calendar_items(self, dates_range: DatesRange) -> None:
        if dates_range.is_empty:
            return
        self.window.reset(
            self.items_generator.generate_calendar_items(
                dates_range.date_from, dates_range.date_to
            )
        )

    # ------------------------------------------------------------------
    # 선택
    # ------------------------------------------------------------------
    def on_date_click(self, date: CalendarDate, long_click: bool = False) -> Set[int]:
        """
        날짜 셀 클릭 처리

        Returns:
            Set[int]: 다시 그려야 하는 위치 (롱클릭은 선택을 바꾸지 않으므로 빈 집합)
        """
        if long_click:
            if self.on_date_long_click_listener:
                self.on_date_long_click_listener(date)
            return set()

        positions = self.selection_strategy.on_date_selected(date)
        self.window.refresh(positions, self.items_generator.create_date_item)

        if self.on_date_click_listener:
            self.on_date_click_listener(date)
        return positions

    @property
    def selected_dates(self) -> List[CalendarDate]:
        return self.selection_strategy.get_selected_dates()

    @property
    def selected_date(self) -> Optional[CalendarDate]:
        dates = self.selection_strategy.get_selected_dates()
        return dates[0] if dates else None

    def update_selected_dates(self, selected_dates: Sequence[CalendarDate]) -> None:
        """현재 선택을 지우고 새 날짜들로 교체 (검증 실패 시 기존 선택 유지)"""
        selected_dates = list(selected_dates)
        self._validate_selected_dates(self.selection_mode, selected_dates, allow_empty=True)

        self.selection_strategy.clear()
        self._apply_selected_dates(selected_dates)
        self._refresh_all_items()

    @property
    def date_selection_filter(self) -> Optional[DateSelectionFilter]:
        return self._date_selection_filter

    @date_selection_filter.setter
    def date_selection_filter(self, value: Optional[DateSelectionFilter]) -> None:
        self._date_selection_filter = value
        self._refresh_all_items()

    @property
    def dates_indicators(self) -> List[DateIndicator]:
        return list(self._dates_indicators)

    @dates_indicators.setter
    def dates_indicators(self, value: Iterable[DateIndicator]) -> None:
        self._dates_indicators = list(value)
        self._grouped_dates_indicators = {}
        for indicator in self._dates_indicators:
            self._grouped_dates_indicators.setdefault(indicator.date, []).append(indicator)
        self._refresh_all_items()

    def get_date_indicators(self, date: CalendarDate) -> List[DateIndicator]:
        return list(self._grouped_dates_indicators.get(date, []))

    def _refresh_all_items(self) -> None:
        self.window.refresh_all(self.items_generator.create_date_item)

    # ------------------------------------------------------------------
    # 상태 저장 / 복원
    # ------------------------------------------------------------------
    def save_state(self) -> Dict[str, Any]:
        """
        현재 상태를 JSON 직렬화 가능한 딕셔너리로 저장

        셀 플래그는 저장하지 않습니다 (복원 시 다시 생성).
        """
        bundle: Dict[str, Any] = {
            BUNDLE_SELECTION_MODE: self.selection_mode.value,
            BUNDLE_DISPLAY_DATE_RANGE: self.displayed_dates_range.to_dict(),
            BUNDLE_LIMIT_DATE_RANGE: self.min_max_dates_range.to_dict(),
            BUNDLE_DISPLAYED_DATE: str(self.displayed_date) if self.displayed_date else None,
            BUNDLE_SHOW_YEAR_SELECTION_VIEW: self.show_year_selection_view,
            BUNDLE_FIRST_DAY_OF_WEEK: int(self.first_day_of_week),
        }
        self.selection_strategy.save_selected_dates(bundle)
        return bundle

    def restore_state(self, bundle: Mapping[str, Any]) -> bool:
        """
        저장된 상태 복원

        - setup_calendar 로 이미 설정된 경우 복원하지 않음 (새 설정 우선)
        - 필드별로 독립적으로 복원하며, 없거나 잘못된 필드는 기존 값 유지
        - 모드를 먼저 복원해 전략을 만든 뒤 선택 상태를 복원
        - 아이템은 복원된 구간으로 다시 생성

        Returns:
            bool: 복원 수행 여부
        """
        if self._initialized_with_setup:
            self.logger.info("ℹ️  이미 설정된 캘린더이므로 상태 복원을 건너뜁니다")
            return False

        if not isinstance(bundle, Mapping):
            self.logger.warning(f"⚠️  저장된 상태 형식이 잘못되었습니다: {type(bundle).__name__}")
            return False

        mode = self._restore_field(
            bundle, BUNDLE_SELECTION_MODE, self._parse_selection_mode, self.selection_mode
        )
        self._set_selection_mode(mode)

        self.displayed_dates_range = self._restore_field(
            bundle, BUNDLE_DISPLAY_DATE_RANGE, DatesRange.from_dict, self.displayed_dates_range
        )
        self.min_max_dates_range = self._restore_field(
            bundle, BUNDLE_LIMIT_DATE_RANGE, self._parse_limit_range, self.min_max_dates_range
        )
        self.show_year_selection_view = self._restore_field(
            bundle, BUNDLE_SHOW_YEAR_SELECTION_VIEW, self._parse_bool, self.show_year_selection_view
        )
        first_day = self._restore_field(
            bundle, BUNDLE_FIRST_DAY_OF_WEEK, DayOfWeek.of, self.first_day_of_week
        )
        self._set_first_day_of_week(first_day)

        try:
            self.selection_strategy.restore_selected_dates(bundle)
        except (TypeError, ValueError) as e:
            self.logger.warning(f"⚠️  선택 상태 복원 실패, 빈 선택으로 시작합니다: {e}")
            self.selection_strategy.clear()

        self.displayed_date = self._restore_field(
            bundle, BUNDLE_DISPLAYED_DATE, CalendarDate.parse, self.displayed_date
        )

        self._generate_calendar_items(self.displayed_dates_range)
        self.logger.info(
            f"♻️  캘린더 상태 복원 완료: 모드 {self.selection_mode.value}, "
            f"선택 {len(self.selected_dates)}개, 아이템 {len(self.window)}개"
        )
        return True

    def _restore_field(
        self,
        bundle: Mapping[str, Any],
        key: str,
        parser: Callable[[Any], Any],
        default: Any,
    ) -> Any:
        if bundle.get(key) is None:
            return default
        try:
            return parser(bundle[key])
        except (KeyError, TypeError, ValueError) as e:
            self.logger.warning(f"⚠️  저장된 '{key}' 값이 잘못되어 기존 값을 유지합니다: {e}")
            return default

    @staticmethod
    def _parse_limit_range(value: Any) -> NullableDatesRange:
        limit_range = NullableDatesRange.from_dict(value)
        date_from, date_to = limit_range
        if date_from is not None and date_to is not None and date_from > date_to:
            raise InvalidConfigurationError(f"저장된 경계 순서가 잘못되었습니다: {date_from} > {date_to}")
        return limit_range

    @staticmethod
    def _parse_bool(value: Any) -> bool:
        if not isinstance(value, bool):
            raise InvalidConfigurationError(f"불리언 값이 아닙니다: {value!r}")
        return value
