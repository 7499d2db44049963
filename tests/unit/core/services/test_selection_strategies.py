"""
날짜 선택 전략 단위 테스트
선택 상태 전이와 무효화 위치 검증
"""
import pytest

from core.domain.calendar_date import CalendarDate
from core.domain.exceptions import InvalidConfigurationError
from core.domain.models import SelectionMode
from core.services.selection_strategies import (
    BUNDLE_MULTIPLE_DATES,
    BUNDLE_RANGE_FROM,
    BUNDLE_RANGE_TO,
    BUNDLE_SINGLE_DATE,
    MultipleDateSelectionStrategy,
    NoDateSelectionStrategy,
    RangeDateSelectionStrategy,
    SingleDateSelectionStrategy,
    create_selection_strategy,
)

JUNE_10 = CalendarDate(2024, 6, 10)
JUNE_20 = CalendarDate(2024, 6, 20)
JULY_5 = CalendarDate(2024, 7, 5)


class TestNoDateSelectionStrategy:

    def test_clicks_do_nothing(self, window, date_info_provider):
        strategy = NoDateSelectionStrategy(window, date_info_provider)

        assert strategy.on_date_selected(JUNE_10) == set()
        assert strategy.get_selected_dates() == []
        assert not strategy.is_date_selected(JUNE_10)


class TestSingleDateSelectionStrategy:

    @pytest.fixture
    def strategy(self, window, date_info_provider):
        return SingleDateSelectionStrategy(window, date_info_provider)

    def test_select_then_replace(self, strategy, window):
        """두 번째 날짜 선택 시 이전 날짜 해제"""
        # When
        first = strategy.on_date_selected(JUNE_10)
        second = strategy.on_date_selected(JUNE_20)

        # Then
        assert first == {window.find_date_position(JUNE_10)}
        assert second == {window.find_date_position(JUNE_10), window.find_date_position(JUNE_20)}
        assert strategy.get_selected_dates() == [JUNE_20]
        assert not strategy.is_date_selected(JUNE_10)

    def test_same_date_twice_deselects(self, strategy, window):
        strategy.on_date_selected(JUNE_10)

        invalidated = strategy.on_date_selected(JUNE_10)

        assert invalidated == {window.find_date_position(JUNE_10)}
        assert strategy.get_selected_dates() == []

    def test_out_of_range_click_ignored(self, strategy, date_info_provider):
        strategy.on_date_selected(JUNE_10)
        date_info_provider.out_of_range = {JUNE_20}

        assert strategy.on_date_selected(JUNE_20) == set()
        assert strategy.get_selected_dates() == [JUNE_10]

    def test_unselectable_click_ignored(self, strategy, date_info_provider):
        date_info_provider.unselectable = {JUNE_20}

        assert strategy.on_date_selected(JUNE_20) == set()
        assert strategy.get_selected_dates() == []

    def test_date_outside_window_selected_without_positions(self, strategy):
        """창 밖 날짜도 선택되지만 다시 그릴 위치는 없음"""
        date = CalendarDate(2030, 1, 1)

        assert strategy.on_date_selected(date) == set()
        assert strategy.get_selected_dates() == [date]

    def test_save_restore(self, strategy, window, date_info_provider):
        strategy.on_date_selected(JUNE_20)
        bundle = {}

        strategy.save_selected_dates(bundle)
        restored = SingleDateSelectionStrategy(window, date_info_provider)
        restored.restore_selected_dates(bundle)

        assert bundle[BUNDLE_SINGLE_DATE] == "2024-06-20"
        assert restored.get_selected_dates() == [JUNE_20]

    def test_restore_missing_is_empty(self, strategy):
        strategy.on_date_selected(JUNE_20)

        strategy.restore_selected_dates({})

        assert strategy.get_selected_dates() == []

    def test_restore_malformed(self, strategy):
        with pytest.raises(InvalidConfigurationError):
            strategy.restore_selected_dates({BUNDLE_SINGLE_DATE: 20240620})


class TestMultipleDateSelectionStrategy:

    @pytest.fixture
    def strategy(self, window, date_info_provider):
        return MultipleDateSelectionStrategy(window, date_info_provider)

    def test_insertion_order_kept(self, strategy):
        for date in (JULY_5, JUNE_10, JUNE_20):
            strategy.on_date_selected(date)

        assert strategy.get_selected_dates() == [JULY_5, JUNE_10, JUNE_20]

    def test_toggle_round_trip(self, strategy, window):
        """같은 날짜 두 번 = 선택하지 않은 것과 동일"""
        strategy.on_date_selected(JUNE_10)

        first = strategy.on_date_selected(JUNE_20)
        second = strategy.on_date_selected(JUNE_20)

        assert first == second == {window.find_date_position(JUNE_20)}
        assert strategy.get_selected_dates() == [JUNE_10]

    def test_reselect_moves_to_end(self, strategy):
        strategy.on_date_selected(JUNE_10)
        strategy.on_date_selected(JUNE_20)
        strategy.on_date_selected(JUNE_10)
        strategy.on_date_selected(JUNE_10)

        assert strategy.get_selected_dates() == [JUNE_20, JUNE_10]

    def test_clear(self, strategy):
        strategy.on_date_selected(JUNE_10)

        strategy.clear()

        assert strategy.get_selected_dates() == []

    def test_save_restore(self, strategy, window, date_info_provider):
        strategy.on_date_selected(JUNE_20)
        strategy.on_date_selected(JUNE_10)
        bundle = {}

        strategy.save_selected_dates(bundle)
        restored = MultipleDateSelectionStrategy(window, date_info_provider)
        restored.restore_selected_dates(bundle)

        assert bundle[BUNDLE_MULTIPLE_DATES] == ["2024-06-20", "2024-06-10"]
        assert restored.get_selected_dates() == [JUNE_20, JUNE_10]

    def test_restore_malformed(self, strategy):
        strategy.on_date_selected(JUNE_10)

        with pytest.raises(InvalidConfigurationError):
            strategy.restore_selected_dates({BUNDLE_MULTIPLE_DATES: "2024-06-10"})
        with pytest.raises(InvalidConfigurationError):
            strategy.restore_selected_dates({BUNDLE_MULTIPLE_DATES: ["2024-06-10", "bad"]})
        assert strategy.get_selected_dates() == []


class TestRangeDateSelectionStrategy:

    @pytest.fixture
    def strategy(self, window, date_info_provider):
        return RangeDateSelectionStrategy(window, date_info_provider)

    def test_first_click_selects_start(self, strategy, window):
        invalidated = strategy.on_date_selected(JUNE_10)

        assert invalidated == {window.find_date_position(JUNE_10)}
        assert strategy.get_selected_dates() == [JUNE_10]

    def test_second_click_completes_range(self, strategy, window):
        """두 번째 선택 시 구간 전체 무효화"""
        strategy.on_date_selected(JUNE_10)

        invalidated = strategy.on_date_selected(JUNE_20)

        assert invalidated == set(window.find_date_positions(JUNE_10, JUNE_20))
        assert len(invalidated) == 11
        assert strategy.get_selected_dates() == [JUNE_10, JUNE_20]

    def test_range_is_normalized(self, strategy):
        """나중에 고른 날짜가 더 이르면 순서를 바꿈"""
        strategy.on_date_selected(JUNE_20)
        strategy.on_date_selected(JUNE_10)

        assert strategy.get_selected_dates() == [JUNE_10, JUNE_20]

    def test_dates_inside_range_are_selected(self, strategy):
        strategy.on_date_selected(JUNE_10)
        strategy.on_date_selected(JUNE_20)

        assert strategy.is_date_selected(CalendarDate(2024, 6, 15))
        assert strategy.is_date_selected(JUNE_20)
        assert not strategy.is_date_selected(CalendarDate(2024, 6, 21))

    def test_same_date_twice_deselects(self, strategy, window):
        strategy.on_date_selected(JUNE_10)

        invalidated = strategy.on_date_selected(JUNE_10)

        assert invalidated == {window.find_date_position(JUNE_10)}
        assert strategy.get_selected_dates() == []

    def test_third_click_starts_new_range(self, strategy, window):
        """세 번째 선택은 기존 구간을 지우고 새 시작 (확장하지 않음)"""
        strategy.on_date_selected(JUNE_10)
        strategy.on_date_selected(JUNE_20)

        invalidated = strategy.on_date_selected(JULY_5)

        expected = set(window.find_date_positions(JUNE_10, JUNE_20))
        expected.add(window.find_date_position(JULY_5))
        assert invalidated == expected
        assert strategy.get_selected_dates() == [JULY_5]
        assert not strategy.is_date_selected(JUNE_10)

        # 이어서 한 번 더 선택하면 새 구간 완성
        strategy.on_date_selected(JUNE_20)
        assert strategy.get_selected_dates() == [JUNE_20, JULY_5]

    def test_unselectable_end_ignored(self, strategy, date_info_provider):
        strategy.on_date_selected(JUNE_10)
        date_info_provider.unselectable = {JUNE_20}

        assert strategy.on_date_selected(JUNE_20) == set()
        assert strategy.get_selected_dates() == [JUNE_10]

    def test_save_restore(self, strategy, window, date_info_provider):
        strategy.on_date_selected(JUNE_10)
        strategy.on_date_selected(JUNE_20)
        bundle = {}

        strategy.save_selected_dates(bundle)
        restored = RangeDateSelectionStrategy(window, date_info_provider)
        restored.restore_selected_dates(bundle)

        assert restored.get_selected_dates() == [JUNE_10, JUNE_20]

    def test_restore_start_only(self, strategy):
        strategy.restore_selected_dates({BUNDLE_RANGE_FROM: "2024-06-10", BUNDLE_RANGE_TO: None})

        assert strategy.get_selected_dates() == [JUNE_10]

    @pytest.mark.parametrize("bundle", [
        {BUNDLE_RANGE_TO: "2024-06-10"},
        {BUNDLE_RANGE_FROM: "2024-06-20", BUNDLE_RANGE_TO: "2024-06-10"},
        {BUNDLE_RANGE_FROM: "not-a-date"},
    ])
    def test_restore_malformed(self, strategy, bundle):
        with pytest.raises(InvalidConfigurationError):
            strategy.restore_selected_dates(bundle)


class TestCreateSelectionStrategy:

    @pytest.mark.parametrize("mode, expected", [
        (SelectionMode.NONE, NoDateSelectionStrategy),
        (SelectionMode.SINGLE, SingleDateSelectionStrategy),
        (SelectionMode.MULTIPLE, MultipleDateSelectionStrategy),
        (SelectionMode.RANGE, RangeDateSelectionStrategy),
    ])
    def test_factory(self, window, date_info_provider, mode, expected):
        strategy = create_selection_strategy(mode, window, date_info_provider)

        assert type(strategy) is expected

    def test_factory_always_creates_fresh_instance(self, window, date_info_provider):
        first = create_selection_strategy(SelectionMode.SINGLE, window, date_info_provider)
        first.on_date_selected(JUNE_10)

        second = create_selection_strategy(SelectionMode.SINGLE, window, date_info_provider)

        assert second.get_selected_dates() == []
