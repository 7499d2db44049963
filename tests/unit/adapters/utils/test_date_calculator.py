"""
DisplayedRangeCalculator 단위 테스트
초기 표시 구간 계산 로직 검증
"""
import pytest

from config import config
from core.domain.calendar_date import CalendarDate
from core.domain.dates_range import DatesRange
from core.domain.exceptions import InvalidConfigurationError
from infra.adapters.utils.date_calculator import DisplayedRangeCalculator


class TestDisplayedRangeCalculator:
    """DisplayedRangeCalculator 단위 테스트"""

    @pytest.fixture
    def calculator(self):
        """6개월 단위 계산기"""
        return DisplayedRangeCalculator(months_per_page=6)

    def test_unbounded_range(self, calculator):
        """경계 없음: 기준 월 앞뒤 6개월, 월 경계로 맞춤"""
        # Given
        initial_date = CalendarDate(2024, 6, 15)

        # When
        result = calculator.calculate(initial_date)

        # Then
        assert result == DatesRange(CalendarDate(2023, 12, 1), CalendarDate(2024, 12, 31))

    def test_month_end_anchor(self, calculator):
        """말일 기준: 2/29, 2/28 로 맞춘 뒤 월 경계로 확장"""
        result = calculator.calculate(CalendarDate(2024, 8, 31))

        assert result == DatesRange(CalendarDate(2024, 2, 1), CalendarDate(2025, 2, 28))

    def test_clipped_to_bounds(self, calculator):
        """경계 안으로 자름"""
        # Given
        min_date = CalendarDate(2024, 1, 1)
        max_date = CalendarDate(2024, 12, 31)

        # When
        result = calculator.calculate(CalendarDate(2024, 6, 15), min_date, max_date)

        # Then
        assert result == DatesRange(min_date, max_date)

    def test_initial_date_before_min(self, calculator):
        """기준 날짜가 최소 날짜보다 앞이면 최소 날짜 기준"""
        result = calculator.calculate(
            CalendarDate(2020, 1, 1),
            min_date=CalendarDate(2024, 3, 10),
            max_date=CalendarDate(2024, 12, 31),
        )

        assert result == DatesRange(CalendarDate(2024, 3, 10), CalendarDate(2024, 9, 30))

    def test_initial_date_after_max(self, calculator):
        """기준 날짜가 최대 날짜보다 뒤면 최대 날짜 기준"""
        result = calculator.calculate(CalendarDate(2030, 1, 1), max_date=CalendarDate(2024, 5, 20))

        assert result == DatesRange(CalendarDate(2023, 11, 1), CalendarDate(2024, 5, 20))

    def test_single_day_bounds(self, calculator):
        """최소 = 최대 이면 그 하루만"""
        day = CalendarDate(2024, 6, 15)

        result = calculator.calculate(CalendarDate(2024, 1, 1), day, day)

        assert result == DatesRange(day, day)

    def test_custom_page_size(self):
        calculator = DisplayedRangeCalculator(months_per_page=1)

        result = calculator.calculate(CalendarDate(2024, 1, 15))

        assert result == DatesRange(CalendarDate(2023, 12, 1), CalendarDate(2024, 2, 29))

    def test_default_page_size_from_config(self):
        assert DisplayedRangeCalculator().months_per_page == config.MONTHS_PER_PAGE

    @pytest.mark.parametrize("months_per_page", [0, -1])
    def test_non_positive_page_size_rejected(self, months_per_page):
        """명시한 0 은 기본값으로 바뀌지 않고 거부"""
        with pytest.raises(InvalidConfigurationError):
            DisplayedRangeCalculator(months_per_page=months_per_page)
