"""
DataFrameMapper 단위 테스트
캘린더 아이템 -> 월별 DataFrame 변환 검증
"""
import pytest

from core.domain.calendar_date import CalendarDate, DayOfWeek
from core.domain.models import DateIndicator, DateItem, EmptyItem
from infra.adapters.data.dataframe_mapper import DataFrameMapper


class TestDataFrameMapper:
    """DataFrameMapper 단위 테스트"""

    @pytest.fixture
    def mapper(self):
        return DataFrameMapper(DayOfWeek.MONDAY)

    def test_weekday_columns(self, mapper):
        assert mapper.weekday_columns() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert DataFrameMapper(DayOfWeek.SUNDAY).weekday_columns()[0] == "Sun"
        assert DataFrameMapper("SATURDAY").weekday_columns()[:2] == ["Sat", "Sun"]

    def test_single_month_shape(self, mapper, generator):
        """2024년 7월 (월요일 시작): 5주 x 7일, 첫 주 1~7일"""
        # Given
        items = generator.generate_calendar_items(CalendarDate(2024, 7, 1), CalendarDate(2024, 7, 31))

        # When
        frames = mapper.to_dataframes(items)

        # Then
        df = frames["2024-07"]
        assert df.shape == (5, 7)
        assert list(df.iloc[0]) == ["1", "2", "3", "4", "5", "6", "7"]
        assert list(df.iloc[4]) == ["29", "30", "31", "", "", "", ""]

    def test_months_in_order(self, mapper, window):
        frames = mapper.to_dataframes(window.items)

        assert list(frames) == ["2024-06", "2024-07"]
        # 6월: 앞 빈 칸 5개 후 토요일 1일
        assert list(frames["2024-06"].iloc[0]) == ["", "", "", "", "", "1", "2"]

    def test_today_marker(self, mapper, window):
        """2024-06-15 = 오늘"""
        frames = mapper.to_dataframes(window.items)

        assert "15@" in frames["2024-06"].values.ravel().tolist()

    def test_partial_month_without_header(self, mapper, generator):
        items = generator.generate_calendar_items(CalendarDate(2024, 7, 1), CalendarDate(2024, 7, 31))

        frames = mapper.to_dataframes(items[1:])

        assert list(frames) == ["2024-07"]
        assert frames["2024-07"].shape == (5, 7)

    def test_incomplete_week_is_padded(self, mapper):
        items = [DateItem(date=CalendarDate(2024, 7, day)) for day in (1, 2, 3)]

        df = mapper.to_dataframes(items)["2024-07"]

        assert df.shape == (1, 7)
        assert list(df.iloc[0]) == ["1", "2", "3", "", "", "", ""]

    def test_empty_items(self, mapper):
        assert mapper.to_dataframes([]) == {}
        assert mapper.to_dataframes([EmptyItem()]) == {}

    @pytest.mark.parametrize("item, expected", [
        (DateItem(date=CalendarDate(2024, 6, 5)), "5"),
        (DateItem(date=CalendarDate(2024, 6, 5), is_selected=True), "*5"),
        (DateItem(date=CalendarDate(2024, 6, 5), is_today=True), "5@"),
        (DateItem(date=CalendarDate(2024, 6, 5), is_selectable=False), "~5"),
        (
            DateItem(
                date=CalendarDate(2024, 6, 15),
                is_selected=True,
                is_today=True,
                is_selectable=False,
                indicators=(DateIndicator(CalendarDate(2024, 6, 15), "#FF0000"),),
            ),
            "~*15@+",
        ),
    ])
    def test_format_cell(self, mapper, item, expected):
        assert mapper.format_cell(item) == expected
