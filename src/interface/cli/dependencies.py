"""
CLI 의존성 주입 모듈
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union

from config import config
from core.domain.calendar_date import DayOfWeek
from core.services.calendar_service import CalendarService
from core.services.calendar_window import CalendarWindow
from infra.adapters.utils.console_logger import ConsoleLogger
from infra.adapters.utils.date_calculator import DisplayedRangeCalculator
from infra.adapters.data.dataframe_mapper import DataFrameMapper
from infra.adapters.data.excel_exporter import ExcelExporter
from infra.adapters.storage.json_state_store import JsonStateStore


def build_dependencies(
    first_day_of_week: Optional[DayOfWeek] = None,
    state_file: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    의존성 주입 컨테이너 역할

    Args:
        first_day_of_week: 주의 첫 요일 (기본값: config)
        state_file: 상태 저장 파일 (기본값: config)
        output_dir: 엑셀 출력 디렉토리 (기본값: config)

    Returns:
        Dict: 구성된 서비스 및 어댑터 모음

    Raises:
        InvalidConfigurationError: 환경 변수 설정값이 잘못된 경우
    """
    first_day = DayOfWeek.of(first_day_of_week or config.FIRST_DAY_OF_WEEK)

    # 1. 유틸리티
    logger = ConsoleLogger()
    months_per_page = config.MONTHS_PER_PAGE
    range_calculator = DisplayedRangeCalculator(months_per_page=months_per_page)

    # 2. Data
    data_mapper = DataFrameMapper(first_day_of_week=first_day)
    data_exporter = ExcelExporter(output_dir=output_dir)

    # 3. Storage
    state_store = JsonStateStore(state_file=state_file)

    # 4. Service
    calendar_service = CalendarService(
        window=CalendarWindow(),
        range_calculator=range_calculator,
        logger=logger,
        months_per_page=months_per_page,
        first_day_of_week=first_day,
    )

    return {
        'calendar': calendar_service,
        'logger': logger,
        'mapper': data_mapper,
        'exporter': data_exporter,
        'state_store': state_store,
    }
