"""
프로젝트 설정

환경 변수로 기본값을 덮어쓸 수 있습니다.
페이지 크기와 주의 첫 요일은 읽는 시점에 검증하므로
잘못된 값은 import 가 아니라 사용하는 쪽에서 InvalidConfigurationError 로 드러납니다.
"""
import os
from datetime import date
from pathlib import Path
from typing import Optional

from core.domain.calendar_date import DayOfWeek
from core.domain.exceptions import InvalidConfigurationError

DEFAULT_MONTHS_PER_PAGE = 6
DEFAULT_FIRST_DAY_OF_WEEK = "MONDAY"


class Config:
    """캘린더 설정값 모음"""

    BASE_DIR: Path = Path(__file__).resolve().parent.parent

    # 엑셀 내보내기 디렉토리
    OUTPUT_DIR: Path = Path(os.getenv("CALENDAR_OUTPUT_DIR", str(BASE_DIR / "reports")))

    # CLI 상태 저장 파일
    STATE_FILE: Path = Path(
        os.getenv("CALENDAR_STATE_FILE", str(BASE_DIR / ".calendar_state.json"))
    )

    @property
    def MONTHS_PER_PAGE(self) -> int:
        """페이지당 로드할 월 수 (초기 표시 구간의 한쪽 폭으로도 사용)"""
        value = os.getenv("CALENDAR_MONTHS_PER_PAGE", str(DEFAULT_MONTHS_PER_PAGE))
        try:
            months = int(value.strip())
        except ValueError:
            raise InvalidConfigurationError(
                f"CALENDAR_MONTHS_PER_PAGE 는 정수여야 합니다: {value!r}"
            )
        if months < 1:
            raise InvalidConfigurationError(
                f"CALENDAR_MONTHS_PER_PAGE 는 1 이상이어야 합니다: {months}"
            )
        return months

    @property
    def FIRST_DAY_OF_WEEK(self) -> DayOfWeek:
        """주의 첫 요일 (이름 또는 1~7)"""
        return DayOfWeek.of(os.getenv("CALENDAR_FIRST_DAY_OF_WEEK", DEFAULT_FIRST_DAY_OF_WEEK))

    def get_default_filename(self, reference_date: Optional[date] = None) -> str:
        """기본 엑셀 파일명 (calendar_YYYYMMDD.xlsx)"""
        reference_date = reference_date or date.today()
        return f"calendar_{reference_date.strftime('%Y%m%d')}.xlsx"

    def get_output_path(self, filename: str) -> Path:
        return Path(self.OUTPUT_DIR) / filename


config = Config()
