"""
데이터 변환/내보내기 포트
"""
from abc import ABC, abstractmethod
from typing import Dict, Sequence

import pandas as pd

from core.domain.models import CalendarItem


class DataMapperPort(ABC):
    """캘린더 아이템 -> DataFrame 변환 인터페이스"""

    @abstractmethod
    def to_dataframes(self, items: Sequence[CalendarItem]) -> Dict[str, pd.DataFrame]:
        """{월 이름: 주 x 요일 DataFrame}"""


class DataExporterPort(ABC):
    """DataFrame 내보내기 인터페이스"""

    @abstractmethod
    def export(self, data: Dict[str, pd.DataFrame]) -> None:
        ...
