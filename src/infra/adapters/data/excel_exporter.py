"""
Excel 내보내기 어댑터 구현
"""
from pathlib import Path
import os
from typing import Dict, Optional, Union
import pandas as pd
from openpyxl.utils import get_column_letter

from core.ports.data_ports import DataExporterPort
from config import config


class ExcelExporter(DataExporterPort):
    """
    월별 캘린더 DataFrame 을 Excel 파일로 저장하는 어댑터
    """

    def __init__(self, output_dir: Optional[Union[str, Path]] = None, filename: Optional[str] = None):
        # config.OUTPUT_DIR 을 기본값으로 사용
        self.output_dir = Path(output_dir) if output_dir else Path(config.OUTPUT_DIR)
        self.filename = filename or config.get_default_filename()
        self.last_export_path: Optional[Path] = None

    def _ensure_output_dir(self) -> None:
        """출력 디렉토리 생성"""
        os.makedirs(self.output_dir, exist_ok=True)

    def export(self, data: Dict[str, pd.DataFrame]) -> None:
        """
        월별 데이터를 엑셀 파일로 저장 (월 하나당 시트 하나)

        Args:
            data: {'YYYY-MM': DataFrame} 형태의 딕셔너리
        """
        if not data:
            return

        self._ensure_output_dir()
        filepath = self.output_dir / self.filename

        with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
            # 시간 순서대로 시트 생성
            for sheet_name, df in sorted(data.items()):
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                self._adjust_column_width(writer, sheet_name, df)

        self.last_export_path = filepath
        print(f"      [저장 완료] {filepath}")

    def _adjust_column_width(self, writer, sheet_name: str, df: pd.DataFrame) -> None:
        """컬럼 너비 자동 조정"""
        worksheet = writer.sheets[sheet_name]
        for idx, col in enumerate(df.columns):
            max_len = len(str(col))
            if not df[col].empty:
                max_len = max(max_len, int(df[col].astype(str).map(len).max()))

            # 너비 설정 (최소 6, 최대 20)
            width = min(max(max_len + 2, 6), 20)
            worksheet.column_dimensions[get_column_letter(idx + 1)].width = width
