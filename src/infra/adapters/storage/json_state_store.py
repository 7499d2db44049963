"""
JSON 파일 상태 저장소 어댑터
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from config import config
from core.ports.storage_ports import StateStorePort


class JsonStateStore(StateStorePort):
    """
    캘린더 저장 상태(bundle)를 JSON 파일로 보관

    파일이 없거나 깨져 있으면 빈 상태로 취급합니다.
    """

    def __init__(self, state_file: Optional[Union[str, Path]] = None):
        self.state_file = Path(state_file) if state_file else Path(config.STATE_FILE)

    def save(self, bundle: Dict[str, Any]) -> None:
        """상태 저장"""
        parent = self.state_file.parent
        if not parent.exists():
            os.makedirs(parent, exist_ok=True)

        with open(self.state_file, "w", encoding="utf-8") as f:
            json.dump(bundle, f, indent=2, ensure_ascii=False)

    def load(self) -> Dict[str, Any]:
        """상태 로드 (없거나 읽을 수 없으면 빈 딕셔너리)"""
        try:
            with open(self.state_file, "r", encoding="utf-8") as f:
                stored = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, OSError):
            return {}

        if not isinstance(stored, dict):
            return {}
        return stored

    def clear(self) -> None:
        """저장 파일 삭제"""
        if self.state_file.exists():
            os.remove(self.state_file)
