"""
상태 저장소 포트
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class StateStorePort(ABC):
    """저장된 캘린더 상태(bundle) 보관 인터페이스"""

    @abstractmethod
    def save(self, bundle: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """저장된 상태가 없거나 읽을 수 없으면 빈 딕셔너리"""

    @abstractmethod
    def clear(self) -> None:
        ...
