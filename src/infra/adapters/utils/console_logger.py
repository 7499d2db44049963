"""
콘솔 로거 어댑터
"""
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from core.ports.utility_ports import LoggerPort

LOG_THEME = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
})


class ConsoleLogger(LoggerPort):
    """
    콘솔 출력 로거 구현

    rich 콘솔로 레벨별 색상을 입히되, 메시지는 마크업 해석 없이 그대로 출력
    """

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(theme=LOG_THEME)

    def _print(self, level: str, style: str, message: str) -> None:
        self._console.print(
            f"[{level}] {message}",
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def info(self, message: str) -> None:
        """정보 로그"""
        self._print("INFO", "info", message)

    def warning(self, message: str) -> None:
        """경고 로그"""
        self._print("WARNING", "warning", message)

    def error(self, message: str) -> None:
        """에러 로그"""
        self._print("ERROR", "error", message)
