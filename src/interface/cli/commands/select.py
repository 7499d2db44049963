"""
저장된 캘린더 상태에서 날짜 선택 명령
"""
from typing import List

import typer

from core.services.calendar_service import CalendarService
from interface.cli.commands.show import console, load_dependencies, parse_optional_date, render_months


def select_dates(
    dates: List[str] = typer.Argument(..., help="순서대로 클릭할 날짜들 (YYYY-MM-DD)"),
    months: int = typer.Option(3, "--months", help="출력할 월 수"),
):
    """
    저장된 상태를 복원하고 날짜를 순서대로 클릭한 뒤 다시 저장

    먼저 `show --save` 로 상태를 만들어야 합니다.
    """
    clicks = [parse_optional_date(value) for value in dates]

    deps = load_dependencies()
    calendar: CalendarService = deps['calendar']
    bundle = deps['state_store'].load()

    if not bundle:
        console.print("[error]❌ 저장된 상태가 없습니다.[/error]")
        console.print("[info]💡 팁: 먼저 `show --save` 로 캘린더를 설정해주세요[/info]")
        raise typer.Exit(code=1)

    calendar.restore_state(bundle)

    for date in clicks:
        moved = calendar.move_to_date(date)
        positions = calendar.on_date_click(date)
        if moved is None or not positions:
            console.print(f"[warning]⚠️  선택 변화 없음: {date}[/warning]")

    deps['state_store'].save(calendar.save_state())
    render_months(calendar, deps['mapper'], months)
