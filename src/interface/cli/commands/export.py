"""
캘린더 엑셀 내보내기 명령
"""
from typing import Optional

import typer

from core.services.calendar_service import CalendarService
from interface.cli.commands.show import console, load_dependencies


def export_calendar(
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="출력 디렉토리 (기본값: config.OUTPUT_DIR)"
    ),
):
    """
    저장된 상태의 표시 구간 전체를 엑셀로 저장 (월별 시트)
    """
    deps = load_dependencies(output_dir=output_dir)
    calendar: CalendarService = deps['calendar']
    bundle = deps['state_store'].load()

    if not bundle:
        console.print("[error]❌ 저장된 상태가 없습니다.[/error]")
        console.print("[info]💡 팁: 먼저 `show --save` 로 캘린더를 설정해주세요[/info]")
        raise typer.Exit(code=1)

    calendar.restore_state(bundle)

    mapper = deps['mapper']
    mapper.first_day_of_week = calendar.first_day_of_week
    frames = mapper.to_dataframes(calendar.window.items)

    if not frames:
        console.print("[warning]⚠️  내보낼 월이 없습니다.[/warning]")
        raise typer.Exit(code=1)

    deps['exporter'].export(frames)
    console.print(
        f"[success]✅ {len(frames)}개월 저장 완료: {deps['exporter'].last_export_path}[/success]"
    )
