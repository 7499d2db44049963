"""
캘린더 출력 명령
"""
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from core.domain.calendar_date import CalendarDate, DayOfWeek
from core.domain.exceptions import InvalidConfigurationError
from core.services.calendar_service import CalendarService
from infra.adapters.data.dataframe_mapper import DataFrameMapper
from interface.cli.dependencies import build_dependencies

# 커스텀 테마 정의
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
})

console = Console(theme=custom_theme)


def parse_optional_date(value: Optional[str]) -> Optional[CalendarDate]:
    """CLI 날짜 문자열 파싱 (잘못된 형식이면 종료 코드 1)"""
    if not value:
        return None
    try:
        return CalendarDate.parse(value)
    except InvalidConfigurationError as e:
        console.print(f"[error]❌ {e}[/error]")
        raise typer.Exit(code=1)


def load_dependencies(**kwargs) -> Dict[str, Any]:
    """build_dependencies 호출 (설정 오류면 종료 코드 1)"""
    try:
        return build_dependencies(**kwargs)
    except InvalidConfigurationError as e:
        console.print(f"[error]❌ 설정 오류:[/error] {e}")
        raise typer.Exit(code=1)


def render_months(
    calendar: CalendarService,
    mapper: DataFrameMapper,
    months: int,
) -> None:
    """표시 기준 월부터 months 개월을 표로 출력"""
    mapper.first_day_of_week = calendar.first_day_of_week
    frames = mapper.to_dataframes(calendar.window.items)

    anchor = calendar.displayed_date or calendar.date_info_provider.today
    start_key = f"{anchor.year:04d}-{anchor.month:02d}"
    keys = [key for key in frames if key >= start_key][:max(months, 0)]

    for key in keys:
        df = frames[key]
        table = Table(title=key, show_lines=False)
        for column in df.columns:
            table.add_column(column, justify="right")
        for row in df.itertuples(index=False):
            table.add_row(*[str(value) for value in row])
        console.print(table)

    selected = ", ".join(str(date) for date in calendar.selected_dates) or "-"
    console.print(f"[info]선택된 날짜: {selected}[/info]")
    console.print(
        f"[info]표시: *선택  @오늘  +표시자  ~선택불가 (모드 {calendar.selection_mode.value})[/info]"
    )


def show_calendar(
    initial_date: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="처음 표시할 날짜 (YYYY-MM-DD 형식), 기본값: 오늘"
    ),
    min_date: Optional[str] = typer.Option(None, "--min", help="최소 날짜 (YYYY-MM-DD)"),
    max_date: Optional[str] = typer.Option(None, "--max", help="최대 날짜 (YYYY-MM-DD)"),
    mode: str = typer.Option("NONE", "--mode", "-m", help="선택 모드 (NONE/SINGLE/MULTIPLE/RANGE)"),
    selected: List[str] = typer.Option([], "--select", "-s", help="초기 선택 날짜 (반복 지정 가능)"),
    first_day: Optional[str] = typer.Option(
        None,
        "--first-day",
        help="주의 첫 요일 (MONDAY, SUNDAY, ...), 기본값: CALENDAR_FIRST_DAY_OF_WEEK 또는 MONDAY"
    ),
    months: int = typer.Option(3, "--months", help="출력할 월 수"),
    save: bool = typer.Option(False, "--save", help="설정 상태를 저장 (select/export 명령에서 사용)"),
):
    """
    캘린더 설정 후 월별 그리드 출력
    """
    start = parse_optional_date(initial_date)
    minimum = parse_optional_date(min_date)
    maximum = parse_optional_date(max_date)
    selected_dates = [parse_optional_date(value) for value in selected]

    try:
        first_day_of_week = DayOfWeek.of(first_day) if first_day else None
        deps = build_dependencies(first_day_of_week=first_day_of_week)
        calendar: CalendarService = deps['calendar']
        calendar.setup_calendar(
            initial_date=start,
            min_date=minimum,
            max_date=maximum,
            selection_mode=mode,
            selected_dates=selected_dates,
            first_day_of_week=first_day_of_week,
        )
    except InvalidConfigurationError as e:
        console.print(f"[error]❌ 설정 오류:[/error] {e}")
        raise typer.Exit(code=1)

    console.print(Panel.fit("📅 Calendar", style="bold blue"))
    render_months(calendar, deps['mapper'], months)

    if save:
        deps['state_store'].save(calendar.save_state())
        console.print(f"[success]✅ 상태 저장 완료: {deps['state_store'].state_file}[/success]")
