"""
Calendar CLI - 단일 진입점
"""
import typer
from interface.cli.commands.show import show_calendar
from interface.cli.commands.select import select_dates
from interface.cli.commands.export import export_calendar

app = typer.Typer(help="스크롤 캘린더 그리드/선택 CLI")

app.command("show")(show_calendar)
app.command("select")(select_dates)
app.command("export")(export_calendar)

if __name__ == "__main__":
    app()
