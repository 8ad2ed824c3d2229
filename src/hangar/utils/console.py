from rich.console import Console
from rich.table import Table
from typing import List

console = Console()

DIFF_STYLES = {
    "+": "green",
    "-": "red",
}


def success(message: str):
    """Display success message"""
    console.print(f"✔ {message}", style="bold green")


def error(message: str):
    """Display error message"""
    console.print(f"✖ {message}", style="bold red")


def warning(message: str):
    """Display warning message"""
    console.print(f"⚠  {message}", style="bold yellow")


def info(message: str):
    """Display info message"""
    console.print(f"{message}", style="cyan")


def create_table(title: str, columns: List[str]) -> Table:
    """Create a rich table"""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in columns:
        table.add_column(column)
    return table


def print_diff(rendered: str):
    """Print rendered diff text, coloring added and removed lines"""
    for index, line in enumerate(rendered.splitlines()):
        if index == 0:
            console.print(line, style="bold yellow", markup=False, highlight=False)
            continue
        style = DIFF_STYLES.get(line[:1])
        console.print(line, style=style, markup=False, highlight=False)
