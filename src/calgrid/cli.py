"""calgrid CLI - print calendar pages and windows."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.cells import DayCell, page_title
from .adapters.gregorian import SYMBOL_STYLES
from .config import Config, load_config
from .core.days import DayRole, Granularity
from .core.errors import CalendarRangeError, GridConfigError
from .core.layout import chunked
from .widget import CalendarWidget


def _parse_date(ctx, param, value):
    if value is None:
        return None
    if isinstance(value, tuple):
        return tuple(_parse_date(ctx, param, v) for v in value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date") from None


def _build_widget(
    config: Config,
    granularity: Granularity,
    target: date | None,
    sunday_first: bool | None = None,
    radius: int | None = None,
) -> CalendarWidget:
    """Apply command-line overrides to the config and build a widget."""
    if sunday_first is not None:
        config.week_start = "sunday" if sunday_first else "monday"
    if radius is not None:
        config.radius = radius
    calendar = config.calendar_system()
    return CalendarWidget(
        calendar,
        options=config.grid_options(),
        granularity=granularity,
        current_date=target or calendar.today(),
        is_selecting_days_active=config.selecting_days,
    )


def _run(build):
    """Build a widget, turning calendar errors into CLI errors."""
    try:
        return build()
    except GridConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except CalendarRangeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _format_cell(cell: DayCell) -> str:
    text = f"{cell.day_number:>3}"
    if cell.is_selected:
        return click.style(text, reverse=True)
    if cell.role is not DayRole.CURRENT:
        return click.style(text, dim=True)
    if cell.is_current_day:
        return click.style(text, bold=True)
    return text


def _show_page(widget: CalendarWidget, style: str, as_json: bool) -> None:
    """Shared page display logic."""
    cells = widget.cells()
    symbols = widget.weekday_symbols(style)
    title = page_title(widget.window.center)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "title": title,
                    "granularity": widget.granularity.value,
                    "weekdays": symbols,
                    "days": [c.to_dict() for c in cells],
                },
                indent=2,
            )
        )
        return

    click.echo(title)
    click.echo("".join(f"{s[:3]:>3}" for s in symbols))
    for row in chunked(cells, 7):
        click.echo("".join(_format_cell(c) for c in row))


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """calgrid - paging calendar grid generator."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _page_options(f):
    f = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(f)
    f = click.option("--select", "-s", "selected", multiple=True, callback=_parse_date,
                     help="Selected day (YYYY-MM-DD), repeatable")(f)
    f = click.option("--sunday-first/--monday-first", default=None,
                     help="Week start, defaults to WEEK_START from the config")(f)
    f = click.option("--date", "-d", "target_date", default=None, callback=_parse_date,
                     help="Reference date (YYYY-MM-DD), defaults to today")(f)
    return f


def _page_command(granularity, target_date, sunday_first, selected, as_json):
    config = load_config()
    widget = _run(lambda: _build_widget(config, granularity, target_date, sunday_first))
    widget.select_many(selected or ())
    _show_page(widget, config.symbol_style, as_json)


@main.command()
@_page_options
def month(target_date: date | None, sunday_first: bool | None, selected: tuple, as_json: bool):
    """Show the month page containing a date."""
    _page_command(Granularity.MONTH, target_date, sunday_first, selected, as_json)


@main.command()
@_page_options
def week(target_date: date | None, sunday_first: bool | None, selected: tuple, as_json: bool):
    """Show the week page containing a date."""
    _page_command(Granularity.WEEK, target_date, sunday_first, selected, as_json)


@main.command()
@click.option("--date", "-d", "target_date", default=None, callback=_parse_date,
              help="Reference date (YYYY-MM-DD), defaults to today")
@click.option("--granularity", "-g", type=click.Choice([g.value for g in Granularity]), default=None,
              help="Page granularity, defaults to GRANULARITY from the config")
@click.option("--radius", "-r", type=int, default=None, help="Pages on each side of the reference page")
@click.option("--sunday-first/--monday-first", default=None)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def window(target_date, granularity, radius, sunday_first, as_json: bool):
    """List the pages of the window around a date."""
    config = load_config()
    if granularity is not None:
        config.granularity = granularity
    widget = _run(
        lambda: _build_widget(config, config.page_granularity(), target_date, sunday_first, radius)
    )

    pages = []
    for index, page in enumerate(widget.window):
        current = page.current_days
        pages.append(
            {
                "index": index,
                "title": page_title(page),
                "first": current[0].isoformat(),
                "last": current[-1].isoformat(),
                "days": len(page),
                "center": index == widget.window.radius,
            }
        )

    if as_json:
        click.echo(json.dumps(pages, indent=2))
        return

    for p in pages:
        marker = ">" if p["center"] else " "
        click.echo(f"{marker} {p['index']:>2}  {p['first']} .. {p['last']}  {p['title']} ({p['days']} days)")


@main.command()
@click.option("--sunday-first/--monday-first", default=None)
@click.option("--style", type=click.Choice(SYMBOL_STYLES), default=None,
              help="Symbol style, defaults to SYMBOL_STYLE from the config")
def weekdays(sunday_first: bool | None, style: str | None):
    """Print weekday header symbols in grid order."""
    config = load_config()
    widget = _run(lambda: _build_widget(config, Granularity.WEEK, None, sunday_first))
    click.echo(" ".join(widget.weekday_symbols(style or config.symbol_style)))
