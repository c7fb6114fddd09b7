"""Tally CLI application using Typer.

Runs the report queries against the configured database and renders the
results as Rich tables.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import date, datetime
from typing import Awaitable, Callable, List, Optional, TypeVar

import typer
import uvicorn
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tally.application.dtos.reporting import (
    InOutResult,
    NetWorthResult,
    SummarizedReport,
)
from tally.application.queries import (
    NetWorthQuery,
    YearInOutQuery,
    YearInOutSummarizedQuery,
)
from tally.domain.reporting.value_objects import AccountSet, DateRange, ReportType
from tally.domain.shared.exceptions import DomainException
from tally.domain.shared.time import today_utc
from tally.infrastructure.cache import NullCacheStore
from tally.infrastructure.persistence.sqlalchemy import SQLAlchemyReportFactory
from tally.infrastructure.persistence.sqlalchemy.models import Base
from tally_config.logging_config import configure_logging
from tally_config.settings import get_settings

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tally",
    help="Tally - time-bucketed financial report charts",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

reports_app = typer.Typer(
    name="reports",
    help="Render report data in the terminal",
    no_args_is_help=True,
)
app.add_typer(reports_app)


@app.callback()
def main() -> None:
    """Configure logging for every command."""
    configure_logging(get_settings().log_level, sys.stderr)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        msg = f"'{value}' is not a date in YYYY-MM-DD format"
        raise typer.BadParameter(msg) from None


StartOption = typer.Option(..., "--start", help="First day (YYYY-MM-DD, inclusive)")
EndOption = typer.Option(
    None,
    "--end",
    help="End day (YYYY-MM-DD, exclusive). Defaults to today.",
)
AccountOption = typer.Option(
    [],
    "--account",
    "-a",
    help="Account id to include (repeatable)",
)
ReportTypeOption = typer.Option(ReportType.DEFAULT, "--report-type")


async def _run_with_factory(
    run: Callable[[SQLAlchemyReportFactory], Awaitable[T]],
) -> T:
    # One-shot process: nothing to share a cache with
    engine = create_async_engine(get_settings().database_url, echo=False)
    logger.debug("Running report against %s", engine.url.render_as_string())
    try:
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            factory = SQLAlchemyReportFactory(
                session=session,
                cache_store=NullCacheStore(),
            )
            return await run(factory)
    finally:
        await engine.dispose()


def _resolve_scope(
    start: str,
    end: Optional[str],
    accounts: List[int],
) -> tuple[AccountSet, date, date]:
    start_date = _parse_date(start)
    end_date = _parse_date(end) if end else today_utc()
    try:
        DateRange.validated(start_date, end_date)
    except DomainException as e:
        raise typer.BadParameter(e.message) from None
    return AccountSet.of(accounts), start_date, end_date


def _money(value) -> str:
    return f"{value:,.2f}"


def _in_currency(label: str) -> str:
    return f"{label} ({get_settings().report_currency})"


@db_app.command("init")
def init_db() -> None:
    """Create missing database tables."""

    async def _create() -> None:
        engine = create_async_engine(get_settings().database_url, echo=False)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    asyncio.run(_create())
    console.print("[bold green]Database tables are up to date[/bold green]")


@reports_app.command("net-worth")
def net_worth(
    start: str = StartOption,
    end: Optional[str] = EndOption,
    account: List[int] = AccountOption,
    report_type: ReportType = ReportTypeOption,
) -> None:
    """Show weekly net worth of the selected accounts."""
    account_set, start_date, end_date = _resolve_scope(start, end, account)
    result: NetWorthResult = asyncio.run(
        _run_with_factory(
            lambda factory: NetWorthQuery.from_factory(factory).execute(
                account_set, start_date, end_date, report_type
            )
        )
    )

    table = Table(title=f"Net worth {start_date} .. {end_date}")
    table.add_column("Date")
    table.add_column(_in_currency("Net worth"), justify="right")
    for snapshot in result.snapshots:
        table.add_row(snapshot.date.isoformat(), _money(snapshot.net_worth))
    console.print(table)


@reports_app.command("in-out")
def in_out(
    start: str = StartOption,
    end: Optional[str] = EndOption,
    account: List[int] = AccountOption,
    report_type: ReportType = ReportTypeOption,
) -> None:
    """Show income and expenses per month (or per year)."""
    account_set, start_date, end_date = _resolve_scope(start, end, account)
    result: InOutResult = asyncio.run(
        _run_with_factory(
            lambda factory: YearInOutQuery.from_factory(factory).execute(
                account_set, start_date, end_date, report_type
            )
        )
    )

    table = Table(title=f"Income vs. expenses per {result.granularity.value}")
    table.add_column("Period")
    table.add_column(_in_currency("Income"), justify="right", style="green")
    table.add_column(_in_currency("Expenses"), justify="right", style="red")
    for entry in result.entries:
        table.add_row(entry.period_label, _money(entry.income), _money(entry.expense))
    console.print(table)


@reports_app.command("in-out-summarized")
def in_out_summarized(
    start: str = StartOption,
    end: Optional[str] = EndOption,
    account: List[int] = AccountOption,
    report_type: ReportType = ReportTypeOption,
) -> None:
    """Show total income and expenses with the per-period average."""
    account_set, start_date, end_date = _resolve_scope(start, end, account)
    report: SummarizedReport = asyncio.run(
        _run_with_factory(
            lambda factory: YearInOutSummarizedQuery.from_factory(factory).execute(
                account_set, start_date, end_date, report_type
            )
        )
    )

    count = report.period_count
    table = Table(title=f"Summary over {count} {report.granularity.value}(s)")
    table.add_column("")
    table.add_column(_in_currency("Income"), justify="right", style="green")
    table.add_column(_in_currency("Expenses"), justify="right", style="red")
    table.add_row("Sum", _money(report.total_income), _money(report.total_expense))
    if count:
        table.add_row(
            "Average",
            _money(report.total_income / count),
            _money(report.total_expense / count),
        )
    console.print(table)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Defaults to API_HOST"),
    port: Optional[int] = typer.Option(None, "--port", help="Defaults to API_PORT"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Serve the report chart API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "tally.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=settings.api_port if port is None else port,
        reload=reload,
        log_config=None,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
