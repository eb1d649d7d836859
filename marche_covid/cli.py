"""CLI utilities."""

import json
from datetime import timedelta

import click
import uvicorn

from marche_covid.api.auth import create_access_token, get_password_hash
from marche_covid.config import settings
from marche_covid.core.dates import validate_range
from marche_covid.core.errors import InvalidDate, InvalidDateRange, ReportError
from marche_covid.core.statistics import StatisticsEngine
from marche_covid.core.store import ReportStore
from marche_covid.database import get_store

SERIES = {
    "new-positives": ("new_positives_series", "new_positives"),
    "new-recovered": ("new_recovered_series", "new_recovered"),
    "new-deceased": ("new_deceased_series", "new_deceased"),
    "moving-average": ("moving_average_7", "average_new_positives"),
    "positivity-rate": ("positivity_rate", "positivity_rate"),
}


@click.group()
def cli():
    """Marche COVID-19 daily reports CLI."""
    pass


@cli.command()
@click.option("--host", default="127.0.0.1")
@click.option("--port", default=3000, type=int)
@click.option("--reload", is_flag=True, default=False)
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API."""
    uvicorn.run("marche_covid.api.main:app", host=host, port=port, reload=reload)


@cli.command()
@click.option("--password", required=True, prompt=True, hide_input=True, confirmation_prompt=True)
def hash_password(password: str):
    """Print a bcrypt hash for ADMIN_PASSWORD_HASH."""
    click.echo(get_password_hash(password))


@cli.command()
@click.option("--minutes", default=None, type=int, help="Token lifetime in minutes")
def create_token(minutes):
    """Issue an access token for the admin account."""
    expires = timedelta(minutes=minutes) if minutes else None
    click.echo(create_access_token({"sub": settings.admin_username}, expires_delta=expires))


@cli.command()
def latest():
    """Show the most recent report."""
    try:
        report = get_store().latest()
    except ReportError as e:
        raise click.ClickException(str(e))
    click.echo(json.dumps(report.to_record(), indent=2, ensure_ascii=False))


@cli.command()
@click.argument("series", type=click.Choice(sorted(SERIES)))
@click.argument("start")
@click.argument("end")
def stats(series: str, start: str, end: str):
    """Print a daily statistic between START and END (YYYY-MM-DD)."""
    try:
        start_day, end_day = validate_range(start, end)
    except (InvalidDate, InvalidDateRange) as e:
        raise click.BadParameter(str(e))
    method, key = SERIES[series]
    points = getattr(StatisticsEngine(get_store()), method)(start_day, end_day)
    if not points:
        raise click.ClickException("No report available for the given range")
    click.echo(json.dumps([p.to_dict(key) for p in points], indent=2))


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def import_reports(source: str):
    """Merge reports from a JSON document, skipping days already stored."""
    try:
        incoming = ReportStore.load(source).all()
        added = get_store().create_many(incoming)
    except ReportError as e:
        raise click.ClickException(str(e))
    click.echo(f"Imported {len(added)} of {len(incoming)} reports into {settings.data_file}")


if __name__ == "__main__":
    cli()
