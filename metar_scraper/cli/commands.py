"""Command-line interface for METAR Scraper."""

import logging
import sys

import click

from metar_scraper import __version__
from metar_scraper.config.stations import load_station_sources, resolve_output_dir
from metar_scraper.core import ConfigurationError, RunConfig
from metar_scraper.data import registered_stations
from metar_scraper.engine import ScrapePipeline
from metar_scraper.cli.display import render_summary
from metar_scraper.utils import MailNotifier, setup_logging

logger = logging.getLogger(__name__)

HELP_HINT = "Try 'metar-scraper --help' for more information."

# Exit status when --strict is set and at least one station failed
STATION_FAILURE_EXIT_CODE = 2


def fail_startup(error: Exception, notifier: MailNotifier) -> None:
    """Report a fatal startup error and exit non-zero."""
    click.echo(err=True)
    click.echo("ERROR: ", err=True)
    click.echo(str(error), err=True)
    click.echo(err=True)
    click.echo(HELP_HINT, err=True)

    logger.error(f"Fatal configuration error: {error}", exc_info=error)
    notifier.send(str(error))
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None,
              help="Also write log records to this FILE")
@click.pass_context
def main(ctx, debug: bool, log_file: str):
    """METAR Scraper - Archive METAR/SPECI bulletins from station web pages."""
    # Logging is configured by the command that runs, after its --help
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = "DEBUG" if debug else None
    ctx.obj["log_file"] = log_file


@main.command()
@click.option("--file", "-f", "config_file", default=None,
              help="The configuration FILE listing the weather data sources")
@click.option("--path", "-p", "data_path", default=None,
              help="The PATH in which to save the data files")
@click.option("--mail-from", envvar="METAR_MAIL_FROM", default="",
              help="The e-mail address FROM which notifications are sent")
@click.option("--mail-to", envvar="METAR_MAIL_TO", default="",
              help="The e-mail address TO which notifications are sent")
@click.option("--mail-server", envvar="METAR_MAIL_SERVER", default="",
              help="The SMTP SERVER through which notifications are sent")
@click.option("--strict", is_flag=True,
              help="Exit with status 2 if any station failed")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the run summary")
@click.pass_context
def run(
    ctx,
    config_file: str,
    data_path: str,
    mail_from: str,
    mail_to: str,
    mail_server: str,
    strict: bool,
    quiet: bool,
):
    """Fetch, validate and archive the configured bulletins once."""
    setup_logging(level=ctx.obj["log_level"], log_file=ctx.obj["log_file"])
    notifier = MailNotifier(mail_from, mail_to, mail_server)

    try:
        sources = load_station_sources(config_file)
        output_dir = resolve_output_dir(data_path)
    except ConfigurationError as e:
        fail_startup(e, notifier)
        return

    config = RunConfig(
        sources=sources,
        output_dir=output_dir,
        mail_from=mail_from,
        mail_to=mail_to,
        mail_server=mail_server,
    )
    summary = ScrapePipeline(config, notifier=notifier).run()

    if not quiet:
        render_summary(summary)

    if strict and summary.failures:
        sys.exit(STATION_FAILURE_EXIT_CODE)


@main.command()
def stations():
    """List station identifiers that have an extraction rule."""
    click.echo("\nSupported Stations:")
    click.echo("-" * 30)
    for code in registered_stations():
        click.echo(f"  {code}")


if __name__ == "__main__":
    main()
