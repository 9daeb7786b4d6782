"""SUBSCRIBEANDSAVE CLI entry point.

Defines the top-level ``subscribeandsave`` command (via Click-Extra), wires up
console logging and the flight recorder, and registers the subscription
commands.

Examples
    $ subscribeandsave --version
    $ subscribeandsave --file subs.csv create --customer-id C1 --asin B01BMDAVIY --frequency 1
    $ subscribeandsave get 81a9792e-9b4c-4090-aac8-28e733ac2f54
    $ subscribeandsave update 81a9792e-9b4c-4090-aac8-28e733ac2f54 --frequency 2
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from subscribeandsave import __version__, config
from subscribeandsave.adapters.id_generators import ID_GENERATOR_NAMES
from subscribeandsave.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers import parse_log_level
from .subscriptions import COMMANDS, StorageSettings

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """SUBSCRIBEANDSAVE command-line interface.

    Manage "Subscribe & Save" subscriptions (a customer's recurring order of a
    product at a fixed delivery frequency) stored in a plain CSV file.
    Records are printed as JSON on stdout; notices go to stderr.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--file",
    "subscriptions_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="CSV file holding the subscriptions (created empty if missing).",
    default=config.default_subscriptions_path(),
    envvar=config.SUBSCRIPTIONS_FILE_ENVVAR,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--id-generator",
    "id_generator",
    type=click.Choice(ID_GENERATOR_NAMES, case_sensitive=False),
    help="Strategy used to assign ids to new subscriptions.",
    default=config.DEFAULT_ID_GENERATOR,
    envvar=config.ID_GENERATOR_ENVVAR,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=Path(user_log_dir(config.APP_NAME, appauthor=False)) / "latest.log",
    envvar="SUBSCRIBEANDSAVE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="SUBSCRIBEANDSAVE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records at "
        "DEBUG granularity (unaffected by -v/-q) and writes them to --log-path "
        "when a WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L click_extra=INFO) or "
        "via SUBSCRIBEANDSAVE_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="SUBSCRIBEANDSAVE_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def subscribeandsave(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    subscriptions_path: Path,
    id_generator: str,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """SUBSCRIBEANDSAVE command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        subscriptions_path=subscriptions_path,
        id_generator=id_generator,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.obj = StorageSettings(path=subscriptions_path, id_generator=id_generator)

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    subscribeandsave.add_command(_command)
