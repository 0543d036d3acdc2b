"""hbshelpers CLI entry point.

Defines the top-level ``hbshelpers`` command and its subcommands:

- ``hbshelpers list``: print the registered helper names.
- ``hbshelpers call NAME [ARG]... [-o KEY=VALUE]...``: invoke a single helper.
- ``hbshelpers render TEMPLATE [--data FILE]``: render a Jinja2 template with
  every helper installed.

Notes
- Rendered output goes to **stdout**; logs and messages go to **stderr**.
- The CLI version is sourced from `hbshelpers.__version__` and displayed by
  Click-Extra (``--version``), which also provides ``--color/--no-color``
  and ``--time/--no-time``.
- Helper arguments and option values are decoded as JSON when possible.

Examples
    $ hbshelpers call limit "Elvis Costello is an English musician" 20
    $ hbshelpers call date '"2024-03-01T12:00:00"' -o "format=MMM Do, YYYY"
    $ hbshelpers render page.html --data page.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from hbshelpers import __version__
from hbshelpers.bootstrap import bootstrap
from hbshelpers.config import CLOUD_NAME_ENV, DATE_FORMAT_ENV, CloudNameNotSetError
from hbshelpers.domain.call_shape import HelperOptions
from hbshelpers.domain.errors import HelperError
from hbshelpers.integrations.jinja import install_helpers
from hbshelpers.logging import config_console_handler, log_startup

from .helpers import parse_hash_options, parse_log_level, parse_value, warn

if TYPE_CHECKING:
    from hbshelpers.registry import HelperRegistry

logger = logging.getLogger(__name__)


HELP = """hbshelpers command-line interface.

    Handlebars-style template helpers (dates, Cloudinary/CDN URLs, string
    helpers, loose comparisons, debug JSON) for Jinja2 templates. Use this
    tool to list the helpers, try one out, or render a template with them.
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
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L jinja2=INFO) or via HBSHELPERS_LOGGER_LEVELS (comma/space list)."
    ),
    default=("jinja2=WARNING", "urllib3=WARNING"),
    envvar="HBSHELPERS_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--cloud-name",
    help="Cloudinary cloud name used by cloudinaryUrl/cdnAsset.",
    envvar=CLOUD_NAME_ENV,
    show_envvar=True,
)
@click.option(
    "--date-format",
    help="Default pattern of the date helper (moment-style tokens).",
    envvar=DATE_FORMAT_ENV,
    show_envvar=True,
)
@clickx.pass_context
def hbshelpers(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    cloud_name: str | None,
    date_format: str | None,
) -> None:
    """hbshelpers command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler and root logger
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 2) set 3rd-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    # 3) wire the registry; CLI flags override environment configuration
    ctx.obj = bootstrap(cloud_name=cloud_name, date_format=date_format).registry

    ctx.call_on_close(logging.shutdown)


def _print_result(name: str, result: Any) -> None:
    if result is None:
        warn(f"{name} returned no value.")
        return
    click.echo(str(result))


@hbshelpers.command("list")
@click.pass_obj
def list_helpers(registry: HelperRegistry) -> None:
    """Print the registered helper names, one per line."""
    for name in registry.names():
        click.echo(name)


@hbshelpers.command("call")
@click.argument("name")
@click.argument("args", nargs=-1)
@click.option(
    "-o",
    "--option",
    "hash_options",
    multiple=True,
    callback=parse_hash_options,
    help="Keyword option passed to the helper (KEY=VALUE, repeatable).",
)
@click.option(
    "--scope",
    "scope_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file used as the rendering scope for options-only calls.",
)
@click.pass_obj
def call_helper(
    registry: HelperRegistry,
    name: str,
    args: tuple[str, ...],
    hash_options: dict[str, Any],
    scope_file: Path | None,
) -> None:
    """Invoke the helper NAME with ARGS and print the result.

    Each ARG is decoded as JSON when possible, so 20 is a number, true a
    boolean and '{"filetype": "application/pdf"}' a record.
    """
    scope = json.loads(scope_file.read_text(encoding="utf-8")) if scope_file else None
    options = HelperOptions(hash=hash_options, scope=scope)
    try:
        result = registry.call_with_options(
            name, [parse_value(arg) for arg in args], options
        )
    except (HelperError, CloudNameNotSetError) as e:
        raise click.ClickException(str(e)) from e
    _print_result(name, result)


@hbshelpers.command("render")
@click.argument(
    "template", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--data",
    "data_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file whose top-level object becomes the template context.",
)
@click.option(
    "--filters/--no-filters",
    default=False,
    help="Also expose the helpers as Jinja filters (shadows the builtin trim).",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Fail on undefined template variables instead of rendering them empty.",
)
@click.pass_obj
def render_template(
    registry: HelperRegistry,
    template: Path,
    data_file: Path | None,
    filters: bool,
    strict: bool,
) -> None:
    """Render the Jinja2 TEMPLATE with every helper installed."""
    data = json.loads(data_file.read_text(encoding="utf-8")) if data_file else {}
    if not isinstance(data, dict):
        raise click.BadParameter("The data file must hold a JSON object.")

    env_kwargs: dict[str, Any] = {"undefined": StrictUndefined} if strict else {}
    env = Environment(
        loader=FileSystemLoader(template.parent),
        autoescape=True,
        **env_kwargs,
    )
    install_helpers(env, registry, filters=filters)
    try:
        output = env.get_template(template.name).render(**data)
    except (TemplateError, HelperError, CloudNameNotSetError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(output)
    logger.info("Rendered %s", template)
