import asyncio
import json
import logging
import sys

import click
import tomli_w

from .snippets import classify, expand
from .utils.config import DEFAULT_CONFIG, get_config_path, load_config, save_config


CLI_HELP = """\
snipls is a small language server for React and React Native files. Editors
talk to it over stdin/stdout; besides the usual component, hook and
navigation snippets it expands a one-line tag shorthand into JSX.

Shorthand: segments are separated by `0`, the first is the tag name, the
others are attributes (`name` or `name(arg, ...)`), and `>` nests a child:

\b
  Button0onPress(handlePress)0style>Text

Use `snipls expand SHORTHAND` to try the expansion without an editor and
`snipls serve` to run the server.
"""


@click.group(
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120},
)
def cli():
    pass


@cli.command()
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Override server.log_level from the config file",
)
def serve(log_level):
    """Run the language server on stdin/stdout."""
    from .server.server import run_server

    config = load_config()
    if log_level:
        config.setdefault("server", {})["log_level"] = log_level

    try:
        exit_code = asyncio.run(run_server(config))
    finally:
        logging.shutdown()
    sys.exit(exit_code)


@cli.command("expand")
@click.argument("shorthand")
@click.option("--indent", default=None, help="Indentation for one nesting level")
def expand_command(shorthand, indent):
    """Print the JSX snippet a tag SHORTHAND expands to."""
    if indent is None:
        indent = load_config().get("completion", {}).get("indent", "  ")

    markup = expand(shorthand, indent=indent)
    if markup is None:
        raise click.ClickException(f"Not a valid tag shorthand: {shorthand!r}")
    click.echo(markup)


@cli.command("classify")
@click.argument("line")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def classify_command(line, json_output):
    """Show whether LINE would be offered as a dynamic tag, and why."""
    result = classify(line)
    signals = {
        "dynamic": result.is_dynamic,
        "pattern_match": result.pattern_match,
        "contains_separator": result.contains_separator,
        "starts_with_identifier": result.starts_with_identifier,
    }
    if json_output:
        click.echo(json.dumps(signals, indent=2))
        return

    for name, value in signals.items():
        click.echo(f"{name}: {'yes' if value else 'no'}")


@cli.command()
@click.option("--init", "init_config", is_flag=True, help="Write the default config file")
def config(init_config):
    """Print config file location and contents."""
    config_path = get_config_path()

    if init_config:
        if config_path.exists():
            raise click.ClickException(f"Config file already exists: {config_path}")
        save_config(DEFAULT_CONFIG)
        click.echo(f"Wrote default config to {config_path}")
        return

    click.echo(f"Config file: {config_path}")
    click.echo()

    if config_path.exists():
        click.echo(config_path.read_text())
    else:
        click.echo("(file does not exist, using defaults)")
        click.echo(tomli_w.dumps(DEFAULT_CONFIG))
