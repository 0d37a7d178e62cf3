# === FILE: robots_scout/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for RobotsScout.

Commands:
  analyze SOURCE    Directive statistics of a robots.txt
  validate SOURCE   Syntax/semantics check with line-numbered messages
  config            Show the effective fetch configuration

SOURCE is a file path, ``-`` for stdin, or an http(s) URL of a site
(its /robots.txt is fetched).

Common options:
  --config PATH       YAML/JSON fetch config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

Example:
  robots-scout analyze https://example.com --pretty
  robots-scout validate robots.txt --strict
"""
import asyncio
import sys
from pathlib import Path

import click

from robots_scout import __version__
from robots_scout.config import load_config
from robots_scout.engine import analyze_url, validate_url
from robots_scout.errors import RobotsScoutError
from robots_scout.logger import init_logging
from robots_scout.parser.analyzer import analyze
from robots_scout.parser.validator import validate
from robots_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _read_source(source: str) -> bytes:
    if source == '-':
        return click.get_binary_stream('stdin').read()
    try:
        return Path(source).expanduser().read_bytes()
    except OSError as e:
        print_error(f'Cannot read {source}: {e}')


def _emit(result, json_output, pretty):
    if json_output:
        try:
            saved = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Failed to save JSON report: {e}')
    else:
        click.echo(result.json(pretty=pretty))


json_option = click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON report to a file'
)
pretty_option = click.option(
    '--pretty', is_flag=True,
    help='Indent the JSON output (2 spaces)'
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON fetch configuration.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """RobotsScout: analyze and validate robots.txt files."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('analyze', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@json_option
@pretty_option
@click.pass_context
def analyze_cmd(ctx, source, json_output, pretty):
    """Count directives, user-agents and sitemaps of SOURCE."""
    cfg = ctx.obj['config']
    if _is_url(source):
        try:
            result = asyncio.run(analyze_url(source, cfg))
        except RobotsScoutError as e:
            print_error(str(e))
    else:
        result = analyze(_read_source(source))
    _emit(result, json_output, pretty)


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@click.argument('source')
@json_option
@pretty_option
@click.option(
    '--strict', is_flag=True,
    help='Exit with status 1 on warnings as well as errors'
)
@click.pass_context
def validate_cmd(ctx, source, json_output, pretty, strict):
    """Check the syntax of SOURCE; exit status 1 if it has errors."""
    cfg = ctx.obj['config']
    if _is_url(source):
        try:
            result = asyncio.run(validate_url(source, cfg))
        except RobotsScoutError as e:
            print_error(str(e))
    else:
        result = validate(_read_source(source))
    _emit(result, json_output, pretty)
    if not result.is_valid or (strict and result.warnings):
        ctx.exit(1)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective fetch configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
