# === FILE: xref_spider/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for XrefSpider.

Commands:
  crawl OUTPUT   Crawl a documentation site and write its xref map (YAML)
  config         Show the validated configuration

Common options:
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if not given)
  --log-format FORMAT Logging format string

crawl options:
  --awssdk, -a        Crawl the AWS SDK for .NET V3 reference
  --unity, -u         Crawl the Unity scripting reference
  --config PATH       YAML/JSON config (site, docs_url, sitemap_url, timeout, ...)
  --timeout SEC       Per-request timeout
  --user-agent UA     User-Agent header
  --rate-limit RPS    Maximum requests per second

Extra:
  --version, -v       Show the XrefSpider version

Example:
  xref-spider crawl --unity unity-xrefmap.yml
"""
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from xref_spider import __version__
from xref_spider.config import SpiderConfig, load_config
from xref_spider.engine import start_crawl
from xref_spider.logger import DEFAULT_FORMAT, init_logging
from xref_spider.serializer import render_yaml, write_yaml

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-?"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _check_writable(path: Path) -> None:
    """Create and remove *path* once so a bad output path fails before the crawl."""
    existed = path.exists()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('a', encoding='utf-8'):
            pass
        if not existed:
            path.unlink()
    except OSError as e:
        print_error(f'The output file cannot be written to: {e}')


def _build_config(
    config_path: Optional[Path],
    aws: bool,
    unity: bool,
    overrides: Dict[str, Any],
) -> SpiderConfig:
    if aws and unity:
        print_error('There are too many spiders specified: use --awssdk or --unity, not both.')

    data: Dict[str, Any] = {}
    if config_path is not None:
        try:
            data = load_config(config_path).model_dump(exclude_none=True, mode='json')
        except Exception as e:
            print_error(f'Failed to load configuration: {e}')

    if aws:
        data['site'] = 'aws'
    elif unity:
        data['site'] = 'unity'
    if 'site' not in data:
        print_error('There was no spider specified: use --awssdk or --unity.')

    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return SpiderConfig(**data)
    except ValidationError as e:
        print_error(f'Invalid configuration: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='XrefSpider, version %(version)s')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if not given)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, log_level, log_file, log_format):
    """Crawl API documentation sites to build xref maps for DocFX and other consumers."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument(
    'output',
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option('--awssdk', '-a', 'aws', is_flag=True, help='Crawl the AWS SDK for .NET V3 reference')
@click.option('--unity', '-u', 'unity', is_flag=True, help='Crawl the Unity scripting reference')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option('--timeout', 'timeout', type=float, default=None, help='Per-request timeout (seconds)')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header')
@click.option('--rate-limit', 'rate_limit', type=float, default=None, help='Maximum requests per second')
def crawl(output, aws, unity, config_path, timeout, user_agent, rate_limit):
    """Crawl a documentation site and write its xref map to OUTPUT ('-' for stdout)."""
    cfg = _build_config(
        config_path,
        aws,
        unity,
        {'timeout': timeout, 'user_agent': user_agent, 'rate_limit': rate_limit},
    )
    to_stdout = str(output) == '-'
    if not to_stdout:
        _check_writable(output)

    try:
        records = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if records is None:
        print_error('Unable to access the seed page; nothing was written.')

    if to_stdout:
        click.echo(render_yaml(records), nl=False)
        return

    try:
        saved = write_yaml(records, output)
    except OSError as e:
        print_error(f'Failed to write {output}: {e}')
    click.echo(f'{len(records)} xrefs written to {saved}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--config', '-c', 'config_path',
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
def show_config(config_path):
    """Show the validated configuration as JSON."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
