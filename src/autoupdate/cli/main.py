#!/usr/bin/env python3
"""
autoupdate CLI - Main entry point
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from autoupdate import __version__
from autoupdate.updater import UpdateChecker, UpdateConfig, UpdateError, generate_sample
from autoupdate.updater.version import as_version

console = Console()


def _parse_headers(ctx, param, values):
    """Turn repeated 'Name: value' options into a dict"""
    headers = {}
    for raw in values:
        name, sep, value = raw.partition(':')
        if not sep or not name.strip():
            raise click.BadParameter(f"expected 'Name: value', got {raw!r}")
        headers[name.strip()] = value.strip()
    return headers


def _build_checker(ctx, uri=None, current=None, headers=None):
    config = ctx.obj['config']
    checker = UpdateChecker.from_config(config, transport=ctx.obj.get('transport'))
    if uri:
        checker.query_uri = uri
    if current:
        checker.current_version = as_version(current)
    if headers:
        checker.headers = {**(checker.headers or {}), **headers}
    return checker


def _fail(error):
    console.print(f"[bold red]✗ {escape(str(error))}[/bold red]")
    sys.exit(1)


def _run_check(ctx, checker):
    try:
        available = checker.check_for_updates()
    except UpdateError as e:
        _fail(e)
    ctx.obj['config'].record_check(checker.latest_version)
    return available


uri_option = click.option('--uri', help='Manifest URI (default: from config)')
header_option = click.option('-H', '--header', 'headers', multiple=True, callback=_parse_headers,
                             help="Extra request header as 'Name: value'")


@click.group()
@click.version_option(version=__version__, prog_name="autoupdate")
@click.option('--debug', is_flag=True, help='Enable debug output')
@click.option('--config-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Config directory (default: ~/.autoupdate)')
@click.pass_context
def cli(ctx, debug, config_dir):
    """autoupdate - check a version manifest for software updates"""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    ctx.obj.setdefault('transport', None)
    try:
        ctx.obj['config'] = UpdateConfig(config_dir)
    except UpdateError as e:
        _fail(e)


@cli.command()
@uri_option
@click.option('--current', help='Installed version (default: from config)')
@header_option
@click.pass_context
def check(ctx, uri, current, headers):
    """Check for updates

    Examples:
        autoupdate check --uri http://example.com/version.manifest --current 1.0
    """
    try:
        checker = _build_checker(ctx, uri, current, headers)
    except UpdateError as e:
        _fail(e)

    console.print(f"[bold blue]Checking {escape(checker.query_uri)}...[/bold blue]")
    available = _run_check(ctx, checker)

    latest = checker.latest_version
    if available:
        console.print(f"[bold green]Update available: {checker.current_version} -> {latest}[/bold green]")
        download = checker.get_download_uri(latest)
        if download:
            console.print(f"Download: {escape(download)}")
    else:
        console.print(f"[green]✓ Up to date ({checker.current_version}, latest {latest})[/green]")


@cli.command()
@click.argument('version')
@uri_option
@header_option
@click.pass_context
def info(ctx, version, uri, headers):
    """Show info and download links for VERSION"""
    try:
        checker = _build_checker(ctx, uri, headers=headers)
        _run_check(ctx, checker)
        entry = checker.get_entry(version)
    except UpdateError as e:
        _fail(e)

    if entry is None:
        console.print(f"[yellow]Version {escape(version)} not found in manifest[/yellow]")
        return

    console.print(f"[bold]{entry.version}[/bold]")
    console.print(f"  info:     {escape(entry.info_uri or '-')}")
    console.print(f"  download: {escape(entry.download_uri or '-')}")


@cli.command('list')
@uri_option
@header_option
@click.pass_context
def list_versions(ctx, uri, headers):
    """List all versions in the manifest"""
    try:
        checker = _build_checker(ctx, uri, headers=headers)
    except UpdateError as e:
        _fail(e)
    _run_check(ctx, checker)

    table = Table(title="Published Versions")
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Info", style="green")
    table.add_column("Download", style="magenta")

    for entry in checker.manifest:
        table.add_row(
            str(entry.version),
            escape(entry.info_uri or ''),
            escape(entry.download_uri or '')
        )

    console.print(table)


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the sample to a file instead of stdout')
def sample(output):
    """Print a sample version manifest"""
    text = generate_sample()
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + '\n', encoding='utf-8')
        console.print(f"[bold green]✓ Sample manifest written to {escape(str(output))}[/bold green]")
    else:
        click.echo(text)


def main():
    """Main entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)


if __name__ == '__main__':
    main()
