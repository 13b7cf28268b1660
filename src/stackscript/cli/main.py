# src/stackscript/cli/main.py
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import __version__, run_source
from ..config import Config
from ..error_reporter import StackScriptError, print_error
from ..lexer import Lexer

console = Console()
err_console = Console(stderr=True)

DEMO_PROGRAM = '''
print
    add
        5
        add
            10
            10

print
    concat
        "Hello, "
        "world!"
'''


def configure_logging(config):
    logging.basicConfig(
        level=config.level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _read_source(file):
    try:
        with open(file, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"{file}: {e}")


def _execute(ctx, source, filename):
    config = ctx.obj['config']
    try:
        run_source(source, filename=filename, config=config)
    except StackScriptError as e:
        print_error(e, err_console, show_suggestion=config.show_suggestions)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="StackScript")
@click.option('--debug', is_flag=True, help="Log every executed instruction.")
@click.pass_context
def cli(ctx, debug):
    """StackScript - a tiny prefix-notation stack language"""
    try:
        config = Config.load()
    except (OSError, ValueError) as e:
        raise click.ClickException(f"could not load config: {e}")
    if debug:
        config.log_level = "debug"
    configure_logging(config)
    ctx.ensure_object(dict)
    ctx.obj['config'] = config


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('-e', '--eval', 'code', help="Run CODE instead of a file.")
@click.pass_context
def run(ctx, file, code):
    """Run a StackScript program"""
    if (file is None) == (code is None):
        raise click.UsageError("give either FILE or --eval CODE")
    if code is not None:
        _execute(ctx, code, "<eval>")
    else:
        _execute(ctx, _read_source(file), file)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx, file):
    """Check that a StackScript file tokenizes"""
    config = ctx.obj['config']
    try:
        tokens = Lexer(_read_source(file), file, config).tokenize()
    except StackScriptError as e:
        print_error(e, err_console, show_suggestion=config.show_suggestions)
        sys.exit(1)
    console.print(f"[bold green]OK[/bold green] {file}: {len(tokens)} tokens")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--json', 'as_json', is_flag=True, help="Emit tokens as JSON lines.")
@click.pass_context
def tokens(ctx, file, as_json):
    """Show tokens of a StackScript file"""
    config = ctx.obj['config']
    try:
        toks = Lexer(_read_source(file), file, config).tokenize()
    except StackScriptError as e:
        print_error(e, err_console, show_suggestion=config.show_suggestions)
        sys.exit(1)

    if as_json:
        for tok in toks:
            click.echo(json.dumps({
                'type': tok.type,
                'literal': tok.literal,
                'line': tok.line,
                'column': tok.column,
            }))
        return

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")
    for tok in toks:
        table.add_row(tok.type, tok.literal, str(tok.line), str(tok.column))
    console.print(table)


@cli.command()
@click.pass_context
def demo(ctx):
    """Run the built-in sample program"""
    _execute(ctx, DEMO_PROGRAM, "<demo>")


@cli.command()
@click.pass_context
def repl(ctx):
    """Start the StackScript REPL"""
    config = ctx.obj['config']
    console.print(f"[bold green]StackScript REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            code = console.input("[bold blue]>>> [/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if code.strip() in ('exit', 'quit'):
            break
        if not code.strip():
            continue

        try:
            run_source(code, filename="<repl>", config=config)
        except StackScriptError as e:
            print_error(e, err_console, show_suggestion=config.show_suggestions)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
