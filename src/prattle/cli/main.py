"""CLI entry point for prattle.

Invoked as::

    prattle [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m prattle.cli.main

Commands
--------
parse       Parse an expression and print its tree
tokens      Show the tokens of an expression
eval        Evaluate expressions in one shared namespace
repl        Read expressions line by line from standard input
grammars    List registered grammar variants
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from prattle.ast.nodes import Node
    from prattle.evaluator import Evaluator
    from prattle.parser.registry import ParseletRegistry

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
_FORMATS = ["describe", "infix", "tree", "json", "yaml"]


def _configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_registry(grammar: str) -> "ParseletRegistry":
    """Resolve a grammar name, exiting with a message if it is unknown."""
    from prattle.plugins import GrammarNotFoundError, grammars

    grammars.load_entrypoints()
    try:
        return grammars.registry_for(grammar)
    except GrammarNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc.args[0]))}")
        sys.exit(2)


def _parse_or_raise(source: str, registry: "ParseletRegistry") -> "Node":
    from prattle.parser import parse

    return parse(source, registry=registry)


def _print_error(label: str, exc: Exception) -> None:
    err_console.print(f"[red]{label}:[/red] {escape(str(exc))}", soft_wrap=True)


def _render(node: "Node", output_format: str) -> None:
    """Print ``node`` in the requested format."""
    from prattle.ast.nodes import depth, walk
    from prattle.ast.serializer import AstSerializer
    from prattle.formatter import describe, format_expression

    if output_format == "describe":
        console.print(describe(node), markup=False, highlight=False, soft_wrap=True)
    elif output_format == "infix":
        console.print(format_expression(node), markup=False, highlight=False, soft_wrap=True)
    elif output_format == "tree":
        console.print(_build_tree(node))
        console.print(
            f"[dim]{len(walk(node))} node(s), depth {depth(node)}[/dim]", highlight=False
        )
    else:
        serializer = AstSerializer()
        if output_format == "json":
            text, lang = serializer.to_json(node), "json"
        else:
            text, lang = serializer.to_yaml(node), "yaml"
        console.print(Syntax(text, lang, word_wrap=True))


def _build_tree(node: "Node", parent: Tree | None = None) -> Tree:
    """Build a Rich tree whose labels name each node and its payload."""
    from prattle.ast.nodes import BinaryOp, Identifier, Literal, UnaryOp

    if isinstance(node, Literal):
        label = f"[cyan]Literal[/cyan] {node.value}"
    elif isinstance(node, Identifier):
        label = f"[green]Identifier[/green] {escape(node.name)}"
    elif isinstance(node, UnaryOp):
        label = f"[magenta]UnaryOp[/magenta] {escape(node.operator)}"
    else:
        label = f"[yellow]BinaryOp[/yellow] {escape(node.operator)}"

    branch = Tree(label) if parent is None else parent.add(label)
    if isinstance(node, UnaryOp):
        _build_tree(node.operand, branch)
    elif isinstance(node, BinaryOp):
        _build_tree(node.left, branch)
        _build_tree(node.right, branch)
    return branch


grammar_option = click.option(
    "--grammar",
    "grammar",
    default="default",
    show_default=True,
    help="Name of the grammar variant to parse with",
)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="prattle")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Enable logging at this level (logs go to stderr)",
)
def cli(log_level: str | None) -> None:
    """Pratt expression parser: tokenize, parse, format and evaluate expressions."""
    if log_level is not None:
        _configure_logging(log_level.upper())


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from prattle import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]prattle[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# grammars command
# ---------------------------------------------------------------------------


@cli.command(name="grammars")
@click.option(
    "--show",
    "show",
    default=None,
    metavar="NAME",
    help="Print the reference grammar of one variant instead of the list",
)
def grammars_command(show: str | None) -> None:
    """List registered grammar variants, including installed plugins."""
    from prattle.plugins import GrammarNotFoundError, grammars

    grammars.load_entrypoints()
    if show is not None:
        try:
            grammar_cls = grammars.get(show)
        except GrammarNotFoundError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc.args[0]))}")
            sys.exit(2)
        if not grammar_cls.ebnf:
            console.print(f"[dim]{escape(show)} has no reference grammar[/dim]")
            return
        console.print(Syntax(grammar_cls.ebnf.strip(), "ebnf", word_wrap=True))
        return

    table = Table(title="Grammars")
    table.add_column("Name", style="bold")
    table.add_column("Description")
    for name in grammars.list_grammars():
        table.add_row(name, grammars.get(name).description)
    console.print(table)


# ---------------------------------------------------------------------------
# tokens command
# ---------------------------------------------------------------------------


@cli.command(name="tokens")
@click.argument("expression")
def tokens_command(expression: str) -> None:
    """Show the tokens of EXPRESSION."""
    from prattle.lexer import LexError, tokenize

    try:
        tokens = tokenize(expression)
    except LexError as exc:
        _print_error("Lex error", exc)
        sys.exit(1)

    table = Table(title="Tokens")
    table.add_column("Offset", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Operator", justify="center")
    for tok in tokens:
        table.add_row(
            str(tok.offset), tok.kind.name, escape(tok.text), "yes" if tok.is_operator else ""
        )
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("expression")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMATS),
    default="describe",
    show_default=True,
    help="How to print the tree",
)
@grammar_option
def parse_command(expression: str, output_format: str, grammar: str) -> None:
    """Parse EXPRESSION and print its syntax tree."""
    from prattle.lexer import LexError
    from prattle.parser import ParseError

    registry = _load_registry(grammar)
    try:
        node = _parse_or_raise(expression, registry)
    except LexError as exc:
        _print_error("Lex error", exc)
        sys.exit(1)
    except ParseError as exc:
        _print_error("Parse error", exc)
        sys.exit(1)
    _render(node, output_format)


# ---------------------------------------------------------------------------
# eval command
# ---------------------------------------------------------------------------


@cli.command(name="eval")
@click.argument("expressions", nargs=-1, required=True)
@grammar_option
def eval_command(expressions: tuple[str, ...], grammar: str) -> None:
    """Evaluate EXPRESSIONS in order, sharing one variable namespace.

    Prints the value of each expression; stops at the first error.
    """
    from prattle.evaluator import Evaluator

    registry = _load_registry(grammar)
    evaluator = Evaluator()
    for expression in expressions:
        if not _run_line(expression, registry, evaluator, "describe"):
            sys.exit(1)


# ---------------------------------------------------------------------------
# repl command
# ---------------------------------------------------------------------------


@cli.command(name="repl")
@click.option(
    "--eval/--no-eval",
    "evaluate",
    default=False,
    help="Print each expression's value instead of its tree",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMATS),
    default="describe",
    show_default=True,
    help="How to print trees when not evaluating",
)
@grammar_option
def repl_command(evaluate: bool, output_format: str, grammar: str) -> None:
    """Read one expression per line from standard input.

    Each line is parsed and its tree (or, with --eval, its value) is
    printed.  Errors are reported and the session continues with the
    next line.  Blank lines are ignored.  Ends at end of input.
    """
    from prattle.evaluator import Evaluator

    registry = _load_registry(grammar)
    evaluator = Evaluator() if evaluate else None
    stream = click.get_text_stream("stdin")
    interactive = stream.isatty()

    while True:
        if interactive:
            console.print("[bold]>[/bold] ", end="")
        line = stream.readline()
        if not line:
            break
        if not line.strip():
            continue
        _run_line(line, registry, evaluator, output_format)

    if interactive:
        console.print()


def _run_line(
    line: str,
    registry: "ParseletRegistry",
    evaluator: "Evaluator | None",
    output_format: str,
) -> bool:
    """Parse one line, print its tree or value, and report success.

    Every domain error is printed to stderr; none propagates.
    """
    from prattle.evaluator import EvaluationError
    from prattle.lexer import LexError
    from prattle.parser import ParseError

    try:
        node = _parse_or_raise(line, registry)
        if evaluator is None:
            _render(node, output_format)
        else:
            value = evaluator.evaluate(node)
            try:
                text = str(value)
            except ValueError:
                # int.__str__ refuses more than sys.get_int_max_str_digits() digits
                err_console.print(
                    "[red]Evaluation error:[/red] the result has too many digits to print"
                )
                return False
            console.print(text, markup=False, highlight=False, soft_wrap=True)
    except LexError as exc:
        _print_error("Lex error", exc)
        return False
    except ParseError as exc:
        _print_error("Parse error", exc)
        return False
    except EvaluationError as exc:
        _print_error("Evaluation error", exc)
        return False
    return True


if __name__ == "__main__":
    cli()
