#!/usr/bin/env python3
"""
Command line front end for the minilang analyzer.

Reads source files (or stdin), runs the pipeline on each and renders the
token list, lexical errors and the syntax/semantic verdicts.

Author: minilang developers
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import PipelineConfig
from .lexer import format_tokens
from .pipeline import AnalysisResult, analyze, analyze_file, is_error

logger = logging.getLogger(__name__)


def _verdict_line(label: str, verdict: Optional[str]) -> str:
    if verdict is None:
        return f"[dim]{label}: skipped[/dim]"
    colour = "red" if is_error(verdict) else "green"
    return f"[{colour}]{label}:[/{colour}] {escape(verdict)}"


def render_result(result: AnalysisResult, console: Console, title: str,
                  tokens_only: bool = False, plain: bool = False):
    """Render one analysis result."""
    if result.lexical.ok:
        if plain:
            for line in format_tokens(result.lexical.tokens):
                console.print(Text(line))
        else:
            table = Table(title=f"Tokens: {title}", show_lines=False)
            table.add_column("#", justify="right", style="dim")
            table.add_column("Kind", style="cyan")
            table.add_column("Text")
            table.add_column("Line:Col", style="dim")
            for index, token in enumerate(result.lexical.tokens):
                location = token.location
                table.add_row(str(index), token.type.label, Text(token.lexeme),
                              f"{location.line}:{location.column}")
            console.print(table)
    else:
        for error in result.lexical.errors:
            console.print(f"[red]{escape(error.message)}[/red]")
            if error.diagnostic.help_text and not plain:
                console.print(f"  [yellow]help:[/yellow] {escape(error.diagnostic.help_text)}")

    if tokens_only:
        return

    lines = [_verdict_line("Syntax", result.syntax), _verdict_line("Semantics", result.semantic)]
    if plain:
        for line in lines:
            console.print(line)
    else:
        border = "green" if result.ok else "red"
        console.print(Panel("\n".join(lines), title=escape(title), border_style=border))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Lexical, syntax and semantic analysis for minilang sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    minilang program.ml                 # Analyze a file
    echo 'let x = 5;' | minilang        # Analyze stdin
    minilang --json a.ml b.ml           # JSON output for several files
    minilang --fail-fast program.ml     # Stop at the first bad character
        """
    )
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="source files to analyze ('-' or none for stdin)")
    parser.add_argument('--fail-fast', action='store_true', default=None,
                        help='stop tokenizing at the first unrecognized character')
    parser.add_argument('--tokens-only', action='store_true',
                        help='only show the lexical stage')
    parser.add_argument('--json', action='store_true',
                        help='output results in JSON format')
    parser.add_argument('--plain', action='store_true',
                        help='plain text output without tables or panels')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what each stage is doing')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)]
        )

    config = PipelineConfig.from_env()
    if args.fail_fast is not None:
        config.lexer_fail_fast = args.fail_fast

    status = 0
    payload = []
    for name in args.files or ['-']:
        try:
            if name == '-':
                result = analyze(sys.stdin.read(), PipelineConfig(config.lexer_fail_fast, "<stdin>"))
            else:
                result = analyze_file(name, config)
        except OSError as e:
            logger.error("cannot read %s: %s", name, e)
            console.print(f"[red]Error:[/red] cannot read {escape(name)}: {escape(str(e))}")
            status = 2
            continue

        if not result.ok and status == 0:
            status = 1

        if args.json:
            payload.append({"file": "<stdin>" if name == '-' else name, **result.to_dict()})
        else:
            render_result(result, console, "<stdin>" if name == '-' else name,
                          tokens_only=args.tokens_only, plain=args.plain)

    if args.json:
        console.print_json(json.dumps(payload))

    return status


if __name__ == "__main__":
    sys.exit(main())
