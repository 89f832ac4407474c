from __future__ import annotations
import json
import logging
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser

from pretty_printer import PrettyPrinter
from ast_json import ast_to_json, tokens_to_json
from ast_viz import write_and_render

logger = logging.getLogger(__name__)


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    viz_spans: bool = False,
) -> bool:
    """Process a single program: lex, parse and optionally print stages.

    Flags control which parts are printed. Returns False if the program
    failed to lex or parse.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            if print_json:
                print(json.dumps(tokens_to_json(tokens), indent=2))
            else:
                print(f"Tokens ({len(tokens)}):")
                print(PrettyPrinter.print_tokens(tokens, limit=50))

        ast = parse_tokens(tokens)
        if print_ast:
            if print_json:
                print(json.dumps(ast_to_json(ast), indent=2))
            else:
                print("\nAST:")
                print(PrettyPrinter.print_ast(ast))

    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return False

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            out = write_and_render(ast, viz_path, fmt=viz_format, include_spans=viz_spans)
            print(f"Wrote AST visualization to {out}")
        except Exception as e:
            logger.debug("graphviz render failed", exc_info=True)
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = True,
    print_json: bool = False,
) -> None:
    """Run interactive REPL reading programs from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program or expression: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                print_json=print_json,
            )

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Tokenize and parse a file or interactive input from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--json",
        dest="print_json",
        action="store_true",
        help="Print tokens and AST as JSON instead of the indented tree",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--viz-spans",
        dest="viz_spans",
        action="store_true",
        help="Include source spans in the AST visualization",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_json=args.print_json,
        )
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)

        ok = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_json=args.print_json,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            viz_spans=args.viz_spans,
        )
        if not ok:
            sys.exit(1)
    else:
        parser.print_help()
