"""
mplex - MyPython Lexer Command-Line Interface
=============================================

Tokenizes a MyPython source file and prints the token stream.

Usage Examples
--------------
Print tokens to the terminal:
    $ mplex program.my

Write tokens to a file:
    $ mplex program.my -o program.tokens

JSON output without whitespace tokens:
    $ mplex program.my --format json --no-whitespace

Fail on unrecognized characters:
    $ mplex --strict program.my
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from mypython import __version__
from mypython.cli.errors import handle_cli_exception
from mypython.lexer import Lexer, LexerOptions, TokenKind
from mypython.render import render_tokens, tokens_to_json

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Token listing format",
)
@click.option(
    "--whitespace/--no-whitespace",
    default=True,
    help="Include WHITESPACE tokens (default: included)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat unrecognized characters as errors instead of INVALID tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mplex")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    whitespace: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Tokenize MyPython source code.

    INPUT_FILE is the source file to scan.

    \b
    Examples:
        mplex hello.my                   # Print tokens
        mplex hello.my -o hello.tokens   # Write tokens to a file
        mplex -f json hello.my           # JSON listing
        mplex --no-whitespace hello.my   # Drop WHITESPACE tokens
    """
    setup_logging(verbose)

    options = LexerOptions(keep_whitespace=whitespace, strict=strict)

    try:
        source = input_file.read_text(encoding="utf-8")
        logger.debug("read %d characters from %s", len(source), input_file)

        tokens = Lexer(source, str(input_file), options).tokenize()

        if output_format.lower() == "json":
            listing = tokens_to_json(tokens) + "\n"
        else:
            listing = render_tokens(tokens)

        if output is None:
            click.echo(listing, nl=False)
        else:
            output.write_text(listing, encoding="utf-8")

        invalid = [t for t in tokens if t.kind == TokenKind.INVALID]
        for token in invalid:
            logger.warning(f"{token.location}: warning: invalid character {token.value!r}")

        if verbose:
            click.echo(f"Tokenized: {len(tokens)} tokens", err=True)
            if output is not None:
                click.echo(f"Wrote {len(listing)} bytes to {output}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
