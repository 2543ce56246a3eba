"""
soltok - Sol Tokenizer Command-Line Interface
=============================================

Scans a sol source file and prints one token per line.

Usage Examples
--------------
List tokens with their positions:
    $ soltok main.sol

Tokens only:
    $ soltok --no-location main.sol

Count tokens:
    $ soltok --count main.sol

Fail on the first unrecognized lexeme:
    $ soltok --strict main.sol
"""

import logging
from pathlib import Path

import click

from sol import __version__
from sol.cli.errors import handle_cli_exception
from sol.errors import UnrecognizedLexemeError
from sol.lexer import Scanner, Token


def format_token(token: Token, show_location: bool = True) -> str:
    """Format a token as `line:column<TAB>TYPE<TAB>text`."""
    text = f"{token.type.name}\t{token}"
    if show_location:
        return f"{token.line}:{token.column}\t{text}"
    return text


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--location/--no-location",
    "show_location",
    default=True,
    help="Prefix each token with line:column (default: on)",
)
@click.option(
    "-c", "--count",
    is_flag=True,
    help="Print only the number of tokens",
)
@click.option(
    "-s", "--strict",
    is_flag=True,
    help="Stop with an error at the first invalid token",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="soltok")
def main(
    input_file: Path,
    show_location: bool,
    count: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Scan a sol source file and print its tokens.

    INPUT_FILE is the sol source file to scan.

    \b
    Examples:
        soltok main.sol                 # One token per line
        soltok --no-location main.sol   # Without positions
        soltok -c main.sol              # Token count only
        soltok -s main.sol              # Reject invalid tokens
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = input_file.read_text(encoding="utf-8")
        scanner = Scanner(source, str(input_file))

        total = 0
        invalid = 0
        for token in scanner:
            if token.is_invalid:
                if strict:
                    raise UnrecognizedLexemeError.from_token(
                        token, source, str(input_file)
                    )
                invalid += 1
            total += 1
            if not count:
                click.echo(format_token(token, show_location))

        if count:
            click.echo(str(total))

        if verbose:
            click.echo(
                f"Scanned {scanner.position} characters: "
                f"{total} tokens, {invalid} invalid",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose, input_file)


if __name__ == "__main__":
    main()
