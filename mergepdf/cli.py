"""
Command-line interface for mergepdf.

    mergepdf <input...> -o <output> [-v] [-e]
    mergepdf -h | --help
"""

import logging
import sys

import click

from mergepdf.arguments import resolve_arguments
from mergepdf.exceptions import HelpRequested, MergePDFError, UsageError
from mergepdf.merger import merge_documents
from mergepdf.report import print_error, print_manifest, print_usage
from mergepdf.utils import get_logger


def _set_verbose_logging() -> None:
    get_logger("mergepdf.merger").setLevel(logging.INFO)


@click.command(
    name="mergepdf",
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": True,
        "help_option_names": [],
    },
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def main(tokens):
    """
    Merge PDF files and directories of PDF files into one PDF.

    Examples:

        mergepdf one.pdf two.pdf -o merged.pdf -v

        mergepdf chapters/ appendix.pdf -o book/book.pdf -e
    """
    try:
        request = resolve_arguments(tokens)

        if request.verbose:
            _set_verbose_logging()

        result = merge_documents(request.inputs, request.output)

    except HelpRequested:
        print_usage()
        sys.exit(0)
    except UsageError as e:
        print_error(e.message)
        print_usage()
        sys.exit(e.exit_code)
    except MergePDFError as e:
        print_error(e.message)
        sys.exit(e.exit_code)

    if request.verbose:
        print_manifest(request.inputs, request.output)


if __name__ == "__main__":  # pragma: no cover
    main()
