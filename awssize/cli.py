# cli.py
import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from awssize.api import describe
from awssize.exceptions import AwsSizeError
from awssize.models.size import SIZE_SCALE
from awssize.models.size import parse
from awssize.utils.logging import setup_logging

logger = logging.getLogger(__name__)

console = Console()


def _print_scale():
    table = Table(
        title="Instance Size Scale", show_header=True, header_style="bold magenta"
    )
    table.add_column("Size", style="cyan")
    table.add_column("Weight", justify="right")
    for name, weight in SIZE_SCALE:
        table.add_row(name, str(weight))
    console.print(table)


def _print_size(instance_class: str):
    size = parse(instance_class)
    console.print(
        f"[cyan]{escape(instance_class)}[/]: [bold]{size}[/] (weight {size.value})",
        highlight=False,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert between AWS instance sizes of the same family"
    )
    parser.add_argument(
        "src",
        nargs="?",
        help='Instance class or size name, e.g. "db.r6g.2xlarge" or "2xlarge"',
    )
    parser.add_argument(
        "dst",
        nargs="?",
        help="Instance class or size name to express src in",
    )
    parser.add_argument(
        "--table", action="store_true", help="Print the full size scale"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if not args.table and args.src is None:
        console.print("[bold red]Error: provide SRC [DST] or --table[/]")
        return 1

    try:
        if args.table:
            _print_scale()
        if args.src is not None and args.dst is not None:
            console.print(describe(args.src, args.dst))
        elif args.src is not None:
            _print_size(args.src)
    except AwsSizeError as e:
        logger.debug(f"Conversion failed: {e!r}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", style="red")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
