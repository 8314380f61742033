import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .analysis import BaseResolver, create_resolver
from .checker import classify
from .log import setup_logging
from .output import ConsoleOutput, JsonExporter, format_report


console = Console()

USAGE_EXAMPLE = "Example: ipcheck 192.168.1.1"


def run_check(address: str, dns: bool, resolver_name: str, timeout: float):
    """Classify one address, with the reverse lookup when enabled"""
    if not dns:
        return classify(address)

    resolver: BaseResolver = create_resolver(resolver_name, timeout=timeout)
    with resolver:
        return classify(address, resolver=resolver)


@click.command()
@click.argument('address', required=False)
@click.option('--dns/--no-dns', default=True,
              help='Enable/disable reverse hostname lookup (default: enabled)')
@click.option('-r', '--resolver', 'resolver_name', default='system',
              type=click.Choice(['system', 'dns'], case_sensitive=False),
              help='Reverse lookup backend (default: system)')
@click.option('-w', '--timeout', default=BaseResolver.DEFAULT_TIMEOUT, type=float,
              help='Reverse lookup timeout in seconds (default: 2)')
@click.option('--plain', is_flag=True,
              help='Print the plain text report without colours')
@click.option('--json', 'json_path', type=click.Path(),
              help='Export result to JSON file')
@click.option('-v', '--verbose', is_flag=True,
              help='Log debug details to stderr')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, address: Optional[str], dns: bool, resolver_name: str,
         timeout: float, plain: bool, json_path: Optional[str], verbose: bool):
    """
    IPCheck - validate and classify an IP address.

    Reports whether ADDRESS is a valid IPv4 or IPv6 literal, its
    class, public/private scope, special-use category and, for IPv4,
    its binary form.

    Examples:

        ipcheck 192.168.1.1

        ipcheck 2001:0db8:85a3:0000:0000:8a2e:0370:7334 --no-dns

        ipcheck 8.8.8.8 --json result.json
    """
    setup_logging("DEBUG" if verbose else "WARNING")

    if address is None:
        click.echo(ctx.get_usage())
        click.echo(USAGE_EXAMPLE)
        sys.exit(2)

    output = ConsoleOutput()

    try:
        result = run_check(address, dns, resolver_name, timeout)

        if plain:
            click.echo(format_report(result), nl=False)
        else:
            output.print_report(result)

        if json_path:
            json_file = Path(json_path)
            JsonExporter().export(result, json_file)
            console.print(f"\n[dim]Result exported to:[/] {json_file.absolute()}")

    except OSError as e:
        output.print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/]")
        sys.exit(130)
    except Exception as e:
        output.print_error(f"Unexpected error: {e}")
        sys.exit(1)

    sys.exit(0 if result.is_valid else 1)


if __name__ == '__main__':
    main()
