from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from dodoclient._client import DodoPayments
from dodoclient._version import __version__
from dodoclient.config import get_settings
from dodoclient.exceptions import DodoPaymentsError

console = Console()
app = typer.Typer(
    name='dodoclient',
    help='Query the Dodo Payments API from the command line',
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str | None,
    typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
]


def _make_client(config: str | None) -> DodoPayments:
    return DodoPayments(settings=get_settings(config))


def _fail(error: DodoPaymentsError) -> typer.Exit:
    console.print(f'[red]Error:[/red] {error}')
    return typer.Exit(1)


@app.command()
def payments(
    config: ConfigOption = None,
    page_number: Annotated[
        int | None, typer.Option('--page-number', help='Page to show (from 0)')
    ] = None,
    page_size: Annotated[
        int | None, typer.Option('--page-size', help='Payments per page')
    ] = None,
    status: Annotated[
        str | None, typer.Option('--status', help='Only payments in this status')
    ] = None,
) -> None:
    """List one page of payments.

    Examples:
        dodoclient payments
        dodoclient payments --page-size 20 --status succeeded
    """
    try:
        page = _make_client(config).payments.list(
            page_number=page_number, page_size=page_size, status=status
        )
    except DodoPaymentsError as e:
        raise _fail(e)

    table = Table(title='Payments')
    table.add_column('Payment ID')
    table.add_column('Status')
    table.add_column('Amount', justify='right')
    table.add_column('Currency')
    table.add_column('Customer')
    table.add_column('Created')

    for payment in page:
        table.add_row(
            payment.payment_id,
            str(getattr(payment.status, 'value', payment.status) or '-'),
            str(payment.total_amount),
            str(getattr(payment.currency, 'value', payment.currency)),
            payment.customer.email,
            payment.created_at.isoformat(),
        )
    console.print(table)
    if page.has_next_page():
        console.print(
            f'[dim]More results: --page-number {page.current_page_number + 1}[/dim]'
        )


@app.command()
def webhooks(
    config: ConfigOption = None,
    limit: Annotated[
        int | None, typer.Option('--limit', help='Endpoints per page')
    ] = None,
) -> None:
    """List every webhook endpoint, following the cursor."""
    try:
        page = _make_client(config).webhooks.list(limit=limit)
        endpoints = list(page.auto_paging_iter())
    except DodoPaymentsError as e:
        raise _fail(e)

    table = Table(title='Webhook endpoints')
    table.add_column('ID')
    table.add_column('URL')
    table.add_column('Disabled')
    table.add_column('Events')

    for endpoint in endpoints:
        events = ', '.join(
            str(getattr(event, 'value', event)) for event in endpoint.filter_types or []
        )
        table.add_row(
            endpoint.id,
            endpoint.url,
            'yes' if endpoint.disabled else 'no',
            events or 'all',
        )
    console.print(table)


@app.command()
def invoice(
    payment_id: Annotated[str, typer.Argument(help='Payment to fetch the invoice of')],
    output: Annotated[
        Path | None, typer.Option('--output', '-o', help='Where to write the PDF')
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Download the invoice PDF of a payment.

    Examples:
        dodoclient invoice pay_123
        dodoclient invoice pay_123 --output invoice.pdf
    """
    output = output or Path(f'{payment_id}.pdf')
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn('[progress.description]{task.description}'),
            console=console,
        ) as progress:
            task = progress.add_task(f'Downloading invoice for {payment_id}...', total=None)
            content = _make_client(config).invoices.payments.retrieve(payment_id)
            progress.update(task, description='Download completed!')
    except DodoPaymentsError as e:
        raise _fail(e)

    output.write_bytes(content)
    console.print(f'[green]Saved[/green] {output} ({len(content)} bytes)')


@app.command()
def countries(config: ConfigOption = None) -> None:
    """List the countries a checkout can bill to."""
    try:
        codes = _make_client(config).misc.list_supported_countries()
    except DodoPaymentsError as e:
        raise _fail(e)
    console.print(' '.join(str(getattr(code, 'value', code)) for code in codes))


@app.command()
def version() -> None:
    """Show the version of dodoclient."""
    console.print(f'dodoclient version: {__version__}')


if __name__ == '__main__':
    app()
