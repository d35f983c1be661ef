"""List on-chain transactions of vaults."""

import typer

from revault_client.app_context import use_context
from revault_client.daemon.errors import RevaultDError


def transactions(
    ctx: typer.Context,
    outpoints: list[str] | None = typer.Argument(default=None, help="Deposit outpoints (txid:vout) to restrict to"),
) -> None:
    """List on-chain transactions, optionally only for the given outpoints."""
    app = use_context(ctx)
    revaultd = app.connect()
    try:
        # No argument means no filter, not an empty filter
        result = revaultd.list_transactions(outpoints or None)
    except RevaultDError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_transactions(result.transactions)
