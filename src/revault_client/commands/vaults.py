"""List vaults with their on-chain transactions."""

import typer

from revault_client.app_context import use_context
from revault_client.daemon.errors import RevaultDError


def vaults(ctx: typer.Context) -> None:
    """List vaults that have on-chain transactions."""
    app = use_context(ctx)
    revaultd = app.connect()
    try:
        pairs = revaultd.list_vaults_with_transactions()
    except RevaultDError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_vaults(pairs)
