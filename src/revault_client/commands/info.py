"""Show daemon status."""

import typer

from revault_client.app_context import use_context
from revault_client.daemon.errors import RevaultDError


def info(ctx: typer.Context) -> None:
    """Show block height, network, sync progress, and daemon version."""
    app = use_context(ctx)
    revaultd = app.connect()
    try:
        result = revaultd.get_info()
    except RevaultDError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_info(result)
