"""Start revaultd and wait until it answers."""

import typer

from revault_client.app_context import use_context
from revault_client.daemon.errors import StartError
from revault_client.daemon.process import is_connectable, start_daemon


def start(ctx: typer.Context) -> None:
    """Start revaultd in the background (no-op if it already answers)."""
    app = use_context(ctx)
    try:
        sock_path = app.cfg.socket_path()
    except (ValueError, RuntimeError) as e:
        app.out.print_error_and_exit("unexpected", str(e))

    if is_connectable(sock_path):
        app.out.print_started(already_running=True)
        return

    try:
        start_daemon(app.cfg.daemon_config_path, binary=app.cfg.revaultd_bin, timeout=app.cfg.start_timeout)
    except StartError as e:
        app.out.print_error_and_exit(e.code, str(e))
    # Readiness probe: retries while the daemon creates its socket
    app.connect()
    app.out.print_started(already_running=False)
