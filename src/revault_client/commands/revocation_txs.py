"""Fetch and submit revocation transactions of a vault."""

import base64
import binascii

import typer

from revault_client.app_context import use_context
from revault_client.daemon.errors import RevaultDError


def get_revocation_txs(ctx: typer.Context, outpoint: str) -> None:
    """Print the cancel and emergency PSBTs to sign for a vault."""
    app = use_context(ctx)
    revaultd = app.connect()
    try:
        txs = revaultd.get_revocation_txs(outpoint)
    except RevaultDError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_revocation_txs(outpoint, txs)


def set_revocation_txs(
    ctx: typer.Context,
    outpoint: str,
    *,
    cancel: str = typer.Option(..., help="Signed cancel PSBT (base64)"),
    emergency: str = typer.Option(..., help="Signed emergency PSBT (base64)"),
    emergency_unvault: str = typer.Option(..., help="Signed unvault-emergency PSBT (base64)"),
) -> None:
    """Send signed revocation PSBTs of a vault to the daemon."""
    app = use_context(ctx)
    try:
        cancel_tx = base64.b64decode(cancel, validate=True)
        emergency_tx = base64.b64decode(emergency, validate=True)
        emergency_unvault_tx = base64.b64decode(emergency_unvault, validate=True)
    except binascii.Error as e:
        app.out.print_error_and_exit("invalid_psbt", f"PSBT is not valid base64: {e}")

    revaultd = app.connect()
    try:
        revaultd.set_revocation_txs(outpoint, emergency_tx, emergency_unvault_tx, cancel_tx)
    except RevaultDError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_revocation_txs_set(outpoint)
