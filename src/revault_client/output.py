"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201
# This module is the output layer; print() is how CLI output is produced.

import json
import sys
from typing import NoReturn

import typer

from revault_client.model import GetInfoResponse, RevocationTransactions, Vault, VaultTransactions


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Daemon ---

    def print_started(self, *, already_running: bool) -> None:
        """Print daemon start confirmation."""
        message = "revaultd is already running." if already_running else "revaultd started."
        self._success({"already_running": already_running}, message)

    def print_info(self, info: GetInfoResponse) -> None:
        """Print daemon status."""
        self._success(
            info.model_dump(mode="json"),
            f"revaultd {info.version} on {info.network}: block {info.blockheight}, synced {info.sync:.2%}",
        )

    # --- Vaults ---

    def print_vaults(self, pairs: list[tuple[Vault, VaultTransactions]]) -> None:
        """Print vaults with their on-chain transactions."""
        if self._json_mode:
            data = [{"vault": v.model_dump(mode="json"), "transactions": t.model_dump(mode="json")} for v, t in pairs]
            print(json.dumps({"ok": True, "data": {"vaults": data}}))
            return
        for vault, _ in pairs:
            print(f"{vault.outpoint}  {vault.amount} sat  {vault.status}")

    def print_transactions(self, transactions: list[VaultTransactions]) -> None:
        """Print on-chain transactions grouped by vault."""
        if self._json_mode:
            data = [t.model_dump(mode="json") for t in transactions]
            print(json.dumps({"ok": True, "data": {"transactions": data}}))
            return
        for txs in transactions:
            kinds = [name for name in ("deposit", "unvault", "cancel", "emergency", "unvault_emergency", "spend") if getattr(txs, name)]
            print(f"{txs.outpoint}  {', '.join(kinds)}")

    def print_revocation_txs(self, outpoint: str, txs: RevocationTransactions) -> None:
        """Print the revocation PSBTs of a vault."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"outpoint": outpoint, **txs.model_dump(mode="json")}}))
            return
        print(f"cancel: {txs.cancel_tx}")
        print(f"emergency: {txs.emergency_tx}")
        print(f"emergency_unvault: {txs.emergency_unvault_tx}")

    def print_revocation_txs_set(self, outpoint: str) -> None:
        """Print revocation signatures submission confirmation."""
        self._success({"outpoint": outpoint}, f"Revocation transactions for {outpoint} sent.")
