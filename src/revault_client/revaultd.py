"""Client facade: the handle application code holds to talk to revaultd."""

import base64
import logging
import time
from dataclasses import dataclass

from revault_client.config import Config
from revault_client.daemon.client import DaemonClient, Transport
from revault_client.daemon.errors import DaemonIOError, UnexpectedError
from revault_client.daemon.transport import UnixTransport
from revault_client.join import pair_vaults_with_transactions
from revault_client.model import (
    GetInfoResponse,
    ListTransactionsResponse,
    ListVaultsResponse,
    RevocationTransactions,
    Vault,
    VaultTransactions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RevaultD:
    """Immutable handle bound to one daemon endpoint.

    Holds no wallet state: every operation is a fresh round trip on its own
    connection, so one instance can be shared freely between threads and tasks.
    Build it with :meth:`connect`, which runs the readiness probe.
    """

    client: DaemonClient
    cfg: Config

    @staticmethod
    def connect(
        cfg: Config,
        *,
        attempts: int | None = None,
        backoff: float | None = None,
        transport: Transport | None = None,
    ) -> "RevaultD":
        """Resolve the daemon socket and return a handle once ``getinfo`` succeeds.

        Transport failures are retried with exponential backoff since the
        daemon may still be creating its socket right after the launcher
        exits. Daemon-reported and protocol failures are not retried.

        Args:
            cfg: Client configuration.
            attempts: Probe attempts, defaults to ``cfg.probe_attempts``.
            backoff: Initial delay between attempts, defaults to ``cfg.probe_backoff``.
            transport: Transport override; a UnixTransport on the resolved socket by default.

        Raises:
            UnexpectedError: Socket path cannot be resolved.
            DaemonIOError: Daemon still unreachable after the last attempt.
            RPCError: Daemon rejected the probe or replied with a malformed result.
            NoAnswerError: Daemon replied with neither result nor error.

        """
        if transport is None:
            try:
                socket_path = cfg.socket_path()
            except (ValueError, RuntimeError) as e:
                raise UnexpectedError(f"Failed to find revaultd socket path: {e}") from e
            transport = UnixTransport(socket_path, timeout=cfg.rpc_timeout)

        revaultd = RevaultD(client=DaemonClient(transport), cfg=cfg)
        attempts = attempts if attempts is not None else cfg.probe_attempts
        if attempts < 1:
            msg = "at least one probe attempt is required"
            raise ValueError(msg)
        delay = backoff if backoff is not None else cfg.probe_backoff

        logger.debug("Connecting to revaultd")
        for attempt in range(1, attempts + 1):
            try:
                revaultd.get_info()
                break
            except DaemonIOError as e:
                if attempt >= attempts:
                    raise
                logger.debug("Probe %d/%d failed (%s), retrying in %.2fs", attempt, attempts, e.kind, delay)
                time.sleep(delay)
                delay *= 2
        logger.info("Connected to revaultd")
        return revaultd

    @property
    def network(self) -> str:
        """Bitcoin network the daemon runs on."""
        return self.cfg.network

    def get_info(self) -> GetInfoResponse:
        """Query chain height, network, sync progress, and daemon version."""
        return self.client.call("getinfo", None, GetInfoResponse)

    def list_vaults(self) -> ListVaultsResponse:
        """List every vault known to the daemon."""
        return self.client.call("listvaults", None, ListVaultsResponse)

    def list_transactions(self, outpoints: list[str] | None = None) -> ListTransactionsResponse:
        """List on-chain transactions of vaults.

        ``None`` asks for all vaults; a list (even empty) restricts the answer
        to those deposit outpoints.
        """
        params = [outpoints] if outpoints is not None else None
        return self.client.call("listtransactions", params, ListTransactionsResponse)

    def get_revocation_txs(self, outpoint: str) -> RevocationTransactions:
        """Fetch the revocation transactions to sign for a vault."""
        return self.client.call("getrevocationtxs", [outpoint], RevocationTransactions)

    def set_revocation_txs(
        self, outpoint: str, emergency_tx: bytes, emergency_unvault_tx: bytes, cancel_tx: bytes
    ) -> None:
        """Hand signed revocation transactions (serialized PSBTs) back to the daemon."""
        emergency = base64.b64encode(emergency_tx).decode()
        emergency_unvault = base64.b64encode(emergency_unvault_tx).decode()
        cancel = base64.b64encode(cancel_tx).decode()
        self.client.call("revocationtxs", [outpoint, cancel, emergency, emergency_unvault], object)

    def list_vaults_with_transactions(self) -> list[tuple[Vault, VaultTransactions]]:
        """List vaults paired with their transactions (two round trips)."""
        vaults = self.list_vaults().vaults
        outpoints = [vault.outpoint for vault in vaults]
        transactions = self.list_transactions(outpoints).transactions
        return pair_vaults_with_transactions(vaults, transactions)
