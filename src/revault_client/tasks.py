"""Async wrappers that keep blocking daemon calls off the event loop.

Each helper runs one facade operation in a worker thread. Cancelling the
awaiting task abandons the result, but the worker still finishes and closes
its connection.
"""

import asyncio

from revault_client.model import GetInfoResponse, Vault, VaultTransactions
from revault_client.revaultd import RevaultD


async def get_info(revaultd: RevaultD) -> GetInfoResponse:
    """Daemon status: chain height, network, sync progress, version."""
    return await asyncio.to_thread(revaultd.get_info)


async def get_blockheight(revaultd: RevaultD) -> int:
    """Current block height seen by the daemon."""
    info = await get_info(revaultd)
    return info.blockheight


async def list_vaults(revaultd: RevaultD) -> list[tuple[Vault, VaultTransactions]]:
    """Vaults paired with their on-chain transactions."""
    return await asyncio.to_thread(revaultd.list_vaults_with_transactions)


async def list_transactions(revaultd: RevaultD, outpoints: list[str] | None = None) -> list[VaultTransactions]:
    """On-chain transactions of the given vaults, or of all vaults when outpoints is None."""
    response = await asyncio.to_thread(revaultd.list_transactions, outpoints)
    return response.transactions
