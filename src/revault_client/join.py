"""Pair vaults with their on-chain transactions."""

from collections.abc import Iterable

from revault_client.model import Vault, VaultTransactions


def pair_vaults_with_transactions(
    vaults: Iterable[Vault], transactions: Iterable[VaultTransactions]
) -> list[tuple[Vault, VaultTransactions]]:
    """Join vaults and transaction records on the deposit outpoint.

    Pairs keep the order of ``vaults``. A vault without a matching record is
    left out, a vault outpoint is emitted at most once, and when several
    records share an outpoint the first one is used.
    """
    by_outpoint: dict[str, VaultTransactions] = {}
    for txs in transactions:
        by_outpoint.setdefault(txs.outpoint, txs)

    pairs: list[tuple[Vault, VaultTransactions]] = []
    seen: set[str] = set()
    for vault in vaults:
        outpoint = vault.outpoint
        if outpoint in seen or outpoint not in by_outpoint:
            continue
        seen.add(outpoint)
        pairs.append((vault, by_outpoint[outpoint]))
    return pairs
