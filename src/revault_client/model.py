"""Typed shapes of the values revaultd returns."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class VaultStatus(StrEnum):
    """Lifecycle state of a vault, driven by the chain and the pre-signed transactions."""

    FUNDED = "funded"
    """The deposit transaction is confirmed."""
    SECURED = "secured"
    """The emergency transaction is signed."""
    ACTIVE = "active"
    """The unvault transaction is signed (so are the unvault-emergency and cancel transactions)."""
    UNVAULTING = "unvaulting"
    """The unvault transaction has been broadcast."""
    UNVAULTED = "unvaulted"
    """The unvault transaction is confirmed."""
    CANCELING = "canceling"
    """The cancel transaction has been broadcast."""
    CANCELED = "canceled"
    """The cancel transaction is confirmed."""
    EMERGENCY_VAULTING = "emergencyvaulting"
    """One of the emergency transactions has been broadcast."""
    EMERGENCY_VAULTED = "emergencyvaulted"
    """One of the emergency transactions is confirmed."""
    SPENDABLE = "spendable"
    """The unvault transaction CSV is expired."""
    SPENDING = "spending"
    """The spend transaction has been broadcast."""
    SPENT = "spent"
    """The spend transaction is confirmed."""


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True)


class Vault(_Model):
    """A deposit controlled by the vault participants."""

    amount: int = Field(ge=0, description="Amount of the vault in satoshis")
    status: VaultStatus = Field(description="Status of the vault")
    txid: str = Field(description="Deposit txid of the vault deposit transaction")
    vout: int = Field(ge=0, description="Deposit vout of the vault deposit transaction")

    @property
    def outpoint(self) -> str:
        """Deposit outpoint as ``txid:vout``."""
        return f"{self.txid}:{self.vout}"


class TransactionResource(_Model):
    """An on-chain transaction as reported by the daemon (opaque hex)."""

    blockheight: int | None = None
    received_at: int | None = None
    hex: str


class VaultTransactions(_Model):
    """On-chain transactions belonging to one vault's lifecycle."""

    outpoint: str
    deposit: TransactionResource
    unvault: TransactionResource | None = None
    cancel: TransactionResource | None = None
    emergency: TransactionResource | None = None
    unvault_emergency: TransactionResource | None = None
    spend: TransactionResource | None = None


class RevocationTransactions(_Model):
    """Base64-encoded PSBTs of the revocation transactions of a vault."""

    cancel_tx: str
    emergency_tx: str
    emergency_unvault_tx: str


class GetInfoResponse(_Model):
    """``getinfo`` result."""

    blockheight: int
    network: str
    sync: float
    version: str


class ListVaultsResponse(_Model):
    """``listvaults`` result."""

    vaults: list[Vault]


class ListTransactionsResponse(_Model):
    """``listtransactions`` result."""

    transactions: list[VaultTransactions]
