from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from models.network import Network

NATIVE = "native"
TOKEN = "token"

ONE_TO_MANY = "one-to-many"
MANY_TO_ONE = "many-to-one"


@dataclass(frozen=True)
class Transfer:
    token_type: str  # native | token
    direction: str  # one-to-many | many-to-one
    amount: Decimal  # per tx, in human units
    tx_count: int  # per sender
    chain: Network
    token_address: str | None = None
    destination: str | None = None
    symbol: str | None = None

    @property
    def is_native(self) -> bool:
        return self.token_type == NATIVE

    @property
    def display_symbol(self) -> str:
        if self.is_native:
            return self.chain.native_token
        return self.symbol or "tokens"


class TxStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"
    NOT_SENT = "not sent"


@dataclass
class TxAttempt:
    sender: str
    receiver: str
    amount: int  # smallest units
    status: TxStatus = TxStatus.NOT_SENT
    tx_hash: str | None = None
    block_number: int | None = None
    gas_used: int | None = None
