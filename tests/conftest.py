"""Shared fakes for the transfer loop tests."""

from decimal import Decimal

import pytest
from web3.exceptions import TransactionNotFound

from models.network import Network
from models.transfer import MANY_TO_ONE, NATIVE, ONE_TO_MANY, TOKEN, Transfer

TEST_CHAIN = Network(
    name="testchain",
    rpc_url="http://localhost:8545",
    chain_id=31337,
    explorer="https://explorer.test",
    native_token="ETH",
)

TOKEN_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DESTINATION = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
RECIPIENTS = [
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
    "0x90F79bf6EB2c4f870365E785982E1f101E93b906",
    "0x15d34AAf54267DB7D7c367839AAf71A00a2C6A65",
]


class RecordingLog:
    """Collects (level, message) pairs instead of printing them."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def _record(self, level):
        return lambda message: self.records.append((level, str(message)))

    def __getattr__(self, level):
        if level in ("debug", "info", "success", "warning", "error"):
            return self._record(level)
        raise AttributeError(level)

    def messages(self, level: str = None) -> list[str]:
        return [msg for lvl, msg in self.records if level is None or lvl == level]


class FakeChain:
    """
    Stands in for the RPC node: builds FakeWallets and records everything
    they send.
    """

    def __init__(
        self,
        balances: dict[str, int] = None,
        default_balance: int = 10**21,
        decimals: int = 18,
        receipt=None,
        receipt_error: Exception = None,
        gas_price_error: Exception = None,
        send_error: Exception = None,
        balance_error: Exception = None,
    ):
        self.balances = balances or {}
        self.default_balance = default_balance
        self.decimals = decimals
        self.receipt = receipt if receipt is not None else {
            "status": 1,
            "blockNumber": 100,
            "gasUsed": 21000,
        }
        self.receipt_error = receipt_error
        self.gas_price_error = gas_price_error
        self.send_error = send_error
        self.balance_error = balance_error

        self.sent: list[dict] = []
        self.events: list[tuple[str, str]] = []
        self.balance_checks: list[tuple[str, str | None]] = []
        self.receipt_calls = 0
        self.send_calls = 0

    def wallet(self, private_key, counter=None, chain=None, w3=None):
        if private_key.startswith("bad"):
            raise ValueError("Unexpected private key format")
        return FakeWallet(self, private_key, counter)


class FakeWallet:
    def __init__(self, node: FakeChain, private_key: str, counter: str = None):
        self.node = node
        self.address = f"addr-{private_key}"
        self.label = f"{counter} {self.address} |"

    def get_balance(self, token_addr=None):
        self.node.balance_checks.append((self.address, token_addr))
        self.node.events.append(("balance", self.address))
        if self.node.balance_error:
            raise self.node.balance_error
        return self.node.balances.get(self.address, self.node.default_balance)

    def get_decimals(self, token_addr):
        return self.node.decimals

    def get_gas_price(self):
        if self.node.gas_price_error:
            raise self.node.gas_price_error
        return 1_000_000_000

    def _send(self, kind, to, value):
        self.node.send_calls += 1
        self.node.events.append(("send", self.address))
        if self.node.send_error:
            raise self.node.send_error

        tx_hash = f"0x{len(self.node.sent):064x}"
        self.node.sent.append(
            {
                "kind": kind,
                "from": self.address,
                "to": to,
                "value": value,
                "hash": tx_hash,
            }
        )
        return tx_hash

    def transfer_native(self, to, value, gas_price):
        return self._send("native", to, value)

    def transfer_token(self, token_addr, to, amount):
        return self._send("token", to, amount)

    def get_receipt(self, tx_hash):
        self.node.receipt_calls += 1
        if self.node.receipt_error:
            raise self.node.receipt_error
        return self.node.receipt


def make_transfer(
    token_type: str = NATIVE,
    direction: str = ONE_TO_MANY,
    amount: str = "0.01",
    tx_count: int = 2,
) -> Transfer:
    return Transfer(
        token_type=token_type,
        direction=direction,
        amount=Decimal(amount),
        tx_count=tx_count,
        chain=TEST_CHAIN,
        token_address=TOKEN_ADDRESS if token_type == TOKEN else None,
        destination=DESTINATION if direction == MANY_TO_ONE else None,
    )


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def sleeps() -> list:
    return []


@pytest.fixture
def not_found() -> TransactionNotFound:
    return TransactionNotFound("Transaction with hash not found")
