import json
from pathlib import Path

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import HTTPProvider, Web3
from web3.contract import Contract
from web3.middleware import ExtraDataToPOAMiddleware

import settings
from models.network import Network

ABI_DIR = Path(__file__).resolve().parent.parent / "data" / "abi"

with open(ABI_DIR / "erc20.json") as file:
    ERC20_ABI = json.load(file)


def connect(chain: Network) -> Web3:
    w3 = Web3(HTTPProvider(chain.rpc_url))
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return w3


def get_contract(w3: Web3, address: str, abi: list[dict] = None) -> Contract:
    contract_address = Web3.to_checksum_address(address)
    if not abi:
        abi = ERC20_ABI

    return w3.eth.contract(address=contract_address, abi=abi)


def check_balance(w3: Web3, address: str, token_addr: str = None) -> int:
    """
    Return the raw balance of the native coin, or of `token_addr` when given,
    in the smallest unit.
    """
    if token_addr is None:
        return w3.eth.get_balance(address)
    else:
        token = get_contract(w3, token_addr)
        return token.functions.balanceOf(address).call()


class Wallet:
    def __init__(
        self,
        private_key: str,
        counter: str = None,
        chain: Network = None,
        w3: Web3 = None,
    ):
        self.account: LocalAccount = Account.from_key(private_key)
        self.address = self.account.address
        self.label = f"{counter} {self.address} |" if counter else f"{self.address} |"

        self.chain = chain
        self.w3 = w3 if w3 is not None else connect(chain)

    def __str__(self):
        return f"Wallet(address={self.address})"

    def get_contract(self, address: str, abi: list[dict] = None) -> Contract:
        return get_contract(self.w3, address, abi)

    def get_balance(self, token_addr: str = None) -> int:
        """
        Return the balance of the native coin or a given token.
        """
        return check_balance(self.w3, self.address, token_addr)

    def get_decimals(self, token_addr: str) -> int:
        return self.get_contract(token_addr).functions.decimals().call()

    def get_gas_price(self) -> int:
        return self.w3.eth.gas_price

    def get_tx_data(self, value: int = 0, **kwargs) -> dict:
        """
        Build a transaction dict.
        """
        return {
            "chainId": self.chain.chain_id,
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "value": value,
            **kwargs,
        }

    def sign_tx(self, tx: dict):
        return self.account.sign_transaction(tx)

    def send_tx(self, tx: dict) -> str:
        signed_tx = self.sign_tx(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        return Web3.to_hex(tx_hash)

    def transfer_native(self, to: str, value: int, gas_price: int) -> str:
        tx = self.get_tx_data(
            value=value,
            to=Web3.to_checksum_address(to),
            gas=settings.NATIVE_GAS_LIMIT,
            gasPrice=gas_price,
        )
        return self.send_tx(tx)

    def transfer_token(self, token_addr: str, to: str, amount: int) -> str:
        token = self.get_contract(token_addr)

        tx_data = self.get_tx_data()
        tx = token.functions.transfer(
            Web3.to_checksum_address(to), amount
        ).build_transaction(tx_data)
        tx["gas"] = int(tx["gas"] * settings.TOKEN_GAS_MULTIPLIER)

        return self.send_tx(tx)

    def get_receipt(self, tx_hash: str):
        """
        Raises web3.exceptions.TransactionNotFound while the tx is not mined.
        """
        return self.w3.eth.get_transaction_receipt(tx_hash)
