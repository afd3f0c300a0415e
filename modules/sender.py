from functools import partial

from web3 import Web3
from web3.exceptions import TransactionNotFound

import settings
from models.transfer import Transfer, TxAttempt, TxStatus
from modules.logger import logger
from modules.retry import retry
from modules.utils import format_units, sleep, to_base_units
from modules.wallet import Wallet

NATIVE_DECIMALS = 18


class BatchSender:
    """
    Runs a transfer job sender by sender, one transaction at a time.

    `receivers` decides where each tx goes (see modules.receivers) and how much
    balance a sender needs before its batch starts. Logger, sleep and the
    wallet factory are injectable so the loop can run without a chain.
    """

    def __init__(
        self,
        transfer: Transfer,
        receivers,
        w3: Web3 = None,
        wallet_factory=Wallet,
        log=logger,
        sleep=sleep,
        max_retries: int = settings.MAX_RETRIES,
        retry_delay: float = settings.RETRY_DELAY,
        settle_delay: float = settings.SETTLE_DELAY,
    ):
        self.transfer = transfer
        self.receivers = receivers
        self.w3 = w3
        self.wallet_factory = wallet_factory
        self.log = log
        self.sleep = sleep
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.settle_delay = settle_delay

    def _retry(self, fn, label: str = ""):
        return retry(
            fn,
            max_retries=self.max_retries,
            delay=self.retry_delay,
            sleep=self.sleep,
            label=label,
            log=self.log,
        )

    def run(self, private_keys: list[str]) -> list[TxAttempt]:
        attempts = []
        total = len(private_keys)

        for index, private_key in enumerate(private_keys, start=1):
            counter = f"[{index}/{total}]"
            attempts.extend(self.process_sender(private_key, counter))

        return attempts

    def process_sender(self, private_key: str, counter: str) -> list[TxAttempt]:
        transfer = self.transfer
        symbol = transfer.display_symbol

        try:
            wallet = self.wallet_factory(
                private_key, counter, transfer.chain, w3=self.w3
            )
        except Exception as err:
            self.log.error(f"{counter} Invalid private key, skipping: {err}")
            return []

        label = wallet.label
        self.log.info(f"{label} Processing transactions")

        try:
            balance = self._retry(
                lambda: wallet.get_balance(transfer.token_address), label
            )
            if transfer.is_native:
                decimals = NATIVE_DECIMALS
            else:
                decimals = self._retry(
                    lambda: wallet.get_decimals(transfer.token_address), label
                )
        except Exception as err:
            self.log.error(
                f"{label} Failed to check balance, skipping to next address: {err}"
            )
            return []

        try:
            value = to_base_units(transfer.amount, decimals)
        except ValueError as err:
            self.log.error(f"{label} {err}, skipping to next address")
            return []

        self.log.info(
            f"{label} Current balance: {format_units(balance, decimals)} {symbol}"
        )

        required = self.receivers.required_balance(value, transfer.tx_count)
        if not self.receivers.full_batch:
            self.log.warning(
                f"{label} Balance is checked for a single tx only, "
                f"not for all {transfer.tx_count}"
            )

        if balance < required:
            self.log.error(
                f"{label} Insufficient balance, need "
                f"{format_units(required, decimals)} {symbol}. Skipping to next address"
            )
            return []

        attempts = []
        for i in range(1, transfer.tx_count + 1):
            tx_label = f"{label} Tx {i}/{transfer.tx_count} |"
            attempts.append(self.send_one(wallet, value, decimals, tx_label))

        self.log.success(f"{label} Finished transactions for address {wallet.address}")
        return attempts

    def send_one(self, wallet, value: int, decimals: int, tx_label: str) -> TxAttempt:
        transfer = self.transfer
        receiver = self.receivers.pick()
        attempt = TxAttempt(sender=wallet.address, receiver=receiver, amount=value)

        self.log.info(f"{tx_label} Sending to address: {receiver}")

        if transfer.is_native:
            try:
                gas_price = wallet.get_gas_price()
            except Exception as err:
                self.log.error(
                    f"{tx_label} Failed to fetch gas price from the network: {err}"
                )
                return attempt

            submit = partial(wallet.transfer_native, receiver, value, gas_price)
        else:
            submit = partial(
                wallet.transfer_token, transfer.token_address, receiver, value
            )

        try:
            attempt.tx_hash = self._retry(submit, tx_label)
        except Exception as err:
            self.log.error(f"{tx_label} Failed to send transaction: {err}")
            return attempt

        self.log.info(
            f"{tx_label} Hash: {attempt.tx_hash} | From: {wallet.address} | "
            f"To: {receiver} | "
            f"Amount: {format_units(value, decimals)} {transfer.display_symbol}"
        )

        self.sleep(self.settle_delay)
        self.confirm(wallet, attempt, tx_label)
        return attempt

    def confirm(self, wallet, attempt: TxAttempt, tx_label: str) -> TxStatus:
        try:
            receipt = self._retry(
                lambda: wallet.get_receipt(attempt.tx_hash), tx_label
            )
        except TransactionNotFound:
            receipt = None
        except Exception as err:
            self.log.error(f"{tx_label} Error checking transaction status: {err}")
            attempt.status = TxStatus.PENDING
            return attempt.status

        tx_link = f"{self.transfer.chain.explorer}/tx/{attempt.tx_hash}"

        if receipt is None:
            self.log.warning(
                f"{tx_label} Transaction is still pending after multiple retries"
            )
            attempt.status = TxStatus.PENDING
        elif receipt["status"] == 1:
            attempt.status = TxStatus.SUCCESS
            attempt.block_number = receipt["blockNumber"]
            attempt.gas_used = receipt["gasUsed"]
            self.log.success(
                f"{tx_label} Transaction success | Block: {attempt.block_number} | "
                f"Gas used: {attempt.gas_used} | {tx_link}"
            )
        else:
            attempt.status = TxStatus.FAILED
            self.log.error(f"{tx_label} Transaction FAILED | {tx_link}")

        return attempt.status
