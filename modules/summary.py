from collections import Counter

from tabulate import tabulate

from models.network import Network
from models.transfer import TxAttempt, TxStatus
from modules.utils import truncate


def count_statuses(attempts: list[TxAttempt]) -> dict[TxStatus, int]:
    counts = Counter(attempt.status for attempt in attempts)
    return {status: counts.get(status, 0) for status in TxStatus}


def build_summary_table(attempts: list[TxAttempt], chain: Network) -> str:
    """
    One row per attempted transaction, with a link for every tx that was sent.
    """
    rows = [
        [
            index,
            truncate(attempt.sender),
            truncate(attempt.receiver),
            attempt.status.value,
            f"{chain.explorer}/tx/{attempt.tx_hash}" if attempt.tx_hash else "-",
        ]
        for index, attempt in enumerate(attempts, start=1)
    ]

    return tabulate(
        rows, headers=["#", "From", "To", "Status", "Tx"], tablefmt="simple_grid"
    )
