import math
import time
from datetime import datetime
from decimal import Decimal, InvalidOperation, localcontext
from pathlib import Path

from tqdm import tqdm
from web3 import Web3


def truncate(address: str) -> str:
    """
    Truncates an Ethereum address to the format 0x1234...abcd12.
    """
    return f"{address[:6]}...{address[-6:]}"


def sleep(sleep_time, label="Waiting"):
    desc = datetime.now().strftime("%H:%M:%S")
    remaining = sleep_time

    # one tick per started second, the last tick sleeps only the remainder
    for _ in tqdm(
        range(math.ceil(sleep_time)),
        desc=desc,
        bar_format=f"{{desc}} | {label} {{n_fmt}}/{{total_fmt}}",
    ):
        time.sleep(min(1, remaining))
        remaining -= 1


def read_lines(path: str | Path) -> list[str]:
    """
    Return the stripped, non-blank lines of a text file.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path} file does not exist")

    with open(path) as file:
        lines = [row.strip() for row in file if row.strip()]

    if not lines:
        raise ValueError(f"No entries found in {path}")

    return lines


def load_addresses(path: str | Path) -> list[str]:
    addresses = []
    for line_no, address in enumerate(read_lines(path), start=1):
        if not Web3.is_address(address):
            raise ValueError(f"Invalid address on line {line_no} of {path}: {address}")
        addresses.append(Web3.to_checksum_address(address))

    return addresses


def parse_amount(value: str) -> Decimal:
    try:
        amount = Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        raise ValueError(f"Amount must be a numeric value, got {value!r}")

    if not amount.is_finite() or amount <= 0:
        raise ValueError(f"Amount must be greater than zero, got {value!r}")

    return amount


def to_base_units(amount: Decimal | str | int, decimals: int) -> int:
    """
    Convert a human readable amount to the token's smallest unit,
    e.g. 1.5 with 6 decimals -> 1500000.
    """
    with localcontext() as ctx:
        ctx.prec = 78  # fits any uint256
        scaled = Decimal(str(amount)).scaleb(decimals)

    if scaled != scaled.to_integral_value():
        raise ValueError(f"Amount {amount} has more than {decimals} decimal places")

    return int(scaled)


def format_units(value: int, decimals: int) -> str:
    with localcontext() as ctx:
        ctx.prec = 78
        return f"{Decimal(value).scaleb(-decimals).normalize():f}"
