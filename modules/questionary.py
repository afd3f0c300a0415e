import sys

import questionary
from questionary import Style
from tabulate import tabulate
from web3 import Web3

from data.const import CHAINS
from models.network import Network
from models.transfer import MANY_TO_ONE, NATIVE, ONE_TO_MANY, TOKEN, Transfer
from modules.logger import logger
from modules.utils import parse_amount, truncate
from modules.wallet import get_contract

"""
This module provides an interactive CLI using
`questionary` for user prompts &
`tabulate` for summary table.
"""

# ANSI color codes
BRIGHT_GREEN = "\033[92m"  # Bright green
RESET = "\033[0m"  # Reset color

style = Style(
    [
        ("qmark", "fg:#2196f3 bold"),
        ("question", "bold"),
        ("answer", "fg:#2196f3 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("instruction", "fg:#8c8c8c italic"),
    ]
)


def select(message: str, choices: list, what: str):
    answer = questionary.select(message, choices=choices, style=style).ask()

    if answer is None:
        logger.error(f"No {what} selected. Exiting...")
        sys.exit(1)

    return answer


def ask_address(message: str, what: str) -> str:
    address = (questionary.text(message, style=style).ask() or "").strip()

    if not Web3.is_address(address):
        raise ValueError(f"Invalid {what} address: {address!r}")

    return Web3.to_checksum_address(address)


def get_amount():
    while True:
        answer = questionary.text(
            "Enter amount to transfer per transaction:", style=style
        ).ask()
        if answer is None:
            logger.error("No amount entered. Exiting...")
            sys.exit(1)

        try:
            return parse_amount(answer)
        except ValueError as err:
            logger.warning(err)


def get_tx_count() -> int:
    while True:
        answer = questionary.text(
            "Enter the number of transactions to send for each address:",
            style=style,
        ).ask()
        if answer is None:
            logger.error("No transaction count entered. Exiting...")
            sys.exit(1)

        try:
            count = int(answer.strip())
        except ValueError:
            logger.warning("Input must be a whole number")
            continue

        if count < 1:
            logger.warning("Number of transactions must be at least 1")
            continue

        return count


def select_chain() -> Network:
    network_type = select(
        "Select network type:", choices=list(CHAINS), what="network type"
    )
    chains = CHAINS[network_type]

    name = select("Select chain:", choices=list(chains), what="chain")
    chain = chains[name]

    logger.info(f"You have selected: {chain.name}")
    logger.info(f"RPC URL: {chain.rpc_url}")
    logger.info(f"Chain ID: {chain.chain_id}")

    return chain


def get_token_symbol(w3, token_addr: str) -> str:
    try:
        return get_contract(w3, token_addr).functions.symbol().call()
    except Exception as err:
        logger.warning(f"Could not read token symbol: {err}")
        return "tokens"


def get_user_input() -> Transfer:
    # Q1: Get chain
    chain = select_chain()

    # Q2: Get transfer type
    token_type = select(
        "Select transfer type:",
        choices=[
            questionary.Choice(
                title=f"Native Token ({chain.native_token})", value=NATIVE
            ),
            questionary.Choice(title="ERC20/BEP20 Token", value=TOKEN),
        ],
        what="transfer type",
    )

    # Q3: Get direction
    direction = select(
        "Select transfer direction:",
        choices=[
            questionary.Choice(
                title="One to Many (1 sender -> many receivers)", value=ONE_TO_MANY
            ),
            questionary.Choice(
                title="Many to One (many senders -> 1 receiver)", value=MANY_TO_ONE
            ),
        ],
        what="transfer direction",
    )

    token_address = None
    if token_type == TOKEN:
        token_address = ask_address("Enter token contract address:", "token contract")

    # Q4: Get amount
    amount = get_amount()

    destination = None
    if direction == MANY_TO_ONE:
        destination = ask_address(
            "Enter destination address for all transfers:", "destination"
        )

    # Q5: Get tx count
    tx_count = get_tx_count()

    return Transfer(
        token_type=token_type,
        direction=direction,
        amount=amount,
        tx_count=tx_count,
        chain=chain,
        token_address=token_address,
        destination=destination,
    )


def build_confirmation_message(
    transfer: Transfer, senders: int, recipients: int = 0
) -> str:
    """
    Builds a user-friendly table with the transfer data using tabulate.
    """
    if transfer.direction == ONE_TO_MANY:
        recipient = f"{recipients} recipients (random)"
    else:
        recipient = truncate(transfer.destination)

    token = transfer.display_symbol
    if transfer.token_address:
        token = f"{token} ({truncate(transfer.token_address)})"

    table_data = [
        ["Mode", transfer.direction],
        ["Amount", f"{transfer.amount} x {transfer.tx_count} txs per sender"],
        ["Token", f"{BRIGHT_GREEN}{token}{RESET}"],
        ["From", f"{senders} accounts"],
        ["To", recipient],
        ["Chain", f"{BRIGHT_GREEN}{transfer.chain.name.upper()}{RESET}"],
    ]

    confirmation_table = tabulate(table_data, tablefmt="double_grid")
    return confirmation_table


def confirm_transfer(transfer: Transfer, senders: int, recipients: int = 0):
    print()  # line break
    print(build_confirmation_message(transfer, senders, recipients))

    confirmation = questionary.confirm(
        "Proceed with the transfer? \n", style=style
    ).ask()

    if not confirmation:
        sys.exit(0)
