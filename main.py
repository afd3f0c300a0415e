import sys
from dataclasses import replace

import settings
from models.transfer import ONE_TO_MANY, TOKEN
from modules.logger import logger
from modules.questionary import confirm_transfer, get_token_symbol, get_user_input
from modules.receivers import build_receivers
from modules.sender import BatchSender
from modules.summary import build_summary_table, count_statuses
from modules.utils import load_addresses, read_lines
from modules.wallet import connect


def process_wallets():
    transfer = get_user_input()  # config object holding transfer params

    # PART 1: load senders and, for one-to-many, the receiver pool
    keys = read_lines(settings.KEYS_FILE)
    recipients = []
    if transfer.direction == ONE_TO_MANY:
        recipients = load_addresses(settings.RECIPIENTS_FILE)

    w3 = connect(transfer.chain)

    if transfer.token_type == TOKEN:
        transfer = replace(
            transfer, symbol=get_token_symbol(w3, transfer.token_address)
        )

    confirm_transfer(transfer, senders=len(keys), recipients=len(recipients))

    # PART 2: execute the main loop
    sender = BatchSender(transfer, build_receivers(transfer, recipients), w3=w3)
    attempts = sender.run(keys)

    # PART 3: report
    if attempts:
        print()
        print(build_summary_table(attempts, transfer.chain))

    counts = ", ".join(
        f"{status.value}: {count}" for status, count in count_statuses(attempts).items()
    )
    logger.info(f"Transactions {counts}")


def main():
    try:
        process_wallets()
        logger.success("All transactions completed.")
    except KeyboardInterrupt:
        logger.warning("Cancelled by the user")
        sys.exit(0)
    except (FileNotFoundError, ValueError) as err:
        logger.error(err)
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
