import random

import settings
from models.transfer import MANY_TO_ONE, ONE_TO_MANY, Transfer


class RandomReceiver:
    """
    one-to-many: every tx goes to a random address from the pool.
    """

    full_batch = True

    def __init__(self, addresses: list[str], rng: random.Random = None):
        if not addresses:
            raise ValueError("Receiver pool is empty")

        self.addresses = list(addresses)
        self.rng = rng or random.Random()

    def pick(self) -> str:
        return self.rng.choice(self.addresses)

    def required_balance(self, value: int, count: int) -> int:
        return value * count


class FixedReceiver:
    """
    many-to-one: every tx from every sender goes to the same address.
    """

    def __init__(
        self, address: str, full_batch: bool = settings.MANY_TO_ONE_FULL_BATCH_CHECK
    ):
        if not address:
            raise ValueError("Destination address is required")

        self.address = address
        self.full_batch = full_batch

    def pick(self) -> str:
        return self.address

    def required_balance(self, value: int, count: int) -> int:
        return value * count if self.full_batch else value


def build_receivers(
    transfer: Transfer, recipients: list[str] = None, rng: random.Random = None
):
    if transfer.direction == ONE_TO_MANY:
        return RandomReceiver(recipients or [], rng=rng)
    elif transfer.direction == MANY_TO_ONE:
        return FixedReceiver(transfer.destination)

    raise ValueError(f"Unknown transfer direction: {transfer.direction}")
