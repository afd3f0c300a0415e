"""Tests for receiver selection strategies."""

import random

import pytest

from conftest import DESTINATION, RECIPIENTS, make_transfer
from models.transfer import MANY_TO_ONE
from modules.receivers import FixedReceiver, RandomReceiver, build_receivers


class TestRandomReceiver:
    def test_picks_only_from_pool(self) -> None:
        receivers = RandomReceiver(RECIPIENTS, rng=random.Random(0))

        picks = [receivers.pick() for _ in range(100)]

        assert set(picks) <= set(RECIPIENTS)

    def test_single_address_pool(self) -> None:
        receivers = RandomReceiver(RECIPIENTS[:1])

        assert receivers.pick() == RECIPIENTS[0]

    def test_empty_pool_rejected(self) -> None:
        with pytest.raises(ValueError):
            RandomReceiver([])

    def test_requires_full_batch(self) -> None:
        assert RandomReceiver(RECIPIENTS).required_balance(10, 3) == 30


class TestFixedReceiver:
    def test_always_same_address(self) -> None:
        receivers = FixedReceiver(DESTINATION)

        assert {receivers.pick() for _ in range(10)} == {DESTINATION}

    def test_single_tx_requirement_by_default(self) -> None:
        assert FixedReceiver(DESTINATION).required_balance(10, 3) == 10

    def test_full_batch_requirement(self) -> None:
        receivers = FixedReceiver(DESTINATION, full_batch=True)

        assert receivers.required_balance(10, 3) == 30

    def test_missing_destination_rejected(self) -> None:
        with pytest.raises(ValueError):
            FixedReceiver(None)


class TestBuildReceivers:
    def test_one_to_many(self) -> None:
        receivers = build_receivers(make_transfer(), RECIPIENTS)

        assert isinstance(receivers, RandomReceiver)
        assert receivers.addresses == RECIPIENTS

    def test_one_to_many_needs_recipients(self) -> None:
        with pytest.raises(ValueError):
            build_receivers(make_transfer(), [])

    def test_many_to_one(self) -> None:
        receivers = build_receivers(make_transfer(direction=MANY_TO_ONE))

        assert isinstance(receivers, FixedReceiver)
        assert receivers.pick() == DESTINATION
