"""Pytest configuration and fixtures."""

import random

import pytest

from two_card_poker.engine.card import Card


@pytest.fixture
def rng():
    """Seeded random source for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def card():
    """Build a card from its short form, e.g. card("As")."""
    return Card.parse
