"""Deck construction, Fisher-Yates shuffle, and draw-without-replacement."""

import logging
import threading
from random import Random
from typing import Iterator, MutableSequence

from blackjack.cards import Card, all_cards

logger = logging.getLogger(__name__)

_local = threading.local()


def thread_rng() -> Random:
    """Return the random generator owned by the calling thread."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = Random()
        _local.rng = rng
    return rng


def fisher_yates_shuffle(cards: MutableSequence[Card], rng: Random) -> None:
    """Shuffle a sequence in place with a uniform Fisher-Yates pass."""
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


class Deck:
    """A standard 52-card deck, shuffled on creation.

    The deck is drawn as a stack: the last card of the sequence is the top.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Build and shuffle a full deck.

        Args:
            rng: Random number generator for shuffling. Defaults to the
                calling thread's generator.
        """
        self._rng = rng or thread_rng()
        self._cards: list[Card] = all_cards()
        fisher_yates_shuffle(self._cards, self._rng)
        logger.debug("Shuffled a new %d-card deck", len(self._cards))

    @classmethod
    def stacked(cls, cards: list[Card]) -> "Deck":
        """Build an unshuffled deck that deals ``cards`` in the given order."""
        deck = cls.__new__(cls)
        deck._rng = thread_rng()
        deck._cards = list(reversed(cards))
        return deck

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)


def generate_deck(rng: Random | None = None) -> Deck:
    """Return a freshly shuffled 52-card deck."""
    return Deck(rng=rng)


def draw(deck: Deck) -> Card:
    """Remove and return the top card of a deck."""
    return deck.draw()
