"""Hand accumulation and scoring."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK = 21


def simple_score(cards: Iterable[Card]) -> int:
    """Sum fixed card values with Ace counted as 1."""
    return sum(card.value for card in cards)


def _resolve_aces(cards: Iterable[Card]) -> tuple[int, int]:
    """Return the ace-aware total and how many aces counted as 11."""
    total = 0
    aces = 0
    for card in cards:
        if card.is_ace:
            aces += 1
        else:
            total += card.value

    # Each ace still to come is reserved at 1 before deciding on 11
    soft_aces = 0
    for remaining in range(aces - 1, -1, -1):
        if total + 11 + remaining <= BLACKJACK:
            total += 11
            soft_aces += 1
        else:
            total += 1

    return total, soft_aces


def ace_aware_score(cards: Iterable[Card]) -> int:
    """
    Score a hand with soft aces.

    Non-ace cards are summed first. Each ace is then resolved against the
    running sum: it counts 11 if that keeps the total at or under 21 with
    every later ace counted as 1, otherwise 1.
    """
    total, _ = _resolve_aces(cards)
    return total


class ScoringPolicy(Enum):
    """How a hand's cards add up to a score."""

    SIMPLE = "simple"
    ACE_AWARE = "ace-aware"

    def score(self, cards: Iterable[Card]) -> int:
        """Score cards under this policy."""
        if self == ScoringPolicy.SIMPLE:
            return simple_score(cards)
        return ace_aware_score(cards)


@dataclass
class Hand:
    """The cards held by one party, scored by a fixed policy."""

    cards: list[Card] = field(default_factory=list)
    scoring: ScoringPolicy = ScoringPolicy.ACE_AWARE

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """Return the hand's score."""
        return self.scoring.score(self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if an ace is currently counted as 11."""
        if self.scoring == ScoringPolicy.SIMPLE:
            return False
        _, soft_aces = _resolve_aces(self.cards)
        return soft_aces > 0

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


@dataclass(frozen=True)
class DealerHand:
    """The dealer's opening two cards, one of them still face down."""

    face_up: Card
    face_down: Card

    def to_hand(self, scoring: ScoringPolicy = ScoringPolicy.ACE_AWARE) -> Hand:
        """Turn the hole card over and return a plain two-card hand."""
        return Hand(cards=[self.face_up, self.face_down], scoring=scoring)
