"""Bust and showdown rules, and the dealer's drawing policy."""

from enum import Enum, auto

from blackjack.hand import BLACKJACK, Hand

DEALER_HIT_LIMIT = 16


class GameResult(Enum):
    """Final outcome from the player's point of view."""

    PLAYER_WIN = auto()
    PLAYER_LOSE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class DealerAction(Enum):
    """What the dealer does on its turn."""

    HIT = auto()
    STAND = auto()


def is_bust(score: int) -> bool:
    """Check if a score is over 21."""
    return score > BLACKJACK


def determine_result(player_score: int, dealer_score: int) -> GameResult:
    """
    Decide the game from final scores.

    The player wins when the dealer busts, or when the player has not busted
    and beats the dealer's score. Everything else, ties included, is a loss.
    """
    player_wins = is_bust(dealer_score) or (
        not is_bust(player_score) and player_score > dealer_score
    )
    return GameResult.PLAYER_WIN if player_wins else GameResult.PLAYER_LOSE


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> GameResult:
    """Compare player and dealer hands."""
    return determine_result(player_hand.value, dealer_hand.value)


def dealer_action(score: int) -> DealerAction:
    """Dealer hits on 16 or less and stands on 17 or more."""
    if is_bust(score):
        raise ValueError(f"Dealer has already busted with {score}")
    if score <= DEALER_HIT_LIMIT:
        return DealerAction.HIT
    return DealerAction.STAND


def hand_to_dealer_action(hand: Hand) -> DealerAction:
    """Apply the dealer policy to a hand."""
    return dealer_action(hand.value)
