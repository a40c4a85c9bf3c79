"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card
from blackjack.deck import Deck, generate_deck
from blackjack.hand import DealerHand, Hand, ScoringPolicy
from blackjack.rules import (
    DealerAction,
    GameResult,
    dealer_action,
    determine_result,
    is_bust,
)
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    Single-hand blackjack engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": "start", "dest": "player_action"},
        {"trigger": "player_continues", "source": "player_action", "dest": "player_action"},
        {"trigger": "player_busts", "source": "player_action", "dest": "end"},
        {"trigger": "player_done", "source": "player_action", "dest": "dealer_open"},
        {"trigger": "reveal", "source": "dealer_open", "dest": "dealer_action"},
        {"trigger": "dealer_continues", "source": "dealer_action", "dest": "dealer_action"},
        {"trigger": "dealer_done", "source": "dealer_action", "dest": "end"},
    ]

    def __init__(
        self,
        scoring: ScoringPolicy = ScoringPolicy.ACE_AWARE,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            scoring: How hands are scored
            rng: Random number generator for reproducible games
            deck: Pre-built deck to play from instead of a freshly shuffled one
        """
        self.scoring = scoring
        self._rng = rng
        self.deck = deck
        self.player_hand = Hand(scoring=scoring)
        self._dealer_opening: DealerHand | None = None
        self._dealer_hand: Hand | None = None
        self._result: GameResult | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="start",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def _log_state(self) -> None:
        logger.debug("Game state -> %s", self.state)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def result(self) -> GameResult | None:
        """Return the outcome once the game has ended."""
        return self._result

    @property
    def is_over(self) -> bool:
        """Check if the game reached its terminal state."""
        return self.state == GameState.END

    @property
    def dealer_up_card(self) -> Card | None:
        """Return the dealer's face-up card, if dealt."""
        if self._dealer_hand is not None:
            return self._dealer_hand.cards[0]
        if self._dealer_opening is not None:
            return self._dealer_opening.face_up
        return None

    @property
    def dealer_hand(self) -> Hand | None:
        """Return the dealer's hand once the hole card is revealed."""
        return self._dealer_hand

    @property
    def player_score(self) -> int:
        """Return the player's current score."""
        return self.player_hand.value

    @property
    def dealer_score(self) -> int | None:
        """Return the dealer's score once the hole card is revealed."""
        if self._dealer_hand is None:
            return None
        return self._dealer_hand.value

    def _reject(self, action: str) -> bool:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )
        return False

    def start(self) -> bool:
        """
        Build the deck and deal the opening cards.

        The player gets two cards face up; the dealer gets one face up and
        one face down.

        Returns:
            True if the game was started
        """
        if self.state != GameState.START:
            return self._reject("start")

        if self.deck is None:
            self.deck = generate_deck(rng=self._rng)
        self.events.emit_new(EventType.GAME_STARTED, scoring=self.scoring.value)
        logger.info("Game started (%s scoring)", self.scoring.value)

        self._deal_to_player()
        self._deal_to_player()

        face_up = self.deck.draw()
        face_down = self.deck.draw()
        self._dealer_opening = DealerHand(face_up=face_up, face_down=face_down)
        self.events.emit_new(EventType.CARD_DEALT, card=face_up.name, hand="dealer", face_up=True)
        self.events.emit_new(EventType.CARD_DEALT, card="??", hand="dealer", face_up=False)

        self.deal()  # Move to player turn
        return True

    def _deal_to_player(self) -> Card:
        card = self.deck.draw()
        self.player_hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card.name,
            hand="player",
            face_up=True,
            hand_value=self.player_hand.value,
        )
        return card

    def hit(self) -> bool:
        """Player takes another card. Busting ends the game as a loss."""
        if self.state != GameState.PLAYER_ACTION:
            return self._reject("hit")

        card = self._deal_to_player()
        self.events.emit_new(EventType.PLAYER_HIT, card=card.name, hand_value=self.player_score)
        logger.debug("Player drew %s, score %d", card, self.player_score)

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_score)
            self.player_busts()
            self._finish(GameResult.PLAYER_LOSE)
            return True

        self.player_continues()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stops drawing; the dealer's hole card is revealed."""
        if self.state != GameState.PLAYER_ACTION:
            return self._reject("stand")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_score)
        self.player_done()
        self._open_dealer()
        return True

    def _open_dealer(self) -> None:
        """Turn the hole card over, converting the opening hand for good."""
        opening = self._dealer_opening
        self._dealer_hand = opening.to_hand(self.scoring)
        self._dealer_opening = None
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=opening.face_down.name,
            hand_value=self._dealer_hand.value,
        )
        self.reveal()

    def dealer_step(self) -> DealerAction | None:
        """
        Play one dealer decision.

        Returns:
            The action taken, or None if it is not the dealer's turn
        """
        if self.state != GameState.DEALER_ACTION:
            self._reject("play dealer")
            return None

        score = self._dealer_hand.value
        if is_bust(score):
            self._dealer_busts()
            return None

        action = dealer_action(score)
        if action == DealerAction.HIT:
            card = self.deck.draw()
            self._dealer_hand.add_card(card)
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=card.name,
                hand_value=self._dealer_hand.value,
            )
            logger.debug("Dealer drew %s, score %d", card, self._dealer_hand.value)
            if self._dealer_hand.is_busted:
                self._dealer_busts()
            else:
                self.dealer_continues()
            return action

        self.events.emit_new(EventType.DEALER_STANDS, hand_value=score)
        self.dealer_done()
        self._finish(determine_result(self.player_score, score))
        return action

    def _dealer_busts(self) -> None:
        self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self._dealer_hand.value)
        self.dealer_done()
        self._finish(GameResult.PLAYER_WIN)

    def play_dealer(self) -> GameResult | None:
        """Run the dealer's turn to completion and return the result."""
        while self.state == GameState.DEALER_ACTION:
            self.dealer_step()
        return self._result

    def _finish(self, result: GameResult) -> None:
        self._result = result
        if result == GameResult.PLAYER_WIN:
            self.events.emit_new(EventType.PLAYER_WINS, player_score=self.player_score)
        else:
            self.events.emit_new(EventType.PLAYER_LOSES, player_score=self.player_score)
        self.events.emit_new(
            EventType.GAME_ENDED,
            result=result.name,
            player_score=self.player_score,
            dealer_score=self.dealer_score,
        )
        logger.info(
            "Game ended: %s (player %d, dealer %s)",
            result,
            self.player_score,
            self.dealer_score,
        )

    def play(self, player_hits: Callable[["BlackjackGame"], bool]) -> GameResult:
        """
        Play a full game with a decision callback for the player.

        Args:
            player_hits: Called on each player turn; returns True to hit

        Returns:
            The final result
        """
        if self.state == GameState.START:
            self.start()

        while self.state == GameState.PLAYER_ACTION:
            if player_hits(self):
                self.hit()
            else:
                self.stand()

        self.play_dealer()
        return self._result

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_ACTION

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_ACTION
