"""
engine.py - Turn management for a game of Puissance 4

The Engine owns the area and the two players. Each call to play_turn asks the
active player for a column, drops its token, runs the detector, and either
hands the turn over or ends the game.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import numpy as np

from puissance4.debug import debug
from puissance4.exceptions import (ColumnFullError, GameFinishedError,
                                   InvalidAreaError, InvalidPlayerSlotError,
                                   MoveInProgressError, NoLegalMoveError,
                                   OutOfBoundsError)
from puissance4.utils import GameResult, Slot, Token, is_valid_column
from puissance4.game.area import Area, AreaView
from puissance4.game.detector import detect_result, scan_result

if TYPE_CHECKING:
    from puissance4.players.base import Player


class EngineState(Enum):
    AWAITING_MOVE = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class TurnOutcome:
    """What a single ply did to the game."""
    slot: Slot
    column: int
    row: int
    result: GameResult
    rejected: int  # refused attempts before the accepted drop
    state: EngineState

    @property
    def finished(self) -> bool:
        return self.state == EngineState.FINISHED


def _to_slot(slot: Union[Slot, int]) -> Slot:
    if isinstance(slot, Slot):
        return slot
    if isinstance(slot, (int, np.integer)) and not isinstance(slot, bool):
        try:
            return Slot(int(slot))
        except ValueError:
            pass
    raise InvalidPlayerSlotError(slot)


class Engine:
    """
    Plays a game between two Player implementations.

    Slot ONE places yellow tokens and moves first. Players only ever see an
    AreaView of the area.
    """

    def __init__(self, player_one: 'Player', player_two: 'Player'):
        debug.debug(f"Initializing Engine: {player_one!r} vs {player_two!r}", "engine")
        self._players: Dict[Slot, 'Player'] = {Slot.ONE: player_one, Slot.TWO: player_two}
        self._area = Area()
        self._pending: Optional[Slot] = None
        self.reset()

    def reset(self):
        """Start a new game with the same players."""
        if self._pending is not None:
            raise MoveInProgressError("Cannot reset while a player is choosing a move")
        debug.debug("Resetting engine", "engine")
        self._area.reset()
        self._active = Slot.ONE
        self._result = GameResult.IN_PROGRESS

    @property
    def area(self) -> AreaView:
        return self._area.view()

    @property
    def active_slot(self) -> Slot:
        return self._active

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def state(self) -> EngineState:
        if self._result.is_game_over():
            return EngineState.FINISHED
        return EngineState.AWAITING_MOVE

    def player(self, slot: Union[Slot, int]) -> 'Player':
        return self._players[_to_slot(slot)]

    def set_player(self, slot: Union[Slot, int], player: 'Player'):
        """
        Replace the player sitting in ``slot``.

        Allowed at any point except while a player is inside choose_move.

        Raises:
            InvalidPlayerSlotError: if ``slot`` is not 1 or 2
            MoveInProgressError: if a move request is in flight
        """
        slot = _to_slot(slot)
        if self._pending is not None:
            raise MoveInProgressError(
                f"Cannot replace player {slot.value} while {self._players[self._pending].name} is choosing a move")

        debug.debug(f"Slot {slot.value} is now {player!r}", "engine")
        self._players[slot] = player

    def winner_name(self) -> Optional[str]:
        winner = self._result.winner
        if winner is None:
            return None
        return self._players[winner].name

    def _request_move(self, slot: Slot) -> int:
        player = self._players[slot]
        self._pending = slot
        try:
            column = player.choose_move(self._area.view(), slot.token)
        finally:
            self._pending = None

        if not isinstance(column, (int, np.integer)) or isinstance(column, bool) or not is_valid_column(int(column)):
            raise OutOfBoundsError(f"{player.name} chose invalid column {column!r}")
        return int(column)

    def play_turn(self) -> TurnOutcome:
        """
        Play exactly one ply.

        A full column is reported back to the same player, which is asked
        again until it picks a playable one.

        Raises:
            GameFinishedError: if the game is already over
            NoLegalMoveError: if the area is full while the game is in progress
            OutOfBoundsError: if a player returns a column outside the area
            MoveInProgressError: if called from inside a choose_move
        """
        if self._pending is not None:
            raise MoveInProgressError("Cannot play a turn while a player is choosing a move")

        if self.state == EngineState.FINISHED:
            raise GameFinishedError(f"Game is over: {self._result.name}")

        if self._area.is_full():
            raise NoLegalMoveError("Area is full but the game is still in progress")

        slot = self._active
        player = self._players[slot]
        rejected = 0

        while True:
            column = self._request_move(slot)
            try:
                row = self._area.drop(column, slot.token)
                break
            except ColumnFullError as e:
                rejected += 1
                debug.warning(f"{player.name} chose full column {column}", "engine")
                player.notify_rejected(column, e)

        self._result = detect_result(self._area, column, row)
        debug.debug(f"{player.name} ({slot.token}) played column {column}, row {row}", "engine")

        if self._result.is_game_over():
            debug.info(f"Game over: {self._result.name}", "engine")
        else:
            self._active = slot.other()

        return TurnOutcome(slot=slot, column=column, row=row, result=self._result,
                           rejected=rejected, state=self.state)

    def run(self) -> GameResult:
        """Play turns until the game ends and return the result."""
        while self.state != EngineState.FINISHED:
            self.play_turn()
        return self._result

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready description of the current position."""
        return {
            "area": self._area.to_string(),
            "active": self._active.value,
            "result": self._result.name,
        }

    def load_snapshot(self, snapshot: Dict[str, Any]):
        """
        Resume from a snapshot produced by :meth:`snapshot`.

        Raises:
            InvalidAreaError: if the snapshot is malformed or inconsistent
        """
        if self._pending is not None:
            raise MoveInProgressError("Cannot load a snapshot while a player is choosing a move")

        try:
            area = Area.from_string(snapshot["area"])
            active = Slot(int(snapshot["active"]))
            result = GameResult[snapshot["result"]]
        except InvalidAreaError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidAreaError(f"Malformed snapshot: {e}") from e

        yellow = int(np.count_nonzero(area.cells == Token.YELLOW.value))
        red = int(np.count_nonzero(area.cells == Token.RED.value))
        if yellow - red not in (0, 1):
            raise InvalidAreaError(f"Token counts do not alternate: {yellow} yellow, {red} red")

        actual = scan_result(area)
        if actual != result:
            raise InvalidAreaError(f"Snapshot claims {result.name} but the area shows {actual.name}")

        if result.winner is not None:
            last_mover = Slot.ONE if yellow > red else Slot.TWO
            if result.winner != last_mover:
                raise InvalidAreaError(f"Slot {result.winner.value} wins without having played last")
        elif not result.is_game_over():
            expected = Slot.ONE if yellow == red else Slot.TWO
            if active != expected:
                raise InvalidAreaError(f"Slot {expected.value} should be the one to play")

        self._area = area
        self._active = active
        self._result = result
        debug.info(f"Snapshot loaded, slot {active.value} to play ({result.name})", "engine")

    @classmethod
    def restore(cls, snapshot: Dict[str, Any], player_one: 'Player', player_two: 'Player') -> 'Engine':
        engine = cls(player_one, player_two)
        engine.load_snapshot(snapshot)
        return engine
