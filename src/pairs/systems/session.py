"""Flip protocol, win detection and timer lifecycle of a pairs game.

The session lives on its own entity as a GameSession component. Every reset
deletes that entity and creates a new one with a higher generation number, so
settle-delay actions scheduled for an older game are ignored when they fire.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from esper import World

from pairs.components.board import Board
from pairs.components.deferred_action import DeferredKind
from pairs.components.game_session import GameSession, SessionPhase, WinSummary
from pairs.components.session_clock import SessionClock
from pairs.errors import BoardGenerationError
from pairs.events.bus import (
    EVENT_DEFERRED_ACTION_DUE,
    EVENT_DEFERRED_ACTION_REQUEST,
    EVENT_DEFERRED_ACTIONS_CANCEL,
    EVENT_DIFFICULTY_SELECTED,
    EVENT_GAME_RESET,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EVENT_PAIR_MATCHED,
    EVENT_PAIR_MISMATCHED,
    EVENT_PAIR_SETTLED,
    EVENT_START_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_TILE_FLIPPED,
    EventBus,
)
from pairs.factories.board import generate_board
from pairs.utils.difficulty import parse_dimension
from pairs.utils.projection import TileView, project_board, visible_symbol
from pairs.world import get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FlipResult:
    """Outcome of a flip request.

    ``match`` is None unless this flip turned the second tile of a pair face-up.
    """
    tile_id: int
    accepted: bool
    face_up: bool
    matched: bool
    symbol: Any = None
    match: Optional[bool] = None


class SessionSystem:
    def __init__(self, world: World, event_bus: EventBus, *, board: Board | None = None):
        self.world = world
        self.event_bus = event_bus
        self.session_entity: int | None = None
        self._generation = 0
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_START_REQUEST, self.on_start_request)
        self.event_bus.subscribe(EVENT_DIFFICULTY_SELECTED, self.on_difficulty_selected)
        self.event_bus.subscribe(EVENT_DEFERRED_ACTION_DUE, self.on_deferred_action_due)
        if board is not None:
            self.reset(board=board)
        else:
            self.new_game()

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def session(self) -> GameSession:
        if self.session_entity is None:
            raise RuntimeError("No game session has been created")
        return self.world.component_for_entity(self.session_entity, GameSession)

    @property
    def board(self) -> Board | None:
        return self.session.board

    @property
    def phase(self) -> SessionPhase:
        return self.session.phase

    @property
    def total_flips(self) -> int:
        return self.session.total_flips

    @property
    def elapsed_seconds(self) -> int:
        return self.session.elapsed_seconds

    @property
    def win_summary(self) -> WinSummary | None:
        return self.session.win_summary

    def tile_views(self) -> List[TileView]:
        return project_board(self.session.board)

    def visible_symbol(self, tile_id: int) -> Any:
        return visible_symbol(self._require_board().tile(tile_id))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def new_game(self, dimension: int | str | None = None) -> GameSession:
        """Generate a fresh board and replace the current session with an idle one.

        The board is built before anything is discarded, so a rejected
        dimension leaves the current game as it was.
        """
        settings = get_settings(self.world)
        dimension = settings.dimension if dimension is None else parse_dimension(dimension)
        board = generate_board(dimension, rng=getattr(self.world, "random", None))
        settings.dimension = dimension
        session = self.reset(board=board)
        logger.info("New %dx%d game (generation %d)", dimension, dimension, session.generation)
        return session

    def reset(self, dimension: int | None = None, *, board: Board | None = None) -> GameSession:
        """Stop the timer, cancel pending actions and start over with zeroed counters.

        The new session holds ``board`` when given, a freshly generated board
        when only ``dimension`` is given, and no board otherwise.
        """
        if board is None and dimension is not None:
            board = generate_board(dimension, rng=getattr(self.world, "random", None))
        if board is not None:
            for tile in board.tiles:
                tile.face_up = False
                tile.matched = False
        self.event_bus.emit(EVENT_DEFERRED_ACTIONS_CANCEL, generation=None)
        if self.session_entity is not None and self.world.entity_exists(self.session_entity):
            self.world.delete_entity(self.session_entity, immediate=True)
        self._generation += 1
        session = GameSession(board=board, generation=self._generation)
        self.session_entity = self.world.create_entity(session)
        self.event_bus.emit(
            EVENT_GAME_RESET,
            generation=session.generation,
            dimension=board.dimension if board is not None else None,
        )
        return session

    def start(self) -> bool:
        """Start the timer. Returns False when the session was not idle or has no board."""
        session = self.session
        if session.phase is not SessionPhase.IDLE:
            return False
        if session.board is None:
            logger.debug("Start ignored: session %d has no board", session.generation)
            return False
        session.phase = SessionPhase.RUNNING
        self.world.add_component(self.session_entity, SessionClock())
        logger.info("Game %d started", session.generation)
        self.event_bus.emit(EVENT_GAME_STARTED, generation=session.generation)
        return True

    def request_start(self) -> None:
        """Start / New Game control: start an idle game, otherwise deal a new board."""
        session = self.session
        if session.board is None or session.started:
            self.new_game()
        else:
            self.start()

    def flip(self, tile_id: int) -> FlipResult:
        session = self.session
        tile = self._require_board().tile(tile_id)
        if (
            session.finished
            or tile.matched
            or tile_id in session.flipped_tile_ids
            or len(session.flipped_tile_ids) >= 2
        ):
            logger.debug("Flip of tile %d ignored", tile_id)
            return FlipResult(
                tile_id=tile_id,
                accepted=False,
                face_up=tile.face_up,
                matched=tile.matched,
                symbol=visible_symbol(tile),
            )
        if session.phase is SessionPhase.IDLE:
            self.start()

        tile.face_up = True
        session.total_flips += 1
        session.flipped_tile_ids.append(tile_id)
        self.event_bus.emit(EVENT_TILE_FLIPPED, tile_id=tile_id, total_flips=session.total_flips)

        match: Optional[bool] = None
        if len(session.flipped_tile_ids) == 2:
            match = self._resolve_pair(session)
        return FlipResult(
            tile_id=tile_id,
            accepted=True,
            face_up=tile.face_up,
            matched=tile.matched,
            symbol=tile.symbol,
            match=match,
        )

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        tile_id = kwargs.get('tile_id')
        if tile_id is None:
            return
        self.flip(tile_id)

    def on_start_request(self, sender, **kwargs):
        self.request_start()

    def on_difficulty_selected(self, sender, **kwargs):
        dimension = kwargs.get('dimension')
        if dimension is None:
            return
        try:
            self.new_game(dimension)
        except BoardGenerationError as exc:
            logger.warning("Ignoring difficulty selection %r: %s", dimension, exc)

    def on_deferred_action_due(self, sender, **kwargs):
        session = self.session
        generation = kwargs.get('generation')
        if generation != session.generation:
            logger.debug("Dropping deferred action from stale generation %s", generation)
            return
        kind = kwargs.get('kind')
        if kind is DeferredKind.SETTLE_MISMATCH:
            self._settle_mismatch(session, tuple(kwargs.get('tile_ids', ())))
        elif kind is DeferredKind.DECLARE_WIN:
            self._declare_win(session)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _require_board(self) -> Board:
        board = self.session.board
        if board is None:
            raise IndexError("The session has no board")
        return board

    def _schedule(self, session: GameSession, kind: DeferredKind, tile_ids=()) -> None:
        self.event_bus.emit(
            EVENT_DEFERRED_ACTION_REQUEST,
            kind=kind,
            delay=get_settings(self.world).settle_delay,
            generation=session.generation,
            tile_ids=tuple(tile_ids),
        )

    def _resolve_pair(self, session: GameSession) -> bool:
        board = session.board
        first_id, second_id = session.flipped_tile_ids
        first = board.tile(first_id)
        second = board.tile(second_id)
        if first.symbol == second.symbol:
            first.matched = True
            second.matched = True
            session.flipped_tile_ids.clear()
            self.event_bus.emit(EVENT_PAIR_MATCHED, tile_ids=(first_id, second_id), symbol=first.symbol)
            if board.all_matched():
                self._schedule(session, DeferredKind.DECLARE_WIN)
            return True
        # Both stay face-up until the settle delay expires; further flips are ignored meanwhile.
        self._schedule(session, DeferredKind.SETTLE_MISMATCH, (first_id, second_id))
        self.event_bus.emit(EVENT_PAIR_MISMATCHED, tile_ids=(first_id, second_id))
        return False

    def _settle_mismatch(self, session: GameSession, tile_ids: tuple) -> None:
        board = session.board
        if board is None:
            return
        for tile_id in tile_ids:
            tile = board.tile(tile_id)
            if not tile.matched:
                tile.face_up = False
        session.flipped_tile_ids = [tid for tid in session.flipped_tile_ids if tid not in tile_ids]
        logger.debug("Tiles %s flipped back", tile_ids)
        self.event_bus.emit(EVENT_PAIR_SETTLED, tile_ids=tile_ids)

    def _declare_win(self, session: GameSession) -> None:
        if session.phase is not SessionPhase.RUNNING or session.board is None or not session.board.all_matched():
            return
        session.phase = SessionPhase.WON
        if self.world.has_component(self.session_entity, SessionClock):
            self.world.remove_component(self.session_entity, SessionClock)
        logger.info(
            "Game %d won with %d moves under %d seconds",
            session.generation, session.total_flips, session.elapsed_seconds,
        )
        self.event_bus.emit(
            EVENT_GAME_WON,
            generation=session.generation,
            total_flips=session.total_flips,
            elapsed_seconds=session.elapsed_seconds,
        )
