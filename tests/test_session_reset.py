import random

import pytest

from pairs.components.board import Board
from pairs.components.deferred_action import DeferredKind
from pairs.components.game_session import GameSession, SessionPhase
from pairs.components.game_settings import GameSettings
from pairs.components.session_clock import SessionClock
from pairs.errors import InvalidDimension
from pairs.events.bus import (
    EventBus,
    EVENT_DEFERRED_ACTION_DUE,
    EVENT_DIFFICULTY_SELECTED,
    EVENT_GAME_RESET,
    EVENT_START_REQUEST,
    EVENT_TICK,
)
from pairs.systems.clock import ClockSystem
from pairs.systems.scheduler import DeferredActionSystem
from pairs.systems.session import SessionSystem
from pairs.world import create_world


def make_engine(symbols=None, **world_kwargs):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(7), **world_kwargs)
    scheduler = DeferredActionSystem(world, bus)
    ClockSystem(world, bus)
    board = Board.from_symbols(symbols) if symbols else None
    system = SessionSystem(world, bus, board=board)
    return bus, world, scheduler, system


def drive_ticks(bus, n, dt=0.25):
    for _ in range(n):
        bus.emit(EVENT_TICK, dt=dt)


def settings_of(world):
    return next(settings for _, settings in world.get_component(GameSettings))


def test_constructor_deals_a_board_of_the_selected_difficulty():
    _, _, _, system = make_engine(dimension=6)
    assert system.board.dimension == 6
    assert len(system.board) == 36
    assert system.phase is SessionPhase.IDLE


def test_reset_cancels_pending_settle():
    bus, world, scheduler, system = make_engine("abab")
    old_generation = system.session.generation
    system.flip(0)
    system.flip(1)
    fresh = Board.from_symbols("abab")
    session = system.reset(board=fresh)

    assert session.generation == old_generation + 1
    assert scheduler.pending() == []
    assert session.total_flips == 0
    assert session.elapsed_seconds == 0
    assert session.flipped_tile_ids == []
    assert session.phase is SessionPhase.IDLE
    assert len(list(world.get_component(GameSession))) == 1
    assert list(world.get_component(SessionClock)) == []
    drive_ticks(bus, 8)
    assert system.elapsed_seconds == 0


def test_stale_settle_action_is_ignored():
    bus, _, _, system = make_engine("abab")
    old_generation = system.session.generation
    system.reset(board=Board.from_symbols("abab"))
    system.flip(0)
    system.flip(1)
    bus.emit(
        EVENT_DEFERRED_ACTION_DUE,
        kind=DeferredKind.SETTLE_MISMATCH,
        generation=old_generation,
        tile_ids=(0, 1),
    )
    assert system.board.tile(0).face_up and system.board.tile(1).face_up
    assert system.session.flipped_tile_ids == [0, 1]


def test_stale_win_action_is_ignored():
    bus, _, _, system = make_engine("aabb")
    for tile_id in range(4):
        system.flip(tile_id)
    old_generation = system.session.generation
    system.reset(board=Board.from_symbols("aabb"))
    bus.emit(EVENT_DEFERRED_ACTION_DUE, kind=DeferredKind.DECLARE_WIN, generation=old_generation, tile_ids=())
    drive_ticks(bus, 8)
    assert system.phase is SessionPhase.IDLE


def test_reset_without_board_leaves_session_empty():
    _, _, _, system = make_engine("aabb")
    system.flip(0)
    session = system.reset()
    assert session.board is None
    assert system.tile_views() == []
    assert system.start() is False
    assert system.phase is SessionPhase.IDLE
    with pytest.raises(IndexError):
        system.flip(0)


def test_reset_with_dimension_generates_board():
    bus, _, _, system = make_engine("aabb")
    reset_events = []
    bus.subscribe(EVENT_GAME_RESET, lambda sender, **p: reset_events.append(p))
    session = system.reset(4)
    assert session.board.dimension == 4
    assert reset_events == [{"generation": session.generation, "dimension": 4}]


def test_reset_then_start_has_clean_counters():
    bus, _, _, system = make_engine("abab")
    system.flip(0)
    system.flip(1)
    drive_ticks(bus, 8)
    system.reset(4)
    assert system.start() is True
    assert system.total_flips == 0
    assert system.elapsed_seconds == 0
    assert not any(t.face_up or t.matched for t in system.board.tiles)


def test_reset_clears_flags_of_a_reused_board():
    _, _, _, system = make_engine("aabb")
    board = system.board
    system.flip(0)
    system.flip(1)
    system.reset(board=board)
    assert not any(t.face_up or t.matched for t in system.board.tiles)


def test_start_is_idempotent():
    _, _, _, system = make_engine("aabb")
    assert system.start() is True
    assert system.start() is False
    assert system.phase is SessionPhase.RUNNING


def test_invalid_new_game_keeps_current_session():
    _, world, _, system = make_engine("aabb")
    system.flip(0)
    generation = system.session.generation
    with pytest.raises(InvalidDimension):
        system.new_game(3)
    assert system.session.generation == generation
    assert system.total_flips == 1
    assert settings_of(world).dimension == 4


def test_difficulty_selection_deals_new_board():
    bus, world, _, system = make_engine("aabb")
    system.flip(0)
    bus.emit(EVENT_DIFFICULTY_SELECTED, dimension=6)
    assert system.board.dimension == 6
    assert system.total_flips == 0
    assert settings_of(world).dimension == 6


def test_invalid_difficulty_selection_is_ignored():
    bus, world, _, system = make_engine("aabb")
    generation = system.session.generation
    bus.emit(EVENT_DIFFICULTY_SELECTED, dimension="5")
    bus.emit(EVENT_DIFFICULTY_SELECTED, dimension=None)
    assert system.session.generation == generation
    assert system.board.dimension == 2
    assert settings_of(world).dimension == 4


def test_start_request_starts_then_restarts():
    bus, world, _, system = make_engine("aabb")
    bus.emit(EVENT_START_REQUEST)
    assert system.phase is SessionPhase.RUNNING
    generation = system.session.generation

    bus.emit(EVENT_START_REQUEST)
    assert system.phase is SessionPhase.IDLE
    assert system.session.generation == generation + 1
    assert system.board.dimension == settings_of(world).dimension


def test_start_request_without_board_deals_one():
    bus, _, _, system = make_engine("aabb")
    system.reset()
    bus.emit(EVENT_START_REQUEST)
    assert system.board is not None
    assert system.phase is SessionPhase.IDLE
