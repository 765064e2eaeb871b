from tetris_engine import Status
from tetris_input import Intent
from tetris_main import parse_args, step
from tetris_timer import DropTimer


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def setup(make_engine, kinds=("O", "T")):
    e = make_engine(kinds)
    clock = FakeClock()
    timer = DropTimer(1000, e.tick, clock=clock)
    step(e, timer)
    return e, timer, clock


def test_first_step_spawns_and_starts_timer(make_engine):
    e, timer, clock = setup(make_engine)
    assert e.active is not None and e.active.y == 0
    assert timer.active and timer.start_time == 0


def test_restart_mid_interval_rephases_timer(make_engine):
    e, timer, clock = setup(make_engine)
    clock.now = 600
    step(e, timer, [Intent.SOFT_DROP])
    assert e.active.y == 1
    clock.now = 700
    step(e, timer, [Intent.RESTART])
    assert e.active is not None and e.active.y == 0
    assert timer.active and timer.start_time == 700
    clock.now = 1000
    step(e, timer)
    assert e.active.y == 0
    clock.now = 1700
    step(e, timer)
    assert e.active.y == 1


def test_tick_ending_in_game_over_stops_timer(make_engine):
    e, timer, clock = setup(make_engine, ["O"])
    e.board[2][4] = "#FFFFFF"
    clock.now = 1000
    step(e, timer)
    assert e.status is Status.GAME_OVER
    assert not timer.active and timer.start_time is None
    board = [row[:] for row in e.board]
    clock.now = 50_000
    step(e, timer)
    assert e.board == board and not timer.active


def test_pause_stops_and_resume_restarts_timer(make_engine):
    e, timer, clock = setup(make_engine)
    clock.now = 300
    step(e, timer, [Intent.TOGGLE_PAUSE])
    assert not timer.active
    clock.now = 5000
    step(e, timer)
    assert e.active.y == 0
    step(e, timer, [Intent.TOGGLE_PAUSE])
    assert timer.active and timer.start_time == 5000
    clock.now = 5999
    step(e, timer)
    assert e.active.y == 0
    clock.now = 6000
    step(e, timer)
    assert e.active.y == 1


def test_parse_args_defaults_and_overrides():
    args = parse_args([])
    assert args.randomizer == "uniform" and args.drop_ms == 1000
    args = parse_args(["--seed", "7", "--randomizer", "bag", "--drop-ms", "500"])
    assert (args.seed, args.randomizer, args.drop_ms) == (7, "bag", 500)
