import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG, RANDOMIZERS
from tetris_engine import BoardEngine, Status
from tetris_input import Intent, dispatch, intent_for_key
from tetris_layout import compute_dims
from tetris_render import Renderer
from tetris_timer import DropTimer

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle (pygame)")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"])
    p.add_argument("--randomizer", choices=RANDOMIZERS, default=CONFIG["RANDOMIZER"])
    p.add_argument("--drop-ms", type=int, default=CONFIG["DROP_INTERVAL_MS"])
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def step(engine: BoardEngine, timer: DropTimer, intents=()):
    """Apply queued intents, then let the drop timer run once.

    The timer is re-synced to the engine status around its tick so pause,
    game over and restart stop or re-phase it.
    """
    for intent in intents:
        dispatch(engine, intent)
        if intent is Intent.RESTART:
            timer.deactivate()

    if engine.status is Status.PLAYING and engine.active is None:
        engine.spawn_next()

    timer.sync(engine.status)
    timer.update()
    timer.sync(engine.status)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = BoardEngine({
        "SEED": args.seed,
        "RANDOMIZER": args.randomizer,
        "DROP_INTERVAL_MS": args.drop_ms,
        "CELL_SIZE": args.cell_size,
    })

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    dims = compute_dims(engine.config["CELL_SIZE"], engine.cols, engine.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 34)
    render = Renderer(dims, font, big_font)
    clock = pygame.time.Clock()

    timer = DropTimer(engine.config["DROP_INTERVAL_MS"], engine.tick)
    logger.info("starting: %dx%d board, %s randomizer, seed=%s",
                engine.cols, engine.rows, args.randomizer, args.seed)

    try:
        while True:
            # Every timer tick and key event runs on this one loop
            intents = []
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    return 0
                if e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        return 0
                    intent = intent_for_key(e.key)
                    if intent is not None:
                        intents.append(intent)

            step(engine, timer, intents)

            render.draw(screen, engine.snapshot())
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == '__main__':
    sys.exit(main())
