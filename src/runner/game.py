# src/runner/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, HIGH_SCORE_FILE, AUDIO_DIR
from .collaborators import JsonHighScoreStore, PygameAudio, NullAudio
from .controller import RunController, frame_dt
from .render import PygameRenderer
from .state import Viewport

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Square Root runner — playable window")
    p.add_argument("--width", type=int, default=WIDTH)
    p.add_argument("--height", type=int, default=HEIGHT)
    p.add_argument("--fps", type=int, default=FPS, help="Frame cap; simulation is dt-scaled.")
    p.add_argument("--highscore-file", default=HIGH_SCORE_FILE)
    p.add_argument("--audio-dir", default=AUDIO_DIR)
    p.add_argument("--mute", action="store_true", help="Disable sound effects.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Square Root")
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    audio = NullAudio() if args.mute else PygameAudio(args.audio_dir)
    controller = RunController(
        viewport=Viewport(args.width, args.height),
        audio=audio,
        store=JsonHighScoreStore(args.highscore_file),
    )
    renderer = PygameRenderer(screen)
    logger.info("window %dx%d, high score %d m",
                args.width, args.height, controller.state.high_score)

    while True:
        dt = frame_dt(clock.tick(args.fps))

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_SPACE:
                    controller.jump()
            if event.type == pygame.MOUSEBUTTONDOWN:  # touch arrives as synthesized mouse events
                controller.jump()
            if event.type == pygame.VIDEORESIZE:
                # A new size rebuilds the run from scratch
                controller.resize(event.w, event.h)

        controller.tick(dt)
        renderer.draw(controller.state)
        pygame.display.flip()


if __name__ == "__main__":
    run()
