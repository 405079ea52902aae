import argparse
import logging
import sys

import numpy as np
import pygame

from .clock import FixedStepClock
from .config import (WIDTH, HEIGHT, FPS, BG_COLOR, TEXT_COLOR, LINK_COLOR, PIN_COLOR,
                     CURSOR_COLOR, LINK_WIDTH, PIXELS_PER_UNIT, CAMERA_CENTER,
                     ClothConfig, ConfigError)
from .logging_config import setup_logging
from .simulation import Simulation

log = logging.getLogger(__name__)


# ---------------------------
# Helpers
# ---------------------------
def draw_text(surface, text, x, y, font):
    surface.blit(font.render(text, True, TEXT_COLOR), (x, y))


class Camera:
    """Orthographic world <-> screen mapping (world y up, screen y down)."""
    __slots__ = ("size", "center", "scale")

    def __init__(self, size=(WIDTH, HEIGHT), center=CAMERA_CENTER, scale=PIXELS_PER_UNIT):
        self.size = size
        self.center = (float(center[0]), float(center[1]))
        self.scale = float(scale)

    def world_to_screen(self, p):
        x = (p[0] - self.center[0]) * self.scale + self.size[0] * 0.5
        y = (self.center[1] - p[1]) * self.scale + self.size[1] * 0.5
        return x, y

    def screen_to_world(self, sx, sy):
        x = (sx - self.size[0] * 0.5) / self.scale + self.center[0]
        y = self.center[1] - (sy - self.size[1] * 0.5) / self.scale
        return np.array([x, y, 0.0])


class ClothRenderer:
    """One line per constraint index; torn constraints are hidden, never dropped."""

    def __init__(self, camera):
        self.camera = camera
        self.lines = []     # parallel to the constraint store
        self.pins = []

    def sync(self, sim):
        ends = sim.constraints.endpoints(sim.particles)
        enabled = sim.constraints.enabled
        if len(self.lines) != len(ends):
            self.lines = [None] * len(ends)

        # skip anything non-finite so pygame never sees an invalid end_pos
        finite = np.isfinite(ends).all(axis=(1, 2))
        for k in range(len(ends)):
            if not (enabled[k] and finite[k]):
                self.lines[k] = None
                continue
            a = self.camera.world_to_screen(ends[k, 0])
            b = self.camera.world_to_screen(ends[k, 1])
            self.lines[k] = ((int(a[0]), int(a[1])), (int(b[0]), int(b[1])))

        pos = sim.particles.position[sim.particles.pinned]
        self.pins = [tuple(int(v) for v in self.camera.world_to_screen(p)) for p in pos]

    def draw(self, screen):
        for line in self.lines:
            if line is not None:
                pygame.draw.line(screen, LINK_COLOR, line[0], line[1], LINK_WIDTH)
        for p in self.pins:
            pygame.draw.circle(screen, PIN_COLOR, p, 2)


# ---------------------------
# Main
# ---------------------------
def parse_args(argv=None):
    defaults = ClothConfig()
    parser = argparse.ArgumentParser(description="Interactive tearable cloth.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--spacing", type=float, default=defaults.spacing)
    parser.add_argument("--gravity", type=float, default=defaults.gravity)
    parser.add_argument("--tear-distance", type=float, default=defaults.tear_distance)
    parser.add_argument("--iterations", type=int, default=defaults.iterations)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser.parse_args(argv)


def config_from_args(args):
    return ClothConfig().replace(width=args.width, height=args.height, spacing=args.spacing,
                                 gravity=args.gravity, tear_distance=args.tear_distance,
                                 iterations=args.iterations)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    try:
        config = config_from_args(args)
    except ConfigError as exc:
        log.error("Invalid cloth configuration: %s", exc)
        return 2

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Tearable Cloth")
    frame_clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 18)

    camera = Camera()
    renderer = ClothRenderer(camera)
    sim = Simulation(config, on_tick=renderer.sync)
    renderer.sync(sim)
    stepper = FixedStepClock(config.dt)
    log.info("Started: %d particles, dt=%.4f s", len(sim.particles), config.dt)

    fps_ema = 0.0
    ema_alpha = 0.12

    running = True
    while running:
        dt_ms = frame_clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    sim.reset()
                    stepper.reset()
                    renderer.sync(sim)
                    log.info("Cloth reset")
                elif event.key == pygame.K_SPACE:
                    sim.paused = not sim.paused

        mx, my = pygame.mouse.get_pos()
        btns = pygame.mouse.get_pressed(num_buttons=3)
        pointer = camera.screen_to_world(mx, my)

        for _ in range(stepper.advance(dt_ms / 1000.0)):
            sim.tick(config.dt, pointer, primary=btns[0], secondary=btns[2])

        # Draw
        screen.fill(BG_COLOR)
        renderer.draw(screen)
        pick_px = max(1, int(config.mouse_distance * camera.scale))
        pygame.draw.circle(screen, CURSOR_COLOR, (mx, my), pick_px, 1)

        inst_fps = 1000.0 / max(1, dt_ms)
        fps_ema = (1 - ema_alpha) * fps_ema + ema_alpha * inst_fps
        cons = sim.constraints
        draw_text(screen,
                  f"links={cons.enabled_count}/{len(cons)}  torn={sim.torn_count}  "
                  f"ticks={sim.tick_count}  {'PAUSED' if sim.paused else ''}  FPS~{fps_ema:5.1f}",
                  10, 10, font)
        draw_text(screen, "LMB=drag  RMB=cut  R=reset  Space=pause  Esc=quit", 10, 32, font)

        pygame.display.flip()

    pygame.quit()
    log.info("Stopped after %d ticks", sim.tick_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
