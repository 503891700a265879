"""The pong match: two paddles, a ball, scores and an end screen."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Collection

from .ball import Ball
from .button import Button
from .paddle import Controls, Direction, Paddle

import pygame  # noqa: E402  (button configures the pygame environment first)

WINNING_SCORE = 10
BALL_SPEED = 500.0
SPEED_INCREMENT = 50.0
PADDLE_WIDTH = 15.0
PADDLE_HEIGHT = 150.0
PADDLE_SPEED = 500.0
PADDLE_MARGIN = 60.0
MIN_RESOLUTION = 100
FPS_WINDOW = 20
FPS_SAMPLE_INTERVAL = 0.2

_KEYMAP = {
    "w": pygame.K_w,
    "s": pygame.K_s,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
}


def _intersects(a: tuple[float, float, float, float], b: tuple[float, float, float, float]) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return max(ax, bx) < min(ax + aw, bx + bw) and max(ay, by) < min(ay + ah, by + bh)


class FpsMeter:
    """Rolling average of frames per second over the last 20 samples."""

    def __init__(self, window: int = FPS_WINDOW) -> None:
        self._samples: deque[int] = deque()
        self._window = window
        self.fps = 0

    def add(self, dt: float) -> int:
        """Record a frame time in seconds and return the current average."""
        if dt > 0:
            self._samples.append(int(1 / dt))
        if len(self._samples) == self._window:
            self.fps = sum(self._samples) // len(self._samples)
            self._samples.popleft()
        return self.fps


class Game:
    """State and rules of a two-player pong match.

    Keys passed to :meth:`step` are the names ``"w"``, ``"s"``, ``"up"`` and ``"down"``.
    """

    def __init__(self, resolution: tuple[float, float] = (1200.0, 800.0), font_path: str | None = None) -> None:
        width, height = resolution
        if width < MIN_RESOLUTION or height < MIN_RESOLUTION:
            raise ValueError(
                "Invalid window size, vertical/horizontal axis cannot be smaller than 100 pixels"
            )
        self.width = float(width)
        self.height = float(height)
        self.font_path = font_path
        self.score1 = 0
        self.score2 = 0
        self.paused = False
        self.button_visible = False
        self.fps_meter = FpsMeter()
        self._collision_time = 0.0

        self.paddle_left = Paddle(PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, Controls.WS)
        self.paddle_right = Paddle(PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, Controls.ARROWS)
        self._left_home = (PADDLE_MARGIN, self.height / 2 - self.paddle_left.height / 2)
        self._right_home = (
            self.width - PADDLE_MARGIN - self.paddle_right.width,
            self.height / 2 - self.paddle_right.height / 2,
        )
        self._reset_paddles()
        self.ball = Ball(self.width / 2, self.height / 2)
        self.button = Button("Play Again!", font_path=font_path)

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.paddle_left, self.paddle_right)

    def _reset_paddles(self) -> None:
        self.paddle_left.x, self.paddle_left.y = self._left_home
        self.paddle_right.x, self.paddle_right.y = self._right_home

    def _cooled_down(self, dt: float, now: float) -> bool:
        elapsed_ms = int((now - self._collision_time) * 1000)
        return elapsed_ms >= dt * 5

    def restart(self) -> None:
        """Clear scores, put the paddles back and hide the end screen."""
        self.paused = False
        self.score1 = 0
        self.score2 = 0
        self._reset_paddles()
        self.button_visible = False

    def show_end_screen(self, side: str) -> None:
        """Pause and show the play-again button on the winner's side."""
        if side == "left":
            x = 300.0
        elif side == "right":
            x = self.width - 300.0
        else:
            raise ValueError("Invalid side argument. Can be either 'left' or 'right'")
        self.paused = True
        self.button.set_text_size(30)
        self.button.on_click_action = self.restart
        self.button.set_position(x, self.height / 2)
        self.button_visible = True

    def _move_paddle(self, paddle: Paddle, dt: float, keys: Collection[str]) -> None:
        ws = paddle.controls is Controls.WS
        arrows = paddle.controls is Controls.ARROWS
        if (ws and "s" in keys) or (arrows and "down" in keys):
            paddle.move(dt, Direction.DOWN, self.height)
        elif (arrows and "up" in keys) or (ws and "w" in keys):
            paddle.move(dt, Direction.UP, self.height)

    def _bounce_off_paddle(self, paddle: Paddle, dt: float, now: float) -> None:
        if not (_intersects(paddle.bounds, self.ball.bounds) and self._cooled_down(dt, now)):
            return
        ball = self.ball
        ball.speed += SPEED_INCREMENT
        relative = ball.y + ball.radius - paddle.y
        if ball.heading_direction == "right":
            ball.heading = 210.0 + (330.0 - 210.0) / paddle.height * relative
        else:
            ball.heading = 150.0 - (150.0 - 30.0) / paddle.height * relative
        self._collision_time = now

    def _bounce_off_walls(self, dt: float, now: float) -> None:
        ball = self.ball
        if ball.y + ball.radius * 2 >= self.height or ball.y <= 0:
            if self._cooled_down(dt, now):
                if ball.heading_direction == "right":
                    ball.heading = 180 - ball.heading
                else:
                    ball.heading = 360 + 180 - ball.heading
                self._collision_time = now

    def _serve(self, heading: float) -> None:
        self.ball.speed = BALL_SPEED
        self.ball.x = self.width / 2
        self.ball.y = self.height / 2
        self.ball.heading = heading

    def step(self, dt: float, keys: Collection[str], now: float) -> None:
        """Advance the match by ``dt`` seconds; ``now`` is the wall clock in seconds."""
        if self.paused:
            return
        for paddle in self.paddles:
            self._move_paddle(paddle, dt, keys)
            self._bounce_off_paddle(paddle, dt, now)

        self._bounce_off_walls(dt, now)

        if self.ball.x + self.ball.radius * 2 > self.width:
            self.score1 += 1
            self._serve(90)
        elif self.ball.x < 0:
            self.score2 += 1
            self._serve(270)

        if self.score1 == WINNING_SCORE:
            self.show_end_screen("left")
        elif self.score2 == WINNING_SCORE:
            self.show_end_screen("right")

        self.ball.move(dt)

    def _render(self, screen: pygame.Surface, score_font: pygame.font.Font, fps_font: pygame.font.Font) -> None:
        screen.fill((0, 0, 0))
        for paddle in self.paddles:
            pygame.draw.rect(
                screen,
                paddle.color,
                pygame.Rect(round(paddle.x), round(paddle.y), round(paddle.width), round(paddle.height)),
            )
        ball = self.ball
        pygame.draw.circle(
            screen, (255, 255, 255), (round(ball.x + ball.radius), round(ball.y + ball.radius)), round(ball.radius)
        )
        white = (255, 255, 255)
        screen.blit(score_font.render(str(self.score1), True, white), (round(self.width / 4), 200))
        screen.blit(
            score_font.render(str(self.score2), True, white), (round(self.width - self.width / 4), 200)
        )
        screen.blit(fps_font.render(f"{self.fps_meter.fps} FPS", True, white), (round(self.width - 100), 30))
        if self.button_visible:
            self.button.draw(screen)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((int(self.width), int(self.height)))
            pygame.display.set_caption("Pong Game")
            score_font = pygame.font.Font(self.font_path, 32)
            fps_font = pygame.font.Font(self.font_path, 20)
            clock = pygame.time.Clock()
            last_sample = time.monotonic()
            open_ = True
            while open_:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        open_ = False
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        self.paused = not self.paused
                    if event.type == pygame.MOUSEBUTTONDOWN:
                        pressed: bool | None = True
                    elif event.type == pygame.MOUSEBUTTONUP:
                        pressed = False
                    else:
                        pressed = None
                    self.button.on_click(pygame.mouse.get_pos(), pressed)
                if not open_:
                    break
                self.button.on_hover(pygame.mouse.get_pos())

                dt = clock.tick() / 1000.0
                if time.monotonic() - last_sample >= FPS_SAMPLE_INTERVAL:
                    self.fps_meter.add(dt)
                    last_sample = time.monotonic()

                state = pygame.key.get_pressed()
                keys = {name for name, code in _KEYMAP.items() if state[code]}
                self.step(dt, keys, time.time())

                self._render(screen, score_font, fps_font)
                pygame.display.flip()
        finally:
            pygame.quit()