# pongjb

A two-player Pong game for the desktop, built on pygame.

Each player moves a paddle to keep the ball in play. Each time the ball
hits a paddle it speeds up by 50 pixels per second. The part of the
paddle it hits decides the angle it leaves at. When the ball gets past a
paddle, the other player scores. The ball then goes back to the centre
at its starting speed of 500 pixels per second. The first player to
reach ten points wins. The game then pauses and shows a **Play Again!**
button, which resets the scores and the paddles.

## Installing

```
pip install .
```

## Playing

```
pongjb
```

This opens a 1200×800 window titled "Pong Game". Options:

| Option | Meaning | Default |
|--------|---------|---------|
| `--width` | window width in pixels | 1200 |
| `--height` | window height in pixels | 800 |
| `--font` | path to a TrueType font for the text | pygame's built-in font |

Neither side of the window may be smaller than 100 pixels. If one is,
the command prints an error on stderr and exits without opening a
window.

| Player | Up | Down |
|--------|----|------|
| Left   | `W` | `S` |
| Right  | `↑` | `↓` |

- `Esc` pauses and resumes the game.
- Each player's score is shown near the top of their half of the screen.
- A frame-rate counter in the top-right corner shows a rolling average.
  The game takes a frame-time sample every 0.2 seconds and averages the
  last twenty samples.

## Using the pieces

The game rules are kept apart from drawing, so you can run and test a
match without a window.

- `pongjb.ball.Ball` is the ball. It has `x`, `y`, `speed`, `radius`
  and a `heading` in degrees: 0 is down, 90 is right, 180 is up and 270
  is left. A heading outside 0–360 raises `ValueError`. Other members
  are `heading_direction` (`"right"` or `"left"`), `bounds` and
  `move(dt)`.
- `pongjb.paddle.Paddle` is a paddle with a `Controls` scheme (`WS` or
  `ARROWS`). `move(dt, direction, vertical_bounds)` takes a `Direction`
  (`UP` or `DOWN`). A paddle that is already past the top or bottom
  edge will not move further that way.
- `pongjb.button.Button` is a clickable text button. It has
  `contains`, `on_hover`, `on_click`, `set_position`, `set_text`,
  `set_text_size`, `set_visibility` and `draw`. Its `on_click_action`
  callback runs when a press lands inside it.
- `pongjb.game.Game` holds a whole match.
  `Game.step(dt, keys, now)` advances it by one frame. `keys` is a
  collection of the names `"w"`, `"s"`, `"up"` and `"down"`, and `now`
  is the wall-clock time in seconds. `restart()` and
  `show_end_screen(side)` control the end screen. `run()` opens the
  window and plays until it is closed.
- `pongjb.game.FpsMeter` keeps the rolling frame-rate average.
  `add(dt)` records a frame time and returns the current average.
- `pongjb.main.main(argv=None)` is the function behind the `pongjb`
  command.

## What it does not do

There is no computer opponent, no network play and no saving of scores.
Both paddles must be played from the same keyboard.

## Running the tests

```
pip install .[test]
pytest
```