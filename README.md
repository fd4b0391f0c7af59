# tenpin

Score keeping for a game of ten-pin bowling. You record each roll, and the
package works out the frames, strikes, spares and total score.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from tenpin.game import BowlingGame

game = BowlingGame()
for pins in [1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6]:
    game.roll(pins)

print(game.score())  # 133
```

`BowlingGame.roll(pins)` records the number of pins knocked down by one roll.
If that number is below 0 or above 10, it raises `InvalidRollError`.
`InvalidRollError` is a subclass of both `GameError` and `ValueError`.

`BowlingGame.score()` builds the frames from the rolls recorded so far and
returns the total. As it goes, it logs each frame's own pin count and the
running total at `DEBUG` level on the `tenpin.game` logger. Nothing is printed.

`Frame` is a dataclass for one frame. It has the fields `first`, `second`,
`third` (used only in the tenth frame), `is_strike`, `is_spare` and
`is_tenth`. Its `pins` property gives the pins knocked down in that frame
alone.

### Scoring rules

- A strike scores 10 plus the next two rolls.
- A spare scores 10 plus the next roll.
- After a strike or a spare, the tenth frame gets one bonus roll. Otherwise it
  gets none.

### Errors

`score()` raises `GameError` when:

- the two rolls of a frame before the tenth add up to more than 10 pins,
- a frame before the tenth is missing its second roll,
- the tenth frame is missing its second roll or the bonus roll it needs,
- rolls are left over after the tenth frame is complete.

A game with fewer than ten frames can be scored. For example, three strikes
give a partial score. A strike or spare whose bonus rolls have not been made
yet counts only the later rolls that exist so far.

## Command line

```
tenpin [-v] [ROLLS ...]
```

The command scores the given rolls, passed as integers, and prints
`Final Total Score: N`. With no rolls, it scores an example game whose total
is 133. Use `-v` / `--verbose` to also show each frame's score and the running
total. If the rolls are invalid, the command writes `error: <message>` to
standard error and exits with status 1.

```
tenpin
tenpin -v 10 10 10 10 10 10 10 10 10 10 10 10
```

## What it does not do

tenpin only computes scores from a list of rolls. It has no interactive play,
no players or turns, and it does not save games.