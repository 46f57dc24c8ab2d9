# filrouge

Game logic for two small puzzle games: Mastermind and a memory card game.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Mastermind (`filrouge.mastermind`)

A `MastermindGame` holds a palette of `LinearColor` values and a secret
solution of four colour numbers. The solution is checked to hold exactly four
pegs. By default the palette is red, yellow, green, blue, gray and white. When
no solution is given, a random one is drawn, with each peg in the range 0 to 5.
You can pass a `random.Random` instance as `rng` to make the draws
reproducible.

```python
from filrouge.mastermind import MastermindGame, score_answer

game = MastermindGame(solution=[0, 1, 2, 3])
game.subscribe(lambda good, wrong: print(f"{good} well placed, {wrong} misplaced"))

game.check_answer([0, 2, 1, 5])   # prints "1 well placed, 2 misplaced", returns False
game.check_answer([0, 1, 2, 3])   # prints "4 well placed, 0 misplaced", returns True
```

- `score_answer(solution, answer)` returns a `Feedback` with `good_places`,
  `wrong_places` and a `solved` property. It has no other effect. Both codes
  must hold four pegs, or it raises `ValueError`.
- `check_answer(answer)` scores the answer and calls every callback registered
  with `subscribe(callback)`, passing `(good_places, wrong_places)`. It returns
  whether the answer is the solution.
- `create_solution()` draws a new secret solution and returns a copy of it.
- `get_color(number)` returns the palette colour at that number. When the
  number is outside the palette, it returns black.

A `MastermindSphere` is one peg that the player clicks through the colours. It
starts with `color_number` 0 and shows its `blocked_color` (black by default).
Each `click()` moves it to the next colour number and wraps back to 0 after 5.
When the sphere has a manager, the click also sets its `color` from the
manager's palette.

A `MastermindRow` groups the player's spheres and subscribes to the game.
`click()` sends the colour numbers of its first four spheres to the game as an
answer and returns whether they solve it. The row stores the last result it
received in `feedback`.

```python
from filrouge.mastermind import MastermindGame, MastermindRow, MastermindSphere

game = MastermindGame(solution=[1, 0, 0, 0])
spheres = [MastermindSphere(game) for _ in range(4)]
row = MastermindRow(game, spheres)

spheres[0].click()   # the first sphere now has colour number 1
row.click()          # submits [1, 0, 0, 0] and returns True
row.feedback         # Feedback(good_places=4, wrong_places=0)
```

## Memory (`filrouge.memory`)

```python
from filrouge.memory import MemoryCard, MemoryGame

game = MemoryGame()
game.is_pair(3, 3)      # True
game.update_score(10)   # game.score is now 10

card = MemoryCard()
card.turn()             # card.face_up and card.is_clickable are now False
card.rotation           # (180.0, 0.0, 0.0)
```

`MemoryGame` also has a `previous_card` attribute that you can use to hold the
last card revealed.

## What this package does not do

It holds the rules and the state only. It has no command to run, no window or
board to draw, and no input handling: you call `click()` and `turn()` from
your own interface. It saves nothing between runs.