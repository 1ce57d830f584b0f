# kongboard

Building blocks for a barrel-and-ladder arcade game drawn in a terminal:
text-file level boards, barrels that roll down sloped floors, ghosts that
patrol the platforms, and the full-screen messages the game shows.

The package has no dependencies outside the standard library and needs
Python 3.10 or later. Drawing uses ANSI escape sequences written to standard
output.

## Level files

A level is a text board 80 columns wide and 25 rows high. Level files are
named `dkong_<anything>.screen`, for example `dkong_01.screen`;
`kongboard.game.find_board_files(directory)` returns those in a directory
(the current one by default), sorted by name.

Each character on the board means something:

| Character | Meaning                                                   |
|-----------|-----------------------------------------------------------|
| `@`       | the hero's starting position (stored in `mario_start`)    |
| `&`       | the barrel thrower, which must stand on `=`, `<` or `>`   |
| `$`       | the one to rescue                                         |
| `p`       | the hammer (stored in `hammer_pos`)                       |
| `x`       | a ghost that walks along floors                           |
| `X`       | a special ghost that can also climb ladders               |
| `L`       | top-left corner of the 20×3 status panel                  |
| `=`       | floor                                                     |
| `<`       | floor that sends barrels to the left                      |
| `>`       | floor that sends barrels to the right                     |
| `H`       | ladder                                                    |
| `Q`       | wall / board limit                                        |
| space     | open space                                                |

Only the first `@`, `&`, `$`, `p` and `L` count; later copies become open
space. Short lines are padded with spaces, missing rows are filled in, and
anything beyond 80 columns or 25 rows is ignored.

`@`, `&`, `$`, `p` and `L` are required. Loading raises a subclass of
`BoardError`:

- `BoardFileError` when the file cannot be opened,
- `UnacceptableCharacterError` for any character not in the table
  (with `char`, `x` and `y` attributes),
- `MissingCharacterError` when a required character is absent,
- `IllegalDonkeyKongError` when `&` is not standing on a floor.

Each error class has a `screen` attribute naming the matching layout in
`kongboard.screens.Screen`.

## Using the board

```python
from kongboard.board import Board, BoardError

board = Board()
try:
    board.load("dkong_01.screen")
except BoardError as error:
    print("bad level:", error)
else:
    board.reset()                 # copy the loaded layout into the shown tiles
    print(board.render())
    print(board.donkey_pos, board.ghost_positions)
```

`Board` also offers `get_char`, `set_char`, `set_line`, the status-panel
positions `lives_position`, `level_position`, `score_position` and
`hammer_status_position`, `score_indentation` and `add_score` for a
right-aligned score, `show(screen)` to display a full-screen layout, and
`reset_ghost_positions`.

## Enemies

`kongboard.enemies` provides:

- `Barrel` – falls when unsupported, rolls left on `<`, right on `>`, keeps
  its direction on `=` or `Q`, and is marked `exploded` after a fall of
  eight rows or more, when standing still on flat floor, or when it
  leaves the board.
- `Ghost` – falls when unsupported, otherwise walks left or right, turning
  at floor edges, at walls, when about to run into another ghost, and at
  random one time in twenty.
- `SpecialGhost` – a ghost that also goes up and down ladders.

`kongboard.game` drives them frame by frame: `create_ghosts(board)`,
`barrel_spawn_position(board)`, `move_enemies(enemies)` (which drops
exploded barrels from the list) and `erase_enemies(enemies)`. `LevelPager`
models the paged level-choice menu: `page_lines()` gives the text to show,
and `handle(choice)` returns a level number, `BACK_TO_MENU`, or `None`
with a `message` for the player.

`kongboard.config` holds the board size, the tile characters, the `Key`
and `Direction` enumerations and `is_floor`. `kongboard.terminal` has the
cursor helpers `gotoxy`, `show_cursor` and `clear_screen`.
`kongboard.screens` contains the full-screen layouts (pause, won level,
victory, disqualified, loss and the error screens), available through
`screen_lines` and `render`.

## What the package does not do

There is no playable game here: no hero figure that moves, jumps, climbs
or swings the hammer, no keyboard handling, no main menu, no game loop
and no command to start a game. `Key` lists the keys such a game would use,
but nothing in the package reads the keyboard.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.