# lifegrid

Conway's Game of Life on a grid whose edges wrap around. The starting world is
read from a binary PGM image, every turn is drawn in a pygame window, and the
final world is written back out as a PGM image.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
lifegrid -w 256 -h 256 -turns 10000 -t 8
```

| Option              | Meaning                                    | Default |
|---------------------|--------------------------------------------|---------|
| `-t`                | number of worker threads (see below)       | 8       |
| `-w`                | image width                                | 256     |
| `-h`                | image height                               | 256     |
| `-turns`, `--turns` | number of turns to process                 | 10000   |
| `--help`            | show the options and exit                  |         |

`-h` sets the height, so help is only available as `--help`.

On start the command prints the thread count, width and height. The starting
image is read from `images/<width>x<height>.pgm` in the current directory, for
example `images/256x256.pgm`. It must be a binary (`P5`) PGM with a maximum
value of 255, and its size must match `-w` and `-h`; otherwise a
`lifegrid.cell.PgmFormatError` is raised. Cells with value 255 are alive,
cells with value 0 are dead.

When the run ends, the final world is written to
`out/<width>x<height>x<turns>.pgm` (the `out` directory is created if needed)
and the window closes.

### Keys

While the window has focus:

- `p` pauses; a second `p` resumes and prints `Continuing...`
- `s` saves the current world to `out/<width>x<height>x<turns>.pgm`
- `q` stops early; the world as it is then is still written out

Every two seconds a line such as `Completed Turns 120     Alive Cells 5565`
is printed. Pausing, resuming and quitting are reported the same way
(`Paused`, `Executing`, `Quitting`).

## Using it as a library

- `lifegrid.params.Params` holds `turns`, `threads`, `image_width` and
  `image_height`; `size_name()` and `output_name()` give the input and output
  image names.
- `lifegrid.gol.run(params, events, key_presses, image_dir="images",
  output_dir="out")` starts the simulation on a daemon thread and returns it.
  Events are put on the `events` queue; key characters (`"p"`, `"s"`, `"q"`)
  are read from `key_presses`. `None` is put on `events` after the last event.
- `lifegrid.distributor.distributor` is the turn loop itself, taking any
  object with `read_image` and `write_image` methods and a `tick_interval` in
  seconds for the alive-cell report.
- `lifegrid.distributor.cells_to_flip`, `count_alive` and `alive_cells` work
  on a world held as rows of byte values.
- `lifegrid.events` defines `State` and the events `CellFlipped`,
  `TurnComplete`, `AliveCellsCount`, `StateChange`, `FinalTurnComplete` and
  `ImageOutputComplete`, each with `completed_turns`.
- `lifegrid.pgm.PgmIo` reads and writes world images; `encode_pgm` turns a
  world into P5 bytes.
- `lifegrid.cell.read_alive_cells` and `parse_pgm` list the alive cells of a
  PGM image as `Cell(x, y)` values.
- `lifegrid.visualise.alive_cells_to_string` and `matrices_to_string` draw
  worlds as text, side by side for comparison; `visualise_matrix` prints one.
- `lifegrid.window.Window` is the pixel window (`headless=True` keeps only the
  pixel buffer), and `lifegrid.loop.start` is the display loop.

## What it does not do

- The `-t` option is accepted, stored and printed, but every turn is computed
  on a single thread; no work is split between workers.
- The `k` key is passed on from the window but has no effect.
- Nothing sends `ImageOutputComplete`; saving an image prints
  `File <name> output done!` instead.