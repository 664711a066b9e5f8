# nbodysim

A two-dimensional gravitational N-body simulation you can watch and steer.
One heavy central body sits in the middle of the window. A few large white
bodies and many small coloured ones orbit it. Every body attracts every
other body, with a softening term so that close passes stay finite.

The program also works as a simple benchmark. It records the frame rate while
it runs and, when it stops, appends the average to a CSV file.

## Installation

```
pip install .
```

This installs `pygame`, which draws the window.

## Running

```
nbodysim            # 250 bodies
nbodysim 2000       # choose the number of bodies
```

The first argument is read as an integer from its leading digits (so `300x`
means 300). If it does not start with a number, or the number is less than 2,
the simulation uses 100 bodies and says so.

The window is 1920 × 1080 pixels. The on-screen text uses the font
`/usr/share/fonts/TTF/JetBrainsMono-SemiBoldItalic.ttf`; if that file cannot
be loaded, a warning is printed and no text is drawn, but the simulation still
runs.

The implementation label used in the window title and in the benchmark file
comes from the file name of the running program. A name containing `omp`,
`OpenMP` or `openmp` gives `OpenMP`. A name containing `serial` or `Serial`
gives `Serial`. Any other name, including plain `nbodysim`, gives `Unknown`.

## Controls

| Key          | Effect                                                       |
|--------------|--------------------------------------------------------------|
| Space        | hide or show the on-screen text                              |
| R            | restart with new random bodies                               |
| T            | turn trails on or off                                        |
| F            | time step × 10 (and softening + 1 if the new step is ≥ 0.001), restart |
| S            | time step ÷ 10 (and softening − 1 while above 1), restart     |
| H / K        | raise / lower softening by 1 (lowering only while above 1), restart |
| keypad + / = | 100 more bodies, restart                                     |
| keypad − / - | 100 fewer bodies (at least 11), restart                      |
| Mouse wheel  | zoom toward the cursor, between 0.2 and 1.0                  |
| Esc          | quit                                                         |

## Benchmark output

When the window is closed, Esc is pressed, or the program receives Ctrl+C or
SIGTERM, the results are appended to `benchmark_results.csv` in the current
directory. The first 100 frames are not counted, so start-up does not distort
the figure:

```
Implementation,NumBodies,AverageFPS
Serial,250,143.52
```

The header is written only when the file does not exist yet. If no more than
100 frames were recorded, nothing is saved and a message says so.

## Using the library

```python
from nbodysim.simulation import Simulation
from nbodysim.benchmark import Benchmark

sim = Simulation(1.0, 2.0, 0.001, 1920, 1080)
sim.initialize_random_bodies(500, 100.0, 8000.0)
for _ in range(10):
    sim.update()
print(len(sim.bodies))   # central body + 10 big + 499 small = 510

bench = Benchmark("Serial", 500)
for _ in range(150):
    bench.add_frame(60.0)
print(bench.average_fps())          # 60.0
bench.save_results("results.csv")   # True once more than 100 frames are in
```

`Simulation` also accepts `bodies=` to start from your own list of `Body`
objects and `rng=` to pass a seeded `random.Random` for repeatable layouts.

Other modules:

- `nbodysim.body` contains `Vec2`, an immutable 2-D vector, and `Body`, a
  point mass with `apply_force`, `update` and `reset_acceleration`.
- `nbodysim.controls` contains the key handling (`Key`, `Action`, `Settings`,
  `apply_key`), the zoom rule (`zoom_level_after_scroll`), `FPSCounter` and
  the overlay text state (`UIManager`).
- `nbodysim.app` contains the window (`main`), `TrailManager`,
  `detect_implementation` and `parse_body_count`.
- `nbodysim.version` reports the package version (`get_version`,
  `get_major`, `get_minor`, `get_patch`, `get_full_info`).

## Limitations

The force calculation is a plain pairwise sum in a single thread; there is no
parallel variant, so the "OpenMP" label only reflects the program's name.
Bodies never merge or collide, and nothing stops them from leaving the window.