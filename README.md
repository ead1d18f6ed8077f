# daylab

Building blocks for small graphics-oriented applications: image filters,
colour generators, two simple data models and a back-key event filter.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Image filters: `daylab.filters`

Each filter takes a Pillow image and returns a new RGBA image:

- `gray(image)`: opaque grayscale.
- `binarize(image)`: white where the mean of the three channels is above 77,
  black elsewhere.
- `negative(image)`: every colour channel inverted, opaque.
- `emboss(image)`: each pixel is compared with its top-left neighbour. The
  first row and the first column keep their original pixels.
- `sharpen(image)`: boosts channels whose gradient exceeds a threshold. The
  last row and the last column are left unchanged.
- `soften(image)`: a 3x3 mean over the interior pixels. Border pixels are left
  unchanged.

`ImageAlgorithm` lists the filters: `GRAY`, `BINARIZE`, `NEGATIVE`, `EMBOSS`,
`SHARPEN` and `SOFTEN`. `run_algorithm(algorithm, source_file, dest_file)`
loads the source, applies the filter, saves the result and returns
`dest_file`. If the source does not exist it raises `FileNotFoundError`.
`strip_file_scheme(path)` removes a leading `file:///` from a path, and
`run_algorithm` applies it to the source path.

```python
from PIL import Image
from daylab.filters import ImageAlgorithm, gray, run_algorithm

with Image.open("photo.png") as image:
    gray(image).save("photo_gray.png")

run_algorithm(ImageAlgorithm.NEGATIVE, "photo.png", "photo_negative.png")
```

## Background processing: `daylab.processor`

`ImageProcessor` runs filters on a thread pool. By default it writes each
result to `<temp_path>/<algorithm number>_<file name>` in the current
directory. `process()` returns that path, and `destination_for()` computes it
without starting a job.

When a job completes and was not aborted, the processor does two things:

- it records the job's `source_file` and `algorithm`;
- it calls `on_finished` with the output path.

`abort(file, algorithm)` stops the callback for the first pending job that
matches; the filter itself still runs. A job that fails is logged and still
reported. `wait()` blocks until all submitted jobs are done. `close()` shuts
the pool down, and it is also called when the processor is used as a
context manager.

```python
from daylab.filters import ImageAlgorithm
from daylab.processor import ImageProcessor

with ImageProcessor(on_finished=print, temp_path=".") as processor:
    processor.process("photo.png", ImageAlgorithm.EMBOSS)
    processor.wait()
```

## Colours: `daylab.colormaker`, `daylab.colorchanger`

`Color` is a frozen RGB value. Each channel must be in 0..255, otherwise
`ValueError` is raised.

`ColorMaker` holds a colour, which starts as black. Each `step()` makes a new
colour according to its `GenerateAlgorithm`:

- `RANDOM_RGB`: all three channels random.
- `RANDOM_RED`, `RANDOM_GREEN`, `RANDOM_BLUE`: one channel random.
- `LINEAR_INCREASE`: each channel increased by 10, modulo 255.

After each step it calls `on_color_changed` with the colour and
`on_current_time` with a timestamp string. `start()` and `stop()` run
`step()` every `interval` seconds on a background thread, and `running`
tells whether that thread is active. `set_color()` replaces the colour and
reports the change. `time_color()` builds a colour from a time of day:
hour, minute × 2 and second × 4.

`ColorChanger(target, interval, rng)` starts at once. Every `interval`
seconds it sets `target.color` to a random `Color`. `tick()` does this once,
and `stop()` ends the timer.

## Models: `daylab.tablemodel`, `daylab.videolist`

`TableModel` holds five phones with the fields name, cost and manufacturer.
`data(row, column, role)` works in two ways:

- with the display role (0), it returns the cell at `column`;
- with a role from `USER_ROLE` (0x100) upward, it selects the field by role
  and ignores `column`.

`role_names()` maps role numbers to names.

`VideoListModel` loads `<video>` elements from an XML file:

- `<video>` gives its `name` and `date` attributes;
- each `<attr>` child gives its `tag` attribute and its text;
- `<poster>` gives its `img` attribute;
- `<page>` gives its `link` attribute;
- `<playtimes>` gives its text.

Load errors are not raised: a missing file or malformed XML is reported by
`has_error()` and `error_string()`. Videos read before a parse error are
kept. Rows are read with `data(row, role)`, starting at `USER_ROLE`.
`load_videos(path)` returns the same lists but raises on errors.

## Key handling: `daylab.keyback`

`KeyBackQuit(quit).event_filter(event)` handles only `KeyEvent`s for
`Key.BACK`:

- on `KEY_PRESS` it accepts the event and returns `True`;
- on `KEY_RELEASE` it accepts the event, calls `quit()` and returns `True`.

Every other event returns `False`.

## What this package does not do

There is no command-line program and no graphical interface. The models,
colour generators and key filter are plain Python objects: nothing displays
them. The caller provides the events and reacts to the callbacks.

## Running the tests

```
pytest
```