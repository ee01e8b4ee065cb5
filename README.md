# fbkpick

Tools for the files that surround seismic first-break picking: binary pick
files, shot-by-shot editing of picks, control-point files, static-correction
files, and synthetic first breaks for testing a static-correction workflow.

## Modules

- **`fbkpick.records`** – `FirstBreakRecord` (file number and first-break time
  in ms) and `FirstBreakFile`, a random-access file of fixed-size records that
  is created if it does not exist. `get(pos, n)` returns `n` records, zeroed
  where the file runs out; `put(records, pos)` writes them back.
  `save_text(path, records)` writes `index,file_number,first_break` lines with
  the time truncated to an integer.
- **`fbkpick.shotindex`** – `ShotIndexedFile` scans a pick file and splits it
  into shots, each a run of consecutive records with the same file number
  (`ShotInfo`). It raises `ValueError` if the file is not a whole number of
  records or holds too many shots. `shot_records(file_number)` and
  `write_shot_records(records)` read and rewrite one shot; `describe(path)`
  writes a text summary. `ShotBrowser` steps through the shots
  (`next_shot`, `previous_shot`, `find_file_number`), saving the current shot
  before moving, and lets one pick be grabbed and moved with `anchor`, `drag`
  and `release`.
- **`fbkpick.controlfile`** – `ControlFile` reads and writes control-point
  files (a shot section and a receiver section, each a header line, a count
  and `ph north east value` lines). Malformed files raise `ControlFileError`.
  `to_grid` and `from_grid` convert the station names to and from a table with
  a header row.
- **`fbkpick.selection`** – `CheckSelection` keeps which receiver line and
  which shot line or shot-point line is chosen for checking statics.
- **`fbkpick.statics`** – `SwathFileNames.for_swath(n)` gives every file name
  of a swath (`swath001.ST`, `SOUT001.DAT`, …); readers and writers for input,
  intermediate and output static files work with `StaticPoint` and raise
  `StaticsFileError` when a file is short or malformed.
- **`fbkpick.colorscale`** – `build_palette()` returns the 512 RGB colours of a
  black–blue–green–red ramp; `ColorScale` maps a value range onto it,
  clamping values outside the range.
- **`fbkpick.params`** – parameter sets (`GroupRange`, `SwathParameters`,
  `PageNumber`, `SurveySystem`, `SwathNumber`, `RelationParameters`,
  `StationDisplay`, `ReceiverBlock`, `CoordinateSource`). Where a set has
  limits, `validate()` raises `ParameterError` for a value out of range.
- **`fbkpick.picking`** – `normalize_traces` for display scaling,
  `split_group_lines` to split a shot into receiver lines (`GroupLine`),
  `find_shot` and `resolve_shot_range` over `ShotEntry` lists, and
  `clamp_header` for trace-header lookups.
- **`fbkpick.extract`** – `extract_groups` copies the first group of every shot
  whose file number is requested out of a fixed-layout trace file.
- **`fbkpick.synthetic`** – `SurveyGeometry`, `read_statics_values`,
  `synthesize_first_breaks` (straight-ray times shifted by the negated statics,
  as `SyntheticPick` objects) and `write_synthetic_files`, which writes
  `RcvPos.txt`, `ShotPos.txt`, `swath000.fbd` and `swath000.txt`.

## Installation

```
pip install .
```

## Example

```python
from fbkpick.shotindex import ShotIndexedFile, ShotBrowser

with ShotIndexedFile("line1.fbk") as index:
    browser = ShotBrowser(index)      # loads the first shot
    print(browser.info())
    browser.anchor(5, 120.0)          # grab trace 5
    browser.drag(132.5)               # move its pick
    browser.release()
    browser.next_shot()               # saves the edited shot, loads the next
```

## Command line

```
fbkpick --help
fbkpick shots picks.fbk [--summary summary.txt]
fbkpick dump picks.fbk picks.txt
fbkpick extract traces.dat out.dat 12 13 14 [--group-bytes N] [--groups-per-shot N]
fbkpick control points.ctl
fbkpick synth --shot-statics swath000.st --receiver-statics swath000.rt \
    --receiver-lines 0,200,400,600 --shot-points 50,150,250,350,450,550 \
    --group-interval 50 --shot-line-interval 200 [--output-dir out]
```

`shots` lists each shot's file number and trace range, `dump` writes a pick
file as text, `extract` copies shots' first groups, `control` counts the points
of a control file, and `synth` writes synthetic first-break files. Errors are
reported on standard error with exit status 1.

## What it does not do

There is no graphical display or editor of traces, and no automatic picking:
the package does not read recorded seismic trace data, so it neither computes
first breaks from waveforms nor solves for static corrections. It works with
pick files, control points and static files that already exist, and with
synthetic picks.

## Tests

```
pip install .[test]
pytest
```