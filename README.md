# savplayer

A small desktop MP3 player built on pygame. It shows a draggable control
panel with a scrolling title, a seekable progress bar and previous /
play-pause / next buttons. A list of every track and its length sits at the
top left of the window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
savplayer
```

Start-up goes like this:

1. `options.conf` is read from the current directory. If it cannot be read,
   `ERROR: COULD NOT READ CONFIGURATION FILE` is printed and the player
   carries on with empty settings. Those settings mean a zero window size,
   an uncapped frame rate and transparent black colours.
2. A `resources` directory is searched for. The working directory comes
   first, then the directory of the running script and up to three levels
   above it. The first one found becomes the working directory.
3. Tracks are read from `tracks/` relative to the working directory. Every
   regular file there is listed, in sorted order, under its name without the
   extension, and is played from `tracks/<name>.mp3`. If the directory is
   missing or holds no files, an error is printed and the command exits with
   status 1.

The text font and the icon font are loaded from the working directory. When
a font file is missing, pygame's default font is used in its place.

Command-line options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--config` | `options.conf` | configuration file |
| `--resources` | `resources` | resource directory to search for |
| `--tracks` | `tracks` | track directory inside the resources |
| `--font` | `maple-mono.ttf` | text font |
| `--glyphs` | `glyphs.ttf` | icon font |

The window closes on the window's close button or on Escape.

## Configuration

`options.conf` is a plain text file split into blocks, `[window]` and
`[colors]`. A line that starts with `#` is a comment. Lines before any block
header belong to `[window]`.

```
# window settings
[window]
res: 1366x768
fps: 100

# panel colours: background, foreground, highlight, alternate background
[colors]
"#000000"
"#ff7a8a"
"#ffccaa"
"#83769c"
```

Each colour is a quoted value. The character after the opening quote is
skipped, and the rest is read as hexadecimal `RRGGBB`. Up to four colours
are taken, in order, as background, foreground, highlight and alternate
background. Further colour lines are ignored.

## Controls

- Click a track in the list to load it and toggle playback.
- Drag the panel to move it.
- Click or drag on the progress bar to seek.
- The previous button goes back to the start of the track when more than two
  seconds have played. Otherwise it moves to the previous track, wrapping
  around to the last one.
- The next button moves to the next track, wrapping around to the first one.
  Playback also moves on by itself when a track ends.

## Using it as a library

- `savplayer.config`: `parse_config`, `load_config`, `parse_color`,
  `hex_to_rgb`, the `Config` dataclass and the `Block` and `UiColor` enums.
- `savplayer.audioplayer`: `AudioPlayer`, which can be used as a context
  manager and takes any backend with `load`, `length`, `play`, `pause`,
  `seek`, `update` and `unload` methods. `PygameMusic` is the default
  backend. The module also has `discover_tracks` and `format_duration`.
- `savplayer.resource_dir`: `search_and_set_resource_dir(folder_name,
  app_dir=None)`.
- `savplayer.ui`: `Ui`, `Button`, `Bar`, `TrackTab`, `MouseState`, the
  `Icon` and `ButtonType` enums, and `scrolling_title`.
- `savplayer.app`: `main(argv=None)` and `build_parser()`.

## What it does not do

The window background is plain black. No 3D scene or model is drawn behind
the panel. The track list cannot be collapsed.