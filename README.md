# timber

A small arcade game built on pygame. A lumberjack stands beside a tree and
chops it from the left or the right. Every chop drops the branches one step;
if a branch comes down on the side you are standing on, the game is over. Each
successful chop adds 100 points and a second to a five-second timer, and when
the timer runs dry the game ends as well. Now and then a beehive falls from
the sky, bursts on the ground and releases bees.

## Installing

```
pip install .
```

The game reads its pictures, fonts and sounds by relative path from
`graphics/`, `fonts/`, `sound/` and `audio/` folders in the working
directory, so start it from the folder that holds them. A file that cannot be
read is skipped: pictures are drawn as nothing, text is not drawn, and no
sound is played.

## Playing

```
timber
timber --width 1280 --height 720
```

`--width` and `--height` set the window size (default 1920 x 1080). The
scenes are laid out for 1920 x 1080.

Controls:

| Screen          | Key          | Action                                   |
|-----------------|--------------|------------------------------------------|
| Title           | Space        | go to the game menu                      |
| Game menu       | 1            | solo mode (choose a character)           |
| Game menu       | 2            | friend mode                              |
| Character pick  | 1            | play the classic lumberjack              |
| Character pick  | 2            | play the animated lumberjack             |
| Game            | Enter        | start, or restart after a loss           |
| Game            | Left / Right | chop from that side                      |
| Game            | Escape       | pause and resume                         |

With the animated lumberjack, releasing Space plays a finishing move.

## What it does not do

- Friend mode has no two-player game: it opens a scene that shows a single
  player sprite and takes no input.
- There is no way back from the game scene to the menus; close the window to
  quit.
- Scores are not saved anywhere.

## Using the pieces

The package is also a small scene framework.

- `timber.app.App` drives the loop: `init(width, height, name)` opens the
  window, `step(real_dt, events)` runs one frame over a list of pygame events
  and returns the scaled time step, `run()` loops until a quit event arrives,
  and `release()` shuts pygame down. `timber.app.main(argv=None)` is the
  `timber` command.
- `timber.scene.Scene` holds game objects; `add_go` and `remove_go` take
  effect at the end of a frame, and objects are drawn by sorting layer and
  order.
- `timber.game_object` has `GameObject`, `SpriteGo` and `TextGo`, placed by
  position, scale and an origin preset from `timber.defines.Origins`.
- `timber.scene_mgr.SceneMgr` switches between scenes by
  `timber.defines.SceneIds` once the current frame is drawn.
- `timber.anim.Anim` plays frames cut from a sprite sheet;
  `timber.input_mgr.InputMgr` tracks keys as down, held or up per frame;
  `timber.resources` caches textures, fonts and sounds;
  `timber.object_pool.ObjectPool` reuses objects;
  `timber.framework.Framework` keeps scaled and real time.

```python
from timber.app import App

app = App()
app.init(1920, 1080, "Timber")
try:
    app.run()
finally:
    app.release()
```

## Tests

```
pip install .[test]
pytest
```