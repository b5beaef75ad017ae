# angel

A small 2D game toolkit built on pygame. It gives a game the pieces it
usually needs: a following camera with a dead zone and look-ahead,
axis-aligned colliders, animated sprites queued through a sorted sprite
batch, tilesets and tilemaps, tiled parallax backgrounds, keyboard and mouse
input with named action bindings, cached text rendering, keyed asset
registries and playback of a single sound file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `angel.engine` | `init()`, `finish()`, `get_ticks()`, `delay()`, `FpsCounter`, `EngineError` |
| `angel.display` | `Display` (window and render target, a context manager), `DisplayError` |
| `angel.input` | `Input`: held / pressed / released keys and mouse buttons, action bindings |
| `angel.camera` | `Camera`, `CameraEffect` |
| `angel.collider` | `Rect`, `Collider` |
| `angel.assets` | `AssetRegistry`, `AssetManager`, `AssetNotFoundError` |
| `angel.resources` | `make_sprite()`, `make_font()`, `ResourceError` |
| `angel.sprite` | `Sprite`, `SpriteBlock`, `SpriteFrame` |
| `angel.batch` | `SpriteBatch`, `SpriteCommand`, `FRect`, `FlipMode` |
| `angel.atlas` | `TextureAtlas`, `AtlasRegion` |
| `angel.tileset` | `Tileset`, `Tile`, `TileCollider` |
| `angel.tilemap` | `Tilemap` |
| `angel.background` | `Background`, `BackgroundLayer` |
| `angel.font` | `Font` |
| `angel.text` | `TextRenderer` |
| `angel.audio` | `AudioPlayer`, `AudioError` |
| `angel.log` | `print_error()`, which logs to the `angel` logger |

## Example

```python
import pygame

from angel import engine
from angel.assets import AssetManager
from angel.batch import SpriteBatch
from angel.camera import Camera
from angel.display import Display
from angel.input import Input
from angel.resources import make_sprite

engine.init()
with Display("Angel", 640, 360) as display:
    assets = AssetManager()
    make_sprite(assets, "player.png", "player", 16, 16)
    player = assets.sprite.get("player")

    player.create_block("idle")
    player.set_block("idle")

    inp = Input()
    inp.bind("left", pygame.K_LEFT)
    inp.bind("right", pygame.K_RIGHT)

    cam = Camera()
    batch = SpriteBatch(display.renderer)
    x, y = 100.0, 100.0

    while True:
        inp.begin_frame()
        inp.poll(pygame.event.get())
        if inp.quit_requested:
            break

        vel_x = (inp.action("right") - inp.action("left")) * 2.0
        x += vel_x
        cam.update(x, y, vel_x, 0.0, 1 / 60)
        player.step(1 / 60)

        display.clear()
        batch.begin()
        player.draw(batch, cam, int(x), int(y))
        batch.flush()
        display.present()
engine.finish()
```

Collision checks work on plain rectangles; touching edges do not count as
an overlap:

```python
from angel.collider import Collider, Rect

body = Collider(w=16, h=16)
wall = Rect(20, 0, 8, 32)
hit = Collider.intersects(body.get_bounds(10, 0), wall)
```

## Notes on behaviour

- `Camera.update()` keeps the target inside a dead zone, eases a
  look-ahead towards the direction of travel, and clamps the camera to the
  world. `view_x()` and `view_y()` give the top-left corner of the view.
- `SpriteBatch.flush()` sorts queued commands by layer, then by texture,
  and blits them onto the batch's target surface.
- `Sprite` treats its texture as a grid of equally sized images. A
  `SpriteBlock` is a looping animation of `SpriteFrame`s; each frame picks
  one of its images at random, weighted by `chance`.
- `Background.draw()` tiles each layer's texture across the renderer,
  offset by the camera divided by the layer's depth;
  `sort_layers_depth()` puts the deepest layer first.
- `Input.poll()` takes an iterable of pygame events, or drains pygame's
  queue when called without one.
- `FpsCounter` accepts any clock returning milliseconds, which makes it
  easy to drive in tests.
- `TextRenderer` re-renders its text only after the text, colour or font
  changes.
- `AssetRegistry` supports `in` and `len()`; `get()` raises
  `AssetNotFoundError` for unknown keys. `TextureAtlas.get()` creates an
  empty region for an unknown name.

Errors are raised rather than returned: missing assets raise
`AssetNotFoundError`, failed loads raise `ResourceError`, and window, engine
and audio failures raise `DisplayError`, `EngineError` and `AudioError`.
Drawing a `Tilemap` that has no tileset raises `RuntimeError`.

## What it does not do

- There is no level or tileset file format. `Tileset.load_from_data()` and
  `Tilemap.load_from_data()` ignore the path they are given and fill the
  tileset and map with random tiles.
- There is no entity system, stage or scene manager, and no loader that
  reads a list of resources from a directory; assets are loaded one at a
  time with `make_sprite()` and `make_font()`.
- `AudioPlayer` plays one sound file at a time; it has no volume, panning,
  pitch or mixing controls.
- There is no command-line program; the package is a library.