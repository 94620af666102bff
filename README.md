# ecsengine

A small entity-component-system (ECS) game engine built on pygame.

The demo opens a resizable 1280x720 window titled "Game Engine". It loads the
texture `assets/test.png` under the id `test` and creates one entity at
position (100, 100) that has a `Sprite` component. It then runs the event,
update and render loop at up to 60 frames per second, clearing the screen to
dark grey on each frame. The loop stops when you close the window or press
Escape.

## Installation

```
pip install .
```

Use `pip install .[test]` to install the test dependencies as well.

## Running the demo

Run this from a directory that contains `assets/test.png`:

```
ecsengine
```

`python -m ecsengine.engine` does the same thing. If the window cannot be
opened, or the texture cannot be loaded or attached, the command prints
`Engine initialization failed!` to standard error and exits without running
the loop.

## Using the library

- `ecsengine.vector.Vect2D` is a mutable 2D vector with `x` and `y`. It supports `+`, `-`, `+=` and `-=`, multiplication by a scalar, and division by a scalar. Dividing by zero returns the zero vector. If both values are integers, division truncates toward zero. `zero()` and `ones()` set both elements in place and return the vector. `str(v)` gives `(x y)`.
- `ecsengine.component.Component` is the base class for components. Override `init`, `update` and `draw`. If `init` returns False, the component is rejected. `component_type_id(cls)` gives each component class a stable slot number. It raises `TypeError` for classes that are not components. At most 32 classes can get an id (`MAX_COMPONENTS`), and going past that raises `ComponentLimitError`.
- `ecsengine.transform.Transform(x, y, scx, scy, rot)` holds `pos`, `scale` and `rotation` (in degrees). All the arguments are optional, and the scale defaults to 1. Every `Entity` gets a `Transform` when it is created.
- `ecsengine.entity.Entity` has one slot for each component type.
  - `add_component` attaches a component, runs its `init` and returns it. It raises `ComponentInitError` if `init` fails.
  - `get_component(cls)` returns the component in that slot, or None. `has_component(cls)` tells whether the slot is filled.
  - `destroy()` marks the entity inactive, and `is_active()` reports it.
- `ecsengine.entity.EntityManager` holds entities.
  - `update()` and `draw()` pass through to each entity.
  - `add_entity` adds an entity and returns it.
  - `erase_entity` removes an entity and raises `ValueError` if the manager does not hold it.
  - `refresh()` drops destroyed entities.
  - `clone_entity` returns an independent deep copy of an entity.
  - The manager supports `len()`, iteration and `in`.
- `ecsengine.assets.AssetManager` stores textures and fonts under string ids.
  - `load_texture(id, path)` does nothing if the id is already loaded.
  - `load_font(id, path, size)` replaces any font already loaded under that id. A `path` of None uses pygame's default font.
  - Both loading methods raise `AssetError` on failure.
  - `get_texture` and `get_font` return None for unknown ids.
  - `clean()` drops everything and shuts down pygame's font system.
  - `get_asset_manager()` returns the shared instance.
- `ecsengine.sprite.Sprite(target, texture_id, assets)` draws a texture onto the `target` surface at its entity's `Transform`. It scales the texture by the transform's scale and rotates it clockwise about its centre by the transform's rotation. Set `flip_x` or `flip_y` to mirror it. Its `init` fails if the texture is not loaded.
- `ecsengine.engine.Engine` owns the window and the entity manager. Its methods are `init`, `event`, `update`, `render`, `quit` and `clean`. `running` tells whether the loop should continue.

Loading messages and errors are reported through the standard `logging` module.

```python
from ecsengine.entity import Entity, EntityManager
from ecsengine.transform import Transform

manager = EntityManager()
entity = Entity()
entity.get_component(Transform).pos.x = 100
manager.add_entity(entity)
manager.update()
```

## What it does not do

- The engine's scene is fixed: one sprite from `assets/test.png`. There is no way to configure it from the command line.
- Fonts can be loaded, but no component draws text.
- There is no input handling beyond quitting, and no physics, audio or scene files.

## Tests

```
pytest
```