# raytracer

A small path-tracing renderer. It traces rays through a scene built from
spheres, moving spheres, axis-aligned rectangles, cubes, objects rotated about
the y axis and constant-density fog, and uses a bounding volume hierarchy to
speed up hit tests. Surfaces use Lambertian, metal, dielectric, emissive and
isotropic materials, textured with solid colours, 3D checkers, Perlin noise,
marble stripes or images.

## Installing

```
pip install .
```

Pillow is the only runtime dependency; it writes the PNG output and reads
image textures.

## Rendering from the command line

```
raytracer --config CornellBoxScene --preset 0
```

Options:

- `-c`, `--config`: the scene to render. One of `CornellBoxScene` (default),
  `NextWeekFinalScene`, `RandomSpheresScene`, `RandomSpheresNightScene`,
  `TwoSpheresScene`. Any other name is rejected with a usage error.
- `-p`, `--preset`: render quality, `0` to `3` for low, medium, high and ultra
  (default `0`). The presets set the picture height to 128, 256, 512 or 1024
  and the samples per pixel to 128, 512, 1024 or 8192; the width follows the
  camera's aspect ratio.
- `--version`: print the version and exit.

The result is written to `out.png` in the current directory. Progress messages
(picture size, thread count, elapsed time) are logged at INFO level.

`NextWeekFinalScene` and `TwoSpheresScene` read
`assets/textures/earthmap.jpg` relative to the current directory; if that file
cannot be read the command prints an error and exits with status 1.

## Using the library

```python
from raytracer.cornell_box import CornellBoxScene
from raytracer.renderer import MultiRenderer, PresetLevel
from raytracer.imagefile import write_to_png

scene = CornellBoxScene()
renderer = MultiRenderer(camera=scene.camera(), world=scene.world())
renderer.apply_preset(PresetLevel.from_number(0))

picture = renderer.render()
write_to_png(picture, "out.png")
```

Main pieces:

- `raytracer.vec.Vec3`: immutable vector with element-wise `+ - * /`, `dot`,
  `cross`, `length` and `unit_vector`; also used for colours.
- `raytracer.ray.Ray`, `raytracer.camera.Camera` (built with
  `Camera.look_from`), `raytracer.picture.Picture`.
- Objects: `Sphere`, `MovingSphere`, `make_sphere`, `make_bouncing_sphere`
  (`raytracer.sphere`); `XYRect`, `XZRect`, `YZRect` (`raytracer.rect`);
  `Cube`; `RotateY`; `ConstantMedium`; `Container`; `BVHNode`; `World`.
- Materials in `raytracer.material`, textures in `raytracer.texture`, noise in
  `raytracer.perlin.Perlin`, backgrounds in `raytracer.skybox`, gamma
  correction in `raytracer.filters.GammaFilter`.
- `raytracer.imagefile`: `write_to_png`, `write_to_ppm` (plain-text P3) and
  `read_picture`.

After adding objects to a `World` or `Container`, call `update_metadata()` so
the bounding volume hierarchy and bounding box are built; until then `hit`
finds nothing.

`MultiRenderer.render` raises `RenderError` when no world or camera is set or
the thread count is below 1, and wraps any error raised while rendering in
`RenderError`. `apply_preset` raises `RenderError` if no camera is set.
Rendering splits the samples per pixel across `thread_count` threads (the CPU
count by default) and applies gamma 2 correction unless
`use_gamma_correction` is false.

Most constructors that draw random numbers take an optional `rng`
(`random.Random`) so scenes and renders can be reproduced.
`RandomSpheresNightScene` always lays out its spheres from a fixed seed
(`seed`, default 1010101).

## Limits

- The command line always writes `out.png`; the output path, picture size and
  thread count can only be changed through the library.
- Rendering is pure Python and slow: even the low preset takes a long time,
  and on CPython threads give little parallel speed-up.
- There is no scene file format; scenes are Python classes.

## Running the tests

```
pip install .[test]
pytest
```