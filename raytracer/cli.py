"""Command line entry point rendering a configured scene to out.png."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from raytracer.cornell_box import CornellBoxScene
from raytracer.imagefile import write_to_png
from raytracer.next_week import NextWeekFinalScene
from raytracer.random_spheres import RandomSpheresScene
from raytracer.random_spheres_night import RandomSpheresNightScene
from raytracer.renderer import MultiRenderer, PresetLevel, RenderError
from raytracer.scene import SceneConfig
from raytracer.two_spheres import TwoSpheresScene

OUTPUT_FILE = "out.png"

_SCENES: dict[str, Callable[[], SceneConfig]] = {
    "CornellBoxScene": CornellBoxScene,
    "NextWeekFinalScene": NextWeekFinalScene,
    "RandomSpheresScene": lambda: RandomSpheresScene(bounce=True),
    "RandomSpheresNightScene": lambda: RandomSpheresNightScene(bounce=False),
    "TwoSpheresScene": TwoSpheresScene,
}


def get_configuration(name: str) -> SceneConfig:
    """The scene registered under ``name``."""
    try:
        factory = _SCENES[name]
    except KeyError:
        raise ValueError(f"Invalid scene configuration name {name}") from None
    return factory()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raytracer",
        description="RustyRay ray-tracing renderer: a simple ray tracer.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument(
        "-c",
        "--config",
        metavar="CONFIG",
        default="CornellBoxScene",
        help="The configured scene to use.",
    )
    parser.add_argument(
        "-p",
        "--preset",
        metavar="PRESET",
        type=int,
        default=0,
        help="The preset to use, among 0~3 standing for low, medium, high & ultra.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        preset = PresetLevel.from_number(args.preset)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        scene = get_configuration(args.config)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        world = scene.world()
    except OSError as exc:
        print(f"Failed to set up scene {args.config}: {exc}", file=sys.stderr)
        return 1
    renderer = MultiRenderer(camera=scene.camera(), world=world)
    renderer.apply_preset(preset)

    print(f"Start rendering scene {args.config}...")
    try:
        picture = renderer.render()
    except RenderError as exc:
        print(f"Render failed, {exc}", file=sys.stderr)
        return 1
    print(f"Writing to {OUTPUT_FILE}...")
    write_to_png(picture, OUTPUT_FILE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())