#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fire a projectile through gravity and wind and plot its trail as PPM.
"""

import argparse
import logging
import pathlib
from dataclasses import dataclass
from typing import Optional

from raytracer import Canvas, Color, Point, Vector

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    position: Point
    velocity: Vector


@dataclass
class Environment:
    gravity: Vector
    wind: Vector


def tick(p: Projectile, env: Environment) -> Projectile:
    return Projectile(
        position=p.position + p.velocity,
        velocity=p.velocity + env.gravity + env.wind,
    )


def simulate(
    canvas: Canvas,
    p: Projectile,
    env: Environment,
    color: Optional[Color] = None,
    max_ticks: int = 100_000,
) -> int:
    """
    Advance `p` until it drops to y <= 0, plotting each position.

    Canvas y grows downward, so the simulated height is flipped.
    Positions off the canvas are not drawn. Returns the tick count.
    """
    if color is None:
        color = Color.red()

    ticks = 0
    while p.position.y > 0.0 and ticks < max_ticks:
        p = tick(p, env)
        ticks += 1

        cx = int(round(p.position.x))
        cy = canvas.height - 1 - int(round(p.position.y))
        if 0 <= cx < canvas.width and 0 <= cy < canvas.height:
            canvas.write_pixel(cx, cy, color)
        else:
            logger.debug(f"tick {ticks}: {p.position} is off canvas")

    logger.debug(f"projectile landed after {ticks} ticks at {p.position}")
    return ticks


def main():
    parser = argparse.ArgumentParser(
        description="Plot a projectile's trajectory to a PPM image."
    )
    parser.add_argument("--width", type=int, default=900)
    parser.add_argument("--height", type=int, default=550)
    parser.add_argument(
        "--speed", type=float, default=11.25, help="Launch speed multiplier"
    )
    parser.add_argument(
        "--output", type=pathlib.Path, help="Write to this file instead of stdout"
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    p = Projectile(
        position=Point(0.0, 1.0, 0.0),
        velocity=Vector(1.0, 1.8, 0.0).normalize() * args.speed,
    )
    env = Environment(gravity=Vector(0.0, -0.1, 0.0), wind=Vector(-0.01, 0.0, 0.0))

    canvas = Canvas(args.width, args.height)
    simulate(canvas, p, env)
    ppm = canvas.to_ppm()

    if args.output is None:
        print(ppm, end="")
    else:
        args.output.write_text(ppm)


if __name__ == "__main__":
    main()
