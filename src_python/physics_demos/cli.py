"""
Copyright 2024 The Physics Demos authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Command line entry point.

Usage:
    physics-demos build --root content [--clean] [--no-minify]
    physics-demos check --root content
    physics-demos list
    physics-demos render convex-lens --param u=150 -o lens.svg
    physics-demos simulate falling-ball-in-water --every 100
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .demos import available_demos, get_demo
from .exceptions import PhysicsDemosError
from .simulator import Simulator
from .site.builder import build_site
from .site.checker import ProjectChecker
from .site.config import load_settings

logger = logging.getLogger(__name__)


def _parse_params(pairs):
    params = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {pair!r}")
        try:
            params[name.strip()] = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Parameter {name!r} is not a number: {value!r}") from None
    return params


def cmd_build(args):
    overrides = {}
    if args.site_url:
        overrides["site_url"] = args.site_url
    if args.no_minify:
        overrides["minify"] = False
    settings = load_settings(args.root, **overrides)
    report = build_site(settings, clean=args.clean)
    print(f"Built {len(report.pages)} pages, minified {report.minified} files -> {settings.dist_dir}")
    return 0


def cmd_check(args):
    checker = ProjectChecker(args.root)
    ok = checker.run_all_checks()
    print(f"{len(checker.errors)} errors, {len(checker.warnings)} warnings")
    return 0 if ok else 1


def cmd_list(args):
    for slug in available_demos():
        print(slug)
    return 0


def cmd_render(args):
    demo = get_demo(args.demo, **_parse_params(args.param))
    svg = demo.render()
    if args.output:
        Path(args.output).write_text(svg, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(svg)
    return 0


def cmd_simulate(args):
    if args.every < 1:
        raise argparse.ArgumentTypeError("--every must be >= 1")
    demo = get_demo(args.demo, **_parse_params(args.param))
    simulator = Simulator(demo, max_frames=args.max_frames)
    frames = simulator.run()
    for index, frame in enumerate(frames):
        if index % args.every == 0 or index == len(frames) - 1:
            print(json.dumps({"frame": index, **frame}, ensure_ascii=False))
    if demo.warning:
        logger.warning("%s", demo.warning)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="physics-demos", description="Physics demo toolkit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("build", help="Generate the static site")
    p.add_argument("--root", type=Path, default=Path.cwd(), help="Site content root")
    p.add_argument("--site-url", help="Override the absolute site URL")
    p.add_argument("--clean", action="store_true", help="Remove dist/ first")
    p.add_argument("--no-minify", action="store_true", help="Skip minification")
    p.set_defaults(func=cmd_build)

    p = sub.add_parser("check", help="Check the site content tree")
    p.add_argument("--root", type=Path, default=Path.cwd(), help="Site content root")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("list", help="List available demos")
    p.set_defaults(func=cmd_list)

    for name, func, help_text in (
        ("render", cmd_render, "Render one demo state to SVG"),
        ("simulate", cmd_simulate, "Play a demo headlessly and print frames as JSON lines"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("demo", help="Demo slug (see `list`)")
        p.add_argument("--param", action="append", metavar="NAME=VALUE", help="Slider value, repeatable")
        if name == "render":
            p.add_argument("-o", "--output", help="Output SVG file (default: stdout)")
        else:
            p.add_argument("--max-frames", type=int, default=10000)
            p.add_argument("--every", type=int, default=1, help="Print one frame out of N")
        p.set_defaults(func=func)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (PhysicsDemosError, argparse.ArgumentTypeError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
