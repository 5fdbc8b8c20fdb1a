import argparse
import logging
import math
from typing import Callable, List

from angle import Angle
from angle_range import AngleRange
from config import DISPLAY_MODES, Settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    level = "DEBUG" if verbose else str(settings.get("logging", "level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=settings.get("logging", "format"),
    )


def run_demo(out: Callable[[str], None] = print) -> None:
    """Walk through angles, comparisons, containment and union."""
    angle1 = Angle(math.pi)
    angle2 = Angle(90, is_radians=False)
    angle3 = Angle(45, is_radians=False)

    range1 = AngleRange.from_values(0, math.pi)
    range2 = AngleRange.from_values(45, 135, is_radians=False)
    range3 = AngleRange.from_values(270, 90, is_radians=False)

    out("-- Angles --")
    out(f"angle1: {angle1:deg} / {angle1:rad}")
    out(f"angle2: {angle2:deg}")
    out(f"angle3: {angle3:deg}")
    out("")

    out("-- Comparisons --")
    out(f"{angle1:deg} == {angle2:deg} -> {angle1 == angle2}")
    out(f"{angle2:deg} <  {angle3:deg} -> {angle2 < angle3}")
    out("")

    out("-- Ranges --")
    out(f"range1: {range1.format_as('rad')}")
    out(f"range2: {range2.format_as('deg')}")
    out(f"range3: {range3.format_as('deg')}")
    out("")

    out("-- Membership --")
    test_angle = Angle(60, is_radians=False)
    out(f"{test_angle:deg} in range2? -> {range2.contains(test_angle)}")
    out(f"{range2.format_as('deg')} inside {range1.format_as('rad')}? -> {range1.contains(range2)}")
    out("")

    out("-- Nesting (raw values) --")
    big = AngleRange.from_values(math.pi / 2.0, 6 * math.pi)
    small = AngleRange.from_values(math.pi / 3.0, 3 * math.pi, True, False, False)
    out(f"big:   {big.format_as('rad')}")
    out(f"small: {small.format_as('rad')}")
    out(f"small inside big? -> {big.contains(small)}")
    out("")

    out("-- Union --")
    merged = AngleRange.union(range1, range2)
    out(f"Union of {range1.format_as('deg')} and {range2.format_as('deg')}:")
    if not merged:
        out("  (empty)")
    for item in merged:
        out(f"  - {item.format_as('deg')}")


def _range(args: argparse.Namespace, start: float, end: float) -> AngleRange:
    return AngleRange.from_values(
        start,
        end,
        is_radians=not args.degrees,
        include_start=not getattr(args, "open_start", False),
        include_end=not getattr(args, "open_end", False),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Angle and arc calculator")
    parser.add_argument("--config", help="Settings file (JSON)")
    parser.add_argument("--degrees", action="store_true",
                        help="Interpret numeric inputs as degrees instead of radians")
    parser.add_argument("--mode", choices=DISPLAY_MODES,
                        help="Display mode, overrides the settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("demo", help="Print a walkthrough of angles and ranges")

    p = sub.add_parser("angle", help="Show an angle")
    p.add_argument("value", type=float)

    p = sub.add_parser("contains", help="Test whether a range contains an angle")
    p.add_argument("start", type=float)
    p.add_argument("end", type=float)
    p.add_argument("value", type=float)
    p.add_argument("--open-start", action="store_true", help="Exclude the start point")
    p.add_argument("--open-end", action="store_true", help="Exclude the end point")

    p = sub.add_parser("union", help="Union of two ranges")
    for name in ("start1", "end1", "start2", "end2"):
        p.add_argument(name, type=float)

    p = sub.add_parser("length", help="Length of a range")
    p.add_argument("start", type=float)
    p.add_argument("end", type=float)
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings(args.config)
    configure_logging(settings, args.verbose)
    mode = args.mode or settings.display_mode
    logger.debug("command=%s mode=%s degrees=%s", args.command, mode, args.degrees)

    if args.command == "demo":
        run_demo()
    elif args.command == "angle":
        angle = Angle(args.value, is_radians=not args.degrees, normalize=False)
        print(angle.format_as(mode))
        print(repr(angle))
    elif args.command == "contains":
        angle = Angle(args.value, is_radians=not args.degrees, normalize=False)
        print(_range(args, args.start, args.end).contains(angle))
    elif args.command == "union":
        first = _range(args, args.start1, args.end1)
        second = _range(args, args.start2, args.end2)
        for item in AngleRange.union(first, second):
            print(item.format_as(mode))
    elif args.command == "length":
        length = Angle(_range(args, args.start, args.end).get_length(), normalize=False)
        print(length.format_as(mode))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
