import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from vdwall.config import WallSettings
from vdwall.domain.factory import create_device
from vdwall.errors import VDWallError
from vdwall.logging import create_logger
from vdwall.parsing.options import parse_action


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vdwall", description="Send a single command to a VDWall LVP processor.")
    parser.add_argument("--host", type=str, default=None, help="Processor IP address (default from VDWALL_HOST or 192.168.1.8).")
    parser.add_argument("--port", type=int, default=None, help="Processor TCP port (default 7).")
    parser.add_argument("--sn", type=int, default=None, help="Serial number 1-255, or 0 for all units.")
    parser.add_argument("--timeout", type=float, default=None, help="Connect timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log connection events to stderr.")

    actions = parser.add_subparsers(dest="action", required=True)
    switch = actions.add_parser("input-switch", help="Switch to another input.")
    switch.add_argument("--input", required=True, help="Input 0-8 (V1, V2, VGA1, VGA2, HDMI, DVI, DP, EXT, YPBPR).")
    switch.add_argument("--fade", default="0", help="Fade 0-3 (0.0s, 0.5s, 1.0s, 1.5s).")

    brightness = actions.add_parser("brightness", help="Set the brightness level.")
    brightness.add_argument("--value", required=True, help="Level 0-100 (some units use 0-64).")
    return parser


def _settings_from_args(args: argparse.Namespace) -> WallSettings:
    overrides = {
        "host": args.host,
        "port": args.port,
        "serial_number": args.sn,
        "connect_timeout": args.timeout,
    }
    return WallSettings(**{key: value for key, value in overrides.items() if value is not None})


def _action_from_args(args: argparse.Namespace):
    if args.action == "input-switch":
        return parse_action("input_switch", {"input": args.input, "fade": args.fade})
    return parse_action("brightness", {"value": args.value})


async def _send(settings: WallSettings, action, logger: logging.Logger) -> bool:
    device = create_device(settings=settings, logger=logger)
    async with device:
        if not device.connected:
            status = device.status
            print(f"Could not connect to {settings.host}:{settings.port}: {status.message or status.state.value}", file=sys.stderr)
            return False
        return device.execute(action)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = _settings_from_args(args)
        action = _action_from_args(args)
    except (ValidationError, VDWallError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logger = create_logger(
        "vdwall.cli",
        ring_size=settings.log_ring_size,
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr if args.verbose else None,
    )
    return 0 if asyncio.run(_send(settings, action, logger)) else 1


if __name__ == "__main__":
    sys.exit(main())
