#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Ray command line sender.

Sends values and commands to the Ray desktop app from a shell::

    ray-send '{"status": "ok"}' 42 --color green --notify "build done"

Positional values are decoded as JSON literals when possible and sent as
plain strings otherwise.
"""

import argparse
import json
import logging
import os
from datetime import datetime, timezone

from ray_client import Ray
from ray_comm import HOST, PORT

LOG_BASENAME = "ray_send"

# -------------------------
# LOGGING SETUP
# -------------------------
def _setup_logging(log_dir=None, verbose=False):
    logger = logging.getLogger("ray_client")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()

    fmt = logging.Formatter("%(asctime)sZ\t%(levelname)s\t%(threadName)s\t%(message)s", "%Y-%m-%dT%H:%M:%S")
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        logfile = os.path.join(log_dir, f"{LOG_BASENAME}_{timestamp}.log")
        fh = logging.FileHandler(logfile, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.info(f"log_file={logfile}")

    logger.propagate = False
    return logger

# -------------------------
# HELPERS
# -------------------------
def parse_value(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text

def build_parser():
    parser = argparse.ArgumentParser(description="Send values and commands to the Ray app")
    parser.add_argument("values", nargs="*", help="Values to send; JSON literals are decoded")
    parser.add_argument("--host", default=HOST, help="Ray app host")
    parser.add_argument("--port", type=int, default=PORT, help="Ray app port")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--json", action="store_true", help="Always send values as JSON strings")
    mode.add_argument("--custom", action="store_true", help="Send the joined values as one custom payload")
    parser.add_argument("--label", default="", help="Label for --custom (requires --custom)")
    screen = parser.add_mutually_exclusive_group()
    screen.add_argument("--new-screen", metavar="NAME", help="Start a new named screen first")
    screen.add_argument("--clear", action="store_true", help="Clear the screen first")
    parser.add_argument("--color", help="Color for the sent values")
    parser.add_argument("--size", help="Size for the sent values")
    parser.add_argument("--notify", metavar="TEXT", help="Show a desktop notification")
    parser.add_argument("--logdir", default=None, help="Directory to write ray_send logs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every post")
    return parser

# -------------------------
# MAIN
# -------------------------
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.label and not args.custom:
        parser.error("--label requires --custom")
    logger = _setup_logging(args.logdir, args.verbose)

    values = [parse_value(v) for v in args.values]
    session = Ray(args.host, args.port)
    logger.debug(f"start host={args.host} port={args.port} uuid={session.uuid} values={len(values)}")

    if args.new_screen is not None:
        session.new_screen(args.new_screen)
    elif args.clear:
        session.clear_screen()

    if args.custom:
        if values:
            session.send_custom(" ".join(args.values), args.label)
    elif args.json:
        for value in values:
            session.json(value)
    else:
        session.send(*values)

    if args.color:
        session.color(args.color)
    if args.size:
        session.size(args.size)
    if args.notify:
        session.notify(args.notify)

    logger.debug("done")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
