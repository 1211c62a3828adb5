"""Command line helpers for inspecting action types."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from actionflow.config import apply_warnings, load_config
from actionflow.resolver import derive_action_type

log = logging.getLogger("actionflow")


def _cmd_derive(args) -> int:
    for name in args.names:
        print(f"{name} -> {derive_action_type(name)}")
    return 0


def _cmd_types(args) -> int:
    cfg = load_config(args.config)
    apply_warnings(cfg)
    if args.log_level is None:
        logging.getLogger("actionflow").setLevel(cfg.log_level)
    if not cfg.creators:
        log.warning("no creators declared in %s", args.config)
        return 1
    for name, creator in cfg.creators.items():
        print(f"{creator.display_name or name}:")
        if not creator.types:
            print("  (no declared types)")
        for method, action_type in creator.types.items():
            print(f"  {method} -> {action_type}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="actionflow", description="Inspect action types and creator declarations")
    parser.add_argument("--log-level", default=None, help="overrides logging.level from the config file")
    sub = parser.add_subparsers(dest="command", required=True)

    derive = sub.add_parser("derive", help="print the action type derived from method names")
    derive.add_argument("names", nargs="+")
    derive.set_defaults(func=_cmd_derive)

    types = sub.add_parser("types", help="print declared type maps from a config file")
    types.add_argument("--config", default="config/actions.yaml")
    types.set_defaults(func=_cmd_types)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=(args.log_level or "INFO").upper(), format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    try:
        return args.func(args)
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
