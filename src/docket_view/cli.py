"""CLI entrypoint with render/decisions commands over a snapshot file."""

from __future__ import annotations

import argparse
import logging
import time

import yaml

from .config import load_config
from .decisions import derive_decision_list
from .docket import derive_docket_view
from .errors import SnapshotError
from .storage import load_snapshot

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docket-view", description="Derive docket view models from a snapshot")
    parser.add_argument("--config", default="docket.yaml", help="Path to config yaml")
    parser.add_argument("--verbose", action="store_true", help="Log degraded inputs")
    sub = parser.add_subparsers(dest="command", required=True)

    render_p = sub.add_parser("render", help="Print the docket view for a snapshot")
    render_p.add_argument("--snapshot", required=True, help="Path to snapshot .json/.yaml")
    render_p.add_argument("--now-ms", type=int, default=None, help="Override the snapshot clock")

    decisions_p = sub.add_parser("decisions", help="Print the filtered past decisions")
    decisions_p.add_argument("--snapshot", required=True, help="Path to snapshot .json/.yaml")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger("docket_view").setLevel(logging.DEBUG)
    try:
        config = load_config(args.config)
    except (yaml.YAMLError, TypeError) as exc:
        logger.error("Invalid config %s: %s", args.config, exc)
        return 2

    now_ms = getattr(args, "now_ms", None)
    try:
        snapshot = load_snapshot(args.snapshot, now_ms=now_ms, default_now_ms=int(time.time() * 1000))
    except SnapshotError as exc:
        logger.error("%s", exc)
        return 2

    if args.command == "render":
        view = derive_docket_view(snapshot, config)
        logger.info(
            "Rendered %d active, %d scheduled, %d open-defence rows",
            len(view.active),
            len(view.scheduled),
            len(view.open_defence),
        )
        print(view.model_dump_json(by_alias=True, indent=2))
    elif args.command == "decisions":
        decisions = derive_decision_list(snapshot.decisions, snapshot.decisions_controls, config)
        logger.info("%s", decisions.count_label)
        print(decisions.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
