# -*- coding: utf-8 -*-
"""
SearchPro entry point
- no subcommand: open the search window
- search QUERY : print matches with highlight segments (JSON)
- list         : print the loaded dataset (JSON)
"""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from .config import CONFIG, SearchProConfig
from .dataset import load_dataset
from .errors import SearchProError
from .logging_setup import configure_logging, get_logger
from .utils.matching import filter_records, highlight

logger = get_logger(__name__)


def build_parser():
    p = argparse.ArgumentParser(
        prog="searchpro",
        description="SearchPro (live substring search + LRU cache + highlight)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p.add_argument("--data", type=Path, default=CONFIG.data_file, help="JSON file of {id, name} records")
    p.add_argument("--debounce-ms", type=int, default=CONFIG.debounce_ms)
    p.add_argument("--cache-size", type=int, default=CONFIG.cache_size)
    p.add_argument("--no-commit", dest="commit", action="store_false", default=CONFIG.commit_enabled,
                   help="disable Enter-to-commit")
    p.add_argument("--log-level", type=str.upper, default=CONFIG.log_level)

    sub = p.add_subparsers(dest="cmd", required=False)
    sp = sub.add_parser("search")
    sp.add_argument("query")
    sub.add_parser("list")
    return p


def config_from_args(args) -> SearchProConfig:
    return replace(
        CONFIG,
        data_file=args.data,
        debounce_ms=args.debounce_ms,
        cache_size=args.cache_size,
        commit_enabled=args.commit,
        log_level=args.log_level,
    ).validate()


def search_payload(records, query: str) -> list[dict]:
    if not query:
        return []
    return [
        {**rec.to_dict(), "segments": [seg._asdict() for seg in highlight(rec.name, query)]}
        for rec in filter_records(records, query)
    ]


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg = config_from_args(args)
        configure_logging(cfg, force=True)
        records = load_dataset(cfg.data_file)
        if args.cmd is None:
            from .search_widget import run_gui

            sys.exit(run_gui(records, cfg))
        elif args.cmd == "search":
            print(json.dumps(search_payload(records, args.query), ensure_ascii=False, indent=2))
        elif args.cmd == "list":
            print(json.dumps([rec.to_dict() for rec in records], ensure_ascii=False, indent=2))
        else:
            print("Unknown command", file=sys.stderr)
            sys.exit(2)
    except SearchProError as e:
        logger.error("SearchPro failed: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
