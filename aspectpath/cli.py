"""Command line entry point: ``aspectpath <command> ...``."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from collections import Counter
from typing import Dict, List, Optional

from aspectpath.api import AspectPath
from aspectpath.config import DATABASE_ENV_VAR, DEFAULT_DATABASE, DEFAULT_CURVE, DEFAULT_P, WeightConfig
from aspectpath.errors import AspectPathError
from aspectpath.reporting import format_path

logger = logging.getLogger(__name__)


def parse_aspect_counts(tokens: List[str]) -> Dict[str, int]:
    """
    Read ``Sano Aer 48 Ira 11 Superbia`` as ``{Sano: 1, Aer: 48, Ira: 11, Superbia: 1}``.

    An aspect is optionally followed by its quantity; repeated aspects add up.
    """
    if not tokens: raise ValueError("Must input at least one aspect.")
    counts: Counter = Counter()
    i = 0
    while i < len(tokens):
        name = tokens[i]
        if name.isdigit(): raise ValueError(f"Expected an aspect name, got quantity {name!r}")
        if i + 1 < len(tokens) and tokens[i + 1].isdigit():
            counts[name] += int(tokens[i + 1]); i += 2
        else:
            counts[name] += 1; i += 1
    return dict(counts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aspectpath", description="Recommend aspect connection paths from a recipe database.")
    parser.add_argument("--database", default=os.environ.get(DATABASE_ENV_VAR, DEFAULT_DATABASE), help="DuckDB database file.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list-elements", help="List the aspects in the database.")
    sub.add_parser("list-recipes", help="List the recipes in the database.")
    sub.add_parser("list-mods", help="List the packs aspects come from.")
    sub.add_parser("list-holdings", help="List the held quantities.")

    p = sub.add_parser("set-holding", help="Set how many of an aspect you hold.")
    p.add_argument("name")
    p.add_argument("num", type=float)

    p = sub.add_parser("crack", help="Break aspects down into primal aspects.")
    p.add_argument("aspects", nargs="+", metavar="ASPECT [QUANTITY]")

    p = sub.add_parser("connect", help="Rank the paths connecting two aspects.")
    p.add_argument("begin")
    p.add_argument("end")
    p.add_argument("--steps", type=int, default=None, help="Exact number of aspects between the two ends.")
    p.add_argument("--max-paths", type=int, default=None)
    p.add_argument("--max-length", type=int, default=None, help="Maximum number of aspects in a path.")
    p.add_argument("--limit", type=int, default=None, help="Only print the best N paths.")
    p.add_argument("--curve", default=DEFAULT_CURVE)
    p.add_argument("--p", type=float, default=DEFAULT_P, dest="p")

    p = sub.add_parser("import", help="Load aspects, recipes and holdings from CSV or Parquet files.")
    p.add_argument("--elements")
    p.add_argument("--recipes")
    p.add_argument("--holdings")
    p.add_argument("--sample", action="store_true", help="Load the bundled Thaumcraft aspect set.")
    return parser


def _run(args: argparse.Namespace, out) -> int:
    config = WeightConfig(p=args.p, curve=args.curve) if args.command == "connect" else None
    with AspectPath(database=args.database, config=config) as engine:
        cmd = args.command
        if cmd == "list-elements":
            for node in engine.store.list_nodes(): print(node.pretty(), file=out)
        elif cmd == "list-recipes":
            for recipe in engine.store.list_recipes(): print(recipe, file=out)
        elif cmd == "list-mods":
            for mod in engine.mods(): print(mod, file=out)
        elif cmd == "list-holdings":
            for name, num in engine.holdings(): print(f"Element: {name} | Number: {num:.0f}", file=out)
        elif cmd == "set-holding":
            engine.set_holding(args.name, args.num)
        elif cmd == "crack":
            for name, n in engine.decompose(parse_aspect_counts(args.aspects)).items():
                print(f"{name}: {n}", file=out)
        elif cmd == "connect":
            ranking = engine.recommend(args.begin, args.end, max_paths=args.max_paths, max_path_length=args.max_length, steps=args.steps)
            if not ranking:
                print("can't be connected", file=sys.stderr)
                return 0
            for ranked in ranking[:args.limit]: print(format_path(ranked), file=out)
        elif cmd == "import":
            _import(engine, args)
    return 0


def _import(engine: AspectPath, args: argparse.Namespace):
    if args.sample:
        from aspectpath.datasets import generate_thaumcraft_aspects
        elements, recipes, _ = generate_thaumcraft_aspects()
        engine.load(elements, recipes)
    if args.elements: engine.load_elements(args.elements)
    if args.recipes: engine.load_recipes(args.recipes)
    if args.holdings: engine.load_holdings(args.holdings)
    logger.info("Database now holds %d aspects", engine.elements().num_rows)


def main(argv: Optional[List[str]] = None, out=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        return _run(args, out or sys.stdout)
    except (AspectPathError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
