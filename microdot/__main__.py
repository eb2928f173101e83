"""
Console entry point.

Usage:
    microdot                          # ~/microdot_graph.json
    microdot --file ./plan.json       # plan.dot / plan.svg alongside
    microdot --no-render -v
"""
import argparse
import logging
import sys
from typing import List, Optional

from .cli.command_processor import CommandProcessor
from .cli.repl import run_repl
from .config import DotConfig, PlatformConfig, default_snapshot_path
from .engine import EditEngine
from .services.exceptions import SnapshotError
from .services.snapshot_service import GraphSerializer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="microdot",
        description="Build a labeled directed graph interactively.",
    )
    parser.add_argument("--file", default=str(default_snapshot_path()),
                        help="Snapshot file to load and save (default: %(default)s)")
    parser.add_argument("--no-render", action="store_true",
                        help="Do not run Graphviz after each change")
    labels = parser.add_mutually_exclusive_group()
    labels.add_argument("--debug-labels", dest="debug_labels", action="store_true", default=True,
                        help="Show ids in node and edge labels (default)")
    labels.add_argument("--plain-labels", dest="debug_labels", action="store_false",
                        help="Show only the labels")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log file and render activity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = PlatformConfig.for_snapshot(
        args.file,
        dot=DotConfig(debug_labels=args.debug_labels),
        render_svg=not args.no_render,
    )

    serializer = GraphSerializer(config.serialization)
    if config.snapshot_path.exists():
        try:
            graph = serializer.load(config.snapshot_path)
        except (SnapshotError, OSError) as e:
            logger.error("Could not load %s: %s", config.snapshot_path, e)
            print(f"Could not load {config.snapshot_path}: {e}", file=sys.stderr)
            return 1
        engine = EditEngine.from_graph(graph, config.max_history_depth)
    else:
        engine = EditEngine(max_history_depth=config.max_history_depth)

    processor = CommandProcessor(engine, config)
    print(f"microdot - editing {config.snapshot_path}. Type 'help' for commands.")

    # bring the DOT file and diagram in line with the loaded snapshot
    refreshed = processor.save(render=config.render_svg)
    if not refreshed.success:
        print(f"Warning: {refreshed.message}")

    run_repl(processor)
    return 0


if __name__ == "__main__":
    sys.exit(main())
