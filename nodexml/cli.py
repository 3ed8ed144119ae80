"""Command-line interface for nodexml."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .io_utils import warn, write_text
from .jobs import check_jobs, load_plan, render_tree_file, run_jobs


def _handle_render(args: argparse.Namespace) -> None:
    document = render_tree_file(Path(args.input))
    if args.output in (None, "-"):
        sys.stdout.write(document.xml)
        return
    write_text(Path(args.output), document.xml)
    print(f"Rendered {document.node_count} nodes to {args.output}")


def _handle_build(args: argparse.Namespace) -> None:
    plan = load_plan(Path(args.jobs))

    if args.check:
        ok, diff = check_jobs(plan)
        if not ok:
            warn(diff.rstrip("\n"))
            raise SystemExit(1)
        print(f"Checked {len(plan.jobs)} jobs: outputs are up to date.")
        return

    for job, document in run_jobs(plan):
        print(f"[{job.key}] {document.node_count} nodes -> {job.output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodexml",
        description="Serialize element/text node trees into XML documents",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"nodexml {__version__}",
        help="Show the nodexml version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render one node tree file.",
        description="Read a JSON or YAML node tree and write its XML document.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the node tree (.json, .yaml or .yml).",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the XML document; '-' or omitted writes to stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    build_parser = subparsers.add_parser(
        "build",
        help="Render every job in a jobs YAML file.",
        description="Render the node trees listed in a jobs file to their outputs.",
    )
    build_parser.add_argument(
        "--jobs",
        default="jobs.yaml",
        help="Path to the jobs YAML file.",
    )
    build_parser.add_argument(
        "--check",
        action="store_true",
        help="Rebuild in memory and fail with a diff if any output on disk differs.",
    )
    build_parser.set_defaults(func=_handle_build)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
