"""Load build job files and render or check their documents."""

from __future__ import annotations

import difflib
import json
from pathlib import Path
from typing import Any, List, Tuple

import yaml
from pydantic import ValidationError

from .errors import MissingNameError
from .io_utils import read_tree, warn, write_text
from .models import BuildJob, BuildPlan
from .xml_builder import BuiltDocument, build_document


def load_plan(path: Path) -> BuildPlan:
    """Load and validate a jobs YAML file.

    Relative ``input``/``output`` paths are resolved against the directory of
    the jobs file. Every invalid entry is reported before exiting.
    """
    if not path.exists():
        raise SystemExit(f"Jobs file not found: {path}")
    try:
        payload: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    except (UnicodeDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid jobs file {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise SystemExit(f"{path} must contain a list of jobs.")

    jobs: List[BuildJob] = []
    errors: List[str] = []
    seen: set[str] = set()
    for index, item in enumerate(payload, start=1):
        try:
            job = BuildJob.model_validate(item)
        except ValidationError as exc:
            errors.append(f"{path} item {index}: {exc}")
            continue
        if job.key in seen:
            errors.append(f"{path} item {index}: duplicate job key '{job.key}'")
            continue
        seen.add(job.key)
        jobs.append(job.resolved(path.parent))

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    return BuildPlan(jobs=jobs)


def render_tree_file(path: Path) -> BuiltDocument:
    """Read a node tree file and serialize it, exiting on unusable input."""
    if not path.exists():
        raise SystemExit(f"Input tree not found: {path}")
    try:
        tree = read_tree(path)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid node tree in {path}: {exc}") from exc
    try:
        return build_document(tree)
    except MissingNameError as exc:
        raise SystemExit(f"{path}: {exc}") from exc


def run_jobs(plan: BuildPlan) -> List[Tuple[BuildJob, BuiltDocument]]:
    """Render every job and write its output file."""
    results: List[Tuple[BuildJob, BuiltDocument]] = []
    for job in plan.jobs:
        document = render_tree_file(job.input)
        write_text(job.output, document.xml)
        results.append((job, document))
    return results


def diff_job(job: BuildJob, document: BuiltDocument) -> str:
    """Return a unified diff between the existing output and ``document``."""
    existing: List[str] = []
    if job.output.exists():
        existing = job.output.read_text(encoding="utf-8").splitlines(keepends=True)
    fresh = document.xml.splitlines(keepends=True)
    if existing == fresh:
        return ""
    diff = difflib.unified_diff(
        existing,
        fresh,
        fromfile=f"{job.key}/{job.output.name}",
        tofile=f"{job.key}/{job.output.name} (rebuilt)",
    )
    # Documents are single-line, so keep the diff output newline-terminated.
    return "".join(line if line.endswith("\n") else line + "\n" for line in diff)


def check_jobs(plan: BuildPlan) -> Tuple[bool, str]:
    """Render every job in memory and compare with the files on disk."""
    diffs: List[str] = []
    for job in plan.jobs:
        document = render_tree_file(job.input)
        diff = diff_job(job, document)
        if diff:
            diffs.append(diff)
    return (not diffs, "".join(diffs))


__all__ = ["check_jobs", "diff_job", "load_plan", "render_tree_file", "run_jobs"]
