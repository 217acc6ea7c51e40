from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from piranhito.constants import MODE_CHECK, MODE_COPYRIGHT, MODE_TRANSFORM
from piranhito.core.errors import ProfileLoadError, UnknownProfileError
from piranhito.logging.factory import DefaultLoggerFactory
from piranhito.logging.helpers import get_logger
from piranhito.profiles.registry import ProfileRegistry, build_registry
from piranhito.runtime.runner import ProjectRunner

logger = get_logger('piranhito')

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Exactly one mode flag is required unless `--list-profiles` is given.
    """
    p = argparse.ArgumentParser(
        prog="piranhito",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "piranhito – marker-driven source transformation\n"
            "Strips feature-gated regions, applies per-project substitutions and\n"
            "aligns copyright notices across a directory of Swift/JS sources."
        ),
    )

    g_mode = p.add_argument_group("Mode")
    modes = g_mode.add_mutually_exclusive_group()
    modes.add_argument(
        "-x",
        "--transform",
        dest="mode",
        action="store_const",
        const=MODE_TRANSFORM,
        help="Full transform of .swift and .js files (strip, substitute, reformat, clean).",
    )
    modes.add_argument(
        "-c",
        "--copyright",
        dest="mode",
        action="store_const",
        const=MODE_COPYRIGHT,
        help="Copyright alignment of .swift, .js, .json and .strings files.",
    )
    modes.add_argument(
        "--check",
        dest="mode",
        action="store_const",
        const=MODE_CHECK,
        help="Count marker tokens per feature and report unbalanced ones. Never writes.",
    )

    p.add_argument("project", metavar="PROJECT", nargs="?", help="Project profile id (case-sensitive).")
    p.add_argument("directory", metavar="DIRECTORY", nargs="?", help="Directory holding the files to process.")

    g_cfg = p.add_argument_group("Configuration")
    g_cfg.add_argument(
        "--profiles",
        metavar="SRC",
        action="append",
        dest="profile_sources",
        default=[],
        help=(
            "Extra profiles: a JSON file or a 'module.path:attr' reference. Repeatable;\n"
            "later sources replace earlier profiles with the same id.\n"
            "Env: PIRANHITO_PROFILES."
        ),
    )
    g_cfg.add_argument(
        "--seed",
        metavar="N",
        type=int,
        default=None,
        help="Seed for @Random(N) substitutions (env: PIRANHITO_SEED).",
    )

    g_run = p.add_argument_group("Run")
    g_run.add_argument("-r", "--recursive", action="store_true", help="Descend into sub-directories.")
    g_run.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Process files and report, but do not write anything back.",
    )
    g_run.add_argument("--report", metavar="FILE", help="Write the execution report as JSON to FILE.")

    g_misc = p.add_argument_group("Miscellaneous")
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines (env: PIRANHITO_JSON_LOGS=1).",
    )
    g_misc.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    g_misc.add_argument(
        "--list-profiles",
        action="store_true",
        dest="list_profiles",
        help="Print the registered profile ids and exit.",
    )
    return p


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory = DefaultLoggerFactory.from_env(verbose=verbose)
    if enable_json and not factory.json_logs:
        factory = DefaultLoggerFactory(json_logs=True, level=logging.DEBUG if verbose else logging.INFO)
    global logger
    logger = factory.get_logger('piranhito')


def _resolve_seed(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> Optional[int]:
    if ns.seed is not None:
        return ns.seed
    raw = (os.getenv('PIRANHITO_SEED') or '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        parser.error(f'PIRANHITO_SEED must be an integer, got {raw!r}')


def _profile_sources(ns: argparse.Namespace) -> List[str]:
    sources: List[str] = []
    env_src = (os.getenv('PIRANHITO_PROFILES') or '').strip()
    if env_src:
        sources.append(env_src)
    sources.extend(ns.profile_sources or [])
    return sources


def run(argv: Sequence[str]) -> int:
    """Run the tool with an argv-like sequence and return the exit code."""
    parser = _build_parser()
    ns = parser.parse_args(list(argv))

    _configure_logging(ns.json_logs, ns.verbose)

    try:
        registry: ProfileRegistry = build_registry(_profile_sources(ns), logger=logger)
    except ProfileLoadError as exc:
        logger.error('%s', exc)
        return EXIT_USAGE

    if ns.list_profiles:
        for pid in registry.ids():
            print(pid)
        return EXIT_OK

    if ns.mode is None:
        parser.error('one of -x/--transform, -c/--copyright or --check is required')
    if not ns.project or not ns.directory:
        parser.error('PROJECT and DIRECTORY are required')

    seed = _resolve_seed(ns, parser)
    runner = ProjectRunner(
        registry,
        ns.mode,
        rng=random.Random(seed) if seed is not None else None,
        dry_run=ns.dry_run,
        recursive=ns.recursive,
        logger=logger,
    )
    try:
        report = runner.run(ns.project, Path(ns.directory))
    except UnknownProfileError as exc:
        logger.error('%s', exc)
        return EXIT_USAGE

    if ns.report:
        report.write_json(Path(ns.report))

    if report.errors:
        return EXIT_FAILED
    if ns.mode == MODE_CHECK and report.has_unbalanced:
        return EXIT_FAILED
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `piranhito` console script and `python -m piranhito`."""
    try:
        raise SystemExit(run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(EXIT_FAILED)


if __name__ == '__main__':
    main()
