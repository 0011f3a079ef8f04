from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .constants import DEFAULT_TIMEOUT_SECONDS, STDIN_SOURCE
from .http_source import HttpSource
from .metrics import RepairMetrics
from .models import RepairOutcome
from .repair import apply_fixes
from .support import read_source, resolve_fixes, write_output


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    fixes = resolve_fixes(args.fix)
    sources = _collect_sources(args)
    metrics = RepairMetrics()

    if args.command == "repair":
        if args.output and len(sources) != 1:
            raise ValueError("--output requires exactly one source")
        if args.in_place and (args.url or STDIN_SOURCE in sources):
            raise ValueError("--in-place only works with file sources")

        for source, text in _load_sources(sources, args, metrics):
            outcome = apply_fixes(text, fixes, source=source, metrics=metrics)
            if args.in_place:
                if outcome.changed:
                    write_output(Path(source), outcome.text)
                    print(f"Repaired {source}: {_describe(outcome)}")
            elif args.output:
                write_output(Path(args.output), outcome.text)
                print(f"Wrote repaired JSON: {args.output} ({_describe(outcome)})")
            else:
                sys.stdout.write(outcome.text)
                if not outcome.text.endswith("\n"):
                    sys.stdout.write("\n")

        if args.summary:
            print(metrics.format_summary(), file=sys.stderr)
        return 1 if metrics.failed_sources else 0

    if args.command == "check":
        needs_repair = False
        for source, text in _load_sources(sources, args, metrics):
            outcome = apply_fixes(text, fixes, source=source, metrics=metrics)
            if outcome.changed or outcome.unterminated_literal:
                needs_repair = True
            print(f"{source}: {_describe(outcome)}")

        if args.summary:
            print(metrics.format_summary(), file=sys.stderr)
        return 1 if needs_repair or metrics.failed_sources else 0

    parser.print_help()
    return 2


def _collect_sources(args) -> list[str]:
    sources = list(args.sources)
    if args.url:
        sources.extend(args.url)
    if not sources:
        sources = [STDIN_SOURCE]
    return sources


def _load_sources(sources: list[str], args, metrics: RepairMetrics):
    http: HttpSource | None = None
    for source in sources:
        try:
            if args.url and source in args.url:
                http = http or HttpSource(timeout_seconds=args.timeout_seconds)
                text = http.fetch(source)
            else:
                text = read_source(source)
        except (OSError, RuntimeError) as exc:
            print(f"Failed to read {source}: {exc}", file=sys.stderr)
            metrics.record_failure(source)
            continue
        yield source, text


def _describe(outcome: RepairOutcome) -> str:
    parts = []
    if outcome.applied:
        parts.append("fixes=" + ",".join(fix.value for fix in outcome.applied))
    else:
        parts.append("unchanged")
    if outcome.unterminated_literal:
        parts.append("unterminated string literal")
    return " ".join(parts)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jsonmend", description="Tolerant repair of almost-JSON text")
    sub = parser.add_subparsers(dest="command")

    rp = sub.add_parser("repair", help="Apply repairs and write the result")
    _add_common_args(rp)
    rp.add_argument("--output", help="Write the repaired text to this file (single source only)")
    rp.add_argument("--in-place", action=argparse.BooleanOptionalAction, default=False)

    ck = sub.add_parser("check", help="Report which repairs each source needs")
    _add_common_args(ck)

    return parser


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("sources", nargs="*", help="Input files, '-' for stdin (default: stdin)")
    parser.add_argument(
        "--fix",
        action="append",
        help="Fix to apply, in order; repeat or comma-separate (prefix, commas, brackets)",
    )
    parser.add_argument("--url", action="append", help="Fetch an input over HTTP")
    parser.add_argument("--timeout-seconds", type=int, default=DEFAULT_TIMEOUT_SECONDS)
    parser.add_argument("--summary", action=argparse.BooleanOptionalAction, default=False)


if __name__ == "__main__":
    sys.exit(main())
