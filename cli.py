"""Command line interface for Redirect Resolver."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections import Counter
from pathlib import Path
from typing import List

from redirect_resolver.config import Config, load_config
from redirect_resolver.errors import ResolutionError
from redirect_resolver.logging_utils import configure_logging, get_logger
from redirect_resolver.resolver import Resolver, create_client, create_resolver
from redirect_resolver.storage import ResultRow, read_input_urls, write_output_csv, write_summary_json
from redirect_resolver.url_tools import trim_to_base_domain

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Redirect Resolver CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve one or more URLs and print the results")
    resolve.add_argument("urls", nargs="+", help="URLs to resolve")
    resolve.add_argument("--timeout", type=float, help="Request timeout in seconds")
    resolve.add_argument("--trim", action="store_true", help="Trim each URL to its base domain first")
    resolve.add_argument("--log-file", type=str, help="Optional log file path")
    resolve.add_argument("--log-level", default="INFO", help="Logging level name, e.g. DEBUG")

    batch = subparsers.add_parser("batch", help="Resolve every URL of a CSV file")
    batch.add_argument("--input", required=True, help="Input CSV with a url column")
    batch.add_argument("--output", required=True, help="Output CSV for results")
    batch.add_argument("--concurrency", type=int, help="Max concurrent resolutions")
    batch.add_argument("--timeout", type=float, help="Request timeout in seconds")
    batch.add_argument("--summary-json", type=str, help="Summary JSON output path")
    batch.add_argument("--log-file", type=str, help="Optional log file path")
    batch.add_argument("--log-level", default="INFO", help="Logging level name, e.g. DEBUG")

    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    if getattr(args, "timeout", None) is not None:
        config.timeout = args.timeout
    if getattr(args, "concurrency", None) is not None:
        config.concurrency = args.concurrency
    if getattr(args, "summary_json", None):
        config.summary_json = Path(args.summary_json)
    return config.validate()


async def resolve_row(url: str, resolver: Resolver, summary: Counter) -> ResultRow:
    try:
        resolution = await resolver.trace(url)
    except ResolutionError as exc:
        summary["errors"] += 1
        summary[exc.kind.value.replace("-", "_")] += 1
        logger.warning("Failed to resolve %s: %s", url, exc)
        return ResultRow(url=url, error_kind=exc.kind.value, error_message=exc.message)

    summary["resolved"] += 1
    if resolution.redirected:
        summary["redirected"] += 1
    return ResultRow(
        url=url,
        final_url=resolution.final_url,
        hops=[f"{hop.kind.value}:{hop.url}" for hop in resolution.hops],
    )


async def resolve_command(args: argparse.Namespace) -> int:
    config = apply_overrides(load_config(), args)
    configure_logging(Path(args.log_file) if args.log_file else None, getattr(args, "log_level", "INFO"))

    failures = 0
    async with create_client(config) as client:
        resolver = create_resolver(client, config)
        for url in args.urls:
            target = trim_to_base_domain(url) if args.trim else url
            try:
                final_url = await resolver.resolve(target)
            except ResolutionError as exc:
                failures += 1
                print(f"{target} -> ERROR {exc.kind.value}: {exc.message}")
                continue
            print(f"{target} -> {final_url}")
    return 1 if failures else 0


async def batch_command(args: argparse.Namespace) -> int:
    config = apply_overrides(load_config(), args)
    configure_logging(Path(args.log_file) if args.log_file else None, getattr(args, "log_level", "INFO"))

    input_path = Path(args.input)
    output_path = Path(args.output)

    urls = read_input_urls(input_path)
    logger.info("Loaded %s URLs from %s", len(urls), input_path)

    semaphore = asyncio.Semaphore(config.concurrency)
    summary: Counter = Counter()

    async with create_client(config) as client:
        resolver = create_resolver(client, config)

        async def worker(url: str) -> ResultRow:
            async with semaphore:
                return await resolve_row(url, resolver, summary)

        results: List[ResultRow] = await asyncio.gather(*(worker(url) for url in urls))

    write_output_csv(output_path, results)
    logger.info("Wrote %s rows to %s", len(results), output_path)

    summary_dict = {
        "resolved": summary.get("resolved", 0),
        "redirected": summary.get("redirected", 0),
        "errors": summary.get("errors", 0),
        "invalid_url": summary.get("invalid_url", 0),
        "fetch_failed": summary.get("fetch_failed", 0),
    }

    write_summary_json(config.summary_json, summary_dict)
    logger.info("Summary saved to %s", config.summary_json)
    return 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    commands = {"resolve": resolve_command, "batch": batch_command}
    if args.command not in commands:
        parser.error("Unknown command")
    try:
        sys.exit(asyncio.run(commands[args.command](args)))
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
