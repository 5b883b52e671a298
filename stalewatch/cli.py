#!/usr/bin/env python3

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

from stalewatch.core.common.enums import TimestampSource
from stalewatch.core.config.settings import settings
from stalewatch.features.staleness.service.api import evaluate_folders
from stalewatch.features.watch_config.service.api import build_config_source, load_scan_requests
from stalewatch.features.metric_reporting.service.api import build_metric_client
from stalewatch.features.metric_reporting.service.host import resolve_host_identity
from stalewatch.features.metric_reporting.service.reporter import MetricReporter

logger = logging.getLogger("stalewatch")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

DESCRIPTION = """
Stalewatch: stale file counter

Counts, for every configured folder, the files older than that folder's
interval and publishes the count as the OldFileCount metric, dimensioned by
InstanceId, FolderPath and InstanceName.

Intervals: <number><unit>, unit one of s m h d w M y (m = minutes, M = months).

Examples:

# Scan folders listed in a JSON file and publish to CloudWatch
stalewatch --config folders.json

# Print what would be published, counting by modification time
stalewatch --config folders.json --dry-run --timestamp-source modified -v

# Use the watched_folders table and keep a history of the run
stalewatch --from-db --init-db --record-history
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stalewatch",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", default=None, help=f"JSON folder list (default: {settings.CONFIG_FILE})")
    source.add_argument("--from-db", action="store_true", help="Read folders from the watched_folders table.")

    parser.add_argument("--init-db", action="store_true", help="Create database tables before running.")
    parser.add_argument("--record-history", action="store_true", help="Store this run's results in the database.")
    parser.add_argument("--dry-run", action="store_true", help="Log samples instead of publishing them.")
    parser.add_argument("--namespace", default=settings.METRIC_NAMESPACE, help="Metric namespace.")
    parser.add_argument("--instance-id", default=None, help="Override the InstanceId dimension.")
    parser.add_argument("--instance-name", default=None, help="Override the InstanceName dimension.")
    parser.add_argument(
        "--timestamp-source",
        choices=[s.value for s in TimestampSource],
        default=settings.TIMESTAMP_SOURCE,
        help="File timestamp treated as creation time."
    )
    parser.add_argument("--skip-error-states", action="store_true",
                        help="Do not publish -1 for invalid or unreadable folders.")
    parser.add_argument("--continue-on-failure", action="store_true",
                        help="Keep publishing after a failed submission.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # argparse does not check an env-supplied default against choices
    try:
        timestamp_source = TimestampSource(args.timestamp_source)
    except ValueError:
        logger.error(
            f"Invalid timestamp source {args.timestamp_source!r}; "
            f"expected one of {', '.join(s.value for s in TimestampSource)}"
        )
        return EXIT_CONFIG_ERROR

    # 1. Load configuration (a failure here is a run-level error)
    try:
        if args.init_db:
            from stalewatch.core.database.connection import init_db
            init_db()
        source = build_config_source(args.config or settings.CONFIG_FILE, from_db=args.from_db)
        requests = load_scan_requests(source)
    except Exception as e:
        logger.error(f"Could not load folder configuration: {e}")
        return EXIT_CONFIG_ERROR

    # 2. Scan (never raises per folder)
    started_at = datetime.now(timezone.utc)
    results = evaluate_folders(requests, now=started_at, timestamp_source=timestamp_source)

    # 3. Report
    host = resolve_host_identity(args.instance_id, args.instance_name)
    reporter = MetricReporter(
        client=build_metric_client(args.namespace, dry_run=args.dry_run),
        report_error_states=not args.skip_error_states,
        stop_on_failure=not args.continue_on_failure
    )
    summary = reporter.report_batch(results, host)

    if args.record_history:
        from stalewatch.features.run_history.service.api import history
        try:
            run_id = history.record_run(results, started_at, summary)
            logger.info(f"Recorded run {run_id}")
        except Exception as e:
            logger.error(f"Could not record run history: {e}")

    if not summary.ok:
        return settings.REPORT_FAILURE_EXIT_CODE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
