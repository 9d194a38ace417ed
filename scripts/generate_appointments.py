#!/usr/bin/env python3
"""
Generate the synthetic appointment set and print it.

Usage:
    python scripts/generate_appointments.py
    python scripts/generate_appointments.py --seed 42 --now 2025-01-08T12:00
    python scripts/generate_appointments.py --seed 42 --summary

Environment Variables:
    GENERATOR_SEED, DEFAULT_CLINIC_ID and the other generation settings are
    read from the environment or .env, and overridden by the flags below.
"""

import argparse
import json
import sys
from collections import Counter
from datetime import datetime

import dotenv
import structlog

dotenv.load_dotenv()

# Keep stdout clean for the JSON payload
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))

from app.config import get_settings  # noqa: E402
from app.core.clock import FixedClock, SystemClock  # noqa: E402
from app.services.appointment_service import build_store  # noqa: E402
from app.services.directory_service import DirectoryService  # noqa: E402


def print_summary(appointments: list) -> None:
    """Print one line per day with the number of appointments and their statuses."""
    by_day: dict[str, Counter] = {}
    for appointment in appointments:
        day = appointment.start_time.date().isoformat()
        by_day.setdefault(day, Counter())[appointment.status.value] += 1

    for day, statuses in by_day.items():
        details = ", ".join(f"{status}={count}" for status, count in sorted(statuses.items()))
        print(f"{day}  {sum(statuses.values()):>2}  {details}")

    print(f"Total: {len(appointments)}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate the synthetic clinic appointment set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Reproducible set as JSON
  python generate_appointments.py --seed 7 > appointments.json

  # Pin "now" to see how statuses are derived around a given day
  python generate_appointments.py --seed 7 --now 2025-01-08T12:00 --summary
        """,
    )
    parser.add_argument("--seed", type=int, help="Random seed (default: GENERATOR_SEED)")
    parser.add_argument(
        "--now",
        type=str,
        help="ISO timestamp used as the current time (default: system clock)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-day summary instead of JSON",
    )

    args = parser.parse_args()

    settings = get_settings()
    directory = DirectoryService()
    if args.seed is not None:
        settings = settings.model_copy(update={"generator_seed": args.seed})

    if args.now:
        try:
            clock = FixedClock(datetime.fromisoformat(args.now))
        except ValueError as e:
            print(f"Error: Invalid --now timestamp: {e}", file=sys.stderr)
            return 1
    else:
        clock = SystemClock(
            settings.clinic_timezone or directory.clinic_timezone(settings.default_clinic_id)
        )

    store = build_store(settings, directory, clock)
    appointments = list(store.snapshot())

    if args.summary:
        print_summary(appointments)
    else:
        payload = [appointment.model_dump(mode="json") for appointment in appointments]
        print(json.dumps(payload, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
