"""Protean Engine runner for the tracking domain.

Used when PROTEAN_ENV=production switches event processing to async:
- OutboxProcessor: polls the outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes the timeline projector

Usage:
    python src/server.py
    python src/server.py --test-mode   # drain pending messages and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


async def run(test_mode: bool) -> None:
    from tracking.domain import tracking

    tracking.init()
    engine = Engine(tracking, test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="Parcel Ledger Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending messages once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(args.test_mode))


if __name__ == "__main__":
    main()
