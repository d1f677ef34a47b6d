#!/usr/bin/env python3
"""
funqy walkthrough
shows that lazy cursors only pull what they need from an endless,
side-effecting source, and that batches can be drained in any order.
"""

import argparse
import itertools
import logging
from dataclasses import dataclass

from funqy import lazy, eager, F

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """configuration for the walkthrough"""
    batch_size: int = 3
    count: int = 10
    verbose: bool = False


def noisy_naturals():
    """an endless source that reports every element it hands out"""
    for n in itertools.count(1):
        logger.debug("source produced %d", n)
        yield n


def show_lazy_pipeline(config: DemoConfig) -> None:
    evens = lazy.filter(noisy_naturals(), lambda n: n % 2 == 0)
    labels = lazy.map(evens, lambda n: f"#{n}")
    first = lazy.take(labels, config.count).to.list()
    logger.info("first %d even labels: %s", config.count, first)


def show_batches(config: DemoConfig) -> None:
    cursor = iter(lazy.batch(range(1, config.count + 1), config.batch_size))
    batches = []
    while cursor.has_next():
        batches.append(cursor.next())
    # drain back to front to show every batch keeps its own slice
    drained = [list(b) for b in reversed(batches)]
    logger.info("batches drained last-first: %s", drained)


def show_eager(config: DemoConfig) -> None:
    numbers = list(range(1, config.count + 1))
    logger.info("any > %d: %s", config.count // 2, eager.any(numbers, lambda n: n > config.count // 2))
    logger.info("none negative: %s", eager.none(numbers, lambda n: n < 0))
    logger.info("sum: %s", eager.reduce(numbers, lambda acc, n: acc + n, 0))
    logger.info("rest: %s", eager.rest(numbers))
    logger.info("as series:\n%s", F(numbers).where(lambda n: n % 3 == 0).to.pandas())


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='funqy lazy cursor walkthrough')
    parser.add_argument('--batch-size', type=int, default=3, help='Batch size (default: 3)')
    parser.add_argument('--count', type=int, default=10, help='How many elements to pull (default: 10)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    """main entry point for the walkthrough"""
    args = create_cli_interface().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(batch_size=args.batch_size, count=args.count, verbose=args.verbose)

    show_lazy_pipeline(config)
    show_batches(config)
    show_eager(config)


if __name__ == "__main__":
    main()
