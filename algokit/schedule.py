"""Split a study total across days that each have a minimum and maximum."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def plan_study(limits: Sequence[tuple[int, int]], total: int) -> list[int] | None:
    """Return the hours studied on each day, or None if total cannot be reached.

    The total is unreachable when the day maxima add up to less than it.
    Otherwise the hours still to study start at the first day's maximum; a
    day whose limits hold that number studies all of it, after which the
    hours still to study become total less what has been studied so far.
    Any other day studies nothing.
    """
    if sum(high for _, high in limits) < total:
        return None
    plan: list[int] = []
    if not limits:
        return plan
    studied_total = 0
    remaining = limits[0][1]
    for low, high in limits:
        studied = 0
        if low <= remaining <= high:
            studied = remaining
            studied_total += remaining
            remaining = total - studied_total
        plan.append(studied)
    return plan


def format_plan(plan: list[int] | None) -> str:
    """Render a plan as the answer text: "NO", or "YES" and the daily hours."""
    if plan is None:
        return "NO"
    return "YES\n" + "".join(f"{hours} " for hours in plan)


def _parse(text: str) -> tuple[list[tuple[int, int]], int]:
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as error:
        raise ValueError("input must consist of integers") from error
    if len(numbers) < 2:
        raise ValueError("input must start with the day count and the total")
    days, total = numbers[0], numbers[1]
    if days < 0:
        raise ValueError("the day count must not be negative")
    pairs = numbers[2 : 2 + 2 * days]
    if len(pairs) < 2 * days:
        raise ValueError("input holds fewer day limits than the day count")
    limits = list(zip(pairs[::2], pairs[1::2]))
    return limits, total


def main(argv: Sequence[str] | None = None) -> int:
    """Read the day count, the total and each day's limits from standard input."""
    parser = argparse.ArgumentParser(
        description="Plan study hours from limits read on standard input."
    )
    parser.parse_args(argv)
    try:
        limits, total = _parse(sys.stdin.read())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(format_plan(plan_study(limits, total)))
    return 0