# src/inlier_tasks/tasks/earnings.py

"""
Payout for a submitted task, as a function of whole seconds worked.

Piecewise linear:
- first 30 seconds pay 10.0 pro rata,
- every further 30 seconds pay another 5.0.

Continuous at 30 (10.0 on both sides) and unbounded above.
"""

from __future__ import annotations

BASE_WINDOW_SECONDS = 30
BASE_AMOUNT = 10.0
OVERTIME_RATE = 5.0


def earnings(seconds: int) -> float:
    if seconds < 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")

    if seconds <= BASE_WINDOW_SECONDS:
        return (seconds / BASE_WINDOW_SECONDS) * BASE_AMOUNT
    return BASE_AMOUNT + ((seconds - BASE_WINDOW_SECONDS) / BASE_WINDOW_SECONDS) * OVERTIME_RATE
