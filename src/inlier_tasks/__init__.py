"""
Timed task tracking: users take a task, submit it before the deadline for
time-based earnings, or let it expire.
"""

__version__ = "0.1.0"
