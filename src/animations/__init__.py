"""
Clock animation

- base: BasePeriodicUpdate
- clock_updates: fine sweep, per-second and hourly updates
- clock_animation: AnimationClock (state owner + task per update)
"""

__all__ = [
    "base",
    "clock_updates",
    "clock_animation",
]
