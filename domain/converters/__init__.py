"""
Domain converters.

- drafts_to_workout: composer drafts -> Workout record tree

Examples:
    >>> from domain.converters import drafts_to_workout

    >>> workout = drafts_to_workout(drafts, name="Leg Day", duration_minutes=30)
    >>> workout.duration
    1800.0
"""

from domain.converters.drafts_to_workout import drafts_to_workout, minutes_to_seconds

__all__ = [
    "drafts_to_workout",
    "minutes_to_seconds",
]
