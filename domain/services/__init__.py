"""
Domain services: pure operations over domain models.

- selection: id-keyed selection sets for records
- draft_reconciliation: keeps composer drafts consistent with a selection
"""

from domain.services.draft_reconciliation import reconcile_drafts
from domain.services.selection import CategorySelection, ExerciseSelection, Selection

__all__ = [
    "Selection",
    "ExerciseSelection",
    "CategorySelection",
    "reconcile_drafts",
]
