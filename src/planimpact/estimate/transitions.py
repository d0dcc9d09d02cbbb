"""Derive signed before/after projections from a planned change."""

from dataclasses import dataclass
from typing import List
from ..ingest.models import ResourceChange

CREATE = "create"
DELETE = "delete"
UPDATE = "update"


@dataclass(frozen=True)
class ActionTransition:
    """One side of a change, with the sign its impact is counted with."""
    change: ResourceChange
    action: str
    multiplier: float


def _before_side(change: ResourceChange) -> ResourceChange:
    return change.model_copy(update={"after": {}})


def _after_side(change: ResourceChange) -> ResourceChange:
    return change.model_copy(update={"before": {}})


def action_transitions(change: ResourceChange) -> List[ActionTransition]:
    """
    Split a change into signed transitions.
    
    delete removes the before state (-1), create adds the after state (+1); a
    replace yields both. A plain update yields the before state removed and
    the after state added, both labelled "update", so the row pair carries
    the net delta between the two configurations even when only locality
    changed.
    """
    actions = set(change.actions)
    transitions = []
    
    if DELETE in actions and change.before:
        transitions.append(ActionTransition(_before_side(change), DELETE, -1.0))
    
    if CREATE in actions and change.after:
        transitions.append(ActionTransition(_after_side(change), CREATE, 1.0))
    
    if transitions or UPDATE not in actions:
        return transitions
    
    if change.before:
        transitions.append(ActionTransition(_before_side(change), UPDATE, -1.0))
    if change.after:
        transitions.append(ActionTransition(_after_side(change), UPDATE, 1.0))
    
    return transitions
