"""Per-action capability descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

SELECTION_KEYS: frozenset[str] = frozenset({"fields", "sort", "limit", "offset"})


@dataclass(frozen=True)
class ActionSpec:
    """
    What one gateway action accepts.

    `allowed_selection_keys` is the subset of pagination/field-selection
    options the action may carry; all other keyword options always pass.
    """
    name: str
    wire_action: str
    allowed_selection_keys: frozenset[str] = frozenset()
    sends_params: bool = True
    requires_fn_name: bool = False
    description: str = ""


ACTIONS: dict[str, ActionSpec] = {
    spec.name: spec
    for spec in (
        ActionSpec("search", "search", description="ids of records matching a domain"),
        ActionSpec(
            "search_read",
            "search_read",
            allowed_selection_keys=SELECTION_KEYS,
            description="records matching a domain, with field selection and paging",
        ),
        ActionSpec("read", "read", description="records by id"),
        ActionSpec("fields_get", "fields_get", sends_params=False, description="field metadata of a model"),
        ActionSpec("search_count", "search_count", description="number of records matching a domain"),
        ActionSpec("create", "create", description="create a record from a values dict"),
        ActionSpec("update", "write", description="write values to records by id"),
        ActionSpec("remove", "unlink", description="delete records by id"),
        ActionSpec("call_method", "call_method", requires_fn_name=True, description="call a model method"),
    )
}


def get_action(name: str) -> ActionSpec:
    """Look up an action by operation name or wire action name."""
    spec = ACTIONS.get(name)
    if spec is not None:
        return spec
    for candidate in ACTIONS.values():
        if candidate.wire_action == name:
            return candidate
    raise KeyError(f"unknown action: {name}")


def filter_keyword(spec: ActionSpec, keyword: Mapping[str, Any]) -> dict[str, Any]:
    """Drop selection options the action does not allow; keep everything else."""
    blocked = SELECTION_KEYS - spec.allowed_selection_keys
    return {key: value for key, value in keyword.items() if key not in blocked}
