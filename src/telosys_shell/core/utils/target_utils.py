# src/telosys_shell/core/utils/target_utils.py
"""
Selection of target definitions by template name patterns.

A pattern argument ('*', 'java' or 'java,xml') is first translated into a list
of criteria, then every target whose template path contains at least one
criterion is selected (case-sensitive). The result never holds the same target
id twice and is sorted by template path.
"""
from typing import Dict, List, Optional

from telosys_shell.model import TargetDefinition

ALL = "*"
NO_TEMPLATE = "No template"


def build_criteria_from_arg(arg: str) -> Optional[List[str]]:
    """
    Translates a command argument into selection criteria.

    '*'            -> None (no filter)
    'a, b,,c'      -> ['a', 'b', 'c']
    ' abc '        -> ['abc']
    ',' or '  '    -> None (nothing left to filter on)
    """
    if arg == ALL:
        return None
    criteria = [part.strip() for part in arg.split(",") if part.strip()]
    return criteria or None


def select(targets: List[TargetDefinition], criteria: Optional[List[str]]) -> List[TargetDefinition]:
    """
    Returns the targets whose template contains any of the criteria.
    Without criteria (None or empty) the given list is returned as is.
    """
    if not criteria:
        return targets

    selected: Dict[str, TargetDefinition] = {}
    for criterion in criteria:
        for td in targets:
            if criterion in td.template:
                selected[td.id] = td
    return list(selected.values())


def sort_targets(targets: List[TargetDefinition]) -> List[TargetDefinition]:
    """Returns a new list sorted by template path."""
    return sorted(targets, key=lambda td: td.template)


def filter_targets(targets: List[TargetDefinition], criteria: Optional[List[str]]) -> List[TargetDefinition]:
    return sort_targets(select(targets, criteria))


def get_target_type(td: TargetDefinition) -> str:
    """'1' for a once target, 'R' for a resource, '*' for a per-entity template."""
    if td.is_once:
        return "1"
    if td.is_resource:
        return "R"
    return "*"


def build_line(td: TargetDefinition) -> str:
    return f" . [{get_target_type(td)}] {td.template} -> {td.file}"


def build_list(targets: Optional[List[TargetDefinition]]) -> List[str]:
    if not targets:
        return []
    return [build_line(td) for td in targets]


def build_list_as_string(targets: Optional[List[TargetDefinition]]) -> str:
    if not targets:
        return NO_TEMPLATE
    return "\n".join(build_list(targets))
