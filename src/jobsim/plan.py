# plan.py
from __future__ import annotations

from typing import List, Set

from .model import Step


def build_plan(steps: List[Step]) -> List[Step]:
    """
    Validate a step list and return it as the execution order.

    Requires:
      - step.name: str (unique)
      - step.needs: names of steps declared EARLIER in the list

    Declaration order is the execution order, so a need on a later step
    (which also covers cycles) is rejected rather than reordered.
    """
    names = [s.name for s in steps]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"Duplicate step names found: {dupes}")

    name_set = set(names)
    seen: Set[str] = set()

    for s in steps:
        for need in s.needs:
            if need not in name_set:
                raise ValueError(
                    f"Step '{s.name}' needs missing step '{need}'. "
                    f"Known steps: {sorted(name_set)}"
                )
            if need == s.name or need not in seen:
                raise ValueError(
                    f"Step '{s.name}' needs '{need}', which is not declared before it"
                )
        seen.add(s.name)

    return list(steps)

