"""
Toggle validation for choice trees.

Checks read-only locks, group capacity and dependencies against the current
selection. Selections map key -> namespace; like the selection itself,
dependency lookups are by key across the whole tree unless the engine is
scoped to namespaces.
"""

from dataclasses import dataclass

from .model import Choice, ChoiceTree

READONLY = "readonly"
DEPENDENTS = "dependents"
MAX_REACHED = "max"
MISSING = "missing"


@dataclass(frozen=True)
class Verdict:
    """Outcome of a toggle check."""
    allowed: bool
    reason: str = ""
    names: tuple[str, ...] = ()
    limit: int | None = None

    @classmethod
    def ok(cls) -> "Verdict":
        return cls(allowed=True)

    @property
    def message(self) -> str:
        if self.reason == READONLY:
            return "Option cannot be changed"
        if self.reason == DEPENDENTS:
            return "First remove child dependencies: " + ", ".join(self.names)
        if self.reason == MAX_REACHED:
            return f"Max selections allowed is: {self.limit}"
        if self.reason == MISSING:
            return "Depends on: " + ", ".join(self.names)
        return ""

    def __bool__(self) -> bool:
        return self.allowed


class ConstraintEngine:
    """Stateless checks over a ChoiceTree; the selection is passed in."""

    def __init__(self, tree: ChoiceTree, scoped: bool = False):
        self.tree = tree
        self.scoped = scoped

    def _in_scope(self, other: Choice, namespace: str) -> bool:
        return not self.scoped or other.namespace == namespace

    def _is_selected(self, key: str, namespace: str, selections: dict[str, str]) -> bool:
        if self.scoped:
            return selections.get(key) == namespace
        return key in selections

    def can_deselect(self, choice: Choice, selections: dict[str, str]) -> Verdict:
        """Refuse while any selected choice still depends on this one."""
        if choice.readonly:
            return Verdict(False, READONLY)

        # The selection is keyed by key, so it may belong to a same-named
        # choice in another namespace
        owner = selections.get(choice.key, choice.namespace)
        dependents = [
            other.display_name
            for other in self.tree.choices
            if other is not choice
            and self._in_scope(other, owner)
            and choice.key in other.depends_on
            and self._is_selected(other.key, other.namespace, selections)
        ]
        if dependents:
            return Verdict(False, DEPENDENTS, names=tuple(dependents))
        return Verdict.ok()

    def can_select(self, choice: Choice, selections: dict[str, str]) -> Verdict:
        """Refuse when the group is full or a dependency is not selected yet."""
        if choice.readonly:
            return Verdict(False, READONLY)

        limit = self.tree.group_for(choice).max_selections
        if limit is not None:
            in_group = sum(1 for ns in selections.values() if ns == choice.namespace)
            if in_group >= limit:
                return Verdict(False, MAX_REACHED, limit=limit)

        missing = []
        for dependency in choice.depends_on:
            if self._is_selected(dependency, choice.namespace, selections):
                continue
            parent = self.tree.find(dependency, choice.namespace if self.scoped else None)
            # Dependencies on keys that are not in the tree never block
            if parent is not None:
                missing.append(parent.display_name)
        if missing:
            return Verdict(False, MISSING, names=tuple(missing))
        return Verdict.ok()

    def check_toggle(self, choice: Choice, selections: dict[str, str]) -> Verdict:
        """Check whichever direction toggling this choice would go."""
        if choice.key in selections:
            return self.can_deselect(choice, selections)
        return self.can_select(choice, selections)
