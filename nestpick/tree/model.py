"""
Choice tree model.

A flattened choice mapping becomes an ordered list of lines: one Group header
per namespace (at the point the namespace is first seen) followed by its
Choice leaves. Group metadata comes from the reserved "_" entry of each
namespace.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .flatten import GROUP_KEY, split_path
from ..config.errors import ConfigError
from ..core.logging import debug_log

GROUP_METADATA_KEYS = ("max", "readonly", "depends", "selected")


def _string_list(value, what: str, namespace: str) -> tuple[str, ...]:
    """Coerce a string or a list of strings into a tuple."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ConfigError(
        f"Group '{namespace}': '{what}' must be a string or a list of strings, got {value!r}"
    )


@dataclass(frozen=True)
class Group:
    """Metadata of a namespace; also rendered as the namespace's header line."""
    namespace: str
    max_selections: int | None = None  # None = unbounded
    readonly_keys: tuple[str, ...] = ()
    dependencies: dict[str, tuple[str, ...]] = field(default_factory=dict, hash=False)
    preselected: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.namespace

    @classmethod
    def from_metadata(cls, namespace: str, meta) -> "Group":
        """Parse a '_' record. Raises ConfigError on malformed metadata."""
        if not isinstance(meta, Mapping):
            raise ConfigError(f"Group '{namespace}': metadata must be a mapping, got {meta!r}")

        unknown = sorted(str(k) for k in meta if k not in GROUP_METADATA_KEYS)
        if unknown:
            raise ConfigError(f"Group '{namespace}': unknown metadata key(s): {', '.join(unknown)}")

        max_selections = meta.get("max")
        if max_selections is not None:
            if isinstance(max_selections, bool) or not isinstance(max_selections, int) or max_selections < 0:
                raise ConfigError(
                    f"Group '{namespace}': 'max' must be a non-negative integer, got {max_selections!r}"
                )

        depends = meta.get("depends", {})
        if not isinstance(depends, Mapping):
            raise ConfigError(f"Group '{namespace}': 'depends' must be a mapping, got {depends!r}")
        dependencies = {}
        for key, parents in depends.items():
            if not isinstance(key, str):
                raise ConfigError(f"Group '{namespace}': dependency key {key!r} must be a string")
            dependencies[key] = _string_list(parents, f"depends.{key}", namespace)

        return cls(
            namespace=namespace,
            max_selections=max_selections,
            readonly_keys=_string_list(meta.get("readonly", ()), "readonly", namespace),
            dependencies=dependencies,
            preselected=_string_list(meta.get("selected", ()), "selected", namespace),
        )


@dataclass(frozen=True)
class Choice:
    """A selectable leaf."""
    key: str
    namespace: str
    display_name: str
    readonly: bool = False
    depends_on: tuple[str, ...] = ()
    preselected: bool = False


@dataclass
class ChoiceTree:
    """Ordered lines (Group headers and Choice leaves) plus the group table."""
    lines: list = field(default_factory=list)
    groups: dict[str, Group] = field(default_factory=dict)

    @property
    def choices(self) -> list[Choice]:
        return [line for line in self.lines if isinstance(line, Choice)]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def group_for(self, choice: Choice) -> Group:
        return self.groups[choice.namespace]

    def find(self, key: str, namespace: str | None = None) -> Choice | None:
        """First choice with this key, optionally restricted to one namespace."""
        for choice in self.choices:
            if choice.key == key and (namespace is None or choice.namespace == namespace):
                return choice
        return None

    def preselected_keys(self) -> list[tuple[str, str]]:
        """(key, namespace) of pre-selected choices in line order."""
        return [(c.key, c.namespace) for c in self.choices if c.preselected]


def build_choice_tree(flat: dict[str, object]) -> ChoiceTree:
    """
    Build the line list and group table from a flattened choice mapping.

    Every namespace gets a Group (unbounded unless its '_' record says
    otherwise) and a header line where the namespace first appears.
    """
    records = {}
    for path, value in flat.items():
        namespace, key = split_path(path)
        if key == GROUP_KEY:
            records[namespace] = Group.from_metadata(namespace, value)

    tree = ChoiceTree()
    for path, value in flat.items():
        namespace, key = split_path(path)
        if namespace not in tree.groups:
            group = records.get(namespace) or Group(namespace)
            tree.groups[namespace] = group
            tree.lines.append(group)

        if key == GROUP_KEY:
            continue

        group = tree.groups[namespace]
        display_name = "" if isinstance(value, Mapping) else str(value)
        tree.lines.append(Choice(
            key=key,
            namespace=namespace,
            display_name=display_name,
            readonly=key in group.readonly_keys,
            depends_on=group.dependencies.get(key, ()),
            preselected=key in group.preselected,
        ))

    known = {c.key for c in tree.choices}
    for choice in tree.choices:
        for dependency in choice.depends_on:
            if dependency not in known:
                debug_log(f"choices: '{choice.key}' depends on unknown key '{dependency}'")

    return tree
