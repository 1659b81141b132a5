"""
Flattening of nested choice mappings into dotted paths.
"""

from collections.abc import Mapping

# Reserved key carrying group metadata at any nesting level
GROUP_KEY = "_"


def flatten(config: Mapping, prefix: str = "") -> dict[str, object]:
    """
    Flatten a nested mapping into {dotted.path: leaf} preserving order.

    Non-empty mappings are expanded, except under the reserved "_" key whose
    value is kept whole. Empty mappings are leaves.

    Example:
        {"Db": {"_": {"max": 1}, "Lang": {"php": "PHP"}}}
        -> {"Db._": {"max": 1}, "Db.Lang.php": "PHP"}
    """
    result = {}
    for key, value in config.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping) and value and str(key) != GROUP_KEY:
            result.update(flatten(value, f"{path}."))
        else:
            result[path] = value
    return result


def sort_paths(flat: dict[str, object]) -> dict[str, object]:
    """Return the flattened mapping ordered by path."""
    return dict(sorted(flat.items()))


def split_path(path: str) -> tuple[str, str]:
    """Split a dotted path into (namespace, key). Root paths have namespace ''."""
    namespace, _, key = path.rpartition(".")
    return namespace, key
