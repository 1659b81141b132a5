"""
Choice tree: flattening, model and toggle constraints.
"""

from .flatten import GROUP_KEY, flatten, sort_paths, split_path
from .model import Choice, Group, ChoiceTree, build_choice_tree
from .constraints import ConstraintEngine, Verdict

__all__ = [
    # Flattening
    "GROUP_KEY",
    "flatten",
    "sort_paths",
    "split_path",
    # Model
    "Choice",
    "Group",
    "ChoiceTree",
    "build_choice_tree",
    # Constraints
    "ConstraintEngine",
    "Verdict",
]
