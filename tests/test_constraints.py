"""
Tests for toggle validation: read-only locks, group limits and dependencies.
"""

from nestpick.tree import ConstraintEngine, Verdict, build_choice_tree, flatten


def engine_for(config: dict, scoped: bool = False) -> ConstraintEngine:
    return ConstraintEngine(build_choice_tree(flatten(config)), scoped=scoped)


def choice(engine: ConstraintEngine, key: str, namespace: str | None = None):
    return engine.tree.find(key, namespace)


class TestCapacity:
    """Tests for per-group max selections."""

    def test_third_member_rejected_at_max_two(self):
        engine = engine_for({"G": {"_": {"max": 2}, "a": "A", "b": "B", "c": "C"}})
        selections = {"a": "G", "b": "G"}

        verdict = engine.can_select(choice(engine, "c"), selections)

        assert not verdict
        assert verdict.reason == "max"
        assert verdict.limit == 2
        assert verdict.message == "Max selections allowed is: 2"

    def test_other_namespaces_do_not_count(self):
        engine = engine_for({
            "G": {"_": {"max": 1}, "a": "A"},
            "H": {"b": "B", "c": "C"},
        })
        assert engine.can_select(choice(engine, "a"), {"b": "H", "c": "H"})

    def test_unbounded_by_default(self):
        engine = engine_for({"G": {k: k.upper() for k in "abcdef"}})
        selections = {k: "G" for k in "abcde"}
        assert engine.can_select(choice(engine, "f"), selections)

    def test_zero_max_blocks_everything(self):
        engine = engine_for({"G": {"_": {"max": 0}, "a": "A"}})
        assert engine.can_select(choice(engine, "a"), {}).message == "Max selections allowed is: 0"

    def test_capacity_checked_before_dependencies(self):
        engine = engine_for({"G": {"_": {"max": 1, "depends": {"b": ["a"]}}, "a": "A", "b": "B", "c": "C"}})
        verdict = engine.can_select(choice(engine, "b"), {"c": "G"})
        assert verdict.reason == "max"


class TestDependencies:
    """Tests for depends-on and orphaned dependents."""

    CONFIG = {"G": {"_": {"depends": {"b": ["a"]}}, "a": "A", "b": "B"}}

    def test_select_before_dependency_fails(self):
        engine = engine_for(self.CONFIG)
        verdict = engine.can_select(choice(engine, "b"), {})
        assert not verdict
        assert verdict.reason == "missing"
        assert verdict.names == ("A",)
        assert verdict.message == "Depends on: A"

    def test_select_after_dependency_succeeds(self):
        engine = engine_for(self.CONFIG)
        assert engine.can_select(choice(engine, "b"), {"a": "G"}).allowed

    def test_deselect_with_selected_dependent_fails(self):
        engine = engine_for(self.CONFIG)
        verdict = engine.can_deselect(choice(engine, "a"), {"a": "G", "b": "G"})
        assert verdict.reason == "dependents"
        assert verdict.message == "First remove child dependencies: B"

    def test_deselect_with_unselected_dependent_succeeds(self):
        engine = engine_for(self.CONFIG)
        assert engine.can_deselect(choice(engine, "a"), {"a": "G"})

    def test_all_missing_dependencies_listed(self):
        engine = engine_for({"G": {
            "_": {"depends": {"c": ["a", "b"]}},
            "a": "Alpha", "b": "Beta", "c": "Gamma",
        }})
        assert engine.can_select(choice(engine, "c"), {"b": "G"}).message == "Depends on: Alpha"
        assert engine.can_select(choice(engine, "c"), {}).message == "Depends on: Alpha, Beta"

    def test_all_dependents_listed(self):
        engine = engine_for({"G": {
            "_": {"depends": {"b": ["a"], "c": ["a"]}},
            "a": "A", "b": "B", "c": "C",
        }})
        verdict = engine.can_deselect(choice(engine, "a"), {"a": "G", "b": "G", "c": "G"})
        assert verdict.names == ("B", "C")

    def test_unknown_dependency_never_blocks(self):
        engine = engine_for({"G": {"_": {"depends": {"a": ["ghost"]}}, "a": "A"}})
        assert engine.can_select(choice(engine, "a"), {})


class TestReadonly:
    def test_readonly_cannot_be_selected(self):
        engine = engine_for({"G": {"_": {"readonly": ["a"]}, "a": "A"}})
        verdict = engine.can_select(choice(engine, "a"), {})
        assert verdict.reason == "readonly"
        assert verdict.message == "Option cannot be changed"

    def test_readonly_cannot_be_deselected(self):
        engine = engine_for({"G": {"_": {"readonly": ["a"], "selected": ["a"]}, "a": "A"}})
        assert engine.can_deselect(choice(engine, "a"), {"a": "G"}).reason == "readonly"

    def test_readonly_checked_before_capacity(self):
        engine = engine_for({"G": {"_": {"readonly": ["b"], "max": 1}, "a": "A", "b": "B"}})
        assert engine.can_select(choice(engine, "b"), {"a": "G"}).reason == "readonly"


class TestNamespaceLookup:
    """Dependency lookups are by key across the tree unless scoped."""

    CONFIG = {
        "Other": {"a": "Other A"},
        "G": {"_": {"depends": {"b": ["a"]}}, "a": "A", "b": "B"},
    }

    def test_same_key_elsewhere_satisfies_dependency(self):
        engine = engine_for(self.CONFIG)
        assert engine.can_select(choice(engine, "b"), {"a": "Other"})

    def test_missing_name_resolved_from_first_key_match(self):
        engine = engine_for(self.CONFIG)
        assert engine.can_select(choice(engine, "b"), {}).names == ("Other A",)

    def test_scoped_requires_same_namespace(self):
        engine = engine_for(self.CONFIG, scoped=True)
        verdict = engine.can_select(choice(engine, "b"), {"a": "Other"})
        assert verdict.names == ("A",)

    def test_dependents_in_other_namespaces_block_deselect(self):
        engine = engine_for({
            "G": {"a": "A"},
            "H": {"_": {"depends": {"b": ["a"]}}, "b": "B"},
        })
        selections = {"a": "G", "b": "H"}
        assert engine.can_deselect(choice(engine, "a"), selections).names == ("B",)

    def test_scoped_ignores_dependents_in_other_namespaces(self):
        engine = engine_for({
            "G": {"a": "A"},
            "H": {"_": {"depends": {"b": ["a"]}}, "b": "B"},
        }, scoped=True)
        assert engine.can_deselect(choice(engine, "a"), {"a": "G", "b": "H"})

    def test_scoped_deselect_checks_namespace_holding_the_key(self):
        engine = engine_for(self.CONFIG, scoped=True)
        selections = {"a": "G", "b": "G"}
        verdict = engine.can_deselect(choice(engine, "a", "Other"), selections)
        assert not verdict
        assert verdict.message == "First remove child dependencies: B"


class TestVerdict:
    def test_ok_is_truthy_without_message(self):
        verdict = Verdict.ok()
        assert verdict
        assert verdict.message == ""

    def test_check_toggle_dispatches_on_selection(self):
        engine = engine_for({"G": {"_": {"depends": {"b": ["a"]}}, "a": "A", "b": "B"}})
        a = choice(engine, "a")
        assert engine.check_toggle(a, {"a": "G", "b": "G"}).reason == "dependents"
        assert engine.check_toggle(choice(engine, "b"), {}).reason == "missing"
        assert engine.check_toggle(a, {})
