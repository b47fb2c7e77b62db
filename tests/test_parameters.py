"""Tests for the parameter bag and binder."""

import pytest
from neoquery.query_builder import ParameterBag, ParameterBinder
from neoquery.query_builder.parameters import CYPHER_PLACEHOLDERS, GREMLIN_PLACEHOLDER


class TestParameterBag:
    """Test the ordered, append-only bag."""

    def test_names_follow_insertion_count(self):
        """Test names are p0, p1, ... in the order values are added."""
        bag = ParameterBag()

        names = [bag.add(value) for value in ("a", 1, None)]

        assert names == ["p0", "p1", "p2"]
        assert list(bag.items()) == [("p0", "a"), ("p1", 1), ("p2", None)]

    def test_continues_from_initial_values(self):
        """Test numbering continues after existing entries."""
        bag = ParameterBag({"p0": 10, "p1": 11})

        assert bag.add(12) == "p2"
        assert len(bag) == 3

    def test_skips_names_already_taken(self):
        """Test a seeded name out of sequence is never overwritten."""
        bag = ParameterBag({"p1": "a"})

        assert bag.add("b") == "p2"
        assert bag.add("c") == "p3"
        assert dict(bag) == {"p1": "a", "p2": "b", "p3": "c"}

    def test_initial_mapping_is_copied(self):
        """Test the bag does not write through to its initial mapping."""
        initial = {"p0": 1}
        bag = ParameterBag(initial)

        bag.add(2)

        assert initial == {"p0": 1}

    def test_is_read_only_mapping(self):
        """Test the bag does not support item assignment."""
        bag = ParameterBag()

        with pytest.raises(TypeError):
            bag["p0"] = 1  # type: ignore[index]


class TestParameterBinder:
    """Test value binding and placeholder tokens."""

    def test_bind_returns_name(self, binder):
        """Test bind returns the generated name and records the value."""
        assert binder.bind("x") == "p0"
        assert binder.bind("y") == "p1"
        assert dict(binder.bag) == {"p0": "x", "p1": "y"}

    def test_bind_never_rejects(self, binder):
        """Test arbitrary values are accepted."""
        value = object()

        binder.bind(value)

        assert binder.bag["p0"] is value

    def test_braces_placeholder(self, binder):
        """Test the default Cypher placeholder token."""
        assert binder.placeholder(1) == "{p0}"

    def test_dollar_placeholder(self):
        """Test the Bolt-era Cypher placeholder token."""
        binder = ParameterBinder(placeholder=CYPHER_PLACEHOLDERS["dollar"])

        assert binder.placeholder(1) == "$p0"

    def test_gremlin_placeholder(self):
        """Test Gremlin script variables are bare names."""
        binder = ParameterBinder(placeholder=GREMLIN_PLACEHOLDER)

        assert binder.placeholder(1) == "p0"

    def test_shared_bag_continues_numbering(self):
        """Test a binder on an existing bag continues its numbering."""
        bag = ParameterBag()
        ParameterBinder(bag).bind("first")

        assert ParameterBinder(bag).placeholder("second") == "{p1}"

    def test_separate_binders_do_not_collide(self):
        """Test two binders with their own bags number independently."""
        first, second = ParameterBinder(), ParameterBinder()

        first.bind("a")

        assert second.bind("b") == "p0"
