"""Tests for NodeAttributes equality and the null-aware comparator."""

import pytest

from vargraph.graph.attributes import (
    NodeAttributes,
    attributes_equal,
    equals_manage_null,
    optional_attributes_equal,
)
from vargraph.graph.node_id import NodeId


class TestEqualsManageNull:
    """Tests for equals_manage_null()."""

    def test_both_none_equal(self):
        compare = equals_manage_null(lambda x, y: x == y)
        assert compare(None, None)

    def test_none_vs_value_unequal(self):
        compare = equals_manage_null(lambda x, y: x == y)
        assert not compare(None, 1)
        assert not compare(1, None)

    def test_values_delegate_to_equals(self):
        calls = []

        def equals(x, y):
            calls.append((x, y))
            return True

        compare = equals_manage_null(equals)
        assert compare(1, 2)
        assert calls == [(1, 2)]

    def test_delegate_not_called_with_none(self):
        """The wrapped comparator only ever sees present values."""

        def equals(x, y):
            raise AssertionError("should not be called")

        compare = equals_manage_null(equals)
        assert not compare(None, "x")


class TestAttributesEqual:
    """Tests for attributes_equal()."""

    def test_same_label_no_extract(self):
        assert attributes_equal(NodeAttributes("x"), NodeAttributes("x", None))

    def test_label_is_case_sensitive(self):
        assert not attributes_equal(NodeAttributes("x"), NodeAttributes("X"))

    def test_extract_null_vs_present(self):
        assert not attributes_equal(NodeAttributes("x"), NodeAttributes("x", NodeId("a")))

    def test_extract_compared_by_node_id(self):
        assert attributes_equal(NodeAttributes("x", NodeId("a")), NodeAttributes("x", NodeId("a")))
        assert not attributes_equal(
            NodeAttributes("x", NodeId("a")), NodeAttributes("x", NodeId("b"))
        )

    def test_operator_matches_function(self):
        a = NodeAttributes("x", NodeId("a"))
        b = NodeAttributes("x", NodeId("a"))
        assert a == b
        assert hash(a) == hash(b)
        assert NodeAttributes("x") != NodeAttributes("y")


class TestOptionalAttributesEqual:
    """Tests for the attributes-or-absent comparator."""

    def test_both_absent(self):
        assert optional_attributes_equal(None, None)

    def test_absent_vs_present(self):
        assert not optional_attributes_equal(None, NodeAttributes(""))
        assert not optional_attributes_equal(NodeAttributes(""), None)


class TestAttributesCodec:
    """Tests for NodeAttributes.to_dict() / from_dict()."""

    def test_to_dict(self):
        assert NodeAttributes("x", NodeId("a")).to_dict() == {"label": "x", "extract": "a"}
        assert NodeAttributes("x").to_dict() == {"label": "x", "extract": None}

    def test_from_dict_missing_extract(self):
        assert NodeAttributes.from_dict({"label": "x"}) == NodeAttributes("x")

    def test_from_dict_rejects_bad_records(self):
        assert NodeAttributes.from_dict({"extract": None}) is None
        assert NodeAttributes.from_dict({"label": 3}) is None
        assert NodeAttributes.from_dict({"label": "x", "extract": 5}) is None
        assert NodeAttributes.from_dict({"label": "x", "extract": ""}) is None
        assert NodeAttributes.from_dict(["x"]) is None

    def test_with_helpers_return_new_values(self):
        original = NodeAttributes("x")
        renamed = original.with_label("y")
        pointed = original.with_extract(NodeId("a"))
        assert original == NodeAttributes("x")
        assert renamed == NodeAttributes("y")
        assert pointed == NodeAttributes("x", NodeId("a"))


class TestAttributesConstruction:
    """NodeAttributes only holds values its encoding can carry."""

    @pytest.mark.parametrize("label", [5, None, ["x"]])
    def test_rejects_non_string_label(self, label):
        with pytest.raises(TypeError):
            NodeAttributes(label)

    def test_rejects_raw_text_extract(self):
        with pytest.raises(TypeError):
            NodeAttributes("x", "node-a")

    def test_with_label_checks_type(self):
        with pytest.raises(TypeError):
            NodeAttributes("x").with_label(5)
