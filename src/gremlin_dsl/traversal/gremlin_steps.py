"""Gremlin step vocabulary for the traversal builder.

Every method here appends one METHOD step through ``step()`` and returns the
traversal for chaining. Arguments are inserted as ``str(arg)``; quote string
literals yourself (``has("name", "'marko'")``) and pass nested traversals
(``__().out()``) as-is. Python literals keep their Python spelling, so pass
Gremlin ones as strings: ``value_map("true")``, not ``value_map(True)``.

Names that clash with Python keywords or builtins carry a trailing
underscore (``in_``, ``as_``, ``id_``); the rendered step name never does.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gremlin_dsl.traversal.builder import GraphTraversal


class GremlinSteps:
    """Mixin providing the standard Gremlin steps."""

    # Sources

    def V(self: "GraphTraversal", *ids: Any) -> "GraphTraversal":
        """Start from vertices, all of them when no ids are given."""
        return self.step("V", *ids)

    def E(self: "GraphTraversal", *ids: Any) -> "GraphTraversal":
        """Start from edges, all of them when no ids are given."""
        return self.step("E", *ids)

    def add_v(self: "GraphTraversal", *label: Any) -> "GraphTraversal":
        return self.step("addV", *label)

    def add_e(self: "GraphTraversal", label: Any) -> "GraphTraversal":
        return self.step("addE", label)

    def from_(self: "GraphTraversal", vertex: Any) -> "GraphTraversal":
        """Set the out vertex of an edge added with add_e."""
        return self.step("from", vertex)

    def to(self: "GraphTraversal", vertex: Any) -> "GraphTraversal":
        """Set the in vertex of an edge added with add_e."""
        return self.step("to", vertex)

    def inject(self: "GraphTraversal", *values: Any) -> "GraphTraversal":
        return self.step("inject", *values)

    # Filters

    def has(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        """Filter by property: has(key), has(key, value) or has(label, key, value)."""
        return self.step("has", *args)

    def has_label(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("hasLabel", *labels)

    def has_id(self: "GraphTraversal", *ids: Any) -> "GraphTraversal":
        return self.step("hasId", *ids)

    def has_not(self: "GraphTraversal", key: Any) -> "GraphTraversal":
        return self.step("hasNot", key)

    def where(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        return self.step("where", *args)

    def is_(self: "GraphTraversal", value: Any) -> "GraphTraversal":
        return self.step("is", value)

    def not_(self: "GraphTraversal", traversal: Any) -> "GraphTraversal":
        return self.step("not", traversal)

    def and_(self: "GraphTraversal", *traversals: Any) -> "GraphTraversal":
        return self.step("and", *traversals)

    def or_(self: "GraphTraversal", *traversals: Any) -> "GraphTraversal":
        return self.step("or", *traversals)

    def dedup(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("dedup", *labels)

    def limit(self: "GraphTraversal", count: Any) -> "GraphTraversal":
        return self.step("limit", count)

    def range_(self: "GraphTraversal", low: Any, high: Any) -> "GraphTraversal":
        return self.step("range", low, high)

    def skip(self: "GraphTraversal", count: Any) -> "GraphTraversal":
        return self.step("skip", count)

    # Navigation

    def out(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        """Move to adjacent vertices over outgoing edges."""
        return self.step("out", *labels)

    def in_(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        """Move to adjacent vertices over incoming edges."""
        return self.step("in", *labels)

    def both(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("both", *labels)

    def out_e(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("outE", *labels)

    def in_e(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("inE", *labels)

    def both_e(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("bothE", *labels)

    def out_v(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("outV")

    def in_v(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("inV")

    def other_v(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("otherV")

    def both_v(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("bothV")

    # Properties and maps

    def values(self: "GraphTraversal", *keys: Any) -> "GraphTraversal":
        return self.step("values", *keys)

    def value_map(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        return self.step("valueMap", *args)

    def element_map(self: "GraphTraversal", *keys: Any) -> "GraphTraversal":
        return self.step("elementMap", *keys)

    def properties(self: "GraphTraversal", *keys: Any) -> "GraphTraversal":
        return self.step("properties", *keys)

    def property(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        """Set a property: property(key, value) or property(cardinality, key, value)."""
        return self.step("property", *args)

    def id_(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("id")

    def label(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("label")

    def constant(self: "GraphTraversal", value: Any) -> "GraphTraversal":
        return self.step("constant", value)

    # Aggregation and ordering

    def count(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("count", *scope)

    def sum_(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("sum", *scope)

    def min_(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("min", *scope)

    def max_(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("max", *scope)

    def mean(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("mean", *scope)

    def fold(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("fold")

    def unfold(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("unfold")

    def group(self: "GraphTraversal", *side_effect_key: Any) -> "GraphTraversal":
        return self.step("group", *side_effect_key)

    def group_count(self: "GraphTraversal", *side_effect_key: Any) -> "GraphTraversal":
        return self.step("groupCount", *side_effect_key)

    def order(self: "GraphTraversal", *scope: Any) -> "GraphTraversal":
        return self.step("order", *scope)

    def by(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        """Modulate the previous step, e.g. order().by('name', desc)."""
        return self.step("by", *args)

    # Labels and paths

    def as_(self: "GraphTraversal", *labels: Any) -> "GraphTraversal":
        return self.step("as", *labels)

    def select(self: "GraphTraversal", *args: Any) -> "GraphTraversal":
        return self.step("select", *args)

    def path(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("path")

    # Branching and looping

    def repeat(self: "GraphTraversal", traversal: Any) -> "GraphTraversal":
        return self.step("repeat", traversal)

    def times(self: "GraphTraversal", count: Any) -> "GraphTraversal":
        return self.step("times", count)

    def until(self: "GraphTraversal", condition: Any) -> "GraphTraversal":
        return self.step("until", condition)

    def emit(self: "GraphTraversal", *condition: Any) -> "GraphTraversal":
        return self.step("emit", *condition)

    def coalesce(self: "GraphTraversal", *traversals: Any) -> "GraphTraversal":
        return self.step("coalesce", *traversals)

    def union(self: "GraphTraversal", *traversals: Any) -> "GraphTraversal":
        return self.step("union", *traversals)

    def side_effect(self: "GraphTraversal", traversal: Any) -> "GraphTraversal":
        return self.step("sideEffect", traversal)

    # Mutation and terminal steps

    def drop(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("drop")

    def to_list(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("toList")

    def iterate(self: "GraphTraversal") -> "GraphTraversal":
        return self.step("iterate")
