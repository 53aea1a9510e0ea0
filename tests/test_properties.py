from collections import Counter

from hypothesis import given, strategies as st

from sexpa.interpreter import Interpreter
from sexpa.reader.reader import read_source
from sexpa.types.atom import Reference

PAIRS = [("(", ")"), ("[", "]"), ("{", "}")]

scalars = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(str),
    st.sampled_from(["true", "false", "foo", "bar-baz", "+", "3.5", "-0.25", ":else"]),
)

trees = st.recursive(
    scalars,
    lambda children: st.tuples(st.sampled_from(PAIRS), st.lists(children, max_size=4)),
    max_leaves=30,
)

programs = st.lists(trees, max_size=5)


def _to_source(tree):
    if isinstance(tree, str):
        return tree
    (opener, closer), kids = tree
    return opener + " ".join(_to_source(k) for k in kids) + closer


def _count_containers(tree):
    if isinstance(tree, str):
        return 0
    return 1 + sum(_count_containers(k) for k in tree[1])


def _nested_scalars(tree, inside=False):
    if isinstance(tree, str):
        return [tree] if inside else []
    return [s for k in tree[1] for s in _nested_scalars(k, True)]


def _top_level_ids(program):
    ids, next_id = [], 0
    for tree in program:
        if not isinstance(tree, str):
            ids.append(next_id)
            next_id += _count_containers(tree)
    return ids


@given(programs)
def test_one_node_per_opening_delimiter(program):
    arena = read_source("\n".join(_to_source(t) for t in program))
    assert len(arena) == sum(_count_containers(t) for t in program)


@given(programs)
def test_references_point_forward(program):
    arena = read_source(" ".join(_to_source(t) for t in program))
    for node_id in arena:
        for child in arena[node_id].children:
            if isinstance(child, Reference):
                assert child.node_id > node_id


@given(programs)
def test_driver_visits_each_top_level_form_once(program):
    lines = []
    interp = Interpreter(" ".join(_to_source(t) for t in program), emit=lines.append, show_ids=False)
    visited = interp.run()
    assert visited == _top_level_ids(program)
    assert visited == sorted(set(visited))
    assert len([line for line in lines if line]) == len(interp.arena)


@given(programs)
def test_rendering_preserves_literals(program):
    lines = []
    Interpreter(" ".join(_to_source(t) for t in program), emit=lines.append, show_ids=False).run()
    rendered = [
        word
        for line in lines
        if line
        for word in line[1:-1].split()[1:]
        if not word.startswith("%")
    ]
    expected = [s for t in program for s in _nested_scalars(t)]
    assert Counter(rendered) == Counter(expected)
