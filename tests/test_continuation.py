from gedcom_lossless.loader import RecordNode, resolve_value, structural_children


def make_node(tag, value="", children=None, level=0):
    return RecordNode(level=level, tag=tag, value=value, children=children or [])


def test_resolve_value_conc_appends_without_separator():
    node = make_node(
        "NOTE",
        "Line one",
        children=[make_node("CONC", " and more", level=1)],
    )
    assert resolve_value(node) == "Line one and more"


def test_resolve_value_cont_inserts_newline():
    node = make_node(
        "NOTE",
        "Hello",
        children=[make_node("CONT", "World!", level=1)],
    )
    assert resolve_value(node) == "Hello\nWorld!"


def test_resolve_value_mixed_in_order():
    node = make_node(
        "NOTE",
        "A",
        children=[
            make_node("CONC", "B", level=1),
            make_node("CONT", "C", level=1),
            make_node("CONT", "", level=1),
            make_node("CONC", "D", level=1),
        ],
    )
    assert resolve_value(node) == "AB\nC\nD"


def test_resolve_value_ignores_non_continuation_children():
    node = make_node(
        "TITL",
        "Title",
        children=[make_node("_X", "ignored", level=1)],
    )
    assert resolve_value(node) == "Title"


def test_resolve_value_is_pure():
    node = make_node(
        "NOTE",
        "Hello",
        children=[make_node("CONT", "World!", level=1)],
    )
    first = resolve_value(node)
    second = resolve_value(node)

    assert first == second
    assert node.value == "Hello"
    assert len(node.children) == 1


def test_structural_children_drops_conc_and_cont():
    node = make_node(
        "NOTE",
        "x",
        children=[
            make_node("CONC", "y", level=1),
            make_node("_EXT", "z", level=1),
            make_node("CONT", "w", level=1),
        ],
    )
    assert [c.tag for c in structural_children(node)] == ["_EXT"]


def test_resolve_value_cont_then_conc():
    node = make_node(
        "NOTE",
        "Hello",
        level=1,
        children=[
            make_node("CONT", "World", level=2),
            make_node("CONC", "!", level=2),
        ],
    )
    assert resolve_value(node) == "Hello\nWorld!"
