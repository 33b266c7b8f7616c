from . import n
from .blocks.lists import ListParser
from .cursor import LineCursor
from .parser import parse
from .util_test import check_ast_testing_string


def test_bullet_list() -> None:
    document = parse("- Item 1\n- Item 2\n  Continued")
    check_ast_testing_string(
        document,
        """<document><list>
        <list_item><paragraph><text>Item 1</text></paragraph></list_item>
        <list_item><paragraph><text>Item 2 Continued</text></paragraph></list_item>
        </list></document>""",
    )

    list_node = document.children[0]
    assert isinstance(list_node, n.ListNode)
    assert not list_node.ordered
    assert len(list_node.children) == 2


def test_enumerated_list() -> None:
    document = parse("1. One\n2. Two\n\n#. Auto\n\na. Letter")
    check_ast_testing_string(
        document,
        """<document><list ordered="True">
        <list_item><paragraph><text>One</text></paragraph></list_item>
        <list_item><paragraph><text>Two</text></paragraph></list_item>
        <list_item><paragraph><text>Auto</text></paragraph></list_item>
        <list_item><paragraph><text>Letter</text></paragraph></list_item>
        </list></document>""",
    )


def test_list_boundaries() -> None:
    # A bullet change or an enumerated item starts a new list
    check_ast_testing_string(
        parse("- a\n- b\n* c\n1. d"),
        """<document>
        <list><list_item><paragraph><text>a</text></paragraph></list_item>
        <list_item><paragraph><text>b</text></paragraph></list_item></list>
        <list><list_item><paragraph><text>c</text></paragraph></list_item></list>
        <list ordered="True"><list_item><paragraph><text>d</text></paragraph></list_item></list>
        </document>""",
    )


def test_nested_list() -> None:
    check_ast_testing_string(
        parse("- a\n\n  - nested 1\n  - nested 2\n\n- b\n\nAfter"),
        """<document>
        <list>
        <list_item><paragraph><text>a</text></paragraph>
        <list><list_item><paragraph><text>nested 1</text></paragraph></list_item>
        <list_item><paragraph><text>nested 2</text></paragraph></list_item></list>
        </list_item>
        <list_item><paragraph><text>b</text></paragraph></list_item>
        </list>
        <paragraph><text>After</text></paragraph>
        </document>""",
    )


def test_list_item_with_directive() -> None:
    check_ast_testing_string(
        parse("* Item\n\n  .. note::\n\n     Inside the item\n"),
        """<document><list><list_item>
        <paragraph><text>Item</text></paragraph>
        <admonition kind="note"><paragraph><text>Inside the item</text></paragraph></admonition>
        </list_item></list></document>""",
    )


def test_unicode_bullets() -> None:
    document = parse("• one\n• two")
    list_node = document.children[0]
    assert isinstance(list_node, n.ListNode)
    assert [item.get_text() for item in list_node.children] == ["one", "two"]


def test_standalone_list_parser() -> None:
    # Without a block parser, item bodies are kept as text
    parser = ListParser(LineCursor("- one\n  two\n- three"), None)
    node = parser.parse()
    check_ast_testing_string(
        node,
        """<list>
        <list_item><text>one
two</text></list_item>
        <list_item><text>three</text></list_item>
        </list>""",
    )

    assert ListParser(LineCursor("Not a list"), None).parse() is None


def test_definition_list() -> None:
    document = parse(
        "term\n   definition text\n   more\nother term\n   other definition\n\nAfter"
    )
    check_ast_testing_string(
        document,
        """<document>
        <definition_list>
        <definition_list_item>
        <term><text>term</text></term>
        <definition><paragraph><text>definition text more</text></paragraph></definition>
        </definition_list_item>
        <definition_list_item>
        <term><text>other term</text></term>
        <definition><paragraph><text>other definition</text></paragraph></definition>
        </definition_list_item>
        </definition_list>
        <paragraph><text>After</text></paragraph>
        </document>""",
    )

    definition_list = document.children[0]
    assert isinstance(definition_list, n.DefinitionList)
    item = definition_list.children[1]
    assert item.term.get_text() == "other term"
    assert item.definition.start == (5,)


def test_definition_list_requires_adjacent_definition() -> None:
    # A blank line between the term and the indented text is not a definition
    document = parse("term\n\n   quoted")
    assert not any(isinstance(node, n.DefinitionList) for node in document.children)
