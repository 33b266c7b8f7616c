from . import n
from .blocks.tabs import language_display_name
from .diagnostics import UnknownTabDirective
from .parser import parse, parse_rst
from .util_test import check_ast_testing_string


def test_tabs() -> None:
    document, diagnostics = parse_rst(
        """.. tabs::
   :hidden: true

   .. tab:: Linux

      Linux content

      .. note::

         Nested note

   .. group-tab:: macOS

      Mac content

   .. code-tab:: py

      def main():
          print("hi")

   .. code-tab:: js Node.js

      console.log("hi");

After tabs
"""
    )
    assert diagnostics == []
    check_ast_testing_string(
        document,
        """<document>
        <tabs hidden="true">
        <tab title="Linux">
        <paragraph><text>Linux content</text></paragraph>
        <admonition kind="note"><paragraph><text>Nested note</text></paragraph></admonition>
        </tab>
        <tab title="macOS" group="macOS"><paragraph><text>Mac content</text></paragraph></tab>
        <tab title="Python" language="py"><literal_block language="py">def main():
    print("hi")</literal_block></tab>
        <tab title="Node.js" language="js"><literal_block language="js">console.log("hi");</literal_block></tab>
        </tabs>
        <paragraph><text>After tabs</text></paragraph>
        </document>""",
    )

    tabs = document.children[0]
    assert isinstance(tabs, n.Tabs)
    assert [tab.start[0] for tab in tabs.children] == [4, 12, 16, 21]
    assert tabs.children[0].children[1].start == (8,)


def test_tabs_skip_unknown_content() -> None:
    document, diagnostics = parse_rst(
        """.. tabs::

   Stray text

   .. tab:: Only

      Body
"""
    )
    tabs = document.children[0]
    assert isinstance(tabs, n.Tabs)
    assert [tab.title for tab in tabs.children] == ["Only"]
    assert diagnostics == [UnknownTabDirective("Stray text", 3)]


def test_empty_tab() -> None:
    check_ast_testing_string(
        parse(".. tabs::\n\n   .. tab:: Empty\n   .. tab:: Full\n\n      Text\n"),
        """<document><tabs>
        <tab title="Empty"></tab>
        <tab title="Full"><paragraph><text>Text</text></paragraph></tab>
        </tabs></document>""",
    )


def test_language_display_names() -> None:
    assert language_display_name("py") == "Python"
    assert language_display_name("CPP") == "C++"
    assert language_display_name("sh") == "Shell"
    assert language_display_name("cobol") == "cobol"


def test_code_tab_title_after_any_whitespace() -> None:
    document = parse(".. tabs::\n\n   .. code-tab:: py\tMy Title\n\n      x = 1\n")
    check_ast_testing_string(
        document,
        """<document>
        <tabs>
        <tab title="My Title" language="py"><literal_block language="py">x = 1</literal_block></tab>
        </tabs>
        </document>""",
    )
