from . import n
from .blocks.directive import classify_comment
from .parser import parse
from .util_test import check_ast_testing_string


def test_generic_directive() -> None:
    document = parse(
        """.. include:: ../substitutions.rst.in

.. versionadded:: 4.2 beta
   :class: new

   Body text.

Paragraph
"""
    )
    check_ast_testing_string(
        document,
        """<document>
        <directive name="include" args="../substitutions.rst.in"></directive>
        <directive name="versionadded" args="4.2 beta" class="new">
        <paragraph><text>Body text.</text></paragraph>
        </directive>
        <paragraph><text>Paragraph</text></paragraph>
        </document>""",
    )

    directive = document.children[1]
    assert isinstance(directive, n.Directive)
    assert directive.args == ["4.2", "beta"]
    assert directive.options == {"class": "new"}


def test_duplicate_options_last_wins() -> None:
    directive = parse(".. include:: a\n   :start-after: one\n   :start-after: two\n").children[0]
    assert isinstance(directive, n.Directive)
    assert directive.options == {"start-after": "two"}


def test_options_stop_at_first_non_option() -> None:
    directive = parse(
        ".. include:: a\n   :one: 1\n\n   :two: 2\n"
    ).children[0]
    assert isinstance(directive, n.Directive)
    assert directive.options == {"one": "1"}
    assert directive.get_text() == ":two: 2"


def test_comment_fallbacks() -> None:
    check_ast_testing_string(
        parse(
            """.. _Onnxruntime-Genai:

.. _`label with spaces`: https://example.com

.. |project| replace:: My Project

.. navtitle: Olive

.. this is a generic comment
   that spans multiple lines

..

.. final comment"""
        ),
        """<document>
        <directive name="reference" args="Onnxruntime-Genai"></directive>
        <directive name="reference" args="label with spaces https://example.com"></directive>
        <directive name="substitution" args="project replace:: My Project"></directive>
        <directive name="navtitle" args="Olive"></directive>
        <directive name="comment" args="this is a generic comment">
        <paragraph><text>that spans multiple lines</text></paragraph>
        </directive>
        <directive name="comment"></directive>
        <directive name="comment" args="final comment"></directive>
        </document>""",
    )


def test_classify_comment() -> None:
    assert classify_comment("_Foo:") == ("reference", ["Foo"])
    assert classify_comment("_`a b`: target") == ("reference", ["a b", "target"])
    assert classify_comment("|x| y") == ("substitution", ["x", "y"])
    assert classify_comment("|x|") == ("substitution", ["x"])
    assert classify_comment("key: value") == ("key", ["value"])
    assert classify_comment("key:") == ("key", [])
    assert classify_comment("not a key: value") == ("comment", ["not a key: value"])
    assert classify_comment("") == ("comment", [])


def test_comment_continuation_after_blank_line() -> None:
    document = parse(
        ".. this is a comment\n\n   with continuation after blank line\n\n.. next item"
    )
    first, second = document.children
    assert isinstance(first, n.Directive) and isinstance(second, n.Directive)
    assert (first.name, first.get_text()) == (
        "comment",
        "with continuation after blank line",
    )
    assert (second.name, second.args) == ("comment", ["next item"])


def test_admonitions() -> None:
    check_ast_testing_string(
        parse(
            """.. warning::
   :class: prominent

   Be careful.

.. tip:: Inline text
   continues here.

.. important:: Heading text

   Body text.

.. seealso::

   Not an admonition.
"""
        ),
        """<document>
        <admonition kind="warning" class="prominent"><paragraph><text>Be careful.</text></paragraph></admonition>
        <admonition kind="tip"><paragraph><text>Inline text continues here.</text></paragraph></admonition>
        <admonition kind="important">
        <paragraph><text>Heading text</text></paragraph>
        <paragraph><text>Body text.</text></paragraph>
        </admonition>
        <directive name="seealso"><paragraph><text>Not an admonition.</text></paragraph></directive>
        </document>""",
    )


def test_empty_admonition() -> None:
    document = parse(".. note::\n\nOutside")
    check_ast_testing_string(
        document,
        """<document>
        <admonition kind="note"></admonition>
        <paragraph><text>Outside</text></paragraph>
        </document>""",
    )


def test_container_card_dropdown() -> None:
    check_ast_testing_string(
        parse(
            """.. container:: one two

   Inside the container.

.. card:: Card title
   :link: https://example.com

   Card body.

.. card::

   Untitled card.

.. dropdown:: Click me
   :open:

   Hidden content.
"""
        ),
        """<document>
        <container classes="one two"><paragraph><text>Inside the container.</text></paragraph></container>
        <card title="Card title" link="https://example.com"><paragraph><text>Card body.</text></paragraph></card>
        <card><paragraph><text>Untitled card.</text></paragraph></card>
        <dropdown title="Click me" open=""><paragraph><text>Hidden content.</text></paragraph></dropdown>
        </document>""",
    )


def test_dropdown_requires_title() -> None:
    directive = parse(".. dropdown::\n\n   Body").children[0]
    assert isinstance(directive, n.Directive)
    assert directive.name == "dropdown"


def test_grid() -> None:
    check_ast_testing_string(
        parse(
            """.. grid:: 1 2 2 3
   :gutter: 1 2 3
   :outline:

   .. grid-item-card:: Title A
      :link: a

      Card A body

   .. grid-item::

      Item body

After the grid
"""
        ),
        """<document>
        <grid columns="1 2 2 3" gutter="1 2 3" outline="">
        <grid-item-card title="Title A" link="a"><paragraph><text>Card A body</text></paragraph></grid-item-card>
        <grid-item><paragraph><text>Item body</text></paragraph></grid-item>
        </grid>
        <paragraph><text>After the grid</text></paragraph>
        </document>""",
    )


def test_grid_defaults() -> None:
    grid = parse(".. grid::\n   :gutter: 2\n").children[0]
    assert isinstance(grid, n.Grid)
    assert grid.columns == [1]
    assert grid.gutter == "2"
    assert grid.options is None
    assert grid.children == []


def test_buttons() -> None:
    document = parse(
        """.. button-link:: https://example.com
   :class: link-button

   Go there
   now

.. button-ref:: install-guide

   Install
"""
    )
    link, ref = document.children
    assert isinstance(link, n.ButtonLink)
    assert link.url == "https://example.com"
    assert link.text == "Go there now"
    assert link.css_class == "link-button"
    assert link.serialize()["class"] == "link-button"
    assert link.serialize()["type"] == "button-link"

    assert isinstance(ref, n.ButtonRef)
    assert ref.ref == "install-guide"
    assert ref.text == "Install"
    assert "class" not in ref.serialize()
    assert ref.options is None


def test_code_blocks() -> None:
    document = parse(
        """.. code-block:: python
   :linenos:

   def f():
       return 1

.. code::

   plain

.. parsed-literal::

   **bold** text
"""
    )
    check_ast_testing_string(
        document,
        """<document>
        <code-block language="python" linenos="">def f():
    return 1</code-block>
        <code-block>plain</code-block>
        <code-block parsed="True">**bold** text</code-block>
        </document>""",
    )

    code_block = document.children[0]
    assert isinstance(code_block, n.CodeBlock)
    assert code_block.content == "def f():\n    return 1"


def test_images() -> None:
    document = parse(
        """.. image:: /images/a.png
   :alt: An image
   :width: 100px

.. figure:: /images/b.png
   :align: center

   The caption
   continues.

   The legend.
"""
    )
    image, figure = document.children
    assert isinstance(image, n.Image) and not isinstance(image, n.Figure)
    assert image.uri == "/images/a.png"
    assert (image.alt, image.width, image.height) == ("An image", "100px", None)
    assert image.options == {"alt": "An image", "width": "100px"}

    assert isinstance(figure, n.Figure)
    assert figure.align == "center"
    assert figure.caption == "The caption continues."
    assert figure.legend == "The legend."
    assert figure.serialize()["type"] == "figure"


def test_option_fields_render_once() -> None:
    document = parse(
        """.. image:: /images/a.png
   :alt: An image
   :width: 100px

.. figure:: /images/b.png
   :align: center

   The caption.

.. button-link:: https://example.com
   :class: link-button

   Go
"""
    )
    check_ast_testing_string(
        document,
        """<document>
        <image uri="/images/a.png" alt="An image" width="100px"></image>
        <figure uri="/images/b.png" align="center" caption="The caption."></figure>
        <button-link text="Go" class="link-button" url="https://example.com"></button-link>
        </document>""",
    )
