import dataclasses
from dataclasses import dataclass
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Generic,
    Iterator,
    List,
    MutableSequence,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

__all__ = (
    "Node",
    "InlineNode",
    "Parent",
    "Document",
    "Heading",
    "Section",
    "Paragraph",
    "Text",
    "Directive",
    "ListNode",
    "ListNodeItem",
    "DefinitionList",
    "DefinitionListItem",
    "Term",
    "Definition",
    "LiteralBlock",
    "Table",
    "TableRow",
    "TableCell",
    "Tabs",
    "Tab",
    "Admonition",
    "Container",
    "Image",
    "Figure",
    "Card",
    "ButtonLink",
    "ButtonRef",
    "CodeBlock",
    "Dropdown",
    "Grid",
    "GridItem",
    "GridItemCard",
)

SerializableType = Union[None, bool, str, int, float, Dict[str, Any], List[Any]]
SerializedNode = Dict[str, SerializableType]

ADMONITION_KINDS: FrozenSet[str] = frozenset(
    (
        "note",
        "attention",
        "caution",
        "danger",
        "error",
        "hint",
        "important",
        "tip",
        "warning",
    )
)


@dataclass
class Node:
    __slots__ = ("span",)
    type: ClassVar[str] = "node"
    span: Tuple[int]

    def serialize(self) -> SerializedNode:
        """Serialize this AST node into a form that can be passed to json.dumps()."""
        result: SerializedNode = {
            "type": self.type,
            "position": {"start": {"line": self.span[0]}},
        }

        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Node):
                result[field.name] = value.serialize()
            elif isinstance(value, (str, int, float, bool)):
                # Primitive value: include verbatim
                result[field.name] = value
            elif isinstance(value, dict):
                # We exclude empty dicts, since they're only used for directive options.
                if value:
                    result[field.name] = dict(value)
            elif isinstance(value, (list, tuple)):
                # Lists hold either child nodes or plain values (arguments, classes, columns)
                result[field.name] = [
                    child.serialize() if isinstance(child, Node) else child
                    for child in value
                ]
            elif value is None:
                # Fields with None values are excluded
                continue
            else:
                raise NotImplementedError(field, value)

        del result["span"]
        return result

    def get_text(self) -> str:
        """Return pure textual content from a given AST node. Most nodes will return an empty string."""
        return ""

    def child_nodes(self) -> Iterator["Node"]:
        """Yield every node held directly by this node, in document order."""
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Node):
                yield value
            elif isinstance(value, (list, tuple)):
                yield from (child for child in value if isinstance(child, Node))

    @property
    def start(self) -> Tuple[int]:
        return self.span

    def verify(self) -> None:
        """Perform optional validations on this node."""
        assert self.span[0] >= 1, f"{self.type} has invalid line {self.span[0]}"
        for child in self.child_nodes():
            child.verify()


_N = TypeVar("_N", bound=Node)


@dataclass
class InlineNode(Node):
    __slots__ = ()


@dataclass
class Parent(Node, Generic[_N]):
    __slots__ = ("children",)
    type = "parent"
    children: MutableSequence[_N]

    def get_text(self) -> str:
        return "".join(child.get_text() for child in self.children)


@dataclass
class Text(InlineNode):
    __slots__ = ("value",)
    type = "text"
    value: str

    def get_text(self) -> str:
        return self.value


@dataclass
class Document(Parent[Node]):
    __slots__ = ()
    type = "document"


@dataclass
class Heading(Node):
    __slots__ = ("level", "title")
    type = "heading"
    level: int
    title: str

    def get_text(self) -> str:
        return self.title

    def verify(self) -> None:
        super().verify()
        assert 1 <= self.level <= 6, f"Invalid heading level: {self.level}"


@dataclass
class Section(Parent[Node]):
    __slots__ = ("title", "level")
    type = "section"
    title: str
    level: int

    def get_text(self) -> str:
        return self.title


@dataclass
class Paragraph(Parent[InlineNode]):
    __slots__ = ()
    type = "paragraph"


@dataclass
class Directive(Node):
    __slots__ = ("name", "args", "options", "body")
    type = "directive"
    name: str
    args: List[str]
    options: Dict[str, str]
    body: MutableSequence[Node]

    def get_text(self) -> str:
        return "".join(child.get_text() for child in self.body)


@dataclass
class ListNodeItem(Parent[Node]):
    __slots__ = ()
    type = "list_item"


@dataclass
class ListNode(Parent[ListNodeItem]):
    __slots__ = ("ordered",)
    type = "list"
    ordered: bool


@dataclass
class Term(Parent[InlineNode]):
    __slots__ = ()
    type = "term"


@dataclass
class Definition(Parent[Node]):
    __slots__ = ()
    type = "definition"


@dataclass
class DefinitionListItem(Parent[Union[Term, Definition]]):
    __slots__ = ()
    type = "definition_list_item"

    @property
    def term(self) -> Term:
        term = self.children[0]
        assert isinstance(term, Term)
        return term

    @property
    def definition(self) -> Definition:
        definition = self.children[1]
        assert isinstance(definition, Definition)
        return definition


@dataclass
class DefinitionList(Parent[DefinitionListItem]):
    __slots__ = ()
    type = "definition_list"


@dataclass
class LiteralBlock(Node):
    __slots__ = ("language", "value")
    type = "literal_block"
    language: Optional[str]
    value: str

    def get_text(self) -> str:
        return self.value


@dataclass
class TableCell(Parent[Node]):
    __slots__ = ("cspan", "rspan")
    type = "table_cell"
    cspan: int
    rspan: int

    def verify(self) -> None:
        super().verify()
        assert self.cspan >= 1 and self.rspan >= 1, "Cell spans must be positive"


@dataclass
class TableRow(Node):
    __slots__ = ("cells",)
    type = "table_row"
    cells: List[TableCell]

    def get_text(self) -> str:
        return "".join(cell.get_text() for cell in self.cells)


@dataclass
class Table(Node):
    __slots__ = ("title", "rows", "header_rows", "stub_columns", "options")
    type = "table"
    title: Optional[str]
    rows: List[TableRow]
    header_rows: int
    stub_columns: int
    options: Optional[Dict[str, str]]

    def get_text(self) -> str:
        return "".join(row.get_text() for row in self.rows)


@dataclass
class Tab(Parent[Node]):
    __slots__ = ("title", "group", "language")
    type = "tab"
    title: str
    group: Optional[str]
    language: Optional[str]


@dataclass
class Tabs(Parent[Tab]):
    __slots__ = ("options",)
    type = "tabs"
    options: Optional[Dict[str, str]]


@dataclass
class Admonition(Parent[Node]):
    __slots__ = ("kind", "options")
    type = "admonition"
    kind: str
    options: Optional[Dict[str, str]]

    def verify(self) -> None:
        super().verify()
        assert self.kind in ADMONITION_KINDS, f"Unknown admonition: {self.kind}"


@dataclass
class Container(Parent[Node]):
    __slots__ = ("classes", "options")
    type = "container"
    classes: List[str]
    options: Optional[Dict[str, str]]


@dataclass
class Image(Node):
    __slots__ = ("uri", "alt", "width", "height", "scale", "align", "options")
    type = "image"
    uri: str
    alt: Optional[str]
    width: Optional[str]
    height: Optional[str]
    scale: Optional[str]
    align: Optional[str]
    options: Optional[Dict[str, str]]


@dataclass
class Figure(Image):
    __slots__ = ("caption", "legend")
    type = "figure"
    caption: Optional[str]
    legend: Optional[str]

    def get_text(self) -> str:
        return " ".join(part for part in (self.caption, self.legend) if part)


@dataclass
class Card(Parent[Node]):
    __slots__ = ("title", "options")
    type = "card"
    title: Optional[str]
    options: Optional[Dict[str, str]]


@dataclass
class Button(Node):
    __slots__ = ("text", "css_class", "options")
    text: str
    css_class: Optional[str]
    options: Optional[Dict[str, str]]

    def serialize(self) -> SerializedNode:
        result = super().serialize()
        # "class" is a reserved word, so the field is renamed on the way out
        css_class = result.pop("css_class", None)
        if css_class is not None:
            result["class"] = css_class
        return result

    def get_text(self) -> str:
        return self.text


@dataclass
class ButtonLink(Button):
    __slots__ = ("url",)
    type = "button-link"
    url: str


@dataclass
class ButtonRef(Button):
    __slots__ = ("ref",)
    type = "button-ref"
    ref: str


@dataclass
class CodeBlock(Node):
    __slots__ = ("language", "content", "parsed", "options")
    type = "code-block"
    language: Optional[str]
    content: str
    parsed: Optional[bool]
    options: Optional[Dict[str, str]]

    def get_text(self) -> str:
        return self.content


@dataclass
class Dropdown(Parent[Node]):
    __slots__ = ("title", "options")
    type = "dropdown"
    title: str
    options: Optional[Dict[str, str]]


@dataclass
class GridItem(Parent[Node]):
    __slots__ = ()
    type = "grid-item"


@dataclass
class GridItemCard(Parent[Node]):
    __slots__ = ("title", "options")
    type = "grid-item-card"
    title: Optional[str]
    options: Optional[Dict[str, str]]


@dataclass
class Grid(Parent[Union[GridItem, GridItemCard]]):
    __slots__ = ("columns", "gutter", "options")
    type = "grid"
    columns: List[int]
    gutter: Union[None, str, List[int]]
    options: Optional[Dict[str, str]]
