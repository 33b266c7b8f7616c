from .admonition import AdmonitionParser
from .base import ConstructParser
from .button import ButtonParser
from .card import CardParser
from .code import CodeBlockParser
from .container import ContainerParser
from .directive import DirectiveParser
from .dropdown import DropdownParser
from .grid import GridParser
from .grid_table import GridTableParser
from .heading import HeadingParser
from .image import ImageParser
from .lists import DefinitionListParser, ListParser
from .tables import TableDirectiveParser
from .tabs import TabsParser

__all__ = (
    "ConstructParser",
    "CONSTRUCT_PARSERS",
)

#: Construct parsers in the order the block dispatcher tries them. The first to
#: claim a line wins, so the order is significant.
CONSTRUCT_PARSERS = (
    HeadingParser,
    ButtonParser,
    CodeBlockParser,
    GridParser,
    DropdownParser,
    CardParser,
    ImageParser,
    ContainerParser,
    AdmonitionParser,
    TabsParser,
    DirectiveParser,
    TableDirectiveParser,
    GridTableParser,
    ListParser,
    DefinitionListParser,
)
