"""All repository models, imported so that ``Base.metadata`` knows every table."""

from .element.models import Element, ElementSet, ElementText
from .file.models import File
from .item.models import Item
from .option.models import Option

__all__ = ["Element", "ElementSet", "ElementText", "File", "Item", "Option"]
