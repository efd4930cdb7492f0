from .option import Cases, EmptyOption, Option, PresentOption
from .optional import Optional
from .serialization import dumps, json_default

__all__ = [
    "Optional",
    "Option",
    "PresentOption",
    "EmptyOption",
    "Cases",
    "json_default",
    "dumps",
]
