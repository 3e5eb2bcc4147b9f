"""gemwiki -- render skill gem stat descriptions into wiki template text."""

from gemwiki.ir import DescriptionBlock, StatObservation
from gemwiki.statdesc import StatDescriptionResolver, resolve_all

__all__ = [
    "DescriptionBlock",
    "StatDescriptionResolver",
    "StatObservation",
    "resolve_all",
]
