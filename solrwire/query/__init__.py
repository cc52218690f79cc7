from .base import Params
from .common import Common, Standard, DisMax
from .facet import Facet, FacetRange
from .highlight import Highlight, HighlighterFastVector
from .mlt import MoreLikeThis
from .update import Update

__all__ = [
    'Params',
    'Common', 'Standard', 'DisMax',
    'Facet', 'FacetRange',
    'Highlight', 'HighlighterFastVector',
    'MoreLikeThis',
    'Update',
]
