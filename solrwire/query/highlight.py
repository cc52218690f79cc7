from typing import Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from .base import Params


class Highlight(Params):
    wire_prefix = 'hl.'

    hl: Annotated[bool, Field(alias='hl')] = True
    fl: Optional[str] = None
    q: Optional[str] = None
    qparser: Optional[str] = None
    requireFieldMatch: Optional[bool] = None
    usePhraseHighlighter: Optional[bool] = None
    highlightMultiTerm: Optional[bool] = None
    snippets: Optional[int] = None
    fragsize: Optional[int] = None
    tag_pre: Annotated[Optional[str], Field(alias='hl.tag.pre')] = None
    tag_post: Annotated[Optional[str], Field(alias='hl.tag.post')] = None
    tag_ellipsis: Annotated[Optional[str], Field(alias='hl.tag.ellipsis')] = None
    encoder: Optional[str] = None
    maxAnalyzedChars: Optional[int] = None
    method: Optional[str] = None


class HighlighterFastVector(Params):
    """ Options of the FastVector highlighter, used next to Highlight """
    wire_prefix = 'hl.'

    method: str = 'fastVector'
    alternateField: Optional[str] = None
    maxAlternateFieldLength: Optional[int] = None
    highlightAlternate: Optional[bool] = None
    boundaryScanner: Optional[str] = None
    bs_chars: Annotated[Optional[str], Field(alias='hl.bs.chars')] = None
    bs_country: Annotated[Optional[str], Field(alias='hl.bs.country')] = None
    bs_language: Annotated[Optional[str], Field(alias='hl.bs.language')] = None
    bs_maxScan: Annotated[Optional[int], Field(alias='hl.bs.maxScan')] = None
    bs_type: Annotated[Optional[str], Field(alias='hl.bs.type')] = None
    fragListBuilder: Optional[str] = None
    fragmentsBuilder: Optional[str] = None
    multiValuedSeparatorChar: Optional[str] = None
    phraseLimit: Optional[int] = None
    tag_pre: Annotated[Optional[Union[str, list[str]]], Field(alias='hl.tag.pre')] = None
    tag_post: Annotated[Optional[Union[str, list[str]]], Field(alias='hl.tag.post')] = None

    @classmethod
    def new(cls, alternateField: str = None, maxAlternateFieldLength: int = None,
            highlightAlternate: bool = None) -> "HighlighterFastVector":
        return cls(alternateField=alternateField,
                   maxAlternateFieldLength=maxAlternateFieldLength,
                   highlightAlternate=highlightAlternate)
