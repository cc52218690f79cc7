from typing import Optional

from pydantic import Field
from typing_extensions import Annotated

from .base import Params


class MoreLikeThis(Params):
    wire_prefix = 'mlt.'

    mlt: Annotated[bool, Field(alias='mlt')] = True
    fl: Optional[str] = None
    count: Optional[int] = None
    mintf: Optional[int] = None
    mindf: Optional[int] = None
    maxdf: Optional[int] = None
    maxdfpct: Optional[int] = None
    minwl: Optional[int] = None
    maxwl: Optional[int] = None
    maxqt: Optional[int] = None
    maxntp: Optional[int] = None
    boost: Optional[bool] = None
    qf: Optional[str] = None
    match_include: Annotated[Optional[bool], Field(alias='mlt.match.include')] = None
    match_offset: Annotated[Optional[int], Field(alias='mlt.match.offset')] = None
    interestingTerms: Optional[str] = None
