from typing import Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from .base import Params

Texts = Optional[Union[str, list[str]]]


class Common(Params):
    """ Parameters shared by every query parser """
    cache: Optional[bool] = None
    collection: Optional[str] = None
    debug: Texts = None
    debugQuery: Optional[bool] = None
    defType: Optional[str] = None
    distrib: Optional[bool] = None
    echoParams: Optional[str] = None
    explainOther: Optional[str] = None
    fl: Optional[str] = None
    fq: Texts = None
    json_nl: Annotated[Optional[str], Field(alias='json.nl')] = None
    logParamsList: Optional[str] = None
    omitHeader: Optional[bool] = None
    rows: Optional[int] = None
    segmentTerminateEarly: Optional[bool] = None
    shards: Optional[str] = None
    shards_info: Annotated[Optional[bool], Field(alias='shards.info')] = None
    shards_preference: Annotated[Optional[str], Field(alias='shards.preference')] = None
    shards_tolerant: Annotated[Optional[bool], Field(alias='shards.tolerant')] = None
    sort: Optional[str] = None
    start: Optional[int] = None
    timeAllowed: Optional[int] = None
    tz: Optional[str] = None
    wt: Optional[str] = None


class Standard(Params):
    """ Standard (lucene) query parser """
    df: Optional[str] = None
    q: Optional[str] = None
    q_op: Annotated[Optional[str], Field(alias='q.op')] = None
    sow: Optional[bool] = None


class DisMax(Params):
    """ DisMax and eDisMax query parsers """
    q: Optional[str] = None
    q_alt: Annotated[Optional[str], Field(alias='q.alt')] = None
    qf: Optional[str] = None
    mm: Optional[str] = None
    mm_autoRelax: Annotated[Optional[bool], Field(alias='mm.autoRelax')] = None
    pf: Optional[str] = None
    pf2: Optional[str] = None
    pf3: Optional[str] = None
    ps: Optional[int] = None
    ps2: Optional[int] = None
    ps3: Optional[int] = None
    qs: Optional[int] = None
    tie: Optional[float] = None
    bq: Texts = None
    bf: Texts = None
    boost: Texts = None
    uf: Optional[str] = None
    sow: Optional[bool] = None
    lowercaseOperators: Optional[bool] = None
    stopwords: Optional[bool] = None
