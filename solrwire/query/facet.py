from typing import Iterator, Optional, Union

from pydantic import Field
from typing_extensions import Annotated

from .base import Params, Value

Texts = Optional[Union[str, list[str]]]


class Facet(Params):
    wire_prefix = 'facet.'

    facet: Annotated[bool, Field(alias='facet')] = True
    contains: Optional[str] = None
    contains_ignoreCase: Annotated[Optional[bool], Field(alias='facet.contains.ignoreCase')] = None
    excludeTerms: Optional[str] = None
    exists: Optional[bool] = None
    field: Texts = None
    interval: Optional[str] = None
    limit: Optional[int] = None
    matches: Optional[str] = None
    method: Optional[str] = None
    mincount: Optional[int] = None
    missing: Optional[bool] = None
    offset: Optional[int] = None
    pivot: Texts = None
    pivot_mincount: Annotated[Optional[int], Field(alias='facet.pivot.mincount')] = None
    prefix: Optional[str] = None
    query: Texts = None
    sort: Optional[str] = None
    threads: Optional[int] = None


class FacetRange(Params):
    """
        Range facet on one field.

        With per_field the options apply to this field only:
        f.<range>.facet.range.start etc.
    """
    wire_prefix = 'facet.range.'

    range: Annotated[str, Field(alias='facet.range')]
    start: Optional[Union[int, float, str]] = None
    end: Optional[Union[int, float, str]] = None
    gap: Optional[Union[int, float, str]] = None
    hardend: Optional[bool] = None
    include: Texts = None
    other: Texts = None
    method: Optional[str] = None
    per_field: bool = Field(default=False, exclude=True)

    def wire_fields(self) -> Iterator[tuple[str, Value]]:
        for name, value in super().wire_fields():
            if self.per_field and name != 'facet.range':
                name = f"f.{self.range}.{name}"
            yield name, value
