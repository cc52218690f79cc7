from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from typing_extensions import Annotated

Document = dict[str, Any]
Id = Union[StrictStr, StrictInt]


class Update(BaseModel):
    """
        Index update command: documents to add, deletions, commit/optimize
        directives and rollback. Every part is optional and any subset can be
        sent in one request.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='forbid')

    doc: Optional[Union[Document, list[Document]]] = None
    commit_within: Annotated[Optional[StrictInt], Field(alias='commitWithin')] = None
    overwrite: Optional[StrictBool] = None

    delete_id: Optional[Union[Id, list[Id]]] = None
    delete_query: Optional[Union[StrictStr, list[StrictStr]]] = None

    commit: Optional[StrictBool] = None
    wait_searcher: Annotated[Optional[StrictBool], Field(alias='waitSearcher')] = None
    expunge_deletes: Annotated[Optional[StrictBool], Field(alias='expungeDeletes')] = None

    optimize: Optional[StrictBool] = None
    max_segments: Annotated[Optional[StrictInt], Field(alias='maxSegments')] = None

    rollback: Optional[StrictBool] = None

    @property
    def documents(self) -> list[Document]:
        if self.doc is None:
            return list()
        if isinstance(self.doc, dict):
            return [self.doc]
        return list(self.doc)
