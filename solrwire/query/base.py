from typing import ClassVar, Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict

Scalar = Union[bool, int, float, str]
Value = Optional[Union[Scalar, list[Scalar]]]


class Params(BaseModel):
    """
        Base of every search parameter descriptor.

        Wire name of a field is its alias, or wire_prefix + attribute name.
        Fields set to None are absent and never encoded.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='forbid')

    wire_prefix: ClassVar[str] = ''

    @classmethod
    def wire_name(cls, name: str) -> str:
        field = cls.model_fields[name]
        return field.alias or cls.wire_prefix + name

    def wire_fields(self) -> Iterator[tuple[str, Value]]:
        """ (wire name, value) for every field, declaration order, absent ones included """
        for name, field in type(self).model_fields.items():
            if field.exclude:
                continue
            yield self.wire_name(name), getattr(self, name)
