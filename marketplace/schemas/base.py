from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RequestModel(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class PartialUpdate(RequestModel):
    """
    Base for PATCH payloads. Every field is optional; only the fields the
    client actually sent are merged into the stored entity.
    """

    # Fields the entity requires; an explicit null for these is rejected
    NON_NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.model_fields_set:
            if name in self.NON_NULLABLE and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """The supplied fields, nested models kept as models."""
        return {name: getattr(self, name) for name in self.model_fields_set}
