"""Base Pydantic models for SWU Data serialization and deserialization."""

from typing import Any, Callable, ClassVar, Dict, Set, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_serializer
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema

from ..errors import MissingRequiredField

M = TypeVar("M", bound=BaseModel)


class SwuDataModel(BaseModel):
    """
    Base for all SWU Data output models with custom serialization logic.

    Fields holding None are dropped from the JSON form, unless the field
    is listed in _allow_if_none, in which case an explicit null is written.
    """

    _allow_if_none: ClassVar[Set[str]] = set()

    @model_serializer(mode="wrap")
    def serialize_model(
        self,
        serializer: Callable[[Any], Dict[str, Any]],
        _info: core_schema.SerializationInfo,
    ) -> Dict[str, Any]:
        """Custom serialization respecting _allow_if_none."""
        data = serializer(self)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self._allow_if_none
        }

    def to_json(self) -> Dict[str, Any]:
        """Flat JSON form, as written to cards.json"""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_json(cls: Type[M], data: Any) -> M:
        """Inverse of to_json()"""
        return cls.model_validate(data)

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class UpstreamModel(BaseModel):
    """
    Base for models describing the upstream API's records.
    Upstream keys are camelCase; fields are declared in snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


def validate_model(model: Type[M], data: Any) -> M:
    """
    Validate data against a model, reporting schema violations
    as a MissingRequiredField error
    :param model: Model to validate against
    :param data: Raw JSON data, or keyword data for the model
    :return: Validated model
    """
    try:
        return model.model_validate(data)
    except ValidationError as error:
        first_error = error.errors()[0]
        location = ".".join(str(part) for part in first_error["loc"])
        raise MissingRequiredField(
            location or model.__name__, first_error["msg"]
        ) from error
