"""
Shared pydantic configuration for domain models

Python attributes are snake_case; the wire format (JSON bodies exchanged
between the dashboard and the store API) is camelCase.
"""
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept snake_case too
        from_attributes=True,  # Allow creation from ORM objects
    )

    def to_dict(self) -> dict:
        """JSON-compatible dict using wire (camelCase) keys"""
        return self.model_dump(by_alias=True, mode="json")


class FormValues(CamelModel):
    """
    Base class for the validated body of a create/edit form

    The same schema validates the dashboard form before any request is
    sent and the request body once it reaches the store API.
    """

    @classmethod
    def blank(cls) -> dict:
        """Default (create-mode) values keyed by wire name"""
        raise NotImplementedError

    @classmethod
    def from_record(cls, record: CamelModel) -> dict:
        """
        Edit-mode values pre-populated from an existing record

        Only keys the form knows about are kept.
        """
        data = record.model_dump(by_alias=True)
        try:
            return cls.model_validate(data).model_dump(by_alias=True)
        except ValidationError:
            # Stored values the form rejects (e.g. a zero price) are shown as-is
            keys = {field.alias or name for name, field in cls.model_fields.items()}
            return {key: value for key, value in data.items() if key in keys}
