"""
Create/Edit form modes

A form is either creating a new record or editing an existing one; the
variant carries the record so edit-only code can never run without it.
"""
from dataclasses import dataclass
from typing import Optional, Union

from store_admin.domain.base import CamelModel


@dataclass(frozen=True)
class Create:
    """Form for a record that does not exist yet"""

    is_edit = False


@dataclass(frozen=True)
class Edit:
    """Form pre-populated from an existing record"""

    record: CamelModel
    is_edit = True

    @property
    def entity_id(self) -> str:
        return self.record.id


FormMode = Union[Create, Edit]


def mode_from_initial_data(initial_data: Optional[CamelModel]) -> FormMode:
    """Map a nullable server record to a form mode"""
    if initial_data is None:
        return Create()
    return Edit(initial_data)
