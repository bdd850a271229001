"""
Editable resource registry

One ResourceConfig per resource type drives the generic entity form and
the row cell actions: API path segment, schemas, user-facing labels and
messages, and the reference dropdowns the form needs.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence, Tuple, Type

from store_admin.domain.base import CamelModel, FormValues
from store_admin.domain.billboard import Billboard, BillboardFormValues
from store_admin.domain.catalog import (
    Category,
    CategoryFormValues,
    Color,
    ColorFormValues,
    Size,
    SizeFormValues,
)
from store_admin.domain.product import Product, ProductFormValues
from store_admin.services.form_mode import Edit, FormMode

GENERIC_FAILURE_MESSAGE = "Something went wrong."


@dataclass(frozen=True)
class FormLabels:
    """Everything the form shows that depends on the mode"""
    title: str
    description: str
    toast_message: str
    action: str


@dataclass(frozen=True)
class ReferenceField:
    """
    A form field holding the id of a related entity

    Attributes:
        key: Form value key (wire name), e.g. "billboardId"
        source: Reference list name passed to the form, e.g. "billboards"
        label_attr: Record attribute shown in the dropdown
        label: Field label
        placeholder: Text shown while nothing is selected
    """
    key: str
    source: str
    label_attr: str
    label: str
    placeholder: str


@dataclass(frozen=True)
class ResourceConfig:
    name: str
    singular: str
    record_class: Type[CamelModel]
    form_class: Type[FormValues]
    create_labels: FormLabels
    edit_labels: FormLabels
    deleted_message: str
    dependents_message: str
    references: Tuple[ReferenceField, ...] = ()
    failure_message: str = GENERIC_FAILURE_MESSAGE

    @property
    def copied_message(self) -> str:
        return f"{self.singular} ID copied to clipboard."

    def labels_for(self, mode: FormMode) -> FormLabels:
        return self.edit_labels if isinstance(mode, Edit) else self.create_labels

    def initial_values(self, mode: FormMode) -> Dict[str, Any]:
        if isinstance(mode, Edit):
            return self.form_class.from_record(mode.record)
        return self.form_class.blank()

    def parse_record(self, data: Mapping[str, Any]) -> CamelModel:
        return self.record_class.model_validate(data)


def _labels(singular: str, noun: str) -> Tuple[FormLabels, FormLabels]:
    create = FormLabels(
        title=f"Create {noun}",
        description=f"Add a new {noun}",
        toast_message=f"{singular} created.",
        action="Create",
    )
    edit = FormLabels(
        title=f"Edit {noun}",
        description=f"Edit a {noun}",
        toast_message=f"{singular} updated.",
        action="Save changes",
    )
    return create, edit


def _resource(name: str, singular: str, record_class, form_class, dependents: str,
              references: Sequence[ReferenceField] = ()) -> ResourceConfig:
    create, edit = _labels(singular, singular.lower())
    return ResourceConfig(
        name=name,
        singular=singular,
        record_class=record_class,
        form_class=form_class,
        create_labels=create,
        edit_labels=edit,
        deleted_message=f"{singular} deleted.",
        dependents_message=f"Make sure you removed all {dependents} using this {singular.lower()} first.",
        references=tuple(references),
    )


BILLBOARDS = _resource("billboards", "Billboard", Billboard, BillboardFormValues, "categories")

CATEGORIES = _resource(
    "categories", "Category", Category, CategoryFormValues, "products",
    references=[
        ReferenceField("billboardId", "billboards", "label", "Billboard", "Select a billboard"),
    ],
)

SIZES = _resource("sizes", "Size", Size, SizeFormValues, "products")

COLORS = _resource("colors", "Color", Color, ColorFormValues, "products")

PRODUCTS = _resource(
    "products", "Product", Product, ProductFormValues, "orders",
    references=[
        ReferenceField("categoryId", "categories", "name", "Category", "Select a category"),
        ReferenceField("sizeId", "sizes", "name", "Size", "Select a size"),
        ReferenceField("colorId", "colors", "name", "Color", "Select a color"),
    ],
)

RESOURCES: Dict[str, ResourceConfig] = {
    config.name: config for config in (BILLBOARDS, CATEGORIES, SIZES, COLORS, PRODUCTS)
}


def get_resource(name: str) -> ResourceConfig:
    """Look up an editable resource by its path segment"""
    try:
        return RESOURCES[name]
    except KeyError:
        raise ValueError(f"Unknown resource '{name}'. Expected one of: {', '.join(RESOURCES)}")
