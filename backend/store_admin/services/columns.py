"""
List page tables: column definitions and row builders

Each resource gets a flat display row (strings already formatted) and an
ordered list of ColumnDef describing how the grid shows it.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from store_admin.connectors.resource_api import ResourceApiClient
from store_admin.domain.base import CamelModel
from store_admin.domain.billboard import Billboard
from store_admin.domain.catalog import Category, Color, Size
from store_admin.domain.context import DashboardContext
from store_admin.domain.order import Order
from store_admin.domain.product import Product
from store_admin.services.formatting import format_date, format_price

ACTIONS_COLUMN_ID = "actions"


@dataclass(frozen=True)
class ColumnDef:
    """
    One grid column

    accessor_key names a row field (wire name); cell, when set, computes
    the displayed value from the whole row instead. The actions column has
    only an id; its cell value is the row id the row menu acts on.
    """
    accessor_key: Optional[str] = None
    header: str = ""
    cell: Optional[Callable[[CamelModel], Any]] = None
    id: Optional[str] = None

    @property
    def key(self) -> str:
        return self.id or self.accessor_key


# ============================================================================
# Row types
# ============================================================================

class BillboardColumn(CamelModel):
    id: str
    label: str
    created_at: str


class CategoryColumn(CamelModel):
    id: str
    name: str
    billboard_label: str
    created_at: str


class SizeColumn(CamelModel):
    id: str
    name: str
    value: str
    created_at: str


class ColorColumn(CamelModel):
    id: str
    name: str
    value: str
    created_at: str


class ProductColumn(CamelModel):
    id: str
    name: str
    price: str
    size: str
    category: str
    color: str
    is_featured: bool
    is_archived: bool
    created_at: str


class OrderColumn(CamelModel):
    id: str
    phone: str
    address: str
    is_paid: bool
    total_price: str
    products: str
    created_at: str


# ============================================================================
# Row builders
# ============================================================================

def billboard_row(item: Billboard) -> BillboardColumn:
    return BillboardColumn(id=item.id, label=item.label, created_at=format_date(item.created_at))


def category_row(item: Category) -> CategoryColumn:
    return CategoryColumn(
        id=item.id,
        name=item.name,
        billboard_label=item.billboard_label or "",
        created_at=format_date(item.created_at),
    )


def size_row(item: Size) -> SizeColumn:
    return SizeColumn(id=item.id, name=item.name, value=item.value, created_at=format_date(item.created_at))


def color_row(item: Color) -> ColorColumn:
    return ColorColumn(id=item.id, name=item.name, value=item.value, created_at=format_date(item.created_at))


def product_row(item: Product) -> ProductColumn:
    return ProductColumn(
        id=item.id,
        name=item.name,
        price=format_price(item.price),
        size=item.size_name or "",
        category=item.category_name or "",
        color=item.color_value or "",
        is_featured=item.is_featured,
        is_archived=item.is_archived,
        created_at=format_date(item.created_at),
    )


def order_row(item: Order) -> OrderColumn:
    return OrderColumn(
        id=item.id,
        phone=item.phone,
        address=item.address,
        is_paid=item.is_paid,
        total_price=format_price(item.total_price),
        products=", ".join(item.product_names),
        created_at=format_date(item.created_at),
    )


# ============================================================================
# Column definitions
# ============================================================================

def _swatch(attr: str) -> Callable[[CamelModel], Dict[str, str]]:
    """Color cell: hex text plus the swatch background"""
    def cell(row: CamelModel) -> Dict[str, str]:
        value = getattr(row, attr)
        return {"text": value, "swatch": value}
    return cell


ACTIONS = ColumnDef(id=ACTIONS_COLUMN_ID)

BILLBOARD_COLUMNS = [
    ColumnDef("label", "Label"),
    ColumnDef("createdAt", "Date"),
    ACTIONS,
]

CATEGORY_COLUMNS = [
    ColumnDef("name", "Name"),
    ColumnDef("billboard", "Billboard", cell=lambda row: row.billboard_label),
    ColumnDef("createdAt", "Date"),
    ACTIONS,
]

SIZE_COLUMNS = [
    ColumnDef("name", "Name"),
    ColumnDef("value", "Value"),
    ACTIONS,
]

COLOR_COLUMNS = [
    ColumnDef("name", "Name"),
    ColumnDef("value", "Value", cell=_swatch("value")),
    ColumnDef("createdAt", "Date"),
    ACTIONS,
]

PRODUCT_COLUMNS = [
    ColumnDef("name", "Name"),
    ColumnDef("isArchived", "Archived"),
    ColumnDef("isFeatured", "Featured"),
    ColumnDef("price", "Price"),
    ColumnDef("category", "Category"),
    ColumnDef("size", "Size"),
    ColumnDef("color", "Color", cell=_swatch("color")),
    ColumnDef("createdAt", "Date"),
    ACTIONS,
]

ORDER_COLUMNS = [
    ColumnDef("products", "Products"),
    ColumnDef("phone", "Phone"),
    ColumnDef("address", "Address"),
    ColumnDef("totalPrice", "Total price"),
    ColumnDef("isPaid", "Paid"),
]

# resource -> (record class, row builder, columns)
TABLES: Dict[str, Tuple[Type[CamelModel], Callable[[Any], CamelModel], List[ColumnDef]]] = {
    "billboards": (Billboard, billboard_row, BILLBOARD_COLUMNS),
    "categories": (Category, category_row, CATEGORY_COLUMNS),
    "sizes": (Size, size_row, SIZE_COLUMNS),
    "colors": (Color, color_row, COLOR_COLUMNS),
    "products": (Product, product_row, PRODUCT_COLUMNS),
    "orders": (Order, order_row, ORDER_COLUMNS),
}


def render_row(columns: Sequence[ColumnDef], row: CamelModel) -> List[Any]:
    """Cell values of one row, in column order"""
    values = row.model_dump(by_alias=True)
    cells = []
    for column in columns:
        if column.id == ACTIONS_COLUMN_ID:
            cells.append(row.id)
        elif column.cell is not None:
            cells.append(column.cell(row))
        else:
            cells.append(values[column.accessor_key])
    return cells


async def fetch_rows(resource: str, context: DashboardContext, client: ResourceApiClient) -> List[CamelModel]:
    """Load a resource list from the store API and build its display rows"""
    record_class, build_row, _ = TABLES[resource]
    items = await client.list(context.store_id, resource)
    return [build_row(record_class.model_validate(item)) for item in items]
