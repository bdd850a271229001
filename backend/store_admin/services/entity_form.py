"""
Generic create/edit form for one store resource

Usage:
    form = await EntityForm.load(CATEGORIES, context.for_entity("new"), client, router)
    form.set_value("name", "Vitamins")
    form.set_value("billboardId", billboard_id)
    result = await form.submit()
    if result.message:
        toast(result.message, error=result.is_error)

Rules:
- The mode (Create | Edit) decides labels, initial values and which request
  submit() sends; nothing else differs between modes.
- Values are validated with the resource's form schema before any request.
- One mutating request at a time; `loading` disables every control until it
  finishes, success or failure.
- Exactly one navigation (to the list page) per successful submit/delete,
  none on failure. Entered values are kept on failure.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from store_admin.connectors.resource_api import (
    ApiConflictError,
    ApiResponseError,
    ResourceApiClient,
    StoreApiError,
)
from store_admin.domain.base import CamelModel, FormValues
from store_admin.domain.context import DashboardContext
from store_admin.services.delete_guard import DeleteGuardModal
from store_admin.services.form_mode import Edit, FormMode, mode_from_initial_data
from store_admin.services.navigation import Router
from store_admin.services.resources import RESOURCES, FormLabels, ResourceConfig
from store_admin.services.results import FormResult

logger = logging.getLogger(__name__)

# Entity id used by "new" pages (/{store}/{resource}/new)
NEW_ENTITY_ID = "new"


class FormModeError(Exception):
    """Operation not available in the form's current mode"""


def collect_field_errors(error: ValidationError) -> Dict[str, str]:
    """First validation message per top-level field"""
    field_errors: Dict[str, str] = {}
    for item in error.errors():
        key = str(item["loc"][0]) if item["loc"] else "__root__"
        field_errors.setdefault(key, item["msg"])
    return field_errors


class EntityForm:
    """Bound create/edit form for one resource"""

    def __init__(
        self,
        resource: ResourceConfig,
        mode: FormMode,
        context: DashboardContext,
        client: ResourceApiClient,
        router: Router,
        references: Optional[Mapping[str, Sequence[CamelModel]]] = None,
    ):
        self.resource = resource
        self.mode = mode
        self.context = context
        self.client = client
        self.router = router
        self.references = dict(references or {})

        self.values: Dict[str, Any] = resource.initial_values(mode)
        self.field_errors: Dict[str, str] = {}
        self.notifications: List[FormResult] = []

        self._submitting = False
        self.modal = DeleteGuardModal(self._delete)

    @classmethod
    async def load(
        cls,
        resource: ResourceConfig,
        context: DashboardContext,
        client: ResourceApiClient,
        router: Router,
    ) -> "EntityForm":
        """
        Fetch the record (when context.entity_id names one) and the
        reference lists, then build the form.

        An unknown id or NEW_ENTITY_ID opens the form in create mode.
        """
        record = None
        entity_id = context.entity_id
        if entity_id and entity_id != NEW_ENTITY_ID:
            try:
                data = await client.get(context.store_id, resource.name, entity_id)
                record = resource.parse_record(data)
            except ApiResponseError as e:
                if e.status_code != 404:
                    raise
                logger.info(f"{resource.singular} {entity_id} not found, opening create form")

        references: Dict[str, List[CamelModel]] = {}
        for ref in resource.references:
            if ref.source in references:
                continue
            source = RESOURCES[ref.source]
            items = await client.list(context.store_id, ref.source)
            references[ref.source] = [source.parse_record(item) for item in items]

        return cls(resource, mode_from_initial_data(record), context, client, router, references)

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    @property
    def is_edit(self) -> bool:
        return isinstance(self.mode, Edit)

    @property
    def labels(self) -> FormLabels:
        return self.resource.labels_for(self.mode)

    @property
    def loading(self) -> bool:
        return self._submitting or self.modal.loading

    @property
    def disabled(self) -> bool:
        """Submit button and every field control"""
        return self.loading

    @property
    def show_delete_button(self) -> bool:
        return self.is_edit

    @property
    def entity_id(self) -> Optional[str]:
        if isinstance(self.mode, Edit):
            return self.mode.entity_id
        return None

    @property
    def list_href(self) -> str:
        return self.context.list_href(self.resource.name)

    def options(self, key: str) -> List[Tuple[str, str]]:
        """(value, label) choices for a reference field"""
        for ref in self.resource.references:
            if ref.key == key:
                return [
                    (item.id, getattr(item, ref.label_attr))
                    for item in self.references.get(ref.source, [])
                ]
        raise KeyError(f"{key} is not a reference field of {self.resource.name}")

    # ------------------------------------------------------------------
    # Field editing
    # ------------------------------------------------------------------

    def set_value(self, key: str, value: Any) -> bool:
        """Update one field; ignored while the form is disabled"""
        if self.disabled:
            return False
        self.values[key] = value
        return True

    def add_image(self, url: str) -> bool:
        if self.disabled:
            return False
        self.values["images"] = [*self.values.get("images", []), {"url": url}]
        return True

    def remove_image(self, url: str) -> bool:
        if self.disabled:
            return False
        self.values["images"] = [image for image in self.values.get("images", []) if image["url"] != url]
        return True

    def validate(self) -> Optional[FormValues]:
        """Validate current values; field errors are kept on the form"""
        try:
            parsed = self.resource.form_class.model_validate(self.values)
        except ValidationError as e:
            self.field_errors = collect_field_errors(e)
            return None
        self.field_errors = {}
        return parsed

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _notify(self, result: FormResult) -> FormResult:
        if result.message:
            self.notifications.append(result)
        return result

    async def submit(self, values: Optional[Mapping[str, Any]] = None) -> FormResult:
        """
        Validate and send the create (POST) or update (PATCH) request

        Args:
            values: Optional field values applied before validation

        Returns:
            FormResult; SUCCESS after navigating to the list page
        """
        if self.loading or self.modal.is_open:
            logger.debug(f"Ignoring submit on {self.resource.name} form: request in flight or delete pending")
            return FormResult.ignored()

        if values:
            self.values.update(values)

        parsed = self.validate()
        if parsed is None:
            return FormResult.invalid(self.field_errors)

        body = parsed.model_dump(by_alias=True, mode="json")
        store_id = self.context.store_id

        self._submitting = True
        try:
            if isinstance(self.mode, Edit):
                data = await self.client.update(store_id, self.resource.name, self.mode.entity_id, body)
            else:
                data = await self.client.create(store_id, self.resource.name, body)

            self.router.refresh()
            self.router.push(self.list_href)
        except StoreApiError as e:
            logger.warning(f"Saving {self.resource.name} failed: {e}")
            return self._notify(FormResult.failure(self.resource.failure_message))
        finally:
            self._submitting = False

        return self._notify(FormResult.success(self.labels.toast_message, data=data, navigated_to=self.list_href))

    def request_delete(self) -> None:
        """Open the delete confirmation (edit mode only)"""
        if not isinstance(self.mode, Edit):
            raise FormModeError(f"Cannot delete a {self.resource.singular.lower()} that was never saved")
        if self.loading:
            return
        self.modal.open()

    async def _delete(self) -> FormResult:
        if self._submitting:
            logger.debug(f"Ignoring delete on {self.resource.name} form: save in flight")
            return FormResult.ignored()

        entity_id = self.entity_id
        try:
            await self.client.delete(self.context.store_id, self.resource.name, entity_id)
            self.router.refresh()
            self.router.push(self.list_href)
        except ApiConflictError as e:
            logger.warning(f"Delete of {self.resource.name}/{entity_id} blocked: {e}")
            return self._notify(FormResult.failure(self.resource.dependents_message, conflict=True))
        except StoreApiError as e:
            logger.error(f"Delete of {self.resource.name}/{entity_id} failed: {e}")
            return self._notify(FormResult.failure(self.resource.failure_message))

        return self._notify(FormResult.success(self.resource.deleted_message, navigated_to=self.list_href))
