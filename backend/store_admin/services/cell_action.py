"""
Row actions on a resource list page: copy id, edit, delete

Unlike the entity form, a delete from the list only refreshes the page;
the user stays on the list.
"""
import logging

from store_admin.connectors.resource_api import ApiConflictError, ResourceApiClient, StoreApiError
from store_admin.domain.context import DashboardContext
from store_admin.services.delete_guard import DeleteGuardModal
from store_admin.services.navigation import Router
from store_admin.services.resources import ResourceConfig
from store_admin.services.results import FormResult

logger = logging.getLogger(__name__)


class CellAction:
    """Actions menu for one row"""

    def __init__(
        self,
        resource: ResourceConfig,
        context: DashboardContext,
        row_id: str,
        client: ResourceApiClient,
        router: Router,
    ):
        self.resource = resource
        self.context = context
        self.row_id = row_id
        self.client = client
        self.router = router
        self.modal = DeleteGuardModal(self._delete)

    @property
    def loading(self) -> bool:
        return self.modal.loading

    @property
    def edit_href(self) -> str:
        return self.context.detail_href(self.resource.name, self.row_id)

    def copy_id(self) -> FormResult:
        """The id goes to the clipboard; `data["clipboard"]` carries it"""
        return FormResult.success(self.resource.copied_message, data={"clipboard": self.row_id})

    def edit(self) -> str:
        self.router.push(self.edit_href)
        return self.edit_href

    def request_delete(self) -> None:
        self.modal.open()

    async def _delete(self) -> FormResult:
        try:
            await self.client.delete(self.context.store_id, self.resource.name, self.row_id)
            self.router.refresh()
        except ApiConflictError as e:
            logger.warning(f"Delete of {self.resource.name}/{self.row_id} blocked: {e}")
            return FormResult.failure(self.resource.dependents_message, conflict=True)
        except StoreApiError as e:
            logger.error(f"Delete of {self.resource.name}/{self.row_id} failed: {e}")
            return FormResult.failure(self.resource.failure_message)

        return FormResult.success(self.resource.deleted_message)
