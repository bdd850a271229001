"""
Dashboard services

Framework-independent behaviour of the admin dashboard: entity forms,
delete confirmation, row actions, list tables and navigation.
"""
from store_admin.services.cell_action import CellAction
from store_admin.services.delete_guard import DeleteGuardModal
from store_admin.services.entity_form import NEW_ENTITY_ID, EntityForm, FormModeError
from store_admin.services.form_mode import Create, Edit, FormMode, mode_from_initial_data
from store_admin.services.navigation import NavRoute, Router, main_nav
from store_admin.services.resources import RESOURCES, ResourceConfig, get_resource
from store_admin.services.results import FormResult, ResultStatus

__all__ = [
    'EntityForm',
    'FormModeError',
    'NEW_ENTITY_ID',
    'Create',
    'Edit',
    'FormMode',
    'mode_from_initial_data',
    'DeleteGuardModal',
    'CellAction',
    'FormResult',
    'ResultStatus',
    'ResourceConfig',
    'RESOURCES',
    'get_resource',
    'NavRoute',
    'Router',
    'main_nav',
]
