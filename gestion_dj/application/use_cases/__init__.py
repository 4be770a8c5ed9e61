"""Application use cases package."""

from .authenticate import AuthenticateUseCase
from .backup import ExportBackupUseCase, ImportBackupUseCase
from .bootstrap_admin import BootstrapAdminUseCase
from .get_dashboard import DashboardView, GetDashboardUseCase
from .get_report import GetReportUseCase, ReportView
from .list_events import GetCalendarUseCase, ListEventsUseCase
from .load_workspace import LoadWorkspaceUseCase, Workspace
from .manage_clients import DeleteClientUseCase, SaveClientUseCase
from .manage_events import DeleteEventUseCase, SaveEventUseCase
from .manage_users import (
    AddUserUseCase,
    ChangePasswordUseCase,
    GetUserStatsUseCase,
    ToggleUserActiveUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "AuthenticateUseCase",
    "BootstrapAdminUseCase",
    "AddUserUseCase",
    "UpdateUserUseCase",
    "ToggleUserActiveUseCase",
    "ChangePasswordUseCase",
    "GetUserStatsUseCase",
    "SaveClientUseCase",
    "DeleteClientUseCase",
    "SaveEventUseCase",
    "DeleteEventUseCase",
    "GetDashboardUseCase",
    "DashboardView",
    "GetReportUseCase",
    "ReportView",
    "ListEventsUseCase",
    "GetCalendarUseCase",
    "ExportBackupUseCase",
    "ImportBackupUseCase",
    "LoadWorkspaceUseCase",
    "Workspace",
]
