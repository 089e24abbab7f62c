"""Models for Docker Home."""

from .config import DashboardSettings
from .container import ContainerRecord, CurationRecord
from .operation import OperationFailure, OperationResult
from .registry import RegistryFailure, RegistryInfo

__all__ = [
    'DashboardSettings',
    'ContainerRecord',
    'CurationRecord',
    'OperationFailure',
    'OperationResult',
    'RegistryFailure',
    'RegistryInfo'
]
