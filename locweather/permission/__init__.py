from .console import ConsolePermissionProvider
from .gate import GateState, PermissionGate
from .ports import PermissionCallback, PermissionProvider

__all__ = [
    "ConsolePermissionProvider",
    "GateState",
    "PermissionCallback",
    "PermissionGate",
    "PermissionProvider",
]
