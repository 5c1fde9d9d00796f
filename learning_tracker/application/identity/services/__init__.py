from .access_control_service import AccessControlService

__all__ = ["AccessControlService"]
