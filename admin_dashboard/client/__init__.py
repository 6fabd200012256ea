from .api_client import DashboardApiClient, DashboardApiError
from .viewers import RequestGeneration, SalesGraphViewer, WaitlistViewer

__all__ = [
    "DashboardApiClient",
    "DashboardApiError",
    "RequestGeneration",
    "SalesGraphViewer",
    "WaitlistViewer",
]
