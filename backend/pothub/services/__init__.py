from pothub.services.pothub_client import PotHubClient
from pothub.services.resource_service import ResourceService

__all__ = ["PotHubClient", "ResourceService"]
