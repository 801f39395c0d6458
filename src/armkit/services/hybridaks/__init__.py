"""Microsoft.HybridContainerService, API version 2024-01-01."""

from armkit.services.hybridaks.client import API_VERSION, HybridAksClient
from armkit.services.hybridaks.models import (
    AgentPool,
    AgentPoolListResult,
    AgentPoolProperties,
    ControlPlaneProfile,
    NamedAgentPoolProfile,
    NetworkPolicy,
    NetworkProfile,
    Ossku,
    OsType,
    ProvisionedCluster,
    ProvisionedClusterListResult,
    ProvisionedClusterProperties,
    ProvisionedClusterStatus,
    ProvisioningState,
    VirtualNetwork,
    VirtualNetworkProperties,
    VirtualNetworksListResult,
    VirtualNetworksPatch,
)

__all__ = [
    "API_VERSION",
    "AgentPool",
    "AgentPoolListResult",
    "AgentPoolProperties",
    "ControlPlaneProfile",
    "HybridAksClient",
    "NamedAgentPoolProfile",
    "NetworkPolicy",
    "NetworkProfile",
    "OsType",
    "Ossku",
    "ProvisionedCluster",
    "ProvisionedClusterListResult",
    "ProvisionedClusterProperties",
    "ProvisionedClusterStatus",
    "ProvisioningState",
    "VirtualNetwork",
    "VirtualNetworkProperties",
    "VirtualNetworksListResult",
    "VirtualNetworksPatch",
]
