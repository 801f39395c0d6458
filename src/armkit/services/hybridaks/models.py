"""Microsoft.HybridContainerService provisioned cluster schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import ExtendedLocation, ProxyResource, TrackedResource


class ProvisioningState(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PENDING = "Pending"
    CREATING = "Creating"
    DELETING = "Deleting"
    UPDATING = "Updating"
    UPGRADING = "Upgrading"
    ACCEPTED = "Accepted"


class OsType(OpenEnum):
    LINUX = "Linux"
    WINDOWS = "Windows"


class Ossku(OpenEnum):
    CBL_MARINER = "CBLMariner"
    WINDOWS2019 = "Windows2019"
    WINDOWS2022 = "Windows2022"


class NetworkPolicy(OpenEnum):
    CALICO = "calico"


class Expander(OpenEnum):
    LEAST_WASTE = "least-waste"
    MOST_PODS = "most-pods"
    PRIORITY = "priority"
    RANDOM = "random"


# -- cluster profiles ----------------------------------------------------------


class ControlPlaneEndpoint(ArmModel):
    host_ip: str | None = Field(default=None, alias="hostIP")


class ControlPlaneProfile(ArmModel):
    count: int | None = None
    vm_size: str | None = None
    control_plane_endpoint: ControlPlaneEndpoint | None = None


class SshPublicKey(ArmModel):
    key_data: str | None = None


class SshConfiguration(ArmModel):
    public_keys: list[SshPublicKey] | None = None


class LinuxProfileProperties(ArmModel):
    ssh: SshConfiguration | None = None


class LoadBalancerProfile(ArmModel):
    count: int | None = None


class NetworkProfile(ArmModel):
    load_balancer_profile: LoadBalancerProfile | None = None
    network_policy: NetworkPolicy | None = None
    pod_cidr: str | None = None


class AgentPoolProfile(ArmModel):
    os_type: OsType | None = None
    os_sku: Ossku | None = Field(default=None, alias="osSKU")
    node_labels: dict[str, str] | None = None
    node_taints: list[str] | None = None
    max_count: int | None = None
    min_count: int | None = None
    enable_auto_scaling: bool | None = None
    max_pods: int | None = None


class AgentPoolUpdateProfile(ArmModel):
    count: int | None = None
    vm_size: str | None = None
    kubernetes_version: str | None = None


class NamedAgentPoolProfile(AgentPoolProfile, AgentPoolUpdateProfile):
    """An agent pool declared inline in the cluster properties."""

    name: str | None = None


class AddonStatusProfile(ArmModel):
    name: str | None = None
    phase: str | None = None
    ready: bool | None = None
    error_message: str | None = None


class ProvisionedClusterStatus(ArmModel):
    control_plane_status: list[AddonStatusProfile] | None = None
    current_state: ProvisioningState | None = None
    error_message: str | None = None


class AutoScalerProfile(ArmModel):
    """Cluster autoscaler settings. Wire names are kebab-case."""

    balance_similar_node_groups: str | None = Field(
        default=None, alias="balance-similar-node-groups",
    )
    expander: Expander | None = None
    max_empty_bulk_delete: str | None = Field(default=None, alias="max-empty-bulk-delete")
    max_graceful_termination_sec: str | None = Field(
        default=None, alias="max-graceful-termination-sec",
    )
    max_node_provision_time: str | None = Field(
        default=None, alias="max-node-provision-time",
    )
    max_total_unready_percentage: str | None = Field(
        default=None, alias="max-total-unready-percentage",
    )
    new_pod_scale_up_delay: str | None = Field(default=None, alias="new-pod-scale-up-delay")
    ok_total_unready_count: str | None = Field(default=None, alias="ok-total-unready-count")
    scan_interval: str | None = Field(default=None, alias="scan-interval")
    scale_down_delay_after_add: str | None = Field(
        default=None, alias="scale-down-delay-after-add",
    )
    scale_down_delay_after_delete: str | None = Field(
        default=None, alias="scale-down-delay-after-delete",
    )
    scale_down_delay_after_failure: str | None = Field(
        default=None, alias="scale-down-delay-after-failure",
    )
    scale_down_unneeded_time: str | None = Field(
        default=None, alias="scale-down-unneeded-time",
    )
    scale_down_unready_time: str | None = Field(
        default=None, alias="scale-down-unready-time",
    )
    scale_down_utilization_threshold: str | None = Field(
        default=None, alias="scale-down-utilization-threshold",
    )
    skip_nodes_with_local_storage: str | None = Field(
        default=None, alias="skip-nodes-with-local-storage",
    )
    skip_nodes_with_system_pods: str | None = Field(
        default=None, alias="skip-nodes-with-system-pods",
    )


class ProvisionedClusterProperties(ArmModel):
    linux_profile: LinuxProfileProperties | None = None
    control_plane: ControlPlaneProfile | None = None
    kubernetes_version: str | None = None
    network_profile: NetworkProfile | None = None
    storage_profile: dict[str, Any] | None = None
    cluster_vm_access_profile: dict[str, Any] | None = Field(
        default=None, alias="clusterVMAccessProfile",
    )
    agent_pool_profiles: list[NamedAgentPoolProfile] | None = None
    cloud_provider_profile: dict[str, Any] | None = None
    provisioning_state: ProvisioningState | None = None
    status: ProvisionedClusterStatus | None = None
    license_profile: dict[str, Any] | None = None
    auto_scaler_profile: AutoScalerProfile | None = None


class ProvisionedCluster(ProxyResource):
    """The provisioned cluster attached to a connected cluster.

    There is exactly one per connected cluster, always named ``default``.
    """

    properties: ProvisionedClusterProperties | None = None
    extended_location: ExtendedLocation | None = None


class ProvisionedClusterListResult(ListResult[ProvisionedCluster]):
    pass


# -- agent pools ---------------------------------------------------------------


class AgentPoolStatus(ArmModel):
    current_state: ProvisioningState | None = None
    error_message: str | None = None
    ready_replicas: list[AgentPoolUpdateProfile] | None = None


class AgentPoolProperties(AgentPoolProfile, AgentPoolUpdateProfile):
    provisioning_state: ProvisioningState | None = None
    status: AgentPoolStatus | None = None


class AgentPool(ProxyResource):
    properties: AgentPoolProperties | None = None
    tags: dict[str, str] | None = None
    extended_location: ExtendedLocation | None = None


class AgentPoolListResult(ListResult[AgentPool]):
    pass


# -- virtual networks ----------------------------------------------------------


class HciVnetProfile(ArmModel):
    moc_group: str | None = None
    moc_location: str | None = None
    moc_vnet_name: str | None = None


class InfraVnetProfile(ArmModel):
    hci: HciVnetProfile | None = None


class VirtualNetworkOperationError(ArmModel):
    code: str | None = None
    message: str | None = None


class VirtualNetworkOperationStatus(ArmModel):
    error: VirtualNetworkOperationError | None = None
    operation_id: str | None = None
    status: str | None = None


class VirtualNetworkStatus(ArmModel):
    operation_status: VirtualNetworkOperationStatus | None = None


class VirtualNetworkProperties(ArmModel):
    infra_vnet_profile: InfraVnetProfile | None = None
    vip_pool: list[dict[str, Any]] | None = None
    vmip_pool: list[dict[str, Any]] | None = None
    dns_servers: list[str] | None = None
    gateway: str | None = None
    ip_address_prefix: str | None = None
    vlan_id: int | None = Field(default=None, alias="vlanID")
    provisioning_state: ProvisioningState | None = None
    status: VirtualNetworkStatus | None = None


class VirtualNetwork(TrackedResource):
    properties: VirtualNetworkProperties | None = None
    extended_location: ExtendedLocation | None = None


class VirtualNetworksPatch(ArmModel):
    tags: dict[str, str] | None = None


class VirtualNetworksListResult(ListResult[VirtualNetwork]):
    pass
