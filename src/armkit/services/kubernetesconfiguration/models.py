"""Microsoft.KubernetesConfiguration Flux configuration and extension schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from armkit.models.base import ArmModel, ListResult
from armkit.models.enums import OpenEnum
from armkit.models.resource import ErrorDetail, ProxyResource


class FluxComplianceStateDefinition(OpenEnum):
    COMPLIANT = "Compliant"
    NON_COMPLIANT = "Non-Compliant"
    PENDING = "Pending"
    SUSPENDED = "Suspended"
    UNKNOWN = "Unknown"


class ProvisioningStateDefinition(OpenEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    CREATING = "Creating"
    UPDATING = "Updating"
    DELETING = "Deleting"


class ScopeDefinition(OpenEnum):
    CLUSTER = "cluster"
    NAMESPACE = "namespace"


class SourceKindDefinition(OpenEnum):
    GIT_REPOSITORY = "GitRepository"
    BUCKET = "Bucket"


class ExtensionStatusLevel(OpenEnum):
    ERROR = "Error"
    WARNING = "Warning"
    INFORMATION = "Information"


class IdentityType(OpenEnum):
    SYSTEM_ASSIGNED = "SystemAssigned"


class AksIdentityType(OpenEnum):
    SYSTEM_ASSIGNED = "SystemAssigned"
    USER_ASSIGNED = "UserAssigned"


# -- flux configurations -------------------------------------------------------


class RepositoryRefDefinition(ArmModel):
    """The git ref to sync. Exactly one of the fields is expected."""

    branch: str | None = None
    tag: str | None = None
    semver: str | None = None
    commit: str | None = None


class GitRepositoryDefinition(ArmModel):
    url: str | None = None
    timeout_in_seconds: int | None = None
    sync_interval_in_seconds: int | None = None
    repository_ref: RepositoryRefDefinition | None = None
    ssh_known_hosts: str | None = None
    https_user: str | None = None
    https_ca_cert: str | None = Field(default=None, alias="httpsCACert")
    local_auth_ref: str | None = None


class BucketDefinition(ArmModel):
    url: str | None = None
    bucket_name: str | None = None
    insecure: bool | None = None
    timeout_in_seconds: int | None = None
    sync_interval_in_seconds: int | None = None
    access_key: str | None = None
    local_auth_ref: str | None = None


class KustomizationDefinition(ArmModel):
    name: str | None = None
    path: str | None = None
    depends_on: list[str] | None = None
    timeout_in_seconds: int | None = None
    sync_interval_in_seconds: int | None = None
    retry_interval_in_seconds: int | None = None
    prune: bool | None = None
    force: bool | None = None


class ObjectReferenceDefinition(ArmModel):
    name: str | None = None
    namespace: str | None = None


class ObjectStatusConditionDefinition(ArmModel):
    last_transition_time: datetime | None = None
    message: str | None = None
    reason: str | None = None
    status: str | None = None
    type: str | None = None


class HelmReleasePropertiesDefinition(ArmModel):
    last_revision_applied: int | None = None
    helm_chart_ref: ObjectReferenceDefinition | None = None
    failure_count: int | None = None
    install_failure_count: int | None = None
    upgrade_failure_count: int | None = None


class ObjectStatusDefinition(ArmModel):
    """Status of one Kubernetes object deployed by a Flux configuration."""

    name: str | None = None
    namespace: str | None = None
    kind: str | None = None
    compliance_state: FluxComplianceStateDefinition | None = None
    applied_by: ObjectReferenceDefinition | None = None
    status_conditions: list[ObjectStatusConditionDefinition] | None = None
    helm_release_properties: HelmReleasePropertiesDefinition | None = None


class FluxConfigurationProperties(ArmModel):
    scope: ScopeDefinition | None = None
    namespace: str | None = None
    source_kind: SourceKindDefinition | None = None
    suspend: bool | None = None
    git_repository: GitRepositoryDefinition | None = None
    bucket: BucketDefinition | None = None
    kustomizations: dict[str, KustomizationDefinition] | None = None
    configuration_protected_settings: dict[str, str] | None = None
    statuses: list[ObjectStatusDefinition] | None = None
    repository_public_key: str | None = None
    source_synced_commit_id: str | None = None
    source_updated_at: datetime | None = None
    status_updated_at: datetime | None = None
    compliance_state: FluxComplianceStateDefinition | None = None
    provisioning_state: ProvisioningStateDefinition | None = None
    error_message: str | None = None


class FluxConfiguration(ProxyResource):
    properties: FluxConfigurationProperties | None = None


class FluxConfigurationPatchProperties(ArmModel):
    source_kind: SourceKindDefinition | None = None
    suspend: bool | None = None
    git_repository: GitRepositoryDefinition | None = None
    bucket: BucketDefinition | None = None
    kustomizations: dict[str, KustomizationDefinition | None] | None = None
    configuration_protected_settings: dict[str, str] | None = None


class FluxConfigurationPatch(ArmModel):
    properties: FluxConfigurationPatchProperties | None = None


class FluxConfigurationsList(ListResult[FluxConfiguration]):
    pass


# -- extensions ----------------------------------------------------------------


class ScopeCluster(ArmModel):
    release_namespace: str | None = None


class ScopeNamespace(ArmModel):
    target_namespace: str | None = None


class Scope(ArmModel):
    cluster: ScopeCluster | None = None
    namespace: ScopeNamespace | None = None


class ExtensionStatus(ArmModel):
    code: str | None = None
    display_status: str | None = None
    level: ExtensionStatusLevel | None = None
    message: str | None = None
    time: str | None = None


class AksAssignedIdentity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: AksIdentityType | None = None


class ExtensionProperties(ArmModel):
    extension_type: str | None = None
    auto_upgrade_minor_version: bool | None = None
    release_train: str | None = None
    version: str | None = None
    scope: Scope | None = None
    configuration_settings: dict[str, str] | None = None
    configuration_protected_settings: dict[str, str] | None = None
    installed_version: str | None = None
    provisioning_state: ProvisioningStateDefinition | None = None
    statuses: list[ExtensionStatus] | None = None
    error_info: ErrorDetail | None = None
    custom_location_settings: dict[str, str] | None = None
    package_uri: str | None = None
    aks_assigned_identity: AksAssignedIdentity | None = None


class Identity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: IdentityType | None = None


class Plan(ArmModel):
    """Marketplace plan of a third-party extension."""

    _required: ClassVar[tuple[str, ...]] = ("name", "publisher", "product")

    name: str | None = None
    publisher: str | None = None
    product: str | None = None
    promotion_code: str | None = None
    version: str | None = None


class Extension(ProxyResource):
    properties: ExtensionProperties | None = None
    identity: Identity | None = None
    plan: Plan | None = None


class PatchExtensionProperties(ArmModel):
    auto_upgrade_minor_version: bool | None = None
    release_train: str | None = None
    version: str | None = None
    configuration_settings: dict[str, Any] | None = None
    configuration_protected_settings: dict[str, Any] | None = None


class PatchExtension(ArmModel):
    properties: PatchExtensionProperties | None = None


class ExtensionsList(ListResult[Extension]):
    pass
