"""Microsoft.KubernetesConfiguration, API version 2022-04-02-preview."""

from armkit.services.kubernetesconfiguration.client import (
    API_VERSION,
    KubernetesConfigurationClient,
)
from armkit.services.kubernetesconfiguration.models import (
    BucketDefinition,
    Extension,
    ExtensionProperties,
    ExtensionsList,
    FluxComplianceStateDefinition,
    FluxConfiguration,
    FluxConfigurationPatch,
    FluxConfigurationProperties,
    FluxConfigurationsList,
    GitRepositoryDefinition,
    KustomizationDefinition,
    ObjectStatusDefinition,
    PatchExtension,
    ProvisioningStateDefinition,
    RepositoryRefDefinition,
    ScopeDefinition,
    SourceKindDefinition,
)

__all__ = [
    "API_VERSION",
    "BucketDefinition",
    "Extension",
    "ExtensionProperties",
    "ExtensionsList",
    "FluxComplianceStateDefinition",
    "FluxConfiguration",
    "FluxConfigurationPatch",
    "FluxConfigurationProperties",
    "FluxConfigurationsList",
    "GitRepositoryDefinition",
    "KubernetesConfigurationClient",
    "KustomizationDefinition",
    "ObjectStatusDefinition",
    "PatchExtension",
    "ProvisioningStateDefinition",
    "RepositoryRefDefinition",
    "ScopeDefinition",
    "SourceKindDefinition",
]
