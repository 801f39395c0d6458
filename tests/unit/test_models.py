"""Tests for the shared model layer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from armkit.client.errors import DecodeError
from armkit.models import ErrorResponse, OperationListResult, TrackedResource
from armkit.services.customerinsights.models import Hub, HubListResult
from armkit.services.hybridaks.models import AutoScalerProfile, VirtualNetworkProperties
from armkit.services.kubernetesconfiguration.models import GitRepositoryDefinition


class TestDecode:
    def test_wire_names_to_attributes(self, mock_hub: dict):
        hub = Hub.from_wire(mock_hub)
        assert hub.name == "hub1"
        assert hub.properties.api_endpoint == "https://hub1.api.ci.ai.dynamics.com"
        assert hub.properties.hub_billing_info.max_units == 5

    def test_missing_properties_is_none(self):
        hub = Hub.from_wire({"name": "bare"})
        assert hub.properties is None

    def test_unknown_fields_ignored(self, mock_hub: dict):
        mock_hub["properties"]["brandNewField"] = {"x": 1}
        mock_hub["etag"] = "W/\"1\""
        hub = Hub.from_wire(mock_hub)
        assert "brandNewField" not in hub.properties.to_wire()

    def test_required_fields_not_enforced_on_decode(self):
        resource = TrackedResource.from_wire({"name": "no-location"})
        assert resource.location is None

    def test_invalid_json_raises_decode_error(self):
        with pytest.raises(DecodeError, match="Hub"):
            Hub.from_wire(b"{not json")

    def test_wrong_type_raises_decode_error(self):
        with pytest.raises(DecodeError):
            Hub.from_wire({"properties": {"tenantFeatures": "lots"}})

    def test_error_response(self):
        body = {
            "error": {
                "code": "ResourceNotFound",
                "message": "gone",
                "details": [{"code": "Inner", "message": "deeper"}],
            }
        }
        err = ErrorResponse.from_wire(body)
        assert err.error.details[0].code == "Inner"


class TestEncode:
    def test_none_fields_omitted(self):
        hub = Hub(location="westus")
        assert hub.to_wire() == {"location": "westus"}

    def test_camel_case_names(self):
        repo = GitRepositoryDefinition(url="https://git", sync_interval_in_seconds=60)
        assert repo.to_wire() == {"url": "https://git", "syncIntervalInSeconds": 60}

    def test_explicit_aliases(self):
        repo = GitRepositoryDefinition(https_ca_cert="cert")
        assert repo.to_wire() == {"httpsCACert": "cert"}
        props = VirtualNetworkProperties.from_wire({"vlanID": 12})
        assert props.vlan_id == 12
        assert props.to_wire() == {"vlanID": 12}

    def test_kebab_case_aliases(self):
        profile = AutoScalerProfile.from_wire({"scan-interval": "10s"})
        assert profile.scan_interval == "10s"
        assert profile.to_wire() == {"scan-interval": "10s"}


class TestRequiredAtConstruction:
    def test_tracked_resource_requires_location(self):
        with pytest.raises(ValidationError, match="location"):
            TrackedResource(name="x")

    def test_tracked_resource_with_location(self):
        assert TrackedResource(location="eastus").location == "eastus"


class TestListResult:
    def test_continuation_present(self):
        page = HubListResult.from_wire({"value": [], "nextLink": "https://next"})
        assert page.continuation() == "https://next"

    @pytest.mark.parametrize("body", [{"value": []}, {"value": [], "nextLink": ""}, {}])
    def test_continuation_absent(self, body: dict):
        assert HubListResult.from_wire(body).continuation() is None

    def test_items_decoded(self, mock_hub: dict):
        page = HubListResult.from_wire({"value": [mock_hub, mock_hub]})
        assert [h.name for h in page.value] == ["hub1", "hub1"]

    def test_operation_list(self):
        page = OperationListResult.from_wire({
            "value": [{
                "name": "Microsoft.CustomerInsights/hubs/read",
                "isDataAction": False,
                "display": {"provider": "Microsoft Customer Insights"},
                "origin": "user,system",
            }],
        })
        assert page.value[0].origin.value == "user,system"
