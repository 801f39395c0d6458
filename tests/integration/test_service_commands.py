"""Integration tests for the resource provider command groups."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from armkit.app import app

runner = CliRunner()
ARM = "https://management.azure.com"
SUB = "sub-1"
AUTH = ["--token", "cli-token", "--subscription", SUB]
RG = f"{ARM}/subscriptions/{SUB}/resourceGroups/rg/providers"


class TestCustomerInsights:
    @respx.mock
    def test_list_hubs_in_subscription(self, mock_hub):
        route = respx.get(f"{ARM}/subscriptions/{SUB}/providers/Microsoft.CustomerInsights/hubs").mock(
            return_value=httpx.Response(200, json={"value": [mock_hub]})
        )
        result = runner.invoke(app, ["customerinsights", "hubs", "list", *AUTH])
        assert result.exit_code == 0
        assert "hub1" in result.output
        assert route.calls.last.request.headers["Authorization"] == "Bearer cli-token"

    @respx.mock
    def test_list_hubs_follows_next_link(self, mock_hub):
        url = f"{RG}/Microsoft.CustomerInsights/hubs"
        second = dict(mock_hub, name="hub2")
        respx.get(url, params={"page": "2"}).mock(
            return_value=httpx.Response(200, json={"value": [second]})
        )
        respx.get(url).mock(
            return_value=httpx.Response(200, json={
                "value": [mock_hub], "nextLink": f"{url}?page=2",
            })
        )
        result = runner.invoke(app, [
            "customerinsights", "hubs", "list", "-g", "rg", "-f", "json", *AUTH,
        ])
        assert result.exit_code == 0
        assert [h["name"] for h in json.loads(result.output)] == ["hub1", "hub2"]

    @respx.mock
    def test_show_hub_not_found(self):
        respx.get(f"{RG}/Microsoft.CustomerInsights/hubs/missing").mock(
            return_value=httpx.Response(404, json={
                "error": {"code": "ResourceNotFound", "message": "Hub 'missing' was not found."},
            })
        )
        result = runner.invoke(app, ["customerinsights", "hubs", "show", "rg", "missing", *AUTH])
        assert result.exit_code == 6
        assert "was not found" in result.output

    def test_missing_subscription(self):
        result = runner.invoke(app, ["customerinsights", "hubs", "list", "--token", "t"])
        assert result.exit_code == 9
        assert "No subscription ID" in result.output


class TestDeviceRegistry:
    @respx.mock
    def test_show_asset_yaml(self):
        respx.get(f"{RG}/Microsoft.DeviceRegistry/assets/pump").mock(
            return_value=httpx.Response(200, json={
                "name": "pump",
                "location": "eastus",
                "extendedLocation": {"type": "CustomLocation", "name": "cl"},
                "properties": {"assetEndpointProfileRef": "opc", "enabled": True},
            })
        )
        result = runner.invoke(app, [
            "deviceregistry", "assets", "show", "rg", "pump", "-f", "yaml", *AUTH,
        ])
        assert result.exit_code == 0
        assert "name: pump" in result.output
        assert "assetEndpointProfileRef: opc" in result.output


class TestEdgeOrder:
    @respx.mock
    def test_list_orders_counts_items(self):
        respx.get(f"{ARM}/subscriptions/{SUB}/providers/Microsoft.EdgeOrder/orders").mock(
            return_value=httpx.Response(200, json={"value": [{
                "name": "ord1",
                "properties": {
                    "orderItemIds": ["a", "b"],
                    "currentStage": {"stageName": "Placed", "stageStatus": "Succeeded"},
                },
            }]})
        )
        result = runner.invoke(app, ["edgeorder", "orders", "list", "-f", "csv", *AUTH])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "Name,Stage,Status,Items"
        assert lines[1] == "ord1,Placed,Succeeded,2"


class TestHybridAks:
    @respx.mock
    def test_show_vnet(self):
        respx.get(f"{RG}/Microsoft.HybridContainerService/virtualNetworks/vnet1").mock(
            return_value=httpx.Response(200, json={
                "name": "vnet1",
                "location": "westus",
                "properties": {"vlanID": 10},
            })
        )
        result = runner.invoke(app, ["hybridaks", "vnets", "show", "rg", "vnet1", "-f", "json", *AUTH])
        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "vnet1"


class TestKubernetesConfiguration:
    @respx.mock
    def test_list_flux_on_connected_cluster(self):
        route = respx.get(
            f"{RG}/Microsoft.Kubernetes/connectedClusters/edge-1"
            "/providers/Microsoft.KubernetesConfiguration/fluxConfigurations"
        ).mock(return_value=httpx.Response(200, json={"value": [{
            "name": "gitops",
            "properties": {"sourceKind": "GitRepository", "namespace": "flux-system"},
        }]}))
        result = runner.invoke(app, ["k8sconfig", "flux", "list", "rg", "edge-1", "-f", "json", *AUTH])
        assert result.exit_code == 0
        assert route.called
        assert json.loads(result.output)[0]["properties"]["sourceKind"] == "GitRepository"

    @respx.mock
    def test_list_flux_on_managed_cluster(self):
        route = respx.get(
            f"{RG}/Microsoft.ContainerService/managedClusters/aks-1"
            "/providers/Microsoft.KubernetesConfiguration/fluxConfigurations"
        ).mock(return_value=httpx.Response(200, json={"value": []}))
        result = runner.invoke(app, [
            "k8sconfig", "flux", "list", "rg", "aks-1",
            "--cluster-rp", "Microsoft.ContainerService",
            "--cluster-type", "managedClusters",
            *AUTH,
        ])
        assert result.exit_code == 0
        assert route.called


class TestTimeSeriesInsights:
    @respx.mock
    def test_list_environments(self):
        respx.get(f"{ARM}/subscriptions/{SUB}/providers/Microsoft.TimeSeriesInsights/environments").mock(
            return_value=httpx.Response(200, json={"value": [
                {"name": "env1", "location": "westus", "kind": "Gen1", "sku": {"name": "S1", "capacity": 1}},
                {"name": "env2", "location": "westus", "kind": "Gen2", "sku": {"name": "L1", "capacity": 1}},
            ]})
        )
        result = runner.invoke(app, ["tsi", "environments", "list", "-f", "json", *AUTH])
        assert result.exit_code == 0
        assert [e["kind"] for e in json.loads(result.output)] == ["Gen1", "Gen2"]

    @respx.mock
    def test_show_environment_with_expand(self):
        route = respx.get(f"{RG}/Microsoft.TimeSeriesInsights/environments/env1").mock(
            return_value=httpx.Response(200, json={"name": "env1", "kind": "Gen2"})
        )
        result = runner.invoke(app, [
            "tsi", "environments", "show", "rg", "env1", "--expand", "status", *AUTH,
        ])
        assert result.exit_code == 0
        assert route.calls.last.request.url.params["$expand"] == "status"


class TestRootOptions:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("armkit ")

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "customerinsights" in result.output

    @respx.mock
    def test_debug_log_redacts_token(self):
        respx.get(f"{RG}/Microsoft.TimeSeriesInsights/environments").mock(
            return_value=httpx.Response(200, json={"value": []})
        )
        result = runner.invoke(app, [
            "--log-level", "DEBUG", "tsi", "environments", "list", "-g", "rg", *AUTH,
        ])
        assert result.exit_code == 0
        assert "cli-token" not in result.output

    def test_invalid_log_level_is_a_usage_error(self):
        result = runner.invoke(app, ["--log-level", "chatty", "tsi", "environments", "list", *AUTH])
        assert result.exit_code == 2
        assert "must be one of" in result.output
        assert not isinstance(result.exception, ValueError)

    @respx.mock
    def test_log_level_is_case_insensitive(self):
        respx.get(f"{RG}/Microsoft.TimeSeriesInsights/environments").mock(
            return_value=httpx.Response(200, json={"value": []})
        )
        result = runner.invoke(app, ["-l", "info", "tsi", "environments", "list", "-g", "rg", *AUTH])
        assert result.exit_code == 0
