"""Tests for API definition document construction and rendering."""

from __future__ import annotations

import json
from dataclasses import FrozenInstanceError, dataclass

import pytest

from hello_world_api.config import AppSettings
from hello_world_api.domain import (
    ApiDefinition,
    domain_build_api_definition,
    domain_render_api_definition,
)


@dataclass(frozen=True)
class _PlatformConfig:
    """Minimal configuration double exposing platform fields."""

    api_platform_status: str | None = None
    api_platform_endpoints_enabled: bool | None = None


_EXPECTED_SCENARIO_A = {
    "api": {
        "name": "Hello World",
        "description": "A 'hello world' example of an API on the HMRC API Developer Hub.",
        "context": "discuss-with-the-api-platform-team",
        "categories": ["OTHER"],
        "versions": [
            {
                "version": "1.0",
                "status": "ALPHA",
                "endpointsEnabled": False,
            }
        ],
    }
}


def test_domain_render_defaults_when_both_fields_absent() -> None:
    """Render ALPHA status and disabled endpoints for an empty configuration.

    Returns:
        None: Assertions validate the full document.
    """

    rendered = domain_render_api_definition(_PlatformConfig())

    assert json.loads(rendered) == _EXPECTED_SCENARIO_A


def test_domain_render_uses_configured_values() -> None:
    """Render configured status and endpoints flag in place of defaults."""

    rendered = json.loads(
        domain_render_api_definition(
            _PlatformConfig(api_platform_status="STABLE", api_platform_endpoints_enabled=True)
        )
    )

    assert rendered == {
        "api": {
            "name": "Hello World",
            "description": "A 'hello world' example of an API on the HMRC API Developer Hub.",
            "context": "discuss-with-the-api-platform-team",
            "categories": ["OTHER"],
            "versions": [
                {
                    "version": "1.0",
                    "status": "STABLE",
                    "endpointsEnabled": True,
                }
            ],
        }
    }


@pytest.mark.parametrize("status", ["BETA", "beta", "RETIRED", "SOMETHING-ELSE", ""])
def test_domain_render_passes_status_through_unchanged(status: str) -> None:
    """Keep status text exactly as configured without case folding or validation."""

    rendered = json.loads(domain_render_api_definition(_PlatformConfig(api_platform_status=status)))

    assert rendered["api"]["versions"][0]["status"] == status
    assert rendered["api"]["versions"][0]["endpointsEnabled"] is False


def test_domain_render_keeps_explicit_false_flag() -> None:
    """Treat an explicit False flag as present, not as absent."""

    definition = domain_build_api_definition(
        _PlatformConfig(api_platform_status="BETA", api_platform_endpoints_enabled=False)
    )

    assert definition.versions[0].endpoints_enabled is False
    assert definition.versions[0].status == "BETA"


@pytest.mark.parametrize(
    "config",
    [
        _PlatformConfig(),
        _PlatformConfig(api_platform_status="BETA"),
        _PlatformConfig(api_platform_endpoints_enabled=True),
        _PlatformConfig(api_platform_status="DEPRECATED", api_platform_endpoints_enabled=False),
    ],
)
def test_domain_render_fixed_categories_and_single_version(config: _PlatformConfig) -> None:
    """Emit exactly one OTHER category and exactly one version for any input."""

    rendered = json.loads(domain_render_api_definition(config))

    assert rendered["api"]["categories"] == ["OTHER"]
    assert len(rendered["api"]["versions"]) == 1


def test_domain_render_is_byte_identical_across_calls() -> None:
    """Render identical text for the same configuration snapshot."""

    config = _PlatformConfig(api_platform_status="BETA", api_platform_endpoints_enabled=True)

    assert domain_render_api_definition(config) == domain_render_api_definition(config)


def test_domain_render_escapes_quotes_in_status() -> None:
    """Produce valid JSON when the status contains characters that need escaping."""

    status = 'say "hi"\\now'

    rendered = json.loads(domain_render_api_definition(_PlatformConfig(api_platform_status=status)))

    assert rendered["api"]["versions"][0]["status"] == status


def test_domain_build_returns_immutable_definition() -> None:
    """Return a frozen definition value."""

    definition = domain_build_api_definition(_PlatformConfig())

    assert isinstance(definition, ApiDefinition)
    with pytest.raises(FrozenInstanceError):
        definition.name = "changed"  # type: ignore[misc]


def test_domain_render_accepts_app_settings() -> None:
    """Render directly from runtime settings."""

    settings = AppSettings(
        _env_file=None,
        api_platform_status="BETA",
        api_platform_endpoints_enabled=True,
    )

    rendered = json.loads(domain_render_api_definition(settings))

    assert rendered["api"]["versions"][0] == {"version": "1.0", "status": "BETA", "endpointsEnabled": True}
