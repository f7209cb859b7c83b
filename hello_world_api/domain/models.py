"""Typed domain models shared across runtime layers.

This module provides immutable data contracts for the API definition document
and the health-check surface.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiVersionDefinition:
    """One published API version entry.

    Attributes:
        version: Version label exposed on the API platform.
        status: Lifecycle status text such as `ALPHA` or `STABLE`.
        endpoints_enabled: Whether endpoints for this version are live.
    """

    version: str
    status: str
    endpoints_enabled: bool

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready mapping for this version entry.

        Returns:
            dict[str, object]: Version payload using platform field names.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "version": self.version,
            "status": self.status,
            "endpointsEnabled": self.endpoints_enabled,
        }


@dataclass(frozen=True)
class ApiDefinition:
    """API definition document registered with the API platform.

    Attributes:
        name: Human-readable API name.
        description: Short API description.
        context: URL context path segment assigned to the API.
        categories: Platform category identifiers.
        versions: Published version entries.
    """

    name: str
    description: str
    context: str
    categories: tuple[str, ...]
    versions: tuple[ApiVersionDefinition, ...]

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready mapping for the full definition document.

        Returns:
            dict[str, object]: Document payload wrapped in the top-level `api` key.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "api": {
                "name": self.name,
                "description": self.description,
                "context": self.context,
                "categories": list(self.categories),
                "versions": [version.to_payload() for version in self.versions],
            }
        }


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
