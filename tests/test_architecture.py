"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application services
- Application services don't depend on adapters
- Adapters depend on domain ports, not on application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import adapters, application or ports."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("nyc_subway.domain.models*")
        .should_not_import("nyc_subway.adapters*")
        .should_not_import("nyc_subway.application*")
        .should_not_import("nyc_subway.domain.ports*")
        .may_import("nyc_subway.domain.models*")
        .check("nyc_subway")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("nyc_subway.domain.ports*")
        .should_not_import("nyc_subway.adapters*")
        .should_not_import("nyc_subway.application*")
        .may_import("nyc_subway.domain.ports*")
        .may_import("nyc_subway.domain.models*")
        .check("nyc_subway")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("nyc_subway.application*")
        .should_not_import("nyc_subway.adapters*")
        .may_import("nyc_subway.domain*")
        .may_import("nyc_subway.application*")
        .check("nyc_subway")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should reach services through domain ports only."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("nyc_subway.adapters*")
        .should_not_import("nyc_subway.application*")
        .may_import("nyc_subway.domain*")
        .may_import("nyc_subway.adapters*")
        .check("nyc_subway", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not depend on outer layers."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("nyc_subway.domain*")
        .should_not_import("nyc_subway.adapters*")
        .should_not_import("nyc_subway.application*")
        .may_import("nyc_subway.domain*")
        .check("nyc_subway", only_direct_imports=True)
    )


def test_clustering_does_not_depend_on_index_implementation() -> None:
    """The clustering engine should not know which spatial index is used."""
    (
        archrule("clustering independence", comment="Clustering takes stations, not an index")
        .match("nyc_subway.application.services.clustering")
        .should_not_import("nyc_subway.adapters.spatial*")
        .should_not_import("shapely*")
        .check("nyc_subway")
    )


def test_cli_does_not_import_web_adapters() -> None:
    """CLI should not import web adapters so queries run without a web server."""
    (
        archrule("CLI independence", comment="CLI should not depend on web adapters")
        .match("nyc_subway.cli")
        .should_not_import("nyc_subway.adapters.web*")
        .check("nyc_subway", only_direct_imports=True)
    )
