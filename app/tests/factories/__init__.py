"""Test data factories for deterministic test data generation."""

from tests.factories.resources import (
    Node,
    make_catalog_loader,
    make_requester_tree,
    make_resource_catalog,
    make_spy_loader,
)

__all__ = [
    "Node",
    "make_catalog_loader",
    "make_requester_tree",
    "make_resource_catalog",
    "make_spy_loader",
]
