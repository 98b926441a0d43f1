"""Shared fixtures describing redesign plans used across the test suite."""

from __future__ import annotations

import typing as typ

import pytest


@pytest.fixture
def hero_footer_plan() -> dict[str, typ.Any]:
    """Return the minimal hero + footer plan with props in ``sectionProps``."""
    return {
        "sectionOrdering": ["hero", "footer"],
        "sectionProps": {
            "hero": {"headline": "Welcome"},
            "footer": {"logoText": "X", "linkGroups": []},
        },
    }


@pytest.fixture
def landing_plan() -> dict[str, typ.Any]:
    """Return a planner-shaped plan mixing both props sources and variants."""
    return {
        "sectionOrdering": ["navigation", "hero", "features", "cta", "footer"],
        "layoutVariants": {"hero": "split", "features": "grid2"},
        "contentTone": "confident",
        "contentEmphasis": ["outcomes"],
        "missingSections": [],
        "redundantSections": [],
        "sectionProps": {
            "hero": {
                "headline": "Learn faster",
                "subheadline": "Courses that fit your week",
                "primaryCTA": {"label": "Start", "href": "/start"},
            },
        },
        "componentMappings": [
            {
                "sectionType": "navigation",
                "templateId": "nav-header",
                "variant": "minimal",
                "props": {
                    "logoText": "Acme",
                    "navLinks": [{"label": "Home", "href": "/"}],
                },
            },
            {
                "sectionType": "features",
                "templateId": "features-grid",
                "variant": "grid2",
                "props": {
                    "heading": "Why Acme",
                    "features": [{"title": "Fast", "description": "Very"}],
                },
            },
            {
                "sectionType": "cta",
                "templateId": "final-cta",
                "variant": "gradient",
                "props": {"headline": "Ready?"},
            },
            {
                "sectionType": "footer",
                "templateId": "footer",
                "variant": "default",
                "props": {"logoText": "Acme", "linkGroups": []},
            },
        ],
    }


@pytest.fixture
def page_analysis() -> dict[str, typ.Any]:
    """Return a representative crawled-page analysis object."""
    return {
        "url": "https://example.invalid/",
        "title": "Acme Learning",
        "sections": [{"type": "hero", "headline": "Old headline"}],
    }
