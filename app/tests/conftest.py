"""Shared fixtures for the localizer test suite."""

import pytest
import yaml

from localizer.resources import LocalizerConfig, Localizer, ResolutionPolicy
from tests.factories import make_catalog_loader


@pytest.fixture
def resources_dir(tmp_path):
    """Create temporary directory with sample YAML string catalogs.

    Returns a directory structure like:
    - messages.yml
    - messages.fr.yml
    - messages.fr-FR.yml
    - messages@dark.yml
    - forms.yml
    """
    catalogs = {
        "messages.yml": {
            "greeting": "Hello {name}",
            "farewell": "Goodbye",
            "signup": {"title": "Sign up", "submit": "Create account"},
            "empty": "",
        },
        "messages.fr.yml": {
            "greeting": "Bonjour {name}",
            "signup": {"title": "Inscription"},
        },
        "messages.fr-FR.yml": {
            "farewell": "Au revoir",
        },
        "messages@dark.yml": {
            "signup": {"title": "SIGN UP"},
        },
        "forms.yml": {
            "page": {"form": {"field": {"label": "Field label on page form"}}},
            "field": {"label": "Generic field label"},
        },
    }
    for filename, data in catalogs.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def lenient_policy():
    """Policy that neither uses defaults nor throws."""
    return ResolutionPolicy(use_default_on_missing=False, throw_on_missing=False)


@pytest.fixture
def greeting_localizer():
    """Localizer over a single catalog loader with a greeting template."""
    loader = make_catalog_loader(
        {
            "": {"greeting": "Hello {name}", "title": "Title"},
            "fr": {"greeting": "Bonjour {name}", "title": "Titre"},
        }
    )
    return Localizer(LocalizerConfig(loaders=[loader]))
