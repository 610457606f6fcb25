"""Tests for localizer.resources.factory module."""

import pytest

from localizer.configuration import ResolutionSettings
from localizer.resources import (
    ClassStringResourceLoader,
    Localizer,
    RequesterStringResourceLoader,
    ResourceNotFound,
    VariableInterpolator,
    YAMLStringResourceLoader,
    create_localizer,
)
from localizer.resources.factory import create_default_loaders
from tests.factories import Node, make_catalog_loader


class TestCreateDefaultLoaders:
    """Tests for create_default_loaders()."""

    def test_without_resources_dir(self):
        """Only the class loader is registered without a directory."""
        loaders = create_default_loaders(ResolutionSettings())

        assert len(loaders) == 1
        assert isinstance(loaders[0], ClassStringResourceLoader)

    def test_with_resources_dir(self, resources_dir):
        """Requester-scoped YAML, class bundles, then plain YAML."""
        loaders = create_default_loaders(
            ResolutionSettings(LOCALIZER_RESOURCES_DIR=resources_dir)
        )

        assert [type(loader) for loader in loaders] == [
            RequesterStringResourceLoader,
            ClassStringResourceLoader,
            YAMLStringResourceLoader,
        ]
        assert loaders[0].delegate is loaders[2]

    def test_missing_resources_dir_raises(self, tmp_path):
        """A configured but missing directory raises ValueError."""
        with pytest.raises(ValueError):
            create_default_loaders(
                ResolutionSettings(LOCALIZER_RESOURCES_DIR=tmp_path / "missing")
            )


class TestCreateLocalizer:
    """Tests for create_localizer()."""

    def test_policy_from_settings(self):
        """Policy flags are copied from settings."""
        settings = ResolutionSettings(
            LOCALIZER_USE_DEFAULT_ON_MISSING=False,
            LOCALIZER_THROW_ON_MISSING=False,
        )

        localizer = create_localizer(settings=settings, loaders=[])

        assert isinstance(localizer, Localizer)
        assert localizer.config.policy.use_default_on_missing is False
        assert localizer.config.policy.throw_on_missing is False
        assert localizer.config.policy == settings.to_policy()
        assert localizer.resolve("x") == "[Warning: String resource for 'x' not found]"

    def test_strict_interpolation_from_settings(self):
        """strict_interpolation configures the default interpolator."""
        settings = ResolutionSettings(LOCALIZER_STRICT_INTERPOLATION=False)

        localizer = create_localizer(settings=settings, loaders=[])

        assert isinstance(localizer.interpolator, VariableInterpolator)
        assert localizer.interpolator.strict is False

    def test_explicit_loaders(self):
        """Explicit loaders replace the default chain."""
        loader = make_catalog_loader({"": {"title": "Title"}})

        localizer = create_localizer(settings=ResolutionSettings(), loaders=[loader])

        assert localizer.config.loaders.snapshot() == (loader,)
        assert localizer.get_string("title") == "Title"

    def test_end_to_end_with_yaml(self, resources_dir):
        """A localizer built from a directory resolves scoped and plain keys."""
        localizer = create_localizer(
            settings=ResolutionSettings(LOCALIZER_RESOURCES_DIR=resources_dir)
        )
        field = Node("field", parent=Node("form", parent=Node("page")))

        assert localizer.get_string("label", requester=field) == "Field label on page form"
        assert (
            localizer.get_string("greeting", locale="fr-FR", context={"name": "Ann"})
            == "Bonjour Ann"
        )
        with pytest.raises(ResourceNotFound):
            localizer.get_string("nonexistent")
