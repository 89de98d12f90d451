"""
Tests for goskeleton.models
===========================

- TestValidateProjectName: The narrow project name check
- TestRenderContext: Template context model
- TestProjectConfig: The configuration model
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from goskeleton.errors import GoSkeletonError, InvalidNameError
from goskeleton.models import ProjectConfig, RenderContext, validate_project_name


# =============================================================================
# Name Validation Tests
# =============================================================================

class TestValidateProjectName:
    """Tests for validate_project_name."""

    @pytest.mark.parametrize("name", ["shop", "shop-api", "shop_api", "Shop2", "x"])
    def test_accepts_plain_names(self, name: str) -> None:
        assert validate_project_name(name) == name

    @pytest.mark.parametrize(
        "name",
        ["my app", " shop", "shop ", "a/b", "/shop", "a\\b", "shop\\"],
    )
    def test_rejects_spaces_and_separators(self, name: str) -> None:
        with pytest.raises(InvalidNameError) as exc_info:
            validate_project_name(name)

        assert exc_info.value.name == name
        assert "cannot contain spaces or path separators" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["..", "-rf", "tab\tname", "café", "shop.v2"])
    def test_check_is_deliberately_narrow(self, name: str) -> None:
        """Only spaces and separators are rejected."""
        assert validate_project_name(name) == name

    def test_error_types(self) -> None:
        with pytest.raises(GoSkeletonError):
            validate_project_name("my app")
        with pytest.raises(ValueError):
            validate_project_name("my app")

    def test_rejection_has_no_side_effects(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        with pytest.raises(InvalidNameError):
            validate_project_name("my app")

        assert list(tmp_path.iterdir()) == []


# =============================================================================
# RenderContext Tests
# =============================================================================

class TestRenderContext:
    """Tests for the RenderContext model."""

    def test_dump_exposes_name(self) -> None:
        assert RenderContext(Name="shop").model_dump() == {"Name": "shop"}

    def test_is_immutable(self) -> None:
        ctx = RenderContext(Name="shop")
        with pytest.raises(ValidationError):
            ctx.Name = "other"  # type: ignore[misc]


# =============================================================================
# ProjectConfig Tests
# =============================================================================

class TestProjectConfig:
    """Tests for ProjectConfig."""

    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = ProjectConfig(name="shop")

        assert config.output_dir == tmp_path
        assert config.template_dir is None
        assert config.project_dir == tmp_path / "shop"

    def test_invalid_name_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ProjectConfig(name="my app")

        assert "cannot contain spaces or path separators" in str(exc_info.value)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfig(name="")

    def test_template_dir(self, tmp_path: Path) -> None:
        config = ProjectConfig(name="shop", template_dir=tmp_path)
        assert config.template_dir == tmp_path
