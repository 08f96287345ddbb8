import pytest
from pydantic import ValidationError

from semantic_overlay.config import (
    HintMode,
    OverlayConfig,
    load_config,
    toggle_hint_descriptions,
    toggle_hints,
    with_align_column,
)


class TestOverlayConfig:
    def test_defaults(self) -> None:
        config = OverlayConfig()

        assert config.align_column == 40
        assert config.minimum_padding == 2
        assert config.hint_mode is HintMode.NONE
        assert config.hints_enabled is False

    def test_accepts_editor_style_aliases(self) -> None:
        config = OverlayConfig.model_validate({"alignColumn": 0, "minimumPadding": 4, "hintMode": "description"})

        assert config.align_column == 0
        assert config.minimum_padding == 4
        assert config.hint_mode is HintMode.DESCRIPTION
        assert config.hints_enabled is True

    @pytest.mark.parametrize("field", ["align_column", "minimum_padding"])
    def test_rejects_negative_values(self, field: str) -> None:
        with pytest.raises(ValidationError):
            OverlayConfig.model_validate({field: -1})

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            OverlayConfig.model_validate({"hint_mode": "verbose"})


class TestLoadConfig:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEMANTIC_OVERLAY_ALIGN_COLUMN", "60")
        monkeypatch.setenv("SEMANTIC_OVERLAY_MINIMUM_PADDING", "1")
        monkeypatch.setenv("SEMANTIC_OVERLAY_HINT_MODE", "decompilation")

        config = load_config()

        assert config == OverlayConfig(align_column=60, minimum_padding=1, hint_mode=HintMode.DECOMPILATION)

    def test_defaults_without_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("SEMANTIC_OVERLAY_ALIGN_COLUMN", "SEMANTIC_OVERLAY_MINIMUM_PADDING", "SEMANTIC_OVERLAY_HINT_MODE"):
            monkeypatch.delenv(name, raising=False)

        assert load_config() == OverlayConfig()


class TestToggles:
    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (HintMode.NONE, HintMode.DECOMPILATION),
            (HintMode.DECOMPILATION, HintMode.NONE),
            (HintMode.DESCRIPTION, HintMode.NONE),
        ],
    )
    def test_toggle_hints(self, current: HintMode, expected: HintMode) -> None:
        assert toggle_hints(current) is expected

    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (HintMode.NONE, HintMode.DESCRIPTION),
            (HintMode.DECOMPILATION, HintMode.DESCRIPTION),
            (HintMode.DESCRIPTION, HintMode.DECOMPILATION),
        ],
    )
    def test_toggle_hint_descriptions(self, current: HintMode, expected: HintMode) -> None:
        assert toggle_hint_descriptions(current) is expected


class TestWithAlignColumn:
    def test_returns_updated_copy(self) -> None:
        original = OverlayConfig()

        updated = with_align_column(original, 80)

        assert updated.align_column == 80
        assert original.align_column == 40

    def test_zero_is_allowed(self) -> None:
        assert with_align_column(OverlayConfig(), 0).align_column == 0

    def test_negative_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            with_align_column(OverlayConfig(), -5)
