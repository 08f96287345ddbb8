import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class HintMode(StrEnum):
    NONE = "none"
    DECOMPILATION = "decompilation"
    DESCRIPTION = "description"


class OverlayConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    align_column: int = Field(40, ge=0, alias="alignColumn")
    minimum_padding: int = Field(2, ge=0, alias="minimumPadding")
    hint_mode: HintMode = Field(HintMode.NONE, alias="hintMode")

    @property
    def hints_enabled(self) -> bool:
        return self.hint_mode is not HintMode.NONE


def load_config() -> OverlayConfig:
    return OverlayConfig(
        align_column=int(os.getenv("SEMANTIC_OVERLAY_ALIGN_COLUMN", "40")),
        minimum_padding=int(os.getenv("SEMANTIC_OVERLAY_MINIMUM_PADDING", "2")),
        hint_mode=HintMode(os.getenv("SEMANTIC_OVERLAY_HINT_MODE", HintMode.NONE.value)),
    )


def toggle_hints(mode: HintMode) -> HintMode:
    """Switch hints on (decompilation) when off, off otherwise."""
    return HintMode.DECOMPILATION if mode is HintMode.NONE else HintMode.NONE


def toggle_hint_descriptions(mode: HintMode) -> HintMode:
    return HintMode.DECOMPILATION if mode is HintMode.DESCRIPTION else HintMode.DESCRIPTION


def with_align_column(config: OverlayConfig, value: int) -> OverlayConfig:
    if value < 0:
        raise ValueError(f"Align column must be a non-negative integer, got {value}")
    return config.model_copy(update={"align_column": value})
