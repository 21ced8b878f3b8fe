"""Builder pattern: profiles assembled from fixed presets."""
from typing import List, Protocol

from pydantic import BaseModel, ConfigDict


class Preset(Protocol):
    indentation: int
    preset_name: str
    word_wrap: bool


class DefaultPreset:
    indentation = 4
    preset_name = "Default"
    word_wrap = True


class CompactPreset:
    indentation = 4
    preset_name = "Compact"
    word_wrap = False


class Profile(BaseModel):
    """Editor settings copied from a preset."""
    model_config = ConfigDict(frozen=True)

    indentation: int
    preset_name: str
    word_wrap: bool

    @classmethod
    def from_preset(cls, preset: Preset) -> "Profile":
        return cls(
            indentation=preset.indentation,
            preset_name=preset.preset_name,
            word_wrap=preset.word_wrap,
        )


class Client:
    def main(self) -> List[Profile]:
        return [
            Profile.from_preset(DefaultPreset()),
            Profile.from_preset(CompactPreset()),
        ]
