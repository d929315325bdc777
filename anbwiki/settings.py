"""
Where the game data lives.

The game root comes from --game-dir, else the ANBWIKI_GAME_PATH environment
variable, else ./anbennar. Every input path is derived from it.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_GAME_PATH = Path("anbennar")
DEFAULT_OUTPUT_PATH = Path("output")

GAME_PATH_ENV = "ANBWIKI_GAME_PATH"


class MissingInputError(FileNotFoundError):
    """A required game directory or file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Missing required input: {path}")
        self.path = path


@dataclass(frozen=True)
class GamePaths:
    root: Path

    @classmethod
    def from_env(cls, game_dir: Optional[Union[str, Path]] = None) -> "GamePaths":
        if game_dir is None:
            game_dir = os.environ.get(GAME_PATH_ENV) or DEFAULT_GAME_PATH
        return cls(Path(game_dir))

    @property
    def map(self) -> Path:
        return self.root / "map"

    @property
    def continents(self) -> Path:
        return self.map / "continent.txt"

    @property
    def province_history(self) -> Path:
        return self.root / "history" / "provinces"

    @property
    def country_history(self) -> Path:
        return self.root / "history" / "countries"

    @property
    def common(self) -> Path:
        return self.root / "common"

    @property
    def country_tags(self) -> Path:
        return self.common / "country_tags"

    @property
    def scripted_triggers(self) -> Path:
        return self.common / "scripted_triggers" / "00_scripted_triggers.txt"

    @property
    def ideas(self) -> Path:
        return self.common / "ideas"

    @property
    def governments(self) -> Path:
        return self.common / "governments"

    @property
    def government_reforms(self) -> Path:
        return self.common / "government_reforms"

    @property
    def decisions(self) -> Path:
        return self.root / "decisions"

    @property
    def events(self) -> Path:
        return self.root / "events"

    @property
    def missions(self) -> Path:
        return self.root / "missions"

    @property
    def localisation(self) -> Path:
        return self.root / "localisation"


def require(*paths: Path):
    """Abort the run if any required input is missing."""
    for path in paths:
        if not Path(path).exists():
            raise MissingInputError(Path(path))
