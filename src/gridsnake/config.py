"""Window and timing configuration for a game session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from gridsnake.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Session configuration.

    Supports JSON serialization so a setup can be shared or replayed.
    """

    # Window
    window_width: int = 800
    window_height: int = 600
    cell_size: int = 20
    title: str = "Snake"

    # Timing
    move_interval: float = 0.075
    fps: int = 60

    # Food placement
    seed: int | None = None

    def grid_size(self) -> tuple[int, int]:
        """Return ``(grid_width, grid_height)`` for the configured window."""
        grid = Grid.from_surface(
            self.window_width, self.window_height, self.cell_size,
        )
        return grid.width, grid.height

    def with_overrides(self, **overrides) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        unknown = set(raw) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**raw)
