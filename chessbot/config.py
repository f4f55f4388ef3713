# chessbot/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional
import os
import tomllib

# Material weights per piece type. The fine scale leaves room for fractional
# positional terms; the coarse scale is the plain 1/3/3/5/9 count.
MATERIAL_PRESETS: Dict[str, Dict[str, float]] = {
    "fine": {
        "PAWN": 10.0,
        "KNIGHT": 30.0,
        "BISHOP": 30.0,
        "ROOK": 50.0,
        "QUEEN": 90.0,
    },
    "coarse": {
        "PAWN": 1.0,
        "KNIGHT": 3.0,
        "BISHOP": 3.0,
        "ROOK": 5.0,
        "QUEEN": 9.0,
    },
}

@dataclass
class SearchConfig:
    depth: int = 4
    time_limit_ms: Optional[int] = None  # None means depth-only
    time_check_nodes: int = 1024  # how often the deadline is polled

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.time_check_nodes < 1:
            raise ValueError(
                f"time_check_nodes must be at least 1, got {self.time_check_nodes}"
            )

@dataclass
class EvalConfig:
    material_weights: Dict[str, float] = field(
        default_factory=lambda: MATERIAL_PRESETS["fine"].copy()
    )
    positional_weight: float = 0.1  # scales piece-square table entries
    check_bonus: float = 10.0  # charged against the side in check
    mate_score: float = 1_000_000.0

    def use_preset(self, name: str) -> None:
        if name not in MATERIAL_PRESETS:
            raise ValueError(f"Unknown material preset: {name}")
        self.material_weights = MATERIAL_PRESETS[name].copy()

@dataclass
class UIConfig:
    engine_name: str = "ChessBot"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        if "search" in raw:
            for k, v in raw["search"].items():
                if hasattr(cfg.search, k):
                    setattr(cfg.search, k, v)
            cfg.search.validate()
        if "eval" in raw:
            # preset first so explicit weights can still override single pieces
            preset = raw["eval"].get("material_preset")
            if preset:
                cfg.eval.use_preset(preset)
            for k, v in raw["eval"].items():
                if k == "material_weights":
                    cfg.eval.material_weights.update(
                        {name.upper(): float(w) for name, w in v.items()}
                    )
                elif hasattr(cfg.eval, k):
                    setattr(cfg.eval, k, v)
        if "ui" in raw:
            for k, v in raw["ui"].items():
                if hasattr(cfg.ui, k):
                    setattr(cfg.ui, k, v)
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("CHESSBOT_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("CHESSBOT_SEARCH_DEPTH")
if override_depth and override_depth.isdigit():
    CONFIG.search.depth = int(override_depth)
