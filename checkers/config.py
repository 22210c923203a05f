# checkers/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib

logger = logging.getLogger(__name__)

# Defaults (points, White positive)
PIECE_VALUES = {
    "MAN": 100,
    "KING": 300,
}

@dataclass
class SearchConfig:
    depth: int = 6
    min_depth: int = 2
    max_depth: int = 8
    alpha_beta: bool = True  # False means full-width minimax (same result, more nodes)

@dataclass
class EvalConfig:
    man_value: int = PIECE_VALUES["MAN"]
    king_value: int = PIECE_VALUES["KING"]
    advance_bonus: int = 5  # per row, men only

@dataclass
class UIConfig:
    engine_name: str = "BlitzDraughts"
    engine_author: str = "Medo"
    api_port: int = 8000
    human_side: str = "WHITE"

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
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("CHECKERS_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("CHECKERS_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("Ignoring CHECKERS_SEARCH_DEPTH=%r (not an integer)", override_depth)
