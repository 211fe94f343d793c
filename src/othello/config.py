"""
Configuration parameters for Othello Minimax.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

# Search depth behind each difficulty setting offered on the start screen
DIFFICULTY_LEVELS = {
    'easy': 1,
    'medium': 3,
    'hard': 5,
}

@dataclass
class SearchConfig:
    """Configuration for the minimax search."""
    depth: int = 3
    use_alpha_beta: bool = True
    machine_color: int = 2  # LIGHT; the maximizing side
    difficulty: Optional[str] = None  # Overrides depth when set

    def resolved_depth(self) -> int:
        """Search depth after applying the difficulty preset."""
        if self.difficulty is not None:
            if self.difficulty not in DIFFICULTY_LEVELS:
                raise ValueError(f"Unknown difficulty: {self.difficulty}")
            return DIFFICULTY_LEVELS[self.difficulty]
        if self.depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {self.depth}")
        return self.depth

@dataclass
class EvalConfig:
    """Weights for the static position evaluator."""
    material: int = 1
    corner: int = 25
    corner_adjacent: int = 10  # Penalty per cell next to an empty corner
    edge: int = 2
    mobility: int = 3
    win_score: int = 10000  # Terminal sentinel, must exceed any heuristic value

    def max_heuristic(self) -> int:
        """Upper bound on the magnitude of any non-terminal score."""
        return (abs(self.material) * 64 + abs(self.corner) * 4 + abs(self.corner_adjacent) * 12
                + abs(self.edge) * 24 + abs(self.mobility) * 64)

    def validate(self):
        """Check that terminal scores always dominate heuristic ones."""
        if self.win_score <= self.max_heuristic():
            raise ValueError(
                f"win_score ({self.win_score}) must exceed the heuristic bound "
                f"({self.max_heuristic()})")

@dataclass
class ArenaConfig:
    """Configuration for machine-vs-machine tournaments."""
    rounds: int = 2
    output_dir: str = "arena_results"
    players: Dict[str, int] = field(default_factory=lambda: dict(DIFFICULTY_LEVELS))

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True
    verbose: bool = False

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-Minimax"
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        config = cls(
            project_name=config_dict.get('project_name', 'Othello-Minimax'),
            search=SearchConfig(**config_dict.get('search', {})),
            eval=EvalConfig(**config_dict.get('eval', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )
        config.eval.validate()
        return config

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Config file not found: {filepath}")
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
