"""
Scanner configuration loaded from the environment / .env file
"""
import os
from dataclasses import dataclass, field
from typing import Optional, Set

from dotenv import load_dotenv

DEFAULT_MAX_FILE_SIZE = 5_000_000  # 5MB
VARIANTS = ('rich', 'signature')


@dataclass
class ScannerConfig:
    """Repository scanner configuration"""
    variant: str = 'rich'  # 'rich' or 'signature'
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    workers: int = 1
    log_level: str = 'WARNING'
    ignore_patterns: Set[str] = field(default_factory=set)

    def __post_init__(self):
        if self.variant not in VARIANTS:
            raise ValueError(f"Unsupported extractor variant: {self.variant}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'ScannerConfig':
        """
        Build a config from FUNCGRAPH_* environment variables

        Args:
            env_file: Optional path to a .env file (defaults to ./.env lookup)

        Returns:
            ScannerConfig
        """
        load_dotenv(env_file)

        ignore = os.getenv('FUNCGRAPH_IGNORE', '')
        return cls(
            variant=os.getenv('FUNCGRAPH_VARIANT', 'rich'),
            max_file_size=int(os.getenv('FUNCGRAPH_MAX_FILE_SIZE', DEFAULT_MAX_FILE_SIZE)),
            workers=int(os.getenv('FUNCGRAPH_WORKERS', 1)),
            log_level=os.getenv('FUNCGRAPH_LOG_LEVEL', 'WARNING').upper(),
            ignore_patterns={p.strip() for p in ignore.split(',') if p.strip()}
        )
