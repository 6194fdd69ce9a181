"""
Configuration management for the search sampler
"""
import os
from typing import Literal, Optional
from pydantic import BaseModel, Field, PositiveFloat


class SearchConfig(BaseModel):
    """Configuration for the parallel search"""
    parallel_threshold: int = Field(default=10_000, ge=0)
    timeout_seconds: Optional[PositiveFloat] = 30.0
    strategy: Literal["split", "outward"] = "split"
    resolution: Literal["lowest_index", "first_reported"] = "lowest_index"
    cancel_check_interval: int = Field(default=1024, ge=1)
    raise_on_timeout: bool = False


class LoggingConfig(BaseModel):
    """Configuration for log output"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config(BaseModel):
    """Main configuration class"""
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        search = {}
        if os.getenv("SEARCH_SAMPLER_THRESHOLD"):
            search["parallel_threshold"] = int(os.getenv("SEARCH_SAMPLER_THRESHOLD"))
        if os.getenv("SEARCH_SAMPLER_TIMEOUT"):
            timeout = os.getenv("SEARCH_SAMPLER_TIMEOUT")
            search["timeout_seconds"] = None if timeout.lower() == "none" else float(timeout)
        if os.getenv("SEARCH_SAMPLER_STRATEGY"):
            search["strategy"] = os.getenv("SEARCH_SAMPLER_STRATEGY")
        if os.getenv("SEARCH_SAMPLER_RESOLUTION"):
            search["resolution"] = os.getenv("SEARCH_SAMPLER_RESOLUTION")

        return cls(
            search=SearchConfig(**search),
            logging=LoggingConfig(level=os.getenv("SEARCH_SAMPLER_LOG_LEVEL", "INFO"))
        )

    @classmethod
    def load_from_file(cls, file_path: str) -> "Config":
        """Load configuration from JSON file"""
        import json
        with open(file_path, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def save_to_file(self, file_path: str) -> None:
        """Save configuration to JSON file"""
        import json
        with open(file_path, 'w') as f:
            json.dump(self.model_dump(), f, indent=2)
