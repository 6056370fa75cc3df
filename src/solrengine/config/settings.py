"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (SOLRENGINE_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from solrengine.client.endpoint import Endpoint


class SelectSettings(BaseModel):
    """Select (search) request defaults."""

    limit: int = Field(default=10, ge=1, description="Rows returned when a search sets no limit")


class CreateSettings(BaseModel):
    """Core creation options."""

    config_set: str = Field(default="_default", description="Config set used for new cores")


class UnloadSettings(BaseModel):
    """Core unload options. All off: unloading keeps the core's files."""

    delete_index: bool = Field(default=False, description="Delete the index when unloading")
    delete_data_dir: bool = Field(default=False, description="Delete the data directory when unloading")
    delete_instance_dir: bool = Field(default=False, description="Delete the instance directory when unloading")


class SolrSettings(BaseModel):
    """Solr driver configuration."""

    endpoint: Endpoint = Field(default_factory=Endpoint, description="Default endpoint")
    endpoints: dict[str, Endpoint] = Field(
        default_factory=dict,
        description="Per-index endpoints, keyed by index name",
    )
    select: SelectSettings = Field(default_factory=SelectSettings)
    create: CreateSettings = Field(default_factory=CreateSettings)
    unload: UnloadSettings = Field(default_factory=UnloadSettings)

    @field_validator("endpoints", mode="before")
    @classmethod
    def _parse_endpoints(cls, v: Any) -> Any:
        """Parse endpoints from a JSON string (env var) or mapping."""
        if isinstance(v, str):
            import json

            if not v.strip():
                return {}
            try:
                return json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"endpoints must be a JSON object: {e}") from e
        return v


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SOLRENGINE_ prefix.
    Nested settings use double underscores.

    Example:
        SOLRENGINE_SOLR__SELECT__LIMIT=25
        SOLRENGINE_SOLR__ENDPOINT__HOST=solr.internal
        SOLRENGINE_SOLR__ENDPOINTS='{"posts": {"host": "solr-posts", "core": "posts"}}'
    """

    model_config = {
        "env_prefix": "SOLRENGINE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    driver: str = Field(default="solr", description="Default search engine driver")
    solr: SolrSettings = Field(default_factory=SolrSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file override environment variables; anything
        the file leaves out still comes from the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
