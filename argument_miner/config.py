"""
config.py

Configuration management for ArgumentMiner.

Settings are read from an optional `config.yaml` at the project root,
environment variables written as ${ENV_VAR_NAME} are expanded, and the
result is validated with Pydantic before being exposed through a singleton.

Usage Example:

1. Import the config instance:
   from argument_miner.config import config

2. Access a configuration value:
   max_entries = config["history"]["max_entries"]
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field, ValidationError


class AnalyzerConfig(BaseModel):
    # Seconds awaited before each analysis
    simulated_delay_seconds: float = Field(default=0.0, ge=0.0)


class HistoryConfig(BaseModel):
    max_entries: int = Field(default=5, ge=1)


class UploadConfig(BaseModel):
    max_file_size_bytes: int = 10 * 1024 * 1024
    allowed_content_types: List[str] = [
        "text/plain",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ]
    allowed_extensions: List[str] = [".txt"]


class PathsConfig(BaseModel):
    logs_dir: str = "./logs"
    output_dir: str = "./data/output"


class ConfigModel(BaseModel):
    analyzer: AnalyzerConfig = AnalyzerConfig()
    history: HistoryConfig = HistoryConfig()
    upload: UploadConfig = UploadConfig()
    paths: PathsConfig = PathsConfig()
    logging: Dict[str, Any] = Field(default_factory=dict)
    api: Dict[str, Any] = Field(default_factory=dict)


class Config:
    """
    Manages application configuration, loading settings from a YAML file.

    Loads `config.yaml` from the project root when present, expands
    environment variables explicitly (format: ${ENV_VAR_NAME}) and fills in
    defaults for every section through `ConfigModel`. Used as a singleton via
    the module-level `config` instance.
    """

    _instance = None
    _config: Dict[str, Any] | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._config = cls._instance._load_config()
        return cls._instance

    @staticmethod
    def config_path() -> Path:
        override = os.getenv("ARGUMENT_MINER_CONFIG")
        if override:
            return Path(override)
        return Path(__file__).parent.parent / "config.yaml"

    def _load_config(self) -> Dict[str, Any]:
        config_path = self.config_path()

        config_dict: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r") as stream:
                try:
                    config_dict = yaml.safe_load(stream) or {}
                except yaml.YAMLError as exc:
                    print(f"Error loading {config_path}: {exc}")
                    raise

        # Prefix placeholders so expandvars leaves unknown variables detectable
        config_str = json.dumps(config_dict)
        config_str = os.path.expandvars(config_str.replace("${", "${ENV_"))
        config_dict = json.loads(config_str)

        def remove_prefix(data: Any) -> Any:
            if isinstance(data, dict):
                return {k: remove_prefix(v) for k, v in data.items()}
            elif isinstance(data, list):
                return [remove_prefix(item) for item in data]
            elif isinstance(data, str) and data.startswith("${ENV_"):
                env_var_name = data[6:-1]
                return os.getenv(env_var_name, "")
            return data

        final_config: Dict[str, Any] = remove_prefix(config_dict)

        for section in ("logging", "api"):
            if final_config.get(section) is None:
                final_config[section] = {}

        try:
            final_config = ConfigModel(**final_config).model_dump()
        except ValidationError as e:
            print(f"Configuration validation error: {e}")
            raise

        return final_config

    @property
    def config(self) -> Dict[str, Any]:
        if self._config is None:
            raise RuntimeError("Config not loaded")
        return self._config

    def get(self, key, default=None):
        """
        Retrieves a top-level configuration value, returning `default` if absent.
        """
        return self.config.get(key, default)

    def __getitem__(self, key):
        return self.config[key]

    def __repr__(self):
        return f"Config(path={self.config_path()})"


# Singleton instance
config = Config().config
