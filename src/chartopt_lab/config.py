"""Configuration loader for ChartOpt-Lab runs."""

import os
import yaml
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

THEME_ENV_KEY = "CHARTOPT_THEME"


@dataclass
class ThemeConfig:
    path: Optional[str] = None


@dataclass
class InputConfig:
    option_path: Optional[str] = None


@dataclass
class OutputConfig:
    output_dir: str = os.path.join(PROJECT_ROOT, "results")
    filename: str = "resolved_option.json"
    indent: int = 2


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "Config":
        """Load configuration from YAML file."""
        # Load environment variables
        load_dotenv()

        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # Helper to resolve environment variables in config values
        def resolve_env_vars(d):
            if isinstance(d, dict):
                return {k: resolve_env_vars(v) for k, v in d.items()}
            elif isinstance(d, list):
                return [resolve_env_vars(v) for v in d]
            elif isinstance(d, str) and d.startswith("${") and d.endswith("}"):
                env_key = d[2:-1]
                return os.getenv(env_key, "")
            return d

        data = resolve_env_vars(data)

        config = cls(
            theme=ThemeConfig(**_section(data, "theme")),
            input=InputConfig(**_section(data, "input")),
            output=OutputConfig(**_section(data, "output")),
            logging=LoggingConfig(**_section(data, "logging")),
        )

        # Environment overrides the theme file
        theme_override = os.getenv(THEME_ENV_KEY, "")
        if theme_override:
            config.theme.path = theme_override
        if config.theme.path:
            config.theme.path = config.resolve_path(config.theme.path, yaml_path)
        if config.input.option_path:
            config.input.option_path = config.resolve_path(config.input.option_path, yaml_path)

        # An unset ${VAR} resolves to "", fall back to the default directory
        if not config.output.output_dir:
            config.output.output_dir = OutputConfig().output_dir
        if not os.path.isabs(config.output.output_dir):
            config.output.output_dir = os.path.join(
                os.path.dirname(os.path.abspath(yaml_path)), config.output.output_dir)
        os.makedirs(config.output.output_dir, exist_ok=True)

        return config

    @staticmethod
    def resolve_path(path: str, yaml_path: str) -> str:
        """Resolve ``path`` relative to the directory of the config file."""
        if os.path.isabs(path) or os.path.exists(path):
            return path
        return os.path.join(os.path.dirname(os.path.abspath(yaml_path)), path)

    @property
    def output_path(self) -> str:
        return os.path.join(self.output.output_dir, self.output.filename)


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return section


def load_config(config_path: str = "config/default.yaml") -> Config:
    """Load configuration from file."""
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return Config.from_yaml(config_path)
