"""
Configuration loader for sparselinear.
Loads a YAML config with optional per-environment overrides.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/sparselinear.yaml"


class Config:
    """
    Singleton config loader.
    
    Usage:
        config = Config.load("config/sparselinear.yaml")
        bias = config.get("parser.bias", -1)
        evaluation = config.get_section("evaluation")
    """
    
    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    @classmethod
    def load(
        cls,
        config_path: str = DEFAULT_CONFIG_PATH,
        env: Optional[str] = None,
        env_dir: Optional[str] = None,
    ) -> "Config":
        """
        Load config from YAML file.
        
        Args:
            config_path: Path to main config file
            env: Environment name (loads {env_dir}/{env}.yaml as override)
            env_dir: Directory holding environment overrides
                     (default: "environments" next to the main config)
            
        Returns:
            Config instance
        """
        instance = cls()
        
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        
        with open(path, "r") as f:
            instance._config = yaml.safe_load(f) or {}
        
        logger.info(f"Loaded config from {config_path}")
        
        if env:
            override_dir = Path(env_dir) if env_dir else path.parent / "environments"
            env_path = override_dir / f"{env}.yaml"
            if env_path.exists():
                with open(env_path, "r") as f:
                    env_config = yaml.safe_load(f) or {}
                instance._config = instance._merge_configs(instance._config, env_config)
                logger.info(f"Applied environment override: {env}")
            else:
                logger.warning(f"Environment override not found: {env_path}")
        
        return instance
    
    def _merge_configs(self, base: dict, override: dict) -> dict:
        """Deep merge override into base config."""
        result = base.copy()
        
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        
        return result
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.
        
        Example:
            config.get("parser.bias")  # Returns -1
            config.get("parser.missing", 10)  # Returns 10
        """
        keys = key.split(".")
        value = self._config
        
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section as dict."""
        return self.get(section, {})
    
    @property
    def raw(self) -> Dict[str, Any]:
        """Get raw config dict."""
        return self._config
    
    @classmethod
    def reset(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None
        cls._config = {}
