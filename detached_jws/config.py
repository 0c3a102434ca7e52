from __future__ import annotations

import os
from typing import Optional

import yaml
from pydantic import BaseModel, SecretStr


class DetachedJwsConfig(BaseModel):
    """Top-level configuration model."""

    secret_key: Optional[SecretStr] = None
    log_level: str = "WARNING"


def load_config(path: Optional[str] = None) -> DetachedJwsConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to DETACHED_JWS_CONFIG
            env variable or 'detached_jws.yaml' in the current directory.
    """

    config_path = path or os.getenv("DETACHED_JWS_CONFIG", "detached_jws.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = DetachedJwsConfig(**data)
    else:
        config = DetachedJwsConfig()

    env_secret_key = os.getenv("DETACHED_JWS_SECRET_KEY")
    if env_secret_key:
        config.secret_key = SecretStr(env_secret_key)
    return config
