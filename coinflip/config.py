import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

load_dotenv(override=True)

ENV_PREFIX = "COINFLIP_"


class ConfigError(Exception):
    """Base class for configuration errors."""
    pass


class SimulatorConfig(BaseModel):
    min_flips: int = Field(default=1, ge=1)
    max_flips: int = Field(default=100000, ge=1)
    sequence_length: int = Field(default=5, ge=1)
    page_size: int = Field(default=20, ge=1)
    clear_screen: bool = True
    log_dir: Optional[Path] = None

    @model_validator(mode="after")
    def check_range(self) -> "SimulatorConfig":
        if self.min_flips > self.max_flips:
            raise ValueError("min_flips must not exceed max_flips")
        return self


def env_key(field_name: str) -> str:
    return f"{ENV_PREFIX}{field_name.upper()}"


def load_config(environ: Optional[Mapping[str, str]] = None) -> SimulatorConfig:
    """Build the simulator configuration from ``COINFLIP_*`` variables.

    Unset variables keep their defaults. Empty values are treated as unset.
    """
    if environ is None:
        environ = os.environ

    data = {}
    for name in SimulatorConfig.model_fields:
        value = environ.get(env_key(name))
        if value is not None and value.strip() != "":
            data[name] = value.strip()

    try:
        return SimulatorConfig(**data)
    except ValidationError as e:
        msg = "Configuration validation failed:\n"
        for err in e.errors():
            loc = ".".join(str(l) for l in err["loc"]) or "config"
            msg += f" - {loc}: {err['msg']}\n"
        raise ConfigError(msg)


__all__ = ["ConfigError", "SimulatorConfig", "env_key", "load_config"]
