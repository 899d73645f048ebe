from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv, find_dotenv

# Always load the nearest .env (project root) regardless of CWD
load_dotenv(find_dotenv(), override=False)

Runtime = Literal["auto", "simulator", "device"]


class Settings(BaseSettings):
    # Provider selection: "auto" asks the interpreter whether it runs in a simulator
    runtime: Runtime = "auto"

    # Simulator
    simulator_env_var: str = "SIMULATOR_MODEL_IDENTIFIER"
    simulator_suffix: str = Field(default=" Simulator", min_length=1)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=None,         # dotenv already loaded above
        env_prefix="APPLE_MODELS_",  # "APPLE_MODELS_RUNTIME" maps to runtime
        case_sensitive=False,
    )
