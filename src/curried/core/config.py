import json
import logging
import os
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Level for the curried loggers.")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return value

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Settings":
        """Build settings from a JSON file and the environment.

        The file is ``path`` if given, else ``$CURRIED_CONFIG``, else
        ``~/.curried.json``. Environment variables named like the fields win
        over the file. Only the implicit home file may be absent.
        """
        explicit = path is not None or "CURRIED_CONFIG" in os.environ
        config_path = Path(
            path or os.getenv("CURRIED_CONFIG") or Path().home() / ".curried.json"
        )

        values = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values.update(json.load(f))
        elif explicit:
            raise FileNotFoundError(f"curried config file not found at {config_path}")

        for name in cls.model_fields:
            if name in os.environ:
                values[name] = os.environ[name]

        return cls(**values)


settings = Settings.load()
