from __future__ import annotations

import os
import logging

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = 'HOW_LONG_SINCE_'

class Config(BaseModel):
    refresh_interval: float = Field(default=1.0, gt=0)  # seconds
    log_level: str = 'WARNING'
    log_file: str | None = None

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level

def loadConfig() -> Config:
    '''
    Reads `HOW_LONG_SINCE_*` from the environment, after `.env` if present.
    '''
    dotenv.load_dotenv()
    raw = {}
    for field in Config.model_fields:
        value = os.getenv(ENV_PREFIX + field.upper())
        if value:
            raw[field] = value
    return Config.model_validate(raw)

def setupLogging(config: Config) -> None:
    if config.log_file is None:
        handlers: list[logging.Handler] = [logging.NullHandler()]
    else:
        handlers = [logging.FileHandler(config.log_file, encoding='utf-8')]
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=handlers,
    )
