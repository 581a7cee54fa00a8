# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/config/models.py

import logging
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


def _check_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level '{value}'")
    return level


class SubscriberSpec(BaseModel):
    kind: Literal["console", "logger", "jsonfile"]
    path: Optional[str] = None       # jsonfile only
    level: str = "INFO"              # logger only

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        return _check_level(value)

    @model_validator(mode="after")
    def check_path_for_jsonfile(self) -> "SubscriberSpec":
        if self.kind == "jsonfile" and not self.path:
            raise ValueError("jsonfile subscriber requires 'path'")
        return self


class LoggingSpec(BaseModel):
    level: str = "INFO"
    dir: Optional[str] = None        # per-run log files go here when set

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        return _check_level(value)


class StoreConfig(BaseModel):
    store: str
    isolate_errors: bool = False
    logging: LoggingSpec = Field(default_factory=LoggingSpec)
    subscribers: List[SubscriberSpec] = Field(default_factory=list)
