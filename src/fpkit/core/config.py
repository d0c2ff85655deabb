import os
from typing import Literal
from pydantic import BaseModel, Field


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    LOG_LEVEL: LogLevel = "INFO"
    STRICT_ARITY: bool = Field(
        True,
        description="Check that curried functions can bind the declared arity.",
    )

    @classmethod
    def load(cls, environ: dict | None = None) -> "Settings":
        environ = os.environ if environ is None else environ

        values = {}
        log_level = environ.get("FPKIT_LOG_LEVEL", environ.get("LOG_LEVEL"))
        if log_level is not None:
            values["LOG_LEVEL"] = log_level.upper()

        strict_arity = environ.get("FPKIT_STRICT_ARITY")
        if strict_arity is not None:
            values["STRICT_ARITY"] = strict_arity

        return cls(**values)


settings = Settings.load()
