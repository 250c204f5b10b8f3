from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DemoRules(BaseModel):
    numbers: list[int] = Field(default_factory=lambda: list(range(1, 11)))
    threshold: int = 3
    factor: int = 2

    model_config = ConfigDict(extra="forbid", strict=True)


class LoggingRules(BaseModel):
    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level: {value}")
        return level


class Rules(BaseModel):
    demo: DemoRules = Field(default_factory=DemoRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)

    model_config = ConfigDict(extra="forbid")
