"""Configuration models."""

from pydantic import BaseModel, Field, field_validator

# RFC 5322 hard limit on a physical line, CRLF excluded.
MAX_LINE_LENGTH = 998


class FoldingRules(BaseModel):
    """How rendered header lines are folded."""

    line_length: int = 78

    @field_validator("line_length")
    def validate_line_length(cls, v: int) -> int:
        if not 20 <= v <= MAX_LINE_LENGTH:
            raise ValueError(f"line_length must be between 20 and {MAX_LINE_LENGTH}")
        return v


class ParsingRules(BaseModel):
    """Input handling before message text is parsed."""

    convert_lf: bool = False


class DisplayRules(BaseModel):
    """How header values are shown in listings."""

    max_value_length: int = 60

    @field_validator("max_value_length")
    def validate_max_value_length(cls, v: int) -> int:
        if v < 4:
            raise ValueError("max_value_length must be at least 4")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    folding: FoldingRules = Field(default_factory=FoldingRules)
    parsing: ParsingRules = Field(default_factory=ParsingRules)
    display: DisplayRules = Field(default_factory=DisplayRules)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
