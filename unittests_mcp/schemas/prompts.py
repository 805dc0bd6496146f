"""Pydantic models describing registered prompts to callers."""

from pydantic import BaseModel, Field


class ArgumentDescriptor(BaseModel):
    name: str = Field(description="Argument name, unique within its prompt.")
    required: bool = Field(description="Whether the argument must be supplied.")
    description: str = Field("", description="Human-readable documentation.")
    allowed_values: list[str] | None = Field(
        None,
        description="Permitted values for enum arguments, in declared order.",
    )


class PromptSummary(BaseModel):
    name: str = Field(description="Unique prompt name used for lookup.")
    title: str = Field(description="Short display label.")
    description: str = Field(description="One-line purpose summary.")
    arguments: list[ArgumentDescriptor] = Field(
        default_factory=list,
        description="Argument descriptors in declared order.",
    )
