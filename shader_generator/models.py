"""Pydantic models for the shader generator API."""

from pydantic import BaseModel, Field, StrictStr
from typing import Optional


class GenerateShaderRequest(BaseModel):
    prompt: StrictStr = Field(
        ..., min_length=1, description="Natural-language description of the shader"
    )


class GenerateShaderResponse(BaseModel):
    shader_code: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
