"""
Input validation schemas using Pydantic for the HTTP API.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from inventory.utilities.constants import DEFAULT_LOW_STOCK_THRESHOLD, DEFAULT_QUANTITY, DEFAULT_UNIT


class ItemInput(BaseModel):
    """Schema for registering a new inventory item. Omitted fields use defaults."""
    name: Optional[str] = Field(None, max_length=100)
    quantity: int = Field(DEFAULT_QUANTITY, ge=0, le=1000000)
    unit: str = Field(DEFAULT_UNIT, min_length=1, max_length=20)
    low_stock_threshold: int = Field(DEFAULT_LOW_STOCK_THRESHOLD, ge=0)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; a blank name means 'use the default'."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator('unit')
    @classmethod
    def unit_not_blank(cls, v):
        if not v:
            raise ValueError('Unit cannot be empty')
        return v


class VoiceCommandInput(BaseModel):
    """Schema for a final transcript posted by the browser."""
    transcript: str = Field(..., min_length=1, max_length=500)


class CaptureEventInput(BaseModel):
    """Schema for speech recognition lifecycle events reported by the browser."""
    event: Literal['start', 'result', 'error', 'stop', 'end', 'unsupported']
    transcript: Optional[str] = Field(None, max_length=500)
    error: Optional[str] = Field(None, max_length=100)
