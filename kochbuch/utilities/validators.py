"""
Input validation schemas using Pydantic for recipe store records and editor input.
"""
import math
from pydantic import BaseModel, Field, ValidationError, field_validator
from typing import Any, Dict, List, Optional, Union


class RecipeDataError(ValueError):
    """A record handed over by the recipe store does not have the expected shape."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class IngredientInput(BaseModel):
    """Schema for an ingredient record as stored with a recipe."""
    name: str = Field(..., min_length=1)
    unit: str = ""
    amount: Union[int, float] = 0

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return _strip(v)

    @field_validator('amount', mode='before')
    @classmethod
    def missing_amount_is_zero(cls, v):
        return 0 if v is None else v

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        """Ensure amount is a finite, non-negative number."""
        if not math.isfinite(v):
            raise ValueError('Amount must be a finite number')
        if v < 0:
            raise ValueError('Amount cannot be negative')
        return v


class CandidateIngredient(BaseModel):
    """Schema for an ingredient typed into the editor: every field must be filled in."""
    name: str = Field(..., min_length=1)
    unit: str = Field(..., min_length=1)
    amount: Union[int, float]

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        if not math.isfinite(v) or v <= 0:
            raise ValueError('Amount must be a positive number')
        return v


class ImageInput(BaseModel):
    """Schema for image metadata attached to a recipe."""
    name: str = Field(..., min_length=1, max_length=255)
    width: int = Field(0, ge=0)
    height: int = Field(0, ge=0)
    type: str = ""
    size: int = Field(0, ge=0)
    src: Optional[str] = None


class RecipeInput(BaseModel):
    """Schema for a recipe record read from the store."""
    id: Optional[Union[int, str]] = None
    name: str = Field(..., min_length=1, max_length=200)
    slug: str = ""
    categories: List[str] = Field(default_factory=list)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    images: List[ImageInput] = Field(default_factory=list)
    description: str = ""
    source: str = ""
    servings: int = Field(0, ge=0)

    @field_validator('name', 'slug', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)

    @field_validator('categories')
    @classmethod
    def validate_categories(cls, v):
        """Ensure categories are non-empty strings."""
        return [c.strip() for c in v if c and c.strip()]

    @field_validator('description', 'source', mode='before')
    @classmethod
    def none_is_empty(cls, v):
        return "" if v is None else v

    @field_validator('servings', mode='before')
    @classmethod
    def missing_servings_is_zero(cls, v):
        return 0 if v in (None, "") else v


def parse_model(model: type, data: Any):
    """Validate ``data`` against ``model``, converting pydantic errors to RecipeDataError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RecipeDataError(f"Invalid {model.__name__}: {e.error_count()} error(s)", e.errors()) from e
