"""Strategy catalog Pydantic schemas."""
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

# Values a client may enter for a field; bool first so True stays a bool
InputValue = Union[bool, int, float, str]

FIELD_ID_PATTERN = r"^[A-Za-z0-9_]+$"


class CamelModel(BaseModel):
    """Base schema using camelCase names on the wire."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class InputFieldType(str, Enum):
    """Kinds of input a strategy field accepts."""
    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    TEXTAREA = "textarea"
    DATE = "date"
    TOGGLE = "toggle"


class ConditionalText(CamelModel):
    """Extra paragraphs appended for a toggle field's true/false state."""
    when_true: Optional[str] = None
    when_false: Optional[str] = None


class InputFieldSpec(CamelModel):
    """One substitutable parameter of a strategy."""
    id: str = Field(..., pattern=FIELD_ID_PATTERN, description="Key matched against {{id}} in content")
    label: str
    type: InputFieldType = InputFieldType.TEXT
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[List[str]] = None
    default_value: Optional[InputValue] = None
    conditional_text: Optional[ConditionalText] = None

    @model_validator(mode="after")
    def validate_select_options(self):
        """Select fields must offer at least one option."""
        if self.type == InputFieldType.SELECT and not self.options:
            raise ValueError(f"Select field '{self.id}' requires a non-empty options list")
        return self


class StrategyCreate(CamelModel):
    """Schema for adding a strategy to the catalog. The id is optional."""
    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    section: Optional[str] = None
    subsection: Optional[str] = None
    content: str
    input_fields: List[InputFieldSpec] = Field(default_factory=list)
    is_custom: bool = False


class Strategy(StrategyCreate):
    """A content template belonging to the catalog."""
    id: str


class StrategyUpdate(CamelModel):
    """Partial update; only fields that are set are applied. Built-in status is fixed at creation."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    section: Optional[str] = None
    subsection: Optional[str] = None
    content: Optional[str] = None
    input_fields: Optional[List[InputFieldSpec]] = None


class CustomStrategyWrite(CamelModel):
    """Schema for creating or replacing a user-authored strategy."""
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    section: str = Field(..., min_length=1)


class StrategyImportRequest(CamelModel):
    """Schema for importing a batch of exported strategies."""
    strategies: List[StrategyCreate]


class ClientStrategyConfig(CamelModel):
    """A client's decision to include and parameterize a strategy."""
    strategy_id: str
    is_enabled: bool
    input_values: Dict[str, InputValue] = Field(default_factory=dict)
