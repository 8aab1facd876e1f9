"""Pydantic schemas."""
from finplan.schemas.strategy import (
    InputValue,
    InputFieldType,
    ConditionalText,
    InputFieldSpec,
    Strategy,
    StrategyCreate,
    StrategyUpdate,
    CustomStrategyWrite,
    StrategyImportRequest,
    ClientStrategyConfig,
)
from finplan.schemas.report import (
    ClientData,
    ReportGenerateRequest,
    ReportGenerateResponse,
    ReportResponse,
)

__all__ = [
    "InputValue",
    "InputFieldType",
    "ConditionalText",
    "InputFieldSpec",
    "Strategy",
    "StrategyCreate",
    "StrategyUpdate",
    "CustomStrategyWrite",
    "StrategyImportRequest",
    "ClientStrategyConfig",
    "ClientData",
    "ReportGenerateRequest",
    "ReportGenerateResponse",
    "ReportResponse",
]
