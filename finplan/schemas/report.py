"""Report Pydantic schemas."""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, model_validator

from finplan.schemas.strategy import CamelModel, ClientStrategyConfig


class ClientData(CamelModel):
    """
    Client data collected by the intake form.

    Only the shape is checked here; the compiler treats it as opaque and
    stores it with the report. Unknown keys are kept.
    """
    # Personal information
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None

    # Second client
    has_second_client: bool = False
    second_client_first_name: Optional[str] = None
    second_client_last_name: Optional[str] = None
    second_client_date_of_birth: Optional[str] = None
    second_client_annual_income: Optional[float] = Field(None, ge=0)

    # Financial situation
    annual_income: float = Field(0, ge=0, description="Income must be positive")
    monthly_expenses: float = Field(0, ge=0, description="Expenses must be positive")

    # Debts
    has_debts: bool = False
    debt_type: Optional[Literal["car-loan", "mortgage", "heloc", "personal-loan"]] = None
    debt_interest_rate: Optional[float] = Field(None, ge=0)
    debt_term_remaining: Optional[float] = Field(None, ge=0)
    debt_payment: Optional[float] = Field(None, ge=0)
    debt_payment_frequency: Optional[Literal["weekly", "bi-weekly", "monthly", "quarterly"]] = None

    # Properties
    has_properties: bool = False
    property_type: Optional[Literal["principal-residence", "secondary-residence", "rental-property"]] = None
    property_market_value: Optional[float] = Field(None, ge=0)
    property_cost_basis: Optional[float] = Field(None, ge=0)

    additional_comments: Optional[str] = None

    class Config:
        extra = "allow"


class ReportGenerateRequest(CamelModel):
    """
    Inbound report generation payload.

    Either strategy_configurations or the older selected_strategy_ids list
    must be given.
    """
    client_data: ClientData
    client_id: Optional[str] = None
    strategy_configurations: Optional[List[ClientStrategyConfig]] = None
    selected_strategy_ids: Optional[List[str]] = None
    selected_custom_strategy_ids: Optional[List[str]] = None

    @model_validator(mode="after")
    def validate_selection(self):
        if self.strategy_configurations is None and self.selected_strategy_ids is None:
            raise ValueError("Either strategyConfigurations or selectedStrategyIds is required")
        return self


class ReportGenerateResponse(CamelModel):
    """Outbound result of a generation call."""
    report: str
    report_id: str


class ReportResponse(CamelModel):
    """A stored report."""
    id: str
    client_id: Optional[str] = None
    client_data: Dict[str, Any]
    strategy_configurations: List[Dict[str, Any]]
    generated_report: str
    created_at: datetime
