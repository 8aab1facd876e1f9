"""Report generation and persistence service."""
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from finplan.models.report import Report
from finplan.schemas.report import ReportGenerateRequest
from finplan.schemas.strategy import ClientStrategyConfig
from finplan.services.catalog import CatalogStore
from finplan.services.compiler import compile_report
from finplan.settings import settings

logger = logging.getLogger(__name__)


def save_report(
    db: Session,
    client_data: Dict[str, Any],
    strategy_configurations: List[Dict[str, Any]],
    generated_report: str,
    client_id: Optional[str] = None
) -> Report:
    """
    Persist a compiled report. The id and timestamp are assigned here.

    Returns:
        Report object saved to database
    """
    report = Report(
        client_id=client_id,
        client_data=client_data,
        strategy_configurations=strategy_configurations,
        generated_report=generated_report,
    )

    db.add(report)
    db.commit()
    db.refresh(report)

    return report


def get_report(db: Session, report_id: str) -> Optional[Report]:
    return db.query(Report).filter(Report.id == report_id).first()


def list_reports(db: Session, limit: Optional[int] = None) -> List[Report]:
    """Stored reports, newest first."""
    return db.query(Report).order_by(
        Report.created_at.desc()
    ).limit(limit or settings.REPORT_LIST_LIMIT).all()


def build_configurations(
    request: ReportGenerateRequest,
    catalog: CatalogStore
) -> List[ClientStrategyConfig]:
    """
    Normalize the selection in a generation request into configurations.

    When only the older selectedStrategyIds list is sent, each id becomes an
    enabled configuration carrying its fields' default values. Custom
    strategy ids without a configuration of their own are appended enabled.
    """
    if request.strategy_configurations is not None:
        configs = list(request.strategy_configurations)
    else:
        configs = []
        for strategy_id in request.selected_strategy_ids or []:
            strategy = catalog.get_strategy(strategy_id)
            defaults = {}
            if strategy is not None:
                defaults = {
                    f.id: f.default_value for f in strategy.input_fields
                    if f.default_value is not None
                }
            configs.append(ClientStrategyConfig(
                strategy_id=strategy_id,
                is_enabled=True,
                input_values=defaults,
            ))

    configured = {c.strategy_id for c in configs}
    for strategy_id in request.selected_custom_strategy_ids or []:
        if strategy_id not in configured:
            configs.append(ClientStrategyConfig(strategy_id=strategy_id, is_enabled=True))
            configured.add(strategy_id)

    return configs


def generate_report(
    db: Session,
    catalog: CatalogStore,
    request: ReportGenerateRequest
) -> Tuple[Report, str]:
    """
    Compile a report from a generation request and store it.

    The submitted configuration list is stored with the report verbatim and,
    when a client id is given, saved as that client's current configuration.

    Args:
        db: Database session
        catalog: Strategy catalog
        request: Validated generation request

    Returns:
        Tuple of (stored report, report text)
    """
    configs = build_configurations(request, catalog)
    client_data = request.client_data.model_dump(by_alias=True, mode="json")

    report_text = compile_report(client_data, configs, catalog)

    if request.client_id:
        catalog.save_client_configs(request.client_id, configs)

    report = save_report(
        db,
        client_data=client_data,
        strategy_configurations=[c.model_dump(by_alias=True, mode="json") for c in configs],
        generated_report=report_text,
        client_id=request.client_id,
    )

    logger.info(f"Generated report {report.id} from {len(configs)} configurations")
    return report, report_text


def export_report_text(report: Report) -> str:
    """
    Export a stored report as a plain-text document.

    Args:
        report: Report object

    Returns:
        Text with a short header followed by the compiled body
    """
    client = report.client_data or {}
    name = " ".join(
        part for part in (client.get("firstName"), client.get("lastName")) if part
    ) or "Client"

    header = (
        f"FINANCIAL PLAN - {name}\n"
        f"Created: {report.created_at.strftime('%Y-%m-%d %H:%M UTC')}\n"
        f"Report ID: {report.id}\n"
    )
    return header + "\n" + report.generated_report + "\n"
