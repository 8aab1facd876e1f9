"""Report generation and retrieval routes."""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from finplan.db import get_db
from finplan.dependencies import get_catalog
from finplan.schemas.report import ReportGenerateRequest, ReportGenerateResponse, ReportResponse
from finplan.services.catalog import CatalogStore
from finplan.services.reports import export_report_text, generate_report, get_report, list_reports

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/reports",
    tags=["reports"],
)


@router.post("/generate", response_model=ReportGenerateResponse)
async def generate(
    payload: ReportGenerateRequest,
    db: Session = Depends(get_db),
    catalog: CatalogStore = Depends(get_catalog)
):
    """
    Compile a report from client data and strategy configurations.

    Malformed payloads are rejected by validation before compilation; after
    that, missing strategies and values never fail the request.
    """
    try:
        report, report_text = generate_report(db, catalog, payload)
    except Exception as e:
        logger.error(f"Error generating report: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate report")

    return ReportGenerateResponse(report=report_text, report_id=report.id)


@router.get("", response_model=List[ReportResponse])
async def reports(db: Session = Depends(get_db)):
    """Stored reports, newest first."""
    return list_reports(db)


@router.get("/{report_id}", response_model=ReportResponse)
async def view_report(report_id: str, db: Session = Depends(get_db)):
    report = get_report(db, report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


@router.get("/{report_id}/export")
async def export_report(report_id: str, db: Session = Depends(get_db)):
    """
    Export a report as a plain-text file.

    Downloads as .txt file.
    """
    report = get_report(db, report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")

    filename = f"financial_plan_{report.id}.txt"

    return Response(
        content=export_report_text(report),
        media_type="text/plain",
        headers={
            "Content-Disposition": f"attachment; filename={filename}"
        }
    )
