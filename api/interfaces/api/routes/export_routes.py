# api/interfaces/api/routes/export_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from api.application.services.export_service import ExportService
from api.application.services.painel_service import PainelService
from api.interfaces.api.dependencies import get_export_service, get_painel_service

router = APIRouter()


@router.get("/painel/export")
def export_painel(
    formato: Literal["csv", "json", "pdf"] = Query(...),
    painel_service: PainelService = Depends(get_painel_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    painel = painel_service.obter_painel()
    if painel.resultado is None:
        raise HTTPException(status_code=404, detail="Nenhum diagnostico registrado")

    if formato == "json":
        return Response(
            content=export_service.exportar_json(painel),
            media_type="application/json",
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(painel),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=diagnostico_esg.csv"},
        )
    # pdf
    try:
        from api.infrastructure.pdf_generator import gerar_pdf_painel

        pdf_bytes = gerar_pdf_painel(painel)
    except RuntimeError as err:
        raise HTTPException(status_code=501, detail=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=diagnostico_esg.pdf"},
    )
