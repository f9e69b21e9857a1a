# api/interfaces/api/routes/painel_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.painel_dto import PainelDTO
from api.application.services.painel_service import PainelService
from api.interfaces.api.dependencies import get_painel_service

router = APIRouter()


@router.get("/painel", response_model=PainelDTO)
def get_painel(
    service: PainelService = Depends(get_painel_service),  # noqa: B008
) -> PainelDTO:
    return service.obter_painel()
