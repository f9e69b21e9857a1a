# api/interfaces/api/routes/avaliacao_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.avaliacao_dto import AvaliacaoDTO, AvaliacaoRequestDTO
from api.application.services.avaliacao_service import AvaliacaoService
from api.interfaces.api.dependencies import get_avaliacao_service

router = APIRouter()


@router.post("/avaliacoes/resultado", response_model=AvaliacaoDTO)
def calcular_resultado(
    body: AvaliacaoRequestDTO,
    service: AvaliacaoService = Depends(get_avaliacao_service),  # noqa: B008
) -> AvaliacaoDTO:
    """Resultado parcial em tempo real. Nada e persistido."""
    return service.avaliar(body.respostas)
