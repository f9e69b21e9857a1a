# api/interfaces/api/routes/submissao_routes.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from api.application.dtos.submissao_dto import SubmissaoDetalheDTO, SubmissaoRequestDTO, SubmissaoResumoDTO
from api.application.services.submissao_service import SubmissaoService
from api.interfaces.api.dependencies import get_submissao_service

router = APIRouter()


def _parse_id(submissao_id_raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(submissao_id_raw)
    except ValueError as err:
        raise HTTPException(status_code=422, detail="ID de submissao invalido") from err


@router.post("/submissoes", response_model=SubmissaoDetalheDTO, status_code=201)
def registrar_submissao(
    body: SubmissaoRequestDTO,
    service: SubmissaoService = Depends(get_submissao_service),  # noqa: B008
) -> SubmissaoDetalheDTO:
    try:
        return service.registrar(body)
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.get("/submissoes", response_model=list[SubmissaoResumoDTO])
def listar_submissoes(
    service: SubmissaoService = Depends(get_submissao_service),  # noqa: B008
) -> list[SubmissaoResumoDTO]:
    return service.listar()


@router.get("/submissoes/{submissao_id_raw}", response_model=SubmissaoDetalheDTO)
def get_submissao(
    submissao_id_raw: str,
    service: SubmissaoService = Depends(get_submissao_service),  # noqa: B008
) -> SubmissaoDetalheDTO:
    detalhe = service.obter(_parse_id(submissao_id_raw))
    if detalhe is None:
        raise HTTPException(status_code=404, detail="Submissao nao encontrada")
    return detalhe


@router.delete("/submissoes/{submissao_id_raw}", status_code=204)
def excluir_submissao(
    submissao_id_raw: str,
    service: SubmissaoService = Depends(get_submissao_service),  # noqa: B008
) -> Response:
    if not service.excluir(_parse_id(submissao_id_raw)):
        raise HTTPException(status_code=404, detail="Submissao nao encontrada")
    return Response(status_code=204)


@router.delete("/submissoes", status_code=204)
def limpar_submissoes(
    service: SubmissaoService = Depends(get_submissao_service),  # noqa: B008
) -> Response:
    service.limpar()
    return Response(status_code=204)
