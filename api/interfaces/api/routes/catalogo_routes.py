# api/interfaces/api/routes/catalogo_routes.py
from fastapi import APIRouter, Depends

from api.application.dtos.catalogo_dto import CatalogoDTO
from api.domain.questionario.entities import Catalogo
from api.interfaces.api.dependencies import get_catalogo

router = APIRouter()


@router.get("/catalogo", response_model=CatalogoDTO)
def get_catalogo_route(
    catalogo: Catalogo = Depends(get_catalogo),  # noqa: B008
) -> CatalogoDTO:
    return CatalogoDTO.from_domain(catalogo)
