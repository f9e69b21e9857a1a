# api/application/dtos/painel_dto.py
from pydantic import BaseModel

from .avaliacao_dto import AcaoPlanoDTO, ResultadoDTO


class SetorDTO(BaseModel):
    nome: str
    quantidade: int


class PainelDTO(BaseModel):
    total_submissoes: int
    setores: list[SetorDTO]
    resultado: ResultadoDTO | None  # None = nenhum diagnostico ainda
    plano_por_prazo: dict[str, list[AcaoPlanoDTO]]
    titulos_categorias: dict[str, str] = {}  # categoria_id -> titulo de exibicao
