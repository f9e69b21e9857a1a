# api/application/services/avaliacao_service.py
from __future__ import annotations

from api.domain.plano_acao.regras import RegrasPlano
from api.domain.questionario.entities import Catalogo

from ..dtos.avaliacao_dto import AvaliacaoDTO, ResultadoDTO, plano_dto
from .plano_acao_service import gerar_plano
from .score_service import calcular_score, contar_respondidas


class AvaliacaoService:
    """Calculo sem persistencia: respostas -> resultado + plano."""

    def __init__(self, catalogo: Catalogo, regras: RegrasPlano) -> None:
        self._catalogo = catalogo
        self._regras = regras

    def avaliar(self, respostas: dict[str, str]) -> AvaliacaoDTO:
        resultado = calcular_score(self._catalogo, respostas)
        plano = gerar_plano(self._catalogo, resultado, self._regras)
        return AvaliacaoDTO(
            respondidas=contar_respondidas(self._catalogo, respostas),
            total_perguntas=self._catalogo.total_perguntas,
            resultado=ResultadoDTO.from_domain(resultado),
            plano=plano_dto(plano),
        )
