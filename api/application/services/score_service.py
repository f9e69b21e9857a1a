# api/application/services/score_service.py
"""Calculo do score de maturidade. Funcao pura, zero IO.

ADR: Politica unica para respostas fora do calculo.
Nao respondida, "nao se aplica" e qualquer valor desconhecido ficam fora do
numerador E do denominador. O percentual reflete sempre "do que foi
respondido", sem penalizar questionario incompleto.
"""

from __future__ import annotations

from collections.abc import Mapping

from api.domain.avaliacao.enums import Resposta
from api.domain.avaliacao.resultado import (
    CREDITO,
    PontuacaoCategoria,
    ResultadoAvaliacao,
    percentual_de,
)
from api.domain.questionario.entities import Catalogo, Categoria

RespostasBrutas = Mapping[str, Resposta | str]


def calcular_score(catalogo: Catalogo, respostas: RespostasBrutas) -> ResultadoAvaliacao:
    """Funcao pura e total. Mesma entrada = mesma saida. Nunca levanta excecao."""
    categorias = {categoria.id: _pontuar_categoria(categoria, respostas) for categoria in catalogo}
    return ResultadoAvaliacao.de_categorias(categorias)


def contar_respondidas(catalogo: Catalogo, respostas: RespostasBrutas) -> int:
    """Perguntas do catalogo com resposta valida (N/A conta como respondida)."""
    return sum(
        1
        for categoria in catalogo
        for pergunta in categoria.perguntas
        if Resposta.normalizar(respostas.get(pergunta.id)) is not None
    )


def _pontuar_categoria(categoria: Categoria, respostas: RespostasBrutas) -> PontuacaoCategoria:
    pontos = 0.0
    maximo = 0.0
    for pergunta in categoria.perguntas:
        resposta = Resposta.normalizar(respostas.get(pergunta.id))
        if resposta is None:
            continue
        credito = CREDITO[resposta]
        if credito is None:
            continue
        pontos += credito
        maximo += 1
    return PontuacaoCategoria(pontos=pontos, maximo=maximo, percentual=percentual_de(pontos, maximo))
