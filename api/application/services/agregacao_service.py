# api/application/services/agregacao_service.py
"""Consolidacao municipal (painel administrativo). Funcao pura, zero IO.

ADR: Media simples dos percentuais por categoria.
Cada respondente pesa igual, independente de quantas perguntas respondeu.
O maximo sintetico de cada categoria e o numero nominal de perguntas do
catalogo, nao o maximo individual de cada respondente.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from api.domain.avaliacao.entities import Respondente
from api.domain.avaliacao.resultado import PontuacaoCategoria, ResultadoAvaliacao
from api.domain.questionario.entities import Catalogo


def agregar_resultados(
    catalogo: Catalogo,
    resultados: Sequence[ResultadoAvaliacao],
) -> ResultadoAvaliacao | None:
    """None quando nao ha resultados, nunca um "todos tiraram 0%" sintetico."""
    if not resultados:
        return None

    quantidade = len(resultados)
    categorias: dict[str, PontuacaoCategoria] = {}
    for categoria in catalogo:
        media = sum(r.percentual_categoria(categoria.id) for r in resultados) / quantidade
        maximo = float(len(categoria.perguntas))
        categorias[categoria.id] = PontuacaoCategoria(
            pontos=media / 100 * maximo,
            maximo=maximo,
            percentual=media,
        )
    return ResultadoAvaliacao.de_categorias(categorias)


def contar_setores(respondentes: Iterable[Respondente]) -> list[tuple[str, int]]:
    """(setor, quantidade) por quantidade decrescente; empate mantem a primeira aparicao."""
    contagem = Counter(r.setor_exibicao for r in respondentes)
    return contagem.most_common()
