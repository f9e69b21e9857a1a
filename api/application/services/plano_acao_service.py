# api/application/services/plano_acao_service.py
"""Geracao do plano de acao. Funcao pura, zero IO.

Categorias mais fracas primeiro (ordenacao estavel); dentro de cada categoria,
uma acao por prazo na ordem canonica. Total = 5 * numero de categorias.
"""

from __future__ import annotations

from collections.abc import Iterable

from api.domain.avaliacao.resultado import ResultadoAvaliacao, classificar_nivel
from api.domain.plano_acao.entities import AcaoPlano
from api.domain.plano_acao.enums import Prazo
from api.domain.plano_acao.regras import IMPACTO_POR_NIVEL, RESPONSAVEL_POR_PRAZO, RegrasPlano
from api.domain.questionario.entities import Catalogo, Categoria


def gerar_plano(
    catalogo: Catalogo,
    resultado: ResultadoAvaliacao,
    regras: RegrasPlano,
) -> list[AcaoPlano]:
    """Funcao pura e total. Categoria sem dados (percentual 0) ainda gera 5 acoes."""
    # sorted() e estavel: empate mantem a ordem do catalogo.
    ordenadas = sorted(catalogo, key=lambda c: resultado.percentual_categoria(c.id))

    acoes: list[AcaoPlano] = []
    for categoria in ordenadas:
        acoes.extend(_acoes_da_categoria(categoria, resultado.percentual_categoria(categoria.id), regras))
    return acoes


def agrupar_por_prazo(acoes: Iterable[AcaoPlano]) -> dict[Prazo, list[AcaoPlano]]:
    """Buckets por prazo, todos presentes e na ordem canonica; ordem do plano preservada."""
    grupos: dict[Prazo, list[AcaoPlano]] = {prazo: [] for prazo in Prazo}
    for acao in acoes:
        grupos[acao.prazo].append(acao)
    return grupos


def _acoes_da_categoria(categoria: Categoria, percentual: float, regras: RegrasPlano) -> list[AcaoPlano]:
    nivel = classificar_nivel(percentual)
    modelos = regras.modelos(categoria.id, nivel)
    nome = categoria.titulo_limpo

    acoes: list[AcaoPlano] = []
    for prazo in Prazo:
        modelo = modelos[prazo]
        titulo, descricao = modelo.instanciar(nome)
        acoes.append(
            AcaoPlano(
                titulo=titulo,
                descricao=descricao,
                prazo=prazo,
                responsavel=RESPONSAVEL_POR_PRAZO[prazo],
                impacto=IMPACTO_POR_NIVEL[nivel],
                prioridade=modelo.prioridade,
                categoria=nome,
            )
        )
    return acoes
