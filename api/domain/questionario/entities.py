# api/domain/questionario/entities.py
from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

# "3. Residuos Solidos - PNRS" -> "Residuos Solidos - PNRS"
_PREFIXO_ORDINAL = re.compile(r"^\d+\.\s+")


@dataclass(frozen=True)
class Pergunta:
    id: str
    texto: str
    categoria: str  # id da categoria dona


@dataclass(frozen=True)
class Categoria:
    """Categoria do questionario. A ordem das perguntas e apenas de exibicao."""

    id: str
    titulo: str
    perguntas: tuple[Pergunta, ...] = ()

    @property
    def titulo_limpo(self) -> str:
        """Titulo sem o prefixo ordinal ("<n>. "). Sem prefixo -> titulo original."""
        return _PREFIXO_ORDINAL.sub("", self.titulo, count=1)


@dataclass(frozen=True)
class Catalogo:
    """Questionario completo. Configuracao estatica, nunca mutada em runtime.

    Invariantes validados na construcao (erro de configuracao, nunca de calculo):
      - ids de categoria unicos;
      - ids de pergunta unicos no catalogo inteiro;
      - toda pergunta aponta para a categoria que a contem.
    """

    categorias: tuple[Categoria, ...]

    def __post_init__(self) -> None:
        ids_categoria: set[str] = set()
        ids_pergunta: set[str] = set()
        for categoria in self.categorias:
            if categoria.id in ids_categoria:
                raise ValueError(f"Categoria duplicada no catalogo: {categoria.id}")
            ids_categoria.add(categoria.id)
            for pergunta in categoria.perguntas:
                if pergunta.id in ids_pergunta:
                    raise ValueError(f"Pergunta duplicada no catalogo: {pergunta.id}")
                if pergunta.categoria != categoria.id:
                    raise ValueError(
                        f"Pergunta {pergunta.id} declara categoria {pergunta.categoria!r}, "
                        f"mas esta em {categoria.id!r}"
                    )
                ids_pergunta.add(pergunta.id)

    def __iter__(self) -> Iterator[Categoria]:
        return iter(self.categorias)

    def __len__(self) -> int:
        return len(self.categorias)

    @property
    def total_perguntas(self) -> int:
        return sum(len(c.perguntas) for c in self.categorias)

    def categoria(self, categoria_id: str) -> Categoria | None:
        return next((c for c in self.categorias if c.id == categoria_id), None)


def construir_catalogo(dados: list[tuple[str, str, list[tuple[str, str]]]]) -> Catalogo:
    """Monta um Catalogo a partir de tuplas (id, titulo, [(pergunta_id, texto), ...])."""
    return Catalogo(
        categorias=tuple(
            Categoria(
                id=cat_id,
                titulo=titulo,
                perguntas=tuple(Pergunta(id=pid, texto=texto, categoria=cat_id) for pid, texto in perguntas),
            )
            for cat_id, titulo, perguntas in dados
        )
    )
