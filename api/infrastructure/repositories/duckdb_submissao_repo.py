# api/infrastructure/repositories/duckdb_submissao_repo.py
from __future__ import annotations

import uuid

import duckdb

from api.domain.avaliacao.entities import Evidencia, Respondente, Submissao
from api.domain.avaliacao.enums import NivelMaturidade, Resposta
from api.domain.avaliacao.resultado import PontuacaoCategoria, ResultadoAvaliacao


class DuckDBSubmissaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def salvar(self, submissao: Submissao) -> None:
        """Grava submissao + respostas + scores + evidencias numa unica transacao."""
        sid = str(submissao.id)
        resultado = submissao.resultado
        self._conn.begin()
        try:
            self._conn.execute(
                """
                INSERT INTO submissao (id, registrada_em, nome, setor,
                                       pontuacao_total, pontuacao_maxima, percentual, nivel)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                [
                    sid,
                    submissao.registrada_em,
                    submissao.respondente.nome,
                    submissao.respondente.setor,
                    resultado.pontuacao_total,
                    resultado.pontuacao_maxima,
                    resultado.percentual,
                    resultado.nivel.value,
                ],
            )
            if submissao.respostas:
                self._conn.executemany(
                    "INSERT INTO resposta (fk_submissao, pergunta_id, valor) VALUES (?, ?, ?)",
                    [[sid, pid, r.value] for pid, r in submissao.respostas.items()],
                )
            if resultado.categorias:
                self._conn.executemany(
                    """
                    INSERT INTO categoria_score (fk_submissao, categoria_id, pontos, maximo, percentual)
                    VALUES (?, ?, ?, ?, ?)
                """,
                    [[sid, cid, p.pontos, p.maximo, p.percentual] for cid, p in resultado.categorias.items()],
                )
            if submissao.evidencias:
                self._conn.executemany(
                    """
                    INSERT INTO evidencia (fk_submissao, pergunta_id, comentario, registrada_em,
                                           arquivo_url, arquivo_nome, arquivo_tipo, arquivo_tamanho)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                    [
                        [
                            sid,
                            e.pergunta_id,
                            e.comentario,
                            e.registrada_em,
                            e.arquivo_url,
                            e.arquivo_nome,
                            e.arquivo_tipo,
                            e.arquivo_tamanho,
                        ]
                        for e in submissao.evidencias
                    ],
                )
        except Exception:
            self._conn.rollback()
            raise
        self._conn.commit()

    def listar(self) -> list[Submissao]:
        """Todas as submissoes, mais recentes primeiro."""
        rows = self._conn.execute(
            """
            SELECT id, registrada_em, nome, setor,
                   pontuacao_total, pontuacao_maxima, percentual, nivel
            FROM submissao
            ORDER BY registrada_em DESC, id
        """
        ).fetchall()
        return [self._montar(r) for r in rows]

    def buscar_por_id(self, submissao_id: uuid.UUID) -> Submissao | None:
        row = self._conn.execute(
            """
            SELECT id, registrada_em, nome, setor,
                   pontuacao_total, pontuacao_maxima, percentual, nivel
            FROM submissao
            WHERE id = ?
        """,
            [str(submissao_id)],
        ).fetchone()
        if row is None:
            return None
        return self._montar(row)

    def excluir(self, submissao_id: uuid.UUID) -> bool:
        sid = str(submissao_id)
        row = self._conn.execute("SELECT count(*) FROM submissao WHERE id = ?", [sid]).fetchone()
        if not row or int(row[0]) == 0:
            return False
        self._conn.begin()
        try:
            for tabela in ("resposta", "categoria_score", "evidencia"):
                # Tabela vem de codigo interno, nao de input do usuario
                self._conn.execute(f"DELETE FROM {tabela} WHERE fk_submissao = ?", [sid])  # noqa: S608
            self._conn.execute("DELETE FROM submissao WHERE id = ?", [sid])
        except Exception:
            self._conn.rollback()
            raise
        self._conn.commit()
        return True

    def limpar(self) -> int:
        row = self._conn.execute("SELECT count(*) FROM submissao").fetchone()
        total = int(row[0]) if row else 0
        self._conn.begin()
        try:
            for tabela in ("resposta", "categoria_score", "evidencia", "submissao"):
                self._conn.execute(f"DELETE FROM {tabela}")  # noqa: S608
        except Exception:
            self._conn.rollback()
            raise
        self._conn.commit()
        return total

    def _montar(self, row: tuple) -> Submissao:  # type: ignore[type-arg]
        sid = str(row[0])
        return Submissao(
            id=uuid.UUID(sid),
            registrada_em=row[1],
            respondente=Respondente(nome=str(row[2]), setor=str(row[3] or "")),
            respostas=self._respostas(sid),
            resultado=ResultadoAvaliacao(
                pontuacao_total=float(row[4]),
                pontuacao_maxima=float(row[5]),
                percentual=float(row[6]),
                nivel=NivelMaturidade(row[7]),
                categorias=self._categorias(sid),
            ),
            evidencias=self._evidencias(sid),
        )

    def _respostas(self, sid: str) -> dict[str, Resposta]:
        rows = self._conn.execute(
            "SELECT pergunta_id, valor FROM resposta WHERE fk_submissao = ? ORDER BY pergunta_id",
            [sid],
        ).fetchall()
        return {str(r[0]): Resposta(r[1]) for r in rows}

    def _categorias(self, sid: str) -> dict[str, PontuacaoCategoria]:
        rows = self._conn.execute(
            """
            SELECT categoria_id, pontos, maximo, percentual
            FROM categoria_score
            WHERE fk_submissao = ?
        """,
            [sid],
        ).fetchall()
        return {
            str(r[0]): PontuacaoCategoria(pontos=float(r[1]), maximo=float(r[2]), percentual=float(r[3]))
            for r in rows
        }

    def _evidencias(self, sid: str) -> tuple[Evidencia, ...]:
        rows = self._conn.execute(
            """
            SELECT pergunta_id, comentario, registrada_em,
                   arquivo_url, arquivo_nome, arquivo_tipo, arquivo_tamanho
            FROM evidencia
            WHERE fk_submissao = ?
            ORDER BY registrada_em, pergunta_id
        """,
            [sid],
        ).fetchall()
        return tuple(
            Evidencia(
                pergunta_id=str(r[0]),
                comentario=str(r[1] or ""),
                registrada_em=r[2],
                arquivo_url=r[3],
                arquivo_nome=r[4],
                arquivo_tipo=r[5],
                arquivo_tamanho=int(r[6]) if r[6] is not None else None,
            )
            for r in rows
        )
