# api/application/services/submissao_service.py
from __future__ import annotations

import uuid
from datetime import datetime

from api.domain.avaliacao.entities import Evidencia, Respondente, Submissao
from api.domain.avaliacao.enums import Resposta
from api.domain.avaliacao.repository import SubmissaoRepository
from api.domain.plano_acao.regras import RegrasPlano
from api.domain.questionario.entities import Catalogo

from ..dtos.avaliacao_dto import ResultadoDTO, plano_por_prazo_dto
from ..dtos.submissao_dto import (
    EvidenciaDTO,
    RespondenteDTO,
    SubmissaoDetalheDTO,
    SubmissaoRequestDTO,
    SubmissaoResumoDTO,
)
from .plano_acao_service import agrupar_por_prazo, gerar_plano
from .score_service import calcular_score


class SubmissaoService:
    """Imperative Shell: orquestra IO (repo) e chama Pure Core (score, plano)."""

    def __init__(
        self,
        submissao_repo: SubmissaoRepository,
        catalogo: Catalogo,
        regras: RegrasPlano,
    ) -> None:
        self._submissao_repo = submissao_repo
        self._catalogo = catalogo
        self._regras = regras

    def registrar(self, request: SubmissaoRequestDTO) -> SubmissaoDetalheDTO:
        """Finaliza a avaliacao: congela respostas validas e calcula o resultado no servidor.

        Raises:
            ValueError: respondente invalido (nome vazio apos trim).
        """
        agora = datetime.now()
        respostas = _respostas_validas(request.respostas)
        submissao = Submissao(
            id=uuid.uuid4(),
            registrada_em=agora,
            respondente=Respondente(nome=request.respondente.nome, setor=request.respondente.setor),
            respostas=respostas,
            resultado=calcular_score(self._catalogo, respostas),
            evidencias=tuple(
                Evidencia(
                    pergunta_id=e.pergunta_id,
                    comentario=e.comentario,
                    registrada_em=agora,
                    arquivo_url=e.arquivo_url,
                    arquivo_nome=e.arquivo_nome,
                    arquivo_tipo=e.arquivo_tipo,
                    arquivo_tamanho=e.arquivo_tamanho,
                )
                for e in request.evidencias
            ),
        )
        self._submissao_repo.salvar(submissao)
        return self._detalhe(submissao)

    def listar(self) -> list[SubmissaoResumoDTO]:
        return [SubmissaoResumoDTO.from_domain(s) for s in self._submissao_repo.listar()]

    def obter(self, submissao_id: uuid.UUID) -> SubmissaoDetalheDTO | None:
        submissao = self._submissao_repo.buscar_por_id(submissao_id)
        if submissao is None:
            return None
        return self._detalhe(submissao)

    def excluir(self, submissao_id: uuid.UUID) -> bool:
        return self._submissao_repo.excluir(submissao_id)

    def limpar(self) -> int:
        return self._submissao_repo.limpar()

    def _detalhe(self, submissao: Submissao) -> SubmissaoDetalheDTO:
        plano = gerar_plano(self._catalogo, submissao.resultado, self._regras)
        return SubmissaoDetalheDTO(
            id=str(submissao.id),
            registrada_em=submissao.registrada_em.isoformat(),
            respondente=RespondenteDTO(nome=submissao.respondente.nome, setor=submissao.respondente.setor),
            respostas={pid: r.value for pid, r in submissao.respostas.items()},
            resultado=ResultadoDTO.from_domain(submissao.resultado),
            evidencias=[EvidenciaDTO.from_domain(e) for e in submissao.evidencias],
            plano_por_prazo=plano_por_prazo_dto(agrupar_por_prazo(plano)),
        )


def _respostas_validas(brutas: dict[str, str]) -> dict[str, Resposta]:
    """Descarta valores fora da enumeracao; equivalem a nao respondida no calculo."""
    validas: dict[str, Resposta] = {}
    for pergunta_id, valor in brutas.items():
        resposta = Resposta.normalizar(valor)
        if resposta is not None:
            validas[pergunta_id] = resposta
    return validas
