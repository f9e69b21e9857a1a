# api/domain/avaliacao/repository.py
from __future__ import annotations

import uuid
from typing import Protocol

from .entities import Submissao


class SubmissaoRepository(Protocol):
    def salvar(self, submissao: Submissao) -> None: ...
    def listar(self) -> list[Submissao]: ...
    def buscar_por_id(self, submissao_id: uuid.UUID) -> Submissao | None: ...
    def excluir(self, submissao_id: uuid.UUID) -> bool: ...
    def limpar(self) -> int: ...
