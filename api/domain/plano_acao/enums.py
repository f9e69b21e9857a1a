# api/domain/plano_acao/enums.py
from enum import StrEnum


class Prazo(StrEnum):
    """Horizontes do plano. A ordem de declaracao e a ordem canonica."""

    UM_MES = "1 Mês"
    TRES_MESES = "3 Meses"
    SEIS_MESES = "6 Meses"
    UM_ANO = "1 Ano"
    CINCO_ANOS = "5 Anos"


class Prioridade(StrEnum):
    ALTA = "Alta"
    MEDIA = "Média"
    BAIXA = "Baixa"
