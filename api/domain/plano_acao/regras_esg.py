# api/domain/plano_acao/regras_esg.py
"""Tabela de modelos do plano de acao ESG. Dados estaticos, injetados como o catalogo."""

from __future__ import annotations

from api.domain.avaliacao.enums import NivelMaturidade

from .enums import Prazo, Prioridade
from .regras import CHAVE_PADRAO, RegrasPlano, construir_regras

_Celulas = dict[Prazo, tuple[str, str, Prioridade]]

_PADRAO_CRITICO: _Celulas = {
    Prazo.UM_MES: (
        "Força-Tarefa de Conformidade",
        "Criar grupo de trabalho imediato para mapear riscos legais e evitar sanções do MP/Tribunais "
        'em {cat}. Foco em "estancar a sangria".',
        Prioridade.ALTA,
    ),
    Prazo.TRES_MESES: (
        "Diagnóstico e Regularização Documental",
        "Levantamento de passivos e elaboração de minutas de decretos para regulamentação básica de {cat}.",
        Prioridade.ALTA,
    ),
    Prazo.SEIS_MESES: (
        "Captação de Recursos Emergencial",
        "Protocolar projetos básicos nos ministérios/bancos de fomento para viabilizar obras essenciais em {cat}.",
        Prioridade.ALTA,
    ),
    Prazo.UM_ANO: (
        "Execução de Obras Estruturantes",
        "Início das intervenções físicas ou contratação de serviços terceirizados para sair do índice "
        "crítico em {cat}.",
        Prioridade.MEDIA,
    ),
    Prazo.CINCO_ANOS: (
        "Estabilidade e Nivelamento Estadual",
        "Alcançar os índices médios do estado em {cat}, eliminando completamente os passivos históricos.",
        Prioridade.MEDIA,
    ),
}

_PADRAO_REGULAR: _Celulas = {
    Prazo.UM_MES: (
        "Auditoria de Processos",
        "Revisar fluxos de trabalho em {cat} para identificar gargalos burocráticos que impedem a nota excelente.",
        Prioridade.MEDIA,
    ),
    Prazo.TRES_MESES: (
        "Capacitação Técnica e Tecnologia",
        "Treinamento intensivo das equipes e aquisição de softwares de gestão para otimizar {cat}.",
        Prioridade.MEDIA,
    ),
    Prazo.SEIS_MESES: (
        "Expansão da Cobertura do Serviço",
        "Ampliar o atendimento de {cat} para áreas rurais ou bairros periféricos ainda não atendidos.",
        Prioridade.ALTA,
    ),
    Prazo.UM_ANO: (
        "Digitalização e Monitoramento",
        "Implantar centro de controle operacional com indicadores em tempo real para {cat}.",
        Prioridade.MEDIA,
    ),
    Prazo.CINCO_ANOS: (
        "Universalização com Qualidade",
        "Garantir que 100% da população tenha acesso a {cat} com padrões de qualidade certificados.",
        Prioridade.BAIXA,
    ),
}

_PADRAO_EXCELENTE: _Celulas = {
    Prazo.UM_MES: (
        "Blindagem e Governança de Dados",
        "Validar integridade dos indicadores de {cat} para garantir que o resultado seja auditável e "
        "sustentável. Não permitir retrocesso.",
        Prioridade.ALTA,
    ),
    Prazo.TRES_MESES: (
        "Gestão do Conhecimento e Mentoria",
        "Documentar os POPs (Procedimentos Operacionais Padrão) de {cat} para que a excelência não "
        "dependa de pessoas específicas.",
        Prioridade.MEDIA,
    ),
    Prazo.SEIS_MESES: (
        "Inovação e Benchmarking Global",
        "Buscar tecnologias disruptivas (IoT/AI) aplicadas a {cat} para superar os padrões nacionais.",
        Prioridade.MEDIA,
    ),
    Prazo.UM_ANO: (
        "Certificações Internacionais (ISO)",
        "Submeter a gestão de {cat} a auditorias externas para obtenção de selos de qualidade globais.",
        Prioridade.MEDIA,
    ),
    Prazo.CINCO_ANOS: (
        "Legado e Cidade Inteligente",
        "Consolidar {cat} como case de referência mundial, integrando-o totalmente ao ecossistema de "
        "Smart Cities.",
        Prioridade.BAIXA,
    ),
}

# Legislacao critica: acoes de choque normativas nos dois primeiros horizontes.
_LEGISLACAO_CRITICO: _Celulas = {
    **_PADRAO_CRITICO,
    Prazo.UM_MES: (
        "Decreto de Emergência/Prioridade: {cat}",
        "Criar grupo de trabalho imediato para estancar riscos em {cat} e levantar passivos.",
        Prioridade.ALTA,
    ),
    Prazo.TRES_MESES: (
        "Revisão Legal de {cat}",
        "Enviar projeto de lei à câmara atualizando o código municipal sobre {cat}.",
        Prioridade.ALTA,
    ),
}

# Governanca em desenvolvimento: estruturacao (projetos, indicadores, metas ODS).
_GOVERNANCA_REGULAR: _Celulas = {
    **_PADRAO_REGULAR,
    Prazo.SEIS_MESES: (
        "Projeto Executivo - {cat}",
        "Contratar ou elaborar projetos técnicos para captação de recursos em {cat}.",
        Prioridade.MEDIA,
    ),
    Prazo.UM_ANO: (
        "Implementação de Indicadores de {cat}",
        "Estabelecer rotina de medição e publicação de dados sobre {cat} no portal da transparência.",
        Prioridade.MEDIA,
    ),
    Prazo.CINCO_ANOS: (
        "Plano Municipal 2030 - {cat}",
        "Estabelecer metas de longo prazo para {cat} alinhadas aos ODS da ONU, visando certificação "
        "internacional.",
        Prioridade.BAIXA,
    ),
}

REGRAS_PLANO_ESG: RegrasPlano = construir_regras(
    {
        CHAVE_PADRAO: {
            NivelMaturidade.CRITICO: _PADRAO_CRITICO,
            NivelMaturidade.REGULAR: _PADRAO_REGULAR,
            NivelMaturidade.EXCELENTE: _PADRAO_EXCELENTE,
        },
        "legislacao": {NivelMaturidade.CRITICO: _LEGISLACAO_CRITICO},
        "governanca": {NivelMaturidade.REGULAR: _GOVERNANCA_REGULAR},
    }
)
