# tests/integration/test_api_avaliacao.py
from fastapi.testclient import TestClient


def test_resultado_parcial_sem_respostas(client: TestClient) -> None:
    response = client.post("/api/avaliacoes/resultado", json={"respostas": {}})
    assert response.status_code == 200
    data = response.json()
    assert data["respondidas"] == 0
    assert data["resultado"]["percentual"] == 0
    assert data["resultado"]["nivel"] == "Crítico"
    assert len(data["plano"]) == 50


def test_resultado_parcial_calcula_categoria(client: TestClient) -> None:
    response = client.post(
        "/api/avaliacoes/resultado",
        json={"respostas": {"1_1": "YES", "1_2": "NO", "1_3": "NA", "1_4": "???"}},
    )
    data = response.json()
    legislacao = data["resultado"]["categorias"]["legislacao"]
    assert legislacao["pontos"] == 1
    assert legislacao["maximo"] == 2
    assert legislacao["percentual"] == 50
    assert legislacao["nivel"] == "Em Desenvolvimento"
    assert data["respondidas"] == 3


def test_plano_ordena_categorias_mais_fracas_primeiro(client: TestClient) -> None:
    respostas = {f"2_{i}": "YES" for i in range(1, 10)}
    data = client.post("/api/avaliacoes/resultado", json={"respostas": respostas}).json()
    # agua (100%) vai para o fim do plano
    assert all(a["categoria"] == "Água e Saneamento" for a in data["plano"][-5:])
    assert data["plano"][-1]["impacto"] == "Inovação e Legado"


def test_corpo_invalido_retorna_422(client: TestClient) -> None:
    response = client.post("/api/avaliacoes/resultado", json={"respostas": ["YES"]})
    assert response.status_code == 422
