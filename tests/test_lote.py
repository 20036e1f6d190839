"""
Testes para buscalatlong.lote.

Cobre:
- N registros de entrada → N de saída, mesma ordem, CEP formatado
- progresso monotônico terminando em 100, sem reportar 0
- espera após cada registro (inclusive o último)
- registros de entrada não são modificados
- lote só de CEPs inválidos não chama nenhum serviço
- exceção inesperada do resolvedor não derruba o lote
- lote vazio
- resumir_status
"""

from unittest.mock import MagicMock

from buscalatlong.lote import _percentual, processar_lote, resumir_status
from buscalatlong.modelos import Registro, ResultadoResolucao, StatusResolucao
from buscalatlong.resolucao import resolver_coordenadas

# ===========================================================================
# Helpers
# ===========================================================================


def _registros(*ceps: str) -> list[Registro]:
    return [Registro(id=str(i), nome=f"Franquia {i}", cep=c) for i, c in enumerate(ceps, 1)]


def _resolvedor_fixo(status: StatusResolucao = StatusResolucao.SUCESSO):
    chamadas: list[str] = []

    def resolver(cep: str) -> ResultadoResolucao:
        chamadas.append(cep)
        if status.sucesso:
            return ResultadoResolucao("-22.9", "-43.1", status)
        return ResultadoResolucao.falha(status)

    resolver.chamadas = chamadas  # type: ignore[attr-defined]
    return resolver


def _sem_espera(_s: float) -> None:
    pass


# ===========================================================================
# Ordem e campos
# ===========================================================================


def test_saida_um_para_um_na_mesma_ordem() -> None:
    entrada = _registros("24020005", "01310-100", "abc")
    resolvedor = _resolvedor_fixo()

    saida = processar_lote(entrada, resolvedor=resolvedor, dormir=_sem_espera)

    assert [r.id for r in saida] == ["1", "2", "3"]
    assert [r.nome for r in saida] == ["Franquia 1", "Franquia 2", "Franquia 3"]
    assert [r.cep for r in saida] == ["24020-005", "01310-100", "abc"]
    assert resolvedor.chamadas == ["24020005", "01310-100", "abc"]
    for r in saida:
        assert r.latitude == "-22.9"
        assert r.longitude == "-43.1"
        assert r.status is StatusResolucao.SUCESSO


def test_entrada_nao_e_modificada() -> None:
    entrada = _registros("24020005")

    saida = processar_lote(entrada, resolvedor=_resolvedor_fixo(), dormir=_sem_espera)

    assert entrada[0].cep == "24020005"
    assert entrada[0].status is StatusResolucao.NAO_PROCESSADO
    assert saida[0] is not entrada[0]


def test_campos_sempre_preenchidos_em_falha() -> None:
    saida = processar_lote(
        _registros("24020005"),
        resolvedor=_resolvedor_fixo(StatusResolucao.ENDERECO_NAO_ENCONTRADO),
        dormir=_sem_espera,
    )
    assert (saida[0].latitude, saida[0].longitude) == ("N/A", "N/A")
    assert saida[0].status.rotulo == "address not found"


# ===========================================================================
# Progresso e espera
# ===========================================================================


class TestProgresso:
    def test_progresso_termina_em_100(self) -> None:
        progresso: list[int] = []

        processar_lote(
            _registros(*["24020005"] * 3),
            ao_progredir=progresso.append,
            resolvedor=_resolvedor_fixo(),
            dormir=_sem_espera,
        )

        assert progresso == [33, 67, 100]

    def test_progresso_monotonico_sem_zero(self) -> None:
        progresso: list[int] = []

        processar_lote(
            _registros(*["24020005"] * 7),
            ao_progredir=progresso.append,
            resolvedor=_resolvedor_fixo(),
            dormir=_sem_espera,
        )

        assert len(progresso) == 7
        assert progresso == sorted(progresso)
        assert progresso[0] > 0
        assert progresso[-1] == 100

    def test_percentual_arredonda_meio_para_cima(self) -> None:
        assert _percentual(1, 8) == 13
        assert _percentual(1, 3) == 33
        assert _percentual(5, 5) == 100

    def test_espera_apos_cada_registro(self) -> None:
        dormir = MagicMock()

        processar_lote(
            _registros("1", "24020005"),
            resolvedor=_resolvedor_fixo(),
            intervalo=1.5,
            dormir=dormir,
        )

        assert dormir.call_count == 2
        dormir.assert_called_with(1.5)


# ===========================================================================
# Falhas
# ===========================================================================


def test_lote_invalido_nao_chama_servicos() -> None:
    """CEPs inválidos são rejeitados sem tocar ViaCEP nem Nominatim."""
    servico_endereco = MagicMock()
    servico_geo = MagicMock()

    def resolvedor(cep: str) -> ResultadoResolucao:
        return resolver_coordenadas(cep, servico_endereco, servico_geo)

    for _ in range(2):
        saida = processar_lote(
            _registros("abc", "123", ""), resolvedor=resolvedor, dormir=_sem_espera
        )
        assert all(r.status is StatusResolucao.INVALIDO for r in saida)

    servico_endereco.consultar.assert_not_called()
    servico_geo.buscar.assert_not_called()


def test_excecao_inesperada_nao_derruba_lote() -> None:
    def resolvedor(cep: str) -> ResultadoResolucao:
        if cep == "bomba":
            raise KeyError("inesperado")
        return ResultadoResolucao("-1", "-2", StatusResolucao.SUCESSO)

    saida = processar_lote(
        _registros("bomba", "24020005"), resolvedor=resolvedor, dormir=_sem_espera
    )

    assert saida[0].status is StatusResolucao.ERRO_SERVICO_CEP
    assert (saida[0].latitude, saida[0].longitude) == ("N/A", "N/A")
    assert saida[1].status is StatusResolucao.SUCESSO


def test_lote_vazio() -> None:
    progresso = MagicMock()
    dormir = MagicMock()

    assert processar_lote([], ao_progredir=progresso, dormir=dormir) == []
    progresso.assert_not_called()
    dormir.assert_not_called()


# ===========================================================================
# resumir_status
# ===========================================================================


def test_resumir_status_conta_por_rotulo() -> None:
    registros = [
        Registro(id="1", cep="x", status=StatusResolucao.SUCESSO),
        Registro(id="2", cep="x", status=StatusResolucao.INVALIDO),
        Registro(id="3", cep="x", status=StatusResolucao.SUCESSO),
    ]

    assert resumir_status(registros) == {
        "invalid postal code: expected 8 digits": 1,
        "success": 2,
    }
