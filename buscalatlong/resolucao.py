"""
Resolução CEP → coordenadas.

Fluxo por CEP:

  1. valida/formata o CEP (sem rede quando inválido);
  2. consulta o ViaCEP para obter logradouro, localidade e UF;
  3. geocodifica o endereço montado no Nominatim (no máximo 1 resultado).

Fallback por cidade: quando o ViaCEP falha (rede/serviço) para um CEP
genérico de cidade (terminado em ``000``), consulta-se o CEP de sonda
``<prefixo>010`` só para descobrir cidade/UF e geocodifica-se
``"<cidade>, <UF>, Brasil"``. O sucesso nesse caminho é marcado como
aproximado. É uma heurística sem garantia de acerto.

:func:`resolver_coordenadas` nunca levanta exceção: toda falha vira um
:class:`~buscalatlong.modelos.StatusResolucao`.
"""

import logging

from buscalatlong.cep import eh_cep_generico_de_cidade, formatar_cep
from buscalatlong.config import PAIS, SUFIXO_SONDA_CIDADE
from buscalatlong.modelos import ResultadoResolucao, StatusResolucao
from buscalatlong.servicos import (
    Endereco,
    ServicoEndereco,
    ServicoGeocodificacao,
)

log = logging.getLogger(__name__)


# ===========================================================================
# Helpers de montagem de endereço
# ===========================================================================


def _montar_endereco(endereco: Endereco) -> str:
    """Monta ``"<logradouro>, <localidade>, <UF>, Brasil"``.

    Logradouro vazio (CEP de cidade pequena) é omitido em vez de gerar
    uma vírgula solta no início.
    """
    partes = [endereco.logradouro, endereco.localidade, endereco.uf, PAIS]
    return ", ".join(p for p in partes if p)


def _montar_endereco_cidade(endereco: Endereco) -> str:
    return f"{endereco.localidade}, {endereco.uf}, {PAIS}"


def _normalizar_decimal(valor: object) -> str:
    """Converte a coordenada em texto com ponto decimal (alguns serviços usam vírgula)."""
    return str(valor).strip().replace(",", ".")


def _endereco_de_cidade(
    digitos: str, servico_endereco: ServicoEndereco
) -> str | None:
    """Tenta obter ``"<cidade>, <UF>, Brasil"`` via CEP de sonda.

    Qualquer falha (rede, CEP de sonda inexistente, cidade/UF vazias) é
    registrada em log e resulta em ``None``.
    """
    cep_sonda = digitos[:5] + SUFIXO_SONDA_CIDADE
    try:
        endereco = servico_endereco.consultar(cep_sonda)
    except Exception as exc:  # noqa: BLE001
        log.warning("  Fallback por cidade falhou (sonda %s): %s", cep_sonda, exc)
        return None

    if endereco is None or not endereco.localidade or not endereco.uf:
        log.warning("  Fallback por cidade sem cidade/UF (sonda %s)", cep_sonda)
        return None

    return _montar_endereco_cidade(endereco)


# ===========================================================================
# Resolução
# ===========================================================================


def geocodificar_endereco(
    endereco: str,
    servico_geo: ServicoGeocodificacao,
    status_sucesso: StatusResolucao = StatusResolucao.SUCESSO,
) -> ResultadoResolucao:
    """Geocodifica um endereço livre e classifica o resultado."""
    try:
        coordenadas = servico_geo.buscar(endereco, limite=1)
    except Exception as exc:  # noqa: BLE001
        log.warning("  Geocodificação falhou para '%s': %s", endereco, exc)
        return ResultadoResolucao.falha(StatusResolucao.ERRO_GEOCODIFICACAO)

    if not coordenadas:
        log.info("  Endereço não encontrado: '%s'", endereco)
        return ResultadoResolucao.falha(StatusResolucao.ENDERECO_NAO_ENCONTRADO)

    lat, lon = coordenadas[0]
    return ResultadoResolucao(
        latitude=_normalizar_decimal(lat),
        longitude=_normalizar_decimal(lon),
        status=status_sucesso,
    )


def resolver_coordenadas(
    cep_bruto: object,
    servico_endereco: ServicoEndereco,
    servico_geo: ServicoGeocodificacao,
) -> ResultadoResolucao:
    """Resolve um CEP bruto em latitude/longitude.

    Args:
        cep_bruto:        CEP em qualquer formatação (``"24020-005"``, ``"24020005"``).
        servico_endereco: Serviço CEP → endereço (ex.: :class:`~buscalatlong.servicos.ViaCepServico`).
        servico_geo:      Serviço endereço → coordenadas
                          (ex.: :class:`~buscalatlong.servicos.NominatimServico`).

    Returns:
        :class:`~buscalatlong.modelos.ResultadoResolucao`; lat/lon são
        ``"N/A"`` em qualquer status diferente de sucesso.
    """
    cep = formatar_cep(cep_bruto)
    if not cep.valido:
        log.info("  CEP inválido: '%s'", cep.formatado)
        return ResultadoResolucao.falha(StatusResolucao.INVALIDO)

    try:
        endereco = servico_endereco.consultar(cep.digitos)
    except Exception as exc:  # noqa: BLE001
        log.warning("  Erro ao consultar CEP %s: %s", cep.formatado, exc)
        if eh_cep_generico_de_cidade(cep.digitos):
            endereco_cidade = _endereco_de_cidade(cep.digitos, servico_endereco)
            if endereco_cidade is not None:
                log.info(
                    "  Fallback por cidade: %s → '%s'", cep.formatado, endereco_cidade
                )
                return geocodificar_endereco(
                    endereco_cidade,
                    servico_geo,
                    status_sucesso=StatusResolucao.SUCESSO_APROXIMADO,
                )
        return ResultadoResolucao.falha(StatusResolucao.ERRO_SERVICO_CEP)

    if endereco is None:
        log.info("  CEP não encontrado: %s", cep.formatado)
        return ResultadoResolucao.falha(StatusResolucao.NAO_ENCONTRADO)

    return geocodificar_endereco(_montar_endereco(endereco), servico_geo)
