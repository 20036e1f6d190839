"""
Processamento sequencial de um lote de registros.

Os registros são resolvidos um a um, nunca em paralelo: ViaCEP e Nominatim
têm limite de requisições e a cota é compartilhada pelo lote inteiro.
Depois de cada registro (inclusive o último) o lote espera
:data:`~buscalatlong.config.INTERVALO_ENTRE_REGISTROS` segundos.
"""

import logging
import time
from collections import Counter
from functools import partial
from typing import Callable, Sequence

from tqdm import tqdm

from buscalatlong.cep import formatar_cep
from buscalatlong.config import INTERVALO_ENTRE_REGISTROS
from buscalatlong.modelos import Registro, ResultadoResolucao, StatusResolucao
from buscalatlong.resolucao import resolver_coordenadas
from buscalatlong.servicos import NominatimServico, ViaCepServico

log = logging.getLogger(__name__)

Resolvedor = Callable[[str], ResultadoResolucao]
CallbackProgresso = Callable[[int], None]


def resolvedor_padrao() -> Resolvedor:
    """Resolvedor com os serviços reais (ViaCEP + Nominatim)."""
    return partial(
        resolver_coordenadas,
        servico_endereco=ViaCepServico(),
        servico_geo=NominatimServico(),
    )


def processar_lote(
    registros: Sequence[Registro],
    ao_progredir: CallbackProgresso | None = None,
    resolvedor: Resolvedor | None = None,
    intervalo: float = INTERVALO_ENTRE_REGISTROS,
    dormir: Callable[[float], None] | None = None,
) -> list[Registro]:
    """Resolve as coordenadas de cada registro, em ordem.

    Args:
        registros:    Registros de entrada; não são modificados.
        ao_progredir: Recebe o percentual concluído (1–100) após cada registro.
                      O último valor reportado é sempre 100.
        resolvedor:   Função ``cep -> ResultadoResolucao``. ``None`` usa
                      :func:`resolvedor_padrao`.
        intervalo:    Espera (s) após cada registro.
        dormir:       Função de espera (padrão: :func:`time.sleep`).

    Returns:
        Lista com um registro novo por registro de entrada, na mesma ordem.
    """
    total = len(registros)
    log.info("[ETAPA 2] Resolvendo coordenadas de %d registro(s)...", total)
    if total == 0:
        return []

    if resolvedor is None:
        resolvedor = resolvedor_padrao()
    if dormir is None:
        dormir = time.sleep

    processados: list[Registro] = []
    for i, original in enumerate(tqdm(registros, desc="Buscando", unit="cep")):
        registro = original.pendente()
        try:
            resultado = resolvedor(registro.cep)
        except Exception:  # noqa: BLE001
            # Um registro nunca derruba o lote
            log.exception("  Falha inesperada no registro '%s'", registro.id)
            resultado = ResultadoResolucao.falha(StatusResolucao.ERRO_SERVICO_CEP)

        cep = formatar_cep(registro.cep).formatado
        processados.append(registro.com_resultado(cep, resultado))
        log.debug(
            "  [%d/%d] %s %s → %s", i + 1, total, registro.id, cep, resultado.status.rotulo
        )

        if ao_progredir is not None:
            ao_progredir(_percentual(i + 1, total))

        dormir(intervalo)

    resumo = resumir_status(processados)
    log.info("  Concluído: %s", resumo)
    return processados


def _percentual(feitos: int, total: int) -> int:
    """Percentual inteiro com meio arredondado para cima (12.5 → 13)."""
    return (200 * feitos + total) // (2 * total)


def resumir_status(registros: Sequence[Registro]) -> dict[str, int]:
    """Conta registros por rótulo de status, na ordem da taxonomia."""
    contagem = Counter(r.status for r in registros)
    return {
        status.rotulo: contagem[status]
        for status in StatusResolucao
        if contagem[status]
    }
