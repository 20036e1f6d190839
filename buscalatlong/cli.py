"""
CLI do BuscaLatLong.

Subcomandos disponíveis::

    buscalatlong processar ENTRADA [--saida CSV] [--intervalo S]
    buscalatlong consultar CEP
    buscalatlong validar   ENTRADA
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from buscalatlong.config import INTERVALO_ENTRE_REGISTROS, SAIDA_CSV_PADRAO

log = logging.getLogger(__name__)


# ===========================================================================
# Logging
# ===========================================================================


def _setup_logging(verbose: bool = False) -> None:
    """Configura logging do pipeline."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _imprimir_resumo(resumo: dict[str, int]) -> None:
    print(f"\n{'Status':<40}  {'Qtd':>5}")
    print("-" * 47)
    for rotulo, qtd in resumo.items():
        print(f"{rotulo:<40}  {qtd:>5}")
    print(f"{'Total':<40}  {sum(resumo.values()):>5}\n")


# ===========================================================================
# Subcomando: processar
# ===========================================================================


def cmd_processar(args: argparse.Namespace) -> int:
    """Lê o CSV, busca as coordenadas de cada CEP e exporta o resultado."""
    from buscalatlong.arquivos import carregar_registros, exportar_resultados
    from buscalatlong.lote import processar_lote, resumir_status

    try:
        registros = carregar_registros(Path(args.entrada))
    except ValueError as e:
        log.error("%s", e)
        return 1

    if not registros:
        log.error("Nenhum dado para processar em '%s'.", args.entrada)
        return 1

    processados = processar_lote(registros, intervalo=args.intervalo)

    saida = Path(args.saida) if args.saida else SAIDA_CSV_PADRAO
    try:
        exportar_resultados(processados, saida)
    except OSError as e:
        log.error("Falha ao salvar '%s': %s", saida, e)
        return 1

    _imprimir_resumo(resumir_status(processados))
    print(f"Resultado: {saida} ({len(processados)} linhas)")
    return 0


# ===========================================================================
# Subcomando: consultar
# ===========================================================================


def cmd_consultar(args: argparse.Namespace) -> int:
    """Resolve um único CEP e imprime latitude, longitude e status."""
    from buscalatlong.cep import formatar_cep
    from buscalatlong.lote import resolvedor_padrao

    resultado = resolvedor_padrao()(args.cep)
    print(f"CEP:       {formatar_cep(args.cep).formatado}")
    print(f"Latitude:  {resultado.latitude}")
    print(f"Longitude: {resultado.longitude}")
    print(f"Status:    {resultado.status.rotulo}")
    return 0 if resultado.status.sucesso else 1


# ===========================================================================
# Subcomando: validar
# ===========================================================================


def cmd_validar(args: argparse.Namespace) -> int:
    """Valida os CEPs do CSV localmente, sem chamar nenhum serviço."""
    from buscalatlong.arquivos import carregar_registros
    from buscalatlong.cep import formatar_cep

    try:
        registros = carregar_registros(Path(args.entrada))
    except ValueError as e:
        log.error("%s", e)
        return 1

    invalidos = [r for r in registros if not formatar_cep(r.cep).valido]
    for r in invalidos:
        print(f"{r.id:<12}  {r.cep!r}")

    print(f"\n{len(registros) - len(invalidos)}/{len(registros)} CEP(s) válido(s).")
    return 1 if invalidos else 0


# ===========================================================================
# Parser argparse
# ===========================================================================


def _build_parser() -> argparse.ArgumentParser:
    """Constrói o parser principal com todos os subcomandos."""
    parser = argparse.ArgumentParser(
        prog="buscalatlong",
        description="Busca de latitude e longitude por CEP (ViaCEP + Nominatim)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Exemplos:
  buscalatlong processar franquias.csv              Gera franquias-com-coordenadas.csv
  buscalatlong processar franquias.csv --saida out.csv
  buscalatlong consultar 24020-005                  Consulta um único CEP
  buscalatlong validar franquias.csv                Lista CEPs inválidos (sem rede)
""",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Exibe logs de depuração (DEBUG)"
    )

    sub = parser.add_subparsers(dest="comando", required=True, metavar="COMANDO")

    # ------------------------------------------------------------ processar
    p_proc = sub.add_parser(
        "processar",
        help="Busca coordenadas para todos os CEPs de um CSV",
        description="Lê o CSV (id, nome, cep), resolve cada CEP e exporta o resultado.",
    )
    p_proc.add_argument("entrada", metavar="ENTRADA", help="CSV com colunas id, nome, cep")
    p_proc.add_argument(
        "--saida",
        default=None,
        metavar="CSV",
        help=f"Caminho do CSV de saída (padrão: {SAIDA_CSV_PADRAO})",
    )
    p_proc.add_argument(
        "--intervalo",
        type=float,
        default=INTERVALO_ENTRE_REGISTROS,
        metavar="S",
        help=(
            "Espera em segundos após cada registro "
            f"(padrão: {INTERVALO_ENTRE_REGISTROS}; limite do Nominatim é 1 req/s)"
        ),
    )

    # ------------------------------------------------------------ consultar
    p_cons = sub.add_parser(
        "consultar",
        help="Consulta um único CEP",
        description="Resolve um CEP e imprime latitude, longitude e status.",
    )
    p_cons.add_argument("cep", metavar="CEP", help="CEP com ou sem hífen")

    # -------------------------------------------------------------- validar
    p_val = sub.add_parser(
        "validar",
        help="Valida os CEPs de um CSV sem acessar a rede",
        description="Lista os registros cujo CEP não tem 8 dígitos.",
    )
    p_val.add_argument("entrada", metavar="ENTRADA", help="CSV com colunas id, nome, cep")

    return parser


# ===========================================================================
# Dispatch e entry point
# ===========================================================================

_HANDLER_MAP: dict[str, Callable[[argparse.Namespace], int]] = {
    "processar": cmd_processar,
    "consultar": cmd_consultar,
    "validar": cmd_validar,
}


def main() -> None:
    """Entry point público — chamado por ``python -m buscalatlong`` e pelo script ``buscalatlong``."""
    parser = _build_parser()
    args = parser.parse_args()
    _setup_logging(verbose=args.verbose)

    handler = _HANDLER_MAP.get(args.comando)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(handler(args))
