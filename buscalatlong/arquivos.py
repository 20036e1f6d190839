"""
Leitura do CSV de entrada (``id``, ``nome``, ``cep``) e exportação do
resultado com latitude, longitude e status.
"""

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from buscalatlong.config import COLUNAS_EXPORTACAO, COLUNAS_REQUERIDAS, SAIDA_CSV_PADRAO
from buscalatlong.modelos import Registro

log = logging.getLogger(__name__)

# ===========================================================================
# Entrada
# ===========================================================================


def carregar_registros(arq: Path) -> list[Registro]:
    """Lê o CSV de franquias e devolve um :class:`Registro` por linha.

    Todas as colunas são lidas como texto para preservar zeros à esquerda
    do CEP (``"01310-100"``). Cabeçalhos são comparados sem caixa e sem
    espaços; linhas totalmente vazias são descartadas.

    Args:
        arq: Caminho do CSV (vírgula ou ponto-e-vírgula; UTF-8 ou latin-1).

    Returns:
        Lista de registros na ordem do arquivo.

    Raises:
        ValueError: Se o arquivo não existir, não for legível ou faltar coluna
                    obrigatória.
    """
    log.info("[ETAPA 1] Lendo registros de %s", arq)
    if not arq.exists():
        raise ValueError(f"Arquivo não encontrado: '{arq}'")

    df = _ler_csv_com_fallback(arq)
    if df is None:
        raise ValueError(f"Não foi possível ler o CSV '{arq}'")
    # Linhas curtas são completadas com NaN mesmo com keep_default_na=False
    df = df.fillna("")

    df.columns = df.columns.str.strip().str.lower()
    validar_schema(df)

    for col in df.columns:
        df[col] = df[col].str.strip()
    df = df[(df != "").any(axis=1)]

    nomes = df["nome"] if "nome" in df.columns else pd.Series("", index=df.index)
    registros = [
        Registro(id=id_, nome=nome, cep=cep)
        for id_, nome, cep in zip(df["id"], nomes, df["cep"])
    ]
    log.info("  %d registro(s) carregado(s)", len(registros))
    return registros


def validar_schema(
    df: pd.DataFrame,
    colunas: tuple[str, ...] = COLUNAS_REQUERIDAS,
) -> None:
    """Valida que o DataFrame contém as colunas obrigatórias.

    Raises:
        ValueError: Com as colunas faltantes e as encontradas.
    """
    ausentes = [c for c in colunas if c not in df.columns]
    if ausentes:
        encontradas = sorted(df.columns.tolist())
        raise ValueError(
            f"Schema inválido — colunas ausentes: {ausentes}. "
            f"Colunas encontradas: {encontradas}"
        )


def _ler_csv_com_fallback(arq: Path) -> pd.DataFrame | None:
    """Lê um CSV tentando UTF-8 BOM e depois latin-1."""
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return pd.read_csv(
                arq,
                encoding=encoding,
                sep=None,
                engine="python",
                dtype=str,
                keep_default_na=False,
            )
        except UnicodeDecodeError:
            continue
        except (pd.errors.ParserError, pd.errors.EmptyDataError, OSError) as e:
            log.error("  Falha ao ler %s: %s", arq.name, e)
            return None
    log.error("  Não foi possível decodificar %s com UTF-8 nem latin-1.", arq.name)
    return None


# ===========================================================================
# Saída
# ===========================================================================


def exportar_resultados(
    registros: Sequence[Registro],
    saida: Path = SAIDA_CSV_PADRAO,
) -> Path:
    """Salva os registros processados em CSV.

    Usa encoding ``utf-8-sig`` (BOM) para compatibilidade com Excel.

    Returns:
        :class:`~pathlib.Path` do arquivo salvo.
    """
    saida.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(
        [r.como_linha() for r in registros],
        columns=list(COLUNAS_EXPORTACAO),
    )
    df.to_csv(saida, index=False, encoding="utf-8-sig")
    log.info("  Resultado salvo: %s (%d linhas)", saida, len(df))
    return saida
