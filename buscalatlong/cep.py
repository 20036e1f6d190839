"""
Validação e formatação de CEP.

Um CEP é válido quando, removidos todos os caracteres não numéricos, restam
exatamente 8 dígitos. A forma canônica é ``XXXXX-XXX``.
"""

import re
from typing import NamedTuple

from buscalatlong.config import SUFIXO_CEP_GENERICO


class CepFormatado(NamedTuple):
    """Resultado de :func:`formatar_cep`.

    ``digitos`` só é preenchido quando ``valido``; caso contrário fica vazio e
    ``formatado`` repete a entrada original sem modificação.
    """

    formatado: str
    valido: bool
    digitos: str = ""


def formatar_cep(bruto: object) -> CepFormatado:
    """Valida e formata um CEP bruto.

    Nunca levanta exceção: ``None`` vira string vazia e qualquer outro valor
    (ex.: número lido de planilha) é convertido com ``str``.

    Args:
        bruto: CEP como veio da fonte (``"24020-005"``, ``"24020005"``, ``"24.020 005"``).

    Returns:
        :class:`CepFormatado` com ``formatado="XXXXX-XXX"`` quando válido.
    """
    texto = "" if bruto is None else str(bruto)
    digitos = re.sub(r"\D", "", texto)
    if len(digitos) != 8:
        return CepFormatado(formatado=texto, valido=False)
    return CepFormatado(
        formatado=f"{digitos[:5]}-{digitos[5:]}",
        valido=True,
        digitos=digitos,
    )


def eh_cep_generico_de_cidade(digitos: str) -> bool:
    """CEPs terminados em ``000`` costumam designar a cidade inteira."""
    return len(digitos) == 8 and digitos.endswith(SUFIXO_CEP_GENERICO)
