"""
Tipos do pipeline: registro de entrada/saída, resultado da resolução e a
taxonomia fechada de status.

O status circula internamente como :class:`StatusResolucao`; o texto exibido
(``rotulo``) só é projetado na fronteira de saída (CSV, terminal).
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from buscalatlong.config import VALOR_AUSENTE


class StatusResolucao(Enum):
    """Status possíveis de um registro; o valor é o rótulo exibido."""

    NAO_PROCESSADO = "not yet processed"
    INVALIDO = "invalid postal code: expected 8 digits"
    NAO_ENCONTRADO = "postal code not found"
    ERRO_SERVICO_CEP = "postal-code service error"
    ENDERECO_NAO_ENCONTRADO = "address not found"
    ERRO_GEOCODIFICACAO = "geocoding service error"
    SUCESSO = "success"
    SUCESSO_APROXIMADO = "success (approximate, city-level)"

    @property
    def rotulo(self) -> str:
        return self.value

    @property
    def sucesso(self) -> bool:
        """``True`` para os dois status com coordenadas."""
        return self in (StatusResolucao.SUCESSO, StatusResolucao.SUCESSO_APROXIMADO)


@dataclass(frozen=True)
class ResultadoResolucao:
    """Latitude, longitude e status de um CEP resolvido."""

    latitude: str
    longitude: str
    status: StatusResolucao

    @classmethod
    def falha(cls, status: StatusResolucao) -> "ResultadoResolucao":
        """Resultado sem coordenadas (lat/lon = ``"N/A"``)."""
        return cls(latitude=VALOR_AUSENTE, longitude=VALOR_AUSENTE, status=status)


@dataclass(frozen=True)
class Registro:
    """Uma linha do lote: identificação, CEP e coordenadas.

    Imutável: o pipeline nunca altera o registro recebido, apenas constrói
    um novo com :meth:`com_resultado`.
    """

    id: str
    cep: str
    nome: str = ""
    latitude: str = VALOR_AUSENTE
    longitude: str = VALOR_AUSENTE
    status: StatusResolucao = field(default=StatusResolucao.NAO_PROCESSADO)

    def pendente(self) -> "Registro":
        """Cópia com os campos de saída no estado inicial."""
        return replace(
            self,
            latitude=VALOR_AUSENTE,
            longitude=VALOR_AUSENTE,
            status=StatusResolucao.NAO_PROCESSADO,
        )

    def com_resultado(self, cep: str, resultado: ResultadoResolucao) -> "Registro":
        return replace(
            self,
            cep=cep,
            latitude=resultado.latitude,
            longitude=resultado.longitude,
            status=resultado.status,
        )

    def como_linha(self) -> dict[str, str]:
        """Projeta o registro nas colunas de exportação."""
        return {
            "ID": self.id,
            "Nome": self.nome,
            "CEP": self.cep,
            "Latitude": self.latitude,
            "Longitude": self.longitude,
            "Status": self.status.rotulo,
        }
