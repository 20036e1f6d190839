"""
Serviços externos consumidos pela resolução de coordenadas.

- **ViaCEP** (:class:`ViaCepServico`): CEP → logradouro, localidade, UF.
- **Nominatim** (:class:`NominatimServico`): endereço livre → lat/lon.

Os dois adaptadores convertem as exceções das bibliotecas (``requests`` e
``geopy``) em :class:`ErroServico`, a única falha de transporte que a
resolução conhece.
"""

import logging
from typing import NamedTuple, Protocol

import requests
from geopy.exc import GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from buscalatlong.config import (
    HEADERS,
    INTERVALO_ENTRE_REGISTROS,
    NOMINATIM_TIMEOUT,
    NOMINATIM_USER_AGENT,
    TIMEOUT_VIACEP,
    VIACEP_URL,
)

log = logging.getLogger(__name__)

#: (latitude, longitude) como texto, do jeito que o geocodificador devolveu
Coordenada = tuple[str, str]


class ErroServico(RuntimeError):
    """Falha de rede ou do serviço remoto (timeout, HTTP 5xx, JSON inválido)."""


class Endereco(NamedTuple):
    logradouro: str
    localidade: str
    uf: str


class ServicoEndereco(Protocol):
    def consultar(self, cep: str) -> Endereco | None:
        """Retorna o endereço do CEP (8 dígitos) ou ``None`` se inexistente.

        Falhas de rede ou do serviço devem sair como :class:`ErroServico`.
        """


class ServicoGeocodificacao(Protocol):
    def buscar(self, endereco: str, limite: int = 1) -> list[Coordenada]:
        """Retorna até ``limite`` coordenadas, na ordem de relevância.

        Falhas de rede ou do serviço devem sair como :class:`ErroServico`.
        """


# ===========================================================================
# ViaCEP
# ===========================================================================


class ViaCepServico:
    """Cliente do ViaCEP (``https://viacep.com.br/ws/<cep>/json/``)."""

    def __init__(self, url: str = VIACEP_URL, timeout: float = TIMEOUT_VIACEP) -> None:
        self.url = url
        self.timeout = timeout

    def consultar(self, cep: str) -> Endereco | None:
        """Consulta o CEP no ViaCEP.

        Args:
            cep: Apenas os 8 dígitos.

        Returns:
            :class:`Endereco` ou ``None`` quando o ViaCEP responde ``{"erro": true}``.

        Raises:
            ErroServico: Falha de rede, status HTTP de erro ou resposta ilegível.
        """
        url = self.url.format(cep=cep)
        log.debug("  ViaCEP: %s", url)
        try:
            resp = requests.get(url, headers=HEADERS, timeout=self.timeout)
            resp.raise_for_status()
            dados = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise ErroServico(f"ViaCEP falhou para {cep}: {exc}") from exc

        if not isinstance(dados, dict):
            raise ErroServico(f"ViaCEP retornou payload inesperado para {cep}")
        if dados.get("erro"):
            return None

        return Endereco(
            logradouro=_texto(dados.get("logradouro")),
            localidade=_texto(dados.get("localidade")),
            uf=_texto(dados.get("uf")),
        )


# ===========================================================================
# Nominatim
# ===========================================================================


class NominatimServico:
    """Geocodificação via Nominatim (OpenStreetMap) com geopy.

    O :class:`~geopy.extra.rate_limiter.RateLimiter` garante o intervalo
    mínimo entre chamadas; retries e supressão de erros ficam desligados
    para que a falha chegue à resolução como :class:`ErroServico`.
    """

    def __init__(
        self,
        user_agent: str = NOMINATIM_USER_AGENT,
        timeout: float = NOMINATIM_TIMEOUT,
        min_delay_seconds: float = INTERVALO_ENTRE_REGISTROS,
    ) -> None:
        geolocator = Nominatim(user_agent=user_agent, timeout=timeout)
        self._geocode = RateLimiter(
            geolocator.geocode,
            min_delay_seconds=min_delay_seconds,
            max_retries=0,
            swallow_exceptions=False,
        )

    def buscar(self, endereco: str, limite: int = 1) -> list[Coordenada]:
        log.debug("  Nominatim: '%s'", endereco)
        try:
            locais = self._geocode(endereco, exactly_one=False, limit=limite)
        except (GeocoderServiceError, GeocoderTimedOut, GeocoderUnavailable) as exc:
            raise ErroServico(f"Nominatim falhou para '{endereco}': {exc}") from exc

        coordenadas: list[Coordenada] = []
        for loc in (locais or [])[:limite]:
            bruto = getattr(loc, "raw", None)
            if not isinstance(bruto, dict):
                bruto = {}
            lat = bruto.get("lat", loc.latitude)
            lon = bruto.get("lon", loc.longitude)
            coordenadas.append((str(lat), str(lon)))
        return coordenadas


def _texto(valor: object) -> str:
    if valor is None:
        return ""
    return str(valor).strip()
