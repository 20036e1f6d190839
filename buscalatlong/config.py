"""
Constantes centralizadas para o pacote BuscaLatLong.

Todos os demais módulos importam daqui; nenhuma constante é definida
localmente.
"""

from pathlib import Path

# ===========================================================================
# Arquivos
# ===========================================================================

#: Nome padrão do CSV exportado com as coordenadas
SAIDA_CSV_PADRAO: Path = Path("franquias-com-coordenadas.csv")

#: Colunas obrigatórias no CSV de entrada (cabeçalho case-insensitive);
#: ``nome`` é opcional
COLUNAS_REQUERIDAS: tuple[str, ...] = ("id", "cep")

#: Cabeçalhos do CSV exportado, na ordem de exibição
COLUNAS_EXPORTACAO: tuple[str, ...] = (
    "ID",
    "Nome",
    "CEP",
    "Latitude",
    "Longitude",
    "Status",
)

# ===========================================================================
# ViaCEP (CEP → endereço)
# ===========================================================================

#: Endpoint JSON do ViaCEP; ``{cep}`` recebe apenas os 8 dígitos
VIACEP_URL: str = "https://viacep.com.br/ws/{cep}/json/"

#: Timeout (s) de cada consulta ao ViaCEP
TIMEOUT_VIACEP: float = 10.0

#: Headers HTTP enviados ao ViaCEP
HEADERS: dict[str, str] = {
    "User-Agent": "BuscaLatLong/0.1 (github.com/seu-usuario/busca-lat-long)",
    "Accept": "application/json",
}

# ===========================================================================
# Geocodificação (Nominatim / OpenStreetMap)
# ===========================================================================

#: User-Agent identificador para o Nominatim (ToS exige string descritiva)
NOMINATIM_USER_AGENT: str = "BuscaLatLong-App"

#: Timeout (s) de cada consulta ao Nominatim
NOMINATIM_TIMEOUT: float = 10.0

#: Delay entre registros do lote (1 req/s conforme ToS do Nominatim)
INTERVALO_ENTRE_REGISTROS: float = 1.0

# ===========================================================================
# Resolução
# ===========================================================================

#: País anexado a todo endereço enviado ao geocodificador
PAIS: str = "Brasil"

#: Sufixo do CEP de sonda usado quando um CEP genérico de cidade (``*000``)
#: derruba o ViaCEP. Heurística sem garantia: só serve para achar cidade/UF.
SUFIXO_SONDA_CIDADE: str = "010"

#: Sufixo que identifica um CEP genérico de cidade
SUFIXO_CEP_GENERICO: str = "000"

#: Sentinela de latitude/longitude quando não há coordenada
VALOR_AUSENTE: str = "N/A"
