"""
Pacote BuscaLatLong — enriquecimento de CEPs com latitude e longitude.

Módulos disponíveis:

- ``buscalatlong.config``    — constantes centralizadas (URLs, delays, colunas)
- ``buscalatlong.cep``       — validação e formatação de CEP (``XXXXX-XXX``)
- ``buscalatlong.modelos``   — ``Registro``, ``ResultadoResolucao`` e status
- ``buscalatlong.servicos``  — clientes ViaCEP (endereço) e Nominatim (coordenadas)
- ``buscalatlong.resolucao`` — CEP → endereço → coordenadas, com fallback por cidade
- ``buscalatlong.lote``      — processamento sequencial do lote com progresso
- ``buscalatlong.arquivos``  — leitura do CSV de entrada e exportação do resultado
- ``buscalatlong.cli``       — CLI ``buscalatlong processar|consultar|validar``
"""

__version__ = "0.1.0"
