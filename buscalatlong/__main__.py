"""
Ponto de entrada de ``python -m buscalatlong``.

Delega imediatamente para :func:`buscalatlong.cli.main`, que constrói o
parser argparse e despacha para o subcomando correto.

Uso::

    python -m buscalatlong --help
    python -m buscalatlong processar franquias.csv
    python -m buscalatlong consultar 24020-005
"""

from buscalatlong.cli import main

if __name__ == "__main__":
    main()
