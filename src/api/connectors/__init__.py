"""Connectors: adapters de borda para entrada e saída.

Estrutura:
- city_route/: parse do body enviado pelo mini-app de seleção de cidades
- n8n/: entrega do envelope canônico ao webhook de automação n8n
"""

__all__: list[str] = []
