"""API: camada de borda e adapters externos.

Responsabilidades:
- Receber requests do mini-app (webhook de seleção de rota)
- Validar e parsear payloads de entrada
- Normalizar dados para modelos internos
- Entregar eventos ao webhook n8n

Subpastas:
- connectors/: parse de entrada e cliente HTTP de saída
- normalizers/: conversão de payloads externos → modelos internos
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração de use cases.
"""
