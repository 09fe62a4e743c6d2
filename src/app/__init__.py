"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos do evento de rota e do resultado de entrega
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- infra/: implementações concretas de IO (log de diagnóstico em arquivo)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
