"""App: coração do sistema: formulários, escada de entrega e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: submissão, resultados de entrega, configuração de canais
- forms/: descritores por tipo de formulário
- services/: sanitização, validação e dispatcher
- infra/: implementações concretas (rate limiter, HMAC)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app decide; api adapta; config configura; utils apoia.
"""
