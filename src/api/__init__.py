"""API: camada de borda e adapters de canais.

Responsabilidades:
- Receber submissões HTTP (formulários e webhooks assinados)
- Validar assinaturas e corpo bruto
- Construir payloads para Discord e SendGrid
- Executar as chamadas HTTP de saída

Subpastas:
- connectors/: adapters HTTP por canal
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (formulários, webhooks, health)

NÃO PODE conter: regras de formulário, escada de fallback.
"""
