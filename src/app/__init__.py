"""App — composição, contratos e observabilidade do cliente Slack.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, cliente)
- protocols/: contratos/interfaces dos colaboradores do cliente
- observability/: correlation_id para logs estruturados

Padrão: app compõe; api adapta; config configura; utils apoia.
"""
