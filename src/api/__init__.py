"""API — camada de borda e adapters de canais.

Responsabilidades:
- Falar com APIs externas (envio, transporte, serialização)
- Definir os formatos tipados de requisição/resposta

Subpastas:
- connectors/: adapters HTTP por canal
- payloads/: payloads tipados e tipos de resposta por canal

NÃO PODE conter: composição de dependências nem leitura de ambiente
fora de config/.
"""
