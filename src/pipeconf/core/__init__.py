"""
Core do Pipeconf.

Este pacote contém a implementação canônica e independente de adapters
do Pipeconf:

    - core.tree          → árvore tipada e codec documento ↔ árvore
    - core.catalog       → registries de tipos e factory de defaults
    - core.mutator       → as seis operações de inserção
    - core.config        → documentos YAML/JSON, settings, merge e hashing
    - core.traceability  → journal estruturado de mutações
    - core.errors        → payload canônico de erro
    - core.exceptions    → exceções tipadas do Mutator

Limites explícitos:
    - Não depende da CLI
    - Não executa pipelines
"""
