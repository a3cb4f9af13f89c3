# src/pipeconf/core/tree/codec.py
"""
Codec estrutural da árvore de configuração.

Converte entre o formato de documento (dict carregado de YAML/JSON) e a
`ConfigTree` tipada manipulada pelo Mutator.

Formato de uma declaração no documento:

    {"type": "<nome>", "<nome>": {<payload>}}

Casos especiais:
    - broker (input/output): os filhos ficam em `broker.inputs` ou
      `broker.outputs`; as demais chaves de `broker` são opções
    - filter_parts (processor): a condition fica em `filter_parts.condition`

Formato da raiz:

    input, output          → declarações obrigatórias
    pipeline.threads       → inteiro (default 1)
    pipeline.processors    → lista de declarações
    resources.caches       → mapa chave → declaração
    resources.rate_limits  → mapa chave → declaração
    (demais seções)        → preservadas como estão em `ConfigTree.extras`

Invariantes:
    - `tree_to_dict(tree_from_dict(doc))` reproduz o documento
    - Chaves irmãs de `type` em uma declaração (ex.: `processors` de um
      input) são preservadas em `extras` da declaração
    - Nenhuma estrutura do documento de entrada é mutada ou compartilhada

Limites explícitos:
    - Não valida nomes de tipo contra registries
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Tuple

from ..config.errors import InvalidTreeError
from ..config.hashing import compute_config_hash
from .types import (
    TYPE_BROKER,
    TYPE_FILTER_PARTS,
    Broker,
    Component,
    ComponentCategory,
    ConfigTree,
    Declaration,
    FilterParts,
    Manager,
    Pipeline,
)


_BROKER_CATEGORIES = (ComponentCategory.INPUT, ComponentCategory.OUTPUT)
_KNOWN_SECTIONS = ("input", "output", "pipeline", "resources")


# ---------------------------------------------------------------------------
# Decodificação
# ---------------------------------------------------------------------------

def _split(data: Any, where: str) -> Tuple[str, Dict[str, Any], Dict[str, Any]]:
    if not isinstance(data, Mapping):
        raise InvalidTreeError(f"{where}: declaração deve ser dict, recebido: {type(data).__name__}")

    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name.strip():
        raise InvalidTreeError(f"{where}: campo 'type' ausente ou vazio")

    payload = data.get(type_name)
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise InvalidTreeError(
            f"{where}: payload de '{type_name}' deve ser dict, recebido: {type(payload).__name__}"
        )
    extras = {k: deepcopy(v) for k, v in data.items() if k not in ("type", type_name)}
    return type_name, deepcopy(dict(payload)), extras


def declaration_from_dict(
    data: Any,
    category: ComponentCategory,
    where: str = "",
) -> Declaration:
    """Decodifica uma declaração de uma categoria."""
    where = where or category.value
    type_name, payload, extras = _split(data, where)

    if type_name == TYPE_BROKER and category in _BROKER_CATEGORIES:
        children_key = f"{category.value}s"
        raw_children = payload.pop(children_key, None)
        if raw_children is None:
            raw_children = []
        if not isinstance(raw_children, list):
            raise InvalidTreeError(f"{where}: broker.{children_key} deve ser lista")
        children = [
            declaration_from_dict(child, category, f"{where}.broker.{children_key}[{i}]")
            for i, child in enumerate(raw_children)
        ]
        return Broker(category=category, children=children, payload=payload, extras=extras)

    if type_name == TYPE_FILTER_PARTS and category is ComponentCategory.PROCESSOR:
        raw_condition = payload.pop("condition", None)
        if raw_condition is None:
            raise InvalidTreeError(f"{where}: filter_parts sem condition")
        condition = declaration_from_dict(
            raw_condition, ComponentCategory.CONDITION, f"{where}.filter_parts.condition"
        )
        if not isinstance(condition, Component):
            raise InvalidTreeError(f"{where}: condition inválida em filter_parts")
        return FilterParts(condition=condition, payload=payload, extras=extras)

    return Component(type_name=type_name, payload=payload, extras=extras)


def _keyed_from_dict(data: Any, category: ComponentCategory, where: str) -> Dict[str, Declaration]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise InvalidTreeError(f"{where} deve ser dict, recebido: {type(data).__name__}")

    result: Dict[str, Declaration] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not key:
            raise InvalidTreeError(f"{where}: chaves devem ser strings não vazias")
        result[key] = declaration_from_dict(value, category, f"{where}.{key}")
    return result


def tree_from_dict(data: Mapping[str, Any]) -> ConfigTree:
    """
    Decodifica um documento em uma `ConfigTree`.

    Raises:
        InvalidTreeError: Se `input`/`output` estiverem ausentes ou se
            alguma seção reconhecida tiver estrutura inválida.
    """
    if not isinstance(data, Mapping):
        raise InvalidTreeError(f"Documento deve ser dict, recebido: {type(data).__name__}")

    for slot in ("input", "output"):
        if data.get(slot) is None:
            raise InvalidTreeError(f"Seção obrigatória ausente: '{slot}'")

    pipeline_doc = data.get("pipeline") or {}
    if not isinstance(pipeline_doc, Mapping):
        raise InvalidTreeError("pipeline deve ser dict")

    raw_processors = pipeline_doc.get("processors") or []
    if not isinstance(raw_processors, list):
        raise InvalidTreeError("pipeline.processors deve ser lista")

    threads = pipeline_doc.get("threads", 1)
    if isinstance(threads, bool) or not isinstance(threads, int):
        raise InvalidTreeError("pipeline.threads deve ser inteiro")

    resources = data.get("resources") or {}
    if not isinstance(resources, Mapping):
        raise InvalidTreeError("resources deve ser dict")

    return ConfigTree(
        input=declaration_from_dict(data["input"], ComponentCategory.INPUT),
        output=declaration_from_dict(data["output"], ComponentCategory.OUTPUT),
        pipeline=Pipeline(
            processors=[
                declaration_from_dict(p, ComponentCategory.PROCESSOR, f"pipeline.processors[{i}]")
                for i, p in enumerate(raw_processors)
            ],
            threads=threads,
        ),
        manager=Manager(
            caches=_keyed_from_dict(resources.get("caches"), ComponentCategory.CACHE, "resources.caches"),
            rate_limits=_keyed_from_dict(
                resources.get("rate_limits"), ComponentCategory.RATE_LIMIT, "resources.rate_limits"
            ),
        ),
        extras={k: deepcopy(v) for k, v in data.items() if k not in _KNOWN_SECTIONS},
    )


# ---------------------------------------------------------------------------
# Codificação
# ---------------------------------------------------------------------------

def _with_extras(doc: Dict[str, Any], extras: Mapping[str, Any]) -> Dict[str, Any]:
    for key, value in extras.items():
        if key not in doc:
            doc[key] = deepcopy(value)
    return doc


def declaration_to_dict(decl: Declaration) -> Dict[str, Any]:
    """Codifica uma declaração no formato de documento."""
    if isinstance(decl, Broker):
        body = deepcopy(decl.payload)
        body[decl.children_key] = [declaration_to_dict(c) for c in decl.children]
        return _with_extras({"type": TYPE_BROKER, TYPE_BROKER: body}, decl.extras)

    if isinstance(decl, FilterParts):
        body = deepcopy(decl.payload)
        body["condition"] = declaration_to_dict(decl.condition)
        return _with_extras({"type": TYPE_FILTER_PARTS, TYPE_FILTER_PARTS: body}, decl.extras)

    if isinstance(decl, Component):
        doc = {"type": decl.type_name, decl.type_name: deepcopy(decl.payload)}
        return _with_extras(doc, decl.extras)

    raise TypeError(f"Declaração desconhecida: {type(decl).__name__}")


def tree_to_dict(tree: ConfigTree) -> Dict[str, Any]:
    """Codifica uma `ConfigTree` no formato de documento."""
    processors: List[Dict[str, Any]] = [declaration_to_dict(p) for p in tree.pipeline.processors]

    doc: Dict[str, Any] = {
        "input": declaration_to_dict(tree.input),
        "output": declaration_to_dict(tree.output),
        "pipeline": {
            "threads": tree.pipeline.threads,
            "processors": processors,
        },
        "resources": {
            "caches": {k: declaration_to_dict(v) for k, v in tree.manager.caches.items()},
            "rate_limits": {k: declaration_to_dict(v) for k, v in tree.manager.rate_limits.items()},
        },
    }
    doc.update(deepcopy(tree.extras))
    return doc


def tree_fingerprint(tree: ConfigTree) -> str:
    """Hash canônico da árvore (SHA-256 do documento codificado)."""
    return compute_config_hash(tree_to_dict(tree))
