"""
Normalisation des blocs — défauts fusionnés sous les props stockées, ids d'éléments uniques.
"""
import copy
import logging
from typing import Any, Dict, Iterable, List

from ..models import Block
from .base import new_id
from .elements import path_get
from .registry import defaults_for, list_paths_for, resolve_block_type, validate

log = logging.getLogger(__name__)


def _item_lists(block_type, props: Dict[str, Any]) -> Iterable[List[Any]]:
    # Listes d'objets portant un `id` (hero.trustItems est une liste de chaînes)
    for key in list_paths_for(block_type):
        items = path_get(props, key)
        if isinstance(items, list):
            yield items


def dedupe_item_ids(block_type, props: Dict[str, Any]) -> Dict[str, Any]:
    for items in _item_lists(block_type, props):
        seen = set()
        for item in items:
            if not isinstance(item, dict):
                continue
            if not item.get("id") or item["id"] in seen:
                item["id"] = new_id()
            seen.add(item["id"])
    return props


def renew_item_ids(block_type, props: Dict[str, Any]) -> Dict[str, Any]:
    for items in _item_lists(block_type, props):
        for item in items:
            if isinstance(item, dict):
                item["id"] = new_id()
    return props


def normalize_block(block: Block) -> Block:
    """Props validées + défauts manquants ; retombe sur les défauts (id, type, section gardés) si invalide."""
    block_type = resolve_block_type(block.type)
    props = copy.deepcopy(block.props or {})
    section = props.get("section")

    issues = validate(block_type, props)
    if issues:
        log.warning("Bloc %s (%s) invalide, défauts appliqués : %s", block.id, block_type.value,
                    "; ".join(f"{i.path} {i.message}" for i in issues[:3]))
        normalized = defaults_for(block_type)
    else:
        normalized = {**defaults_for(block_type), **props}
    if isinstance(section, dict):
        normalized["section"] = section

    return Block(id=block.id, type=block_type.value, props=dedupe_item_ids(block_type, normalized), sort=block.sort)


def normalize_blocks(blocks: Iterable[Block]) -> List[Block]:
    return [normalize_block(b) for b in blocks]
