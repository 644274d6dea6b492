"""
Blocs CMS — registre fermé des types, props typées, éléments éditables.
"""
from .base import BlockProps, CmsModel, ListItem, SectionProps, new_id
from .elements import EditableElementDef, element_id_for, path_get, path_set, split_path
from .normalize import dedupe_item_ids, normalize_block, normalize_blocks, renew_item_ids
from .registry import (REGISTRY, BlockDefinition, BlockType, ValidationIssue, defaults_for, describe_types,
                       editable_elements_for, find_editable_element, get_definition, is_known_type,
                       item_factory_for, resolve_block_type, validate)

__all__ = [
    "BlockProps", "CmsModel", "ListItem", "SectionProps", "new_id",
    "EditableElementDef", "element_id_for", "path_get", "path_set", "split_path",
    "dedupe_item_ids", "normalize_block", "normalize_blocks", "renew_item_ids",
    "REGISTRY", "BlockDefinition", "BlockType", "ValidationIssue",
    "defaults_for", "describe_types", "editable_elements_for", "find_editable_element",
    "get_definition", "is_known_type", "item_factory_for", "resolve_block_type", "validate",
]
