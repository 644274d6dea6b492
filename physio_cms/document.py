"""
Modèle de document — liste ordonnée en mémoire des blocs d'une page, éditée par l'admin avant save.

Toutes les opérations sont synchrones et locales : rien n'est persisté avant
`BlockStore.save`. Une opération refusée (NotFound, InvalidPath, props invalides)
laisse le document inchangé.
"""
import copy
import logging
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, Optional

from .blocks import (defaults_for, find_editable_element, item_factory_for, new_id, path_get, path_set,
                     renew_item_ids, resolve_block_type, validate)
from .errors import BlockValidationError, InvalidPath, NotFound
from .models import Block

log = logging.getLogger(__name__)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def _related(issue_path: str, patched: str) -> bool:
    """Vrai si l'erreur porte sur le chemin modifié, un de ses parents ou un de ses enfants."""
    a, b = issue_path.split("."), patched.split(".")
    n = min(len(a), len(b))
    return a[:n] == b[:n]


class OrderedBlocks(Sequence):
    """Vue séquentielle (rejouable) sur l'ordre courant ; chaque accès rend une copie."""

    def __init__(self, blocks: List[Block]):
        self._blocks = blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [b.model_copy(deep=True) for b in self._blocks[index]]
        return self._blocks[index].model_copy(deep=True)

    def __iter__(self) -> Iterator[Block]:
        for b in self._blocks:
            yield b.model_copy(deep=True)


class BlockDocument:
    def __init__(self, blocks: Iterable[Block] = (), page_id: Optional[str] = None):
        self.page_id = page_id
        ordered = sorted(blocks, key=lambda b: b.sort)   # sorted() est stable : égalités → ordre reçu
        self._blocks: List[Block] = []
        seen = set()
        for b in ordered:
            if b.id in seen:
                raise ValueError(f"id de bloc en double : {b.id}")
            seen.add(b.id)
            self._blocks.append(b.model_copy(deep=True))
        self._renumber()

    # ── Lecture ──

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, block_id: str) -> bool:
        return any(b.id == block_id for b in self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self.to_ordered_list())

    def ids(self) -> List[str]:
        return [b.id for b in self._blocks]

    def get(self, block_id: str) -> Block:
        return self._find(block_id).model_copy(deep=True)

    def index_of(self, block_id: str) -> int:
        for i, b in enumerate(self._blocks):
            if b.id == block_id:
                return i
        raise NotFound("Bloc", block_id)

    def to_ordered_list(self) -> OrderedBlocks:
        return OrderedBlocks(self._blocks)

    # ── Structure ──

    def insert(self, index: int, block_type: str) -> str:
        bt = resolve_block_type(block_type)
        block_id = self._fresh_id()
        block = Block(id=block_id, type=bt.value, props=defaults_for(bt))
        self._blocks.insert(_clamp(index, 0, len(self._blocks)), block)
        self._renumber()
        log.debug("insert %s (%s)", block_id, bt.value)
        return block_id

    def remove(self, block_id: str) -> None:
        del self._blocks[self.index_of(block_id)]
        self._renumber()

    def move(self, block_id: str, to_index: int) -> None:
        current = self.index_of(block_id)
        target = _clamp(to_index, 0, len(self._blocks) - 1)
        if current == target:
            return
        block = self._blocks.pop(current)
        self._blocks.insert(target, block)
        self._renumber()

    def duplicate(self, block_id: str) -> str:
        """Copie profonde insérée juste après l'original ; nouvel id de bloc et d'éléments de liste."""
        index = self.index_of(block_id)
        source = self._blocks[index]
        props = renew_item_ids(source.type, copy.deepcopy(source.props))
        clone = Block(id=self._fresh_id(), type=source.type, props=props)
        self._blocks.insert(index + 1, clone)
        self._renumber()
        return clone.id

    # ── Props ──

    def replace_props(self, block_id: str, props: dict) -> None:
        block = self._find(block_id)
        issues = validate(block.type, props)
        if issues:
            raise BlockValidationError(block.type, issues)
        block.props = copy.deepcopy(props)

    def patch(self, block_id: str, path: str, value: Any) -> None:
        block = self._find(block_id)
        if find_editable_element(block.type, path, block.props) is None:
            raise InvalidPath(block.type, path)
        props = copy.deepcopy(block.props)
        try:
            path_set(props, path, copy.deepcopy(value))
        except (KeyError, IndexError):
            raise InvalidPath(block.type, path, "chemin introuvable dans les props")
        self._commit(block, props, path)

    def read(self, block_id: str, path: str, default: Any = None) -> Any:
        return copy.deepcopy(path_get(self._find(block_id).props, path, default))

    # ── Listes répétables ──

    def add_item(self, block_id: str, list_path: str, index: Optional[int] = None) -> int:
        """Ajoute un élément créé par la fabrique du type ; renvoie sa position."""
        block = self._find(block_id)
        factory = item_factory_for(block.type, list_path)
        if factory is None:
            raise InvalidPath(block.type, list_path, "liste non éditable")
        props = copy.deepcopy(block.props)
        items = path_get(props, list_path)
        if items is None:
            # Liste optionnelle absente ou stockée à null : on la crée
            items = []
            try:
                path_set(props, list_path, items)
            except (KeyError, IndexError):
                raise InvalidPath(block.type, list_path, "liste absente")
        elif not isinstance(items, list):
            raise InvalidPath(block.type, list_path, "liste absente")
        position = len(items) if index is None else _clamp(index, 0, len(items))
        items.insert(position, factory())
        self._commit(block, props, list_path)
        return position

    def remove_item(self, block_id: str, list_path: str, index: int) -> None:
        block, props, items = self._list(block_id, list_path)
        if not 0 <= index < len(items):
            raise InvalidPath(block.type, f"{list_path}.{index}", "index hors liste")
        del items[index]
        self._commit(block, props, list_path)

    def move_item(self, block_id: str, list_path: str, from_index: int, to_index: int) -> None:
        block, props, items = self._list(block_id, list_path)
        if not 0 <= from_index < len(items):
            raise InvalidPath(block.type, f"{list_path}.{from_index}", "index hors liste")
        target = _clamp(to_index, 0, len(items) - 1)
        if target == from_index:
            return
        items.insert(target, items.pop(from_index))
        self._commit(block, props, list_path)

    # ── Interne ──

    def _find(self, block_id: str) -> Block:
        return self._blocks[self.index_of(block_id)]

    def _list(self, block_id: str, list_path: str):
        block = self._find(block_id)
        if item_factory_for(block.type, list_path) is None:
            raise InvalidPath(block.type, list_path, "liste non éditable")
        props = copy.deepcopy(block.props)
        items = path_get(props, list_path)
        if not isinstance(items, list):
            raise InvalidPath(block.type, list_path, "liste absente")
        return block, props, items

    def _commit(self, block: Block, props: dict, path: str) -> None:
        # Seules les erreurs sur `path` (parents et enfants compris) bloquent
        issues = [i for i in validate(block.type, props) if _related(i.path, path)]
        if issues:
            raise BlockValidationError(block.type, issues)
        block.props = props

    def _fresh_id(self) -> str:
        taken = set(self.ids())
        block_id = new_id()
        while block_id in taken:
            block_id = new_id()
        return block_id

    def _renumber(self) -> None:
        for i, b in enumerate(self._blocks):
            b.sort = i
