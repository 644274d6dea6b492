"""
Éléments éditables — sous-champs des props exposés à l'inspecteur admin.

Un chemin est une dot-path dans les props (`headline`, `items.2.question`,
`brandContent.physio-konzept.ctaText`). Les gabarits `{index}` et `{brand}`
décrivent les éléments dynamiques (listes répétables, contenu par marque).
"""
import re
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from ..config import Brand

Segment = Union[str, int]


class EditableElementDef(BaseModel):
    id:    str
    label: str
    path:  str
    group: Optional[str] = None
    supports_typography: bool = False
    supports_shadow:     bool = False
    # Éléments dynamiques : liste dont la longueur borne {index}
    item_count_path: Optional[str] = None
    label_template:  Optional[str] = None

    @property
    def dynamic(self) -> bool:
        return "{index}" in self.path


def el(id: str, label: str, path: str, group: str = "Inhalt", typo: bool = False, **kw) -> EditableElementDef:
    """Raccourci de déclaration utilisé par les modules de blocs."""
    return EditableElementDef(id=id, label=label, path=path, group=group, supports_typography=typo, **kw)


def item_el(id: str, label: str, list_path: str, field: str, typo: bool = True, group: str = "Elemente") -> EditableElementDef:
    """Élément répété pour chaque entrée de `list_path` (ex. items.{index}.question).

    `field` vide → l'entrée elle-même est la valeur (liste de chaînes).
    """
    path = f"{list_path}.{{index}}.{field}" if field else f"{list_path}.{{index}}"
    return EditableElementDef(
        id=f"{id}.{{index}}", label=f"{label} {{index+1}}", path=path,
        group=group, supports_typography=typo, item_count_path=list_path,
        label_template=f"{label} {{index+1}}",
    )


def resolve_dynamic_element_id(id_template: str, index: int) -> str:
    return id_template.replace("{index}", str(index))


def resolve_dynamic_element_label(label_template: Optional[str], index: int) -> str:
    if not label_template:
        return ""
    return label_template.replace("{index+1}", str(index + 1)).replace("{index}", str(index))


# ── Chemins ──────────────────────────────────────────────────────────────────

_BRANDS = "|".join(re.escape(b.value) for b in Brand)


@lru_cache(maxsize=512)
def _template_regex(template: str) -> "re.Pattern[str]":
    pattern = re.escape(template)
    pattern = pattern.replace(re.escape("{index}"), r"(?P<index>\d+)")
    pattern = pattern.replace(re.escape("{brand}"), rf"(?P<brand>{_BRANDS})")
    return re.compile(pattern)


def match_element(defs: Sequence[EditableElementDef], path: str) -> Optional[Tuple[EditableElementDef, Optional[int]]]:
    """Trouve la définition qui couvre `path` → (def, index de liste ou None)."""
    for d in defs:
        m = _template_regex(d.path).fullmatch(path)
        if m:
            index = m.groupdict().get("index")
            return d, int(index) if index is not None else None
    return None


def split_path(path: str) -> List[Segment]:
    if not path or path.startswith(".") or path.endswith(".") or ".." in path:
        raise KeyError(path)
    return [int(p) if p.isdigit() else p for p in path.split(".")]


def path_get(data: Any, path: str, default: Any = None) -> Any:
    cur = data
    for seg in split_path(path):
        if isinstance(seg, int) and isinstance(cur, list) and 0 <= seg < len(cur):
            cur = cur[seg]
        elif isinstance(seg, str) and isinstance(cur, dict) and seg in cur:
            cur = cur[seg]
        else:
            return default
    return cur


def path_set(data: Dict[str, Any], path: str, value: Any) -> None:
    """Remplace la valeur au chemin ; crée les dicts intermédiaires absents, jamais les index de liste."""
    segs = split_path(path)
    cur: Any = data
    for seg, nxt in zip(segs, segs[1:]):
        if isinstance(seg, int):
            if not isinstance(cur, list) or not 0 <= seg < len(cur):
                raise IndexError(path)
            cur = cur[seg]
            continue
        if not isinstance(cur, dict):
            raise KeyError(path)
        if cur.get(seg) is None:
            if isinstance(nxt, int):
                raise IndexError(path)
            cur[seg] = {}
        cur = cur[seg]
    last = segs[-1]
    if isinstance(last, int):
        if not isinstance(cur, list) or not 0 <= last < len(cur):
            raise IndexError(path)
        cur[last] = value
    elif isinstance(cur, dict):
        cur[last] = value
    else:
        raise KeyError(path)


def element_id_for(definition: EditableElementDef, path: str) -> str:
    """Id concret d'un élément (gabarit `{index}` résolu d'après le chemin)."""
    m = _template_regex(definition.path).fullmatch(path)
    index = m.groupdict().get("index") if m else None
    return resolve_dynamic_element_id(definition.id, int(index)) if index is not None else definition.id
