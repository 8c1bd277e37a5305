"""Auxiliary Registry — the fixed set of groups that own events and posts.

Invariants:
    - Real auxiliaries are a closed set; slugs are stored as plain strings on rows
    - Combined auxiliaries are virtual: read-only, resolved to member slugs for queries
    - resolve() of any slug that isn't combined returns [slug]
    - AUXILIARY_STYLES is read-only; unknown colors fall back to DEFAULT_STYLE

Design Decisions:
    - Hard-coded tuples, no DB table: the groups never change
    - Style lookup lives here as data and is handed to the renderer via the API
"""

from dataclasses import dataclass
from types import MappingProxyType

from wardsite.core.domain_types import AuxiliaryColor


@dataclass(frozen=True)
class Auxiliary:
    """A real auxiliary that can own content."""
    name: str
    slug: str
    color: AuxiliaryColor


@dataclass(frozen=True)
class CombinedAuxiliary:
    """A virtual auxiliary spanning several real ones."""
    name: str
    slug: str
    color: AuxiliaryColor
    members: tuple[str, ...]


@dataclass(frozen=True)
class BarStyle:
    """Renderer style descriptor for an auxiliary color."""
    bar_classes: str
    border_class: str


AUXILIARIES: tuple[Auxiliary, ...] = (
    Auxiliary("Elder's Quorum", "eq", AuxiliaryColor.BLUE),
    Auxiliary("Relief Society", "rs", AuxiliaryColor.PURPLE),
    Auxiliary("Young Men", "young-men", AuxiliaryColor.GREEN),
    Auxiliary("Young Women", "young-women", AuxiliaryColor.AMBER),
    Auxiliary("Primary", "primary", AuxiliaryColor.ORANGE),
)

COMBINED: tuple[CombinedAuxiliary, ...] = (
    CombinedAuxiliary(
        "Youth", "youth", AuxiliaryColor.GREEN, ("young-men", "young-women"),
    ),
)

AUXILIARY_STYLES = MappingProxyType({
    AuxiliaryColor.BLUE: BarStyle("bg-blue-500 text-white", "border-l-blue-500"),
    AuxiliaryColor.GREEN: BarStyle("bg-green-600 text-white", "border-l-green-600"),
    AuxiliaryColor.PURPLE: BarStyle("bg-purple-500 text-white", "border-l-purple-500"),
    AuxiliaryColor.AMBER: BarStyle("bg-amber-400 text-gray-900", "border-l-amber-400"),
    AuxiliaryColor.ORANGE: BarStyle("bg-orange-500 text-white", "border-l-orange-500"),
})

DEFAULT_STYLE = BarStyle("bg-gray-400 text-white", "border-l-primary")


def all_auxiliaries() -> list[Auxiliary]:
    return list(AUXILIARIES)


def real_slugs() -> list[str]:
    return [a.slug for a in AUXILIARIES]


def is_real_slug(slug: str) -> bool:
    return slug in real_slugs()


def get_by_slug(slug: str) -> Auxiliary | CombinedAuxiliary | None:
    """Real or combined auxiliary for `slug`, or None if unknown."""
    for aux in (*AUXILIARIES, *COMBINED):
        if aux.slug == slug:
            return aux
    return None


def resolve(slug: str) -> list[str]:
    """Real slugs covered by `slug` (combined slugs expand to their members)."""
    for combined in COMBINED:
        if combined.slug == slug:
            return list(combined.members)
    return [slug]


def style_for(color: AuxiliaryColor | str) -> BarStyle:
    try:
        return AUXILIARY_STYLES.get(AuxiliaryColor(color), DEFAULT_STYLE)
    except ValueError:
        return DEFAULT_STYLE
