"""Name-based slugs for addressing workspaces in URLs."""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Protocol, Set

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


class Named(Protocol):
    id: str
    name: str


def slugify(name: str) -> str:
    """Normalize a workspace name into a URL-safe slug.

    Lower-cases, collapses runs of non-alphanumeric characters into a single
    hyphen and strips leading/trailing hyphens. Returns "" for names without
    any ASCII letters or digits.

    Examples:
        >>> slugify("Foo Bar!")
        'foo-bar'
        >>> slugify("--")
        ''
    """
    slug = _NON_ALNUM_RE.sub("-", name.lower().strip())
    return slug.strip("-")


@dataclass
class SlugMap:
    """Slug -> workspace id for one snapshot of the workspace listing.

    Attributes:
        slug_to_id: Each slug mapped to the first workspace (in listing order) producing it
        duplicate_slugs: Slugs produced by more than one workspace
    """

    slug_to_id: Dict[str, str] = field(default_factory=dict)
    duplicate_slugs: Set[str] = field(default_factory=set)

    def resolve(self, slug: str) -> Optional[str]:
        return self.slug_to_id.get(slug)

    def is_duplicate(self, slug: str) -> bool:
        return bool(slug) and slug in self.duplicate_slugs


def build_slug_map(workspaces: Iterable[Named]) -> SlugMap:
    """Build a slug map over a workspace listing.

    The first workspace to produce a slug claims it; later workspaces with the
    same slug only mark it as a duplicate and stay reachable by id alone.
    Workspaces whose names slugify to "" are skipped.

    Args:
        workspaces: Workspaces in listing order

    Returns:
        SlugMap for this listing (never cached)
    """
    slug_map = SlugMap()

    for ws in workspaces:
        slug = slugify(ws.name)
        if not slug:
            continue
        if slug in slug_map.slug_to_id:
            slug_map.duplicate_slugs.add(slug)
        else:
            slug_map.slug_to_id[slug] = ws.id

    return slug_map
