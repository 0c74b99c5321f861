"""
Group Tailwind utility classes into ordered categories.

A class string is split on whitespace, each token is assigned to the first
category whose pattern accepts it, and every non-empty category is joined
back into one string.  Output order is the declaration order of `Category`:

  sizing, spacing, typography, layout, positioning, borders,
  background, animation, accessibility, pseudo-state, other
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, List, Tuple


class Category(Enum):
    SIZING = 'sizing'
    SPACING = 'spacing'
    TYPOGRAPHY = 'typography'
    LAYOUT = 'layout'
    POSITIONING = 'positioning'
    BORDERS = 'borders'
    BACKGROUND = 'background'
    ANIMATION = 'animation'
    ACCESSIBILITY = 'accessibility'
    PSEUDO = 'pseudo'
    OTHER = 'other'


# optional responsive prefix with an importance marker on either side of it,
# then negative value
BREAKPOINT = r'(?:(?:sm|md|lg|xl|2xl):)?'
DECORATION = rf'(?:!{BREAKPOINT}|{BREAKPOINT}!?)-?'

STATE_VARIANTS = (
    'hover', 'focus', 'focus-within', 'focus-visible', 'active', 'visited',
    'disabled', 'first', 'last', 'odd', 'even', 'checked', 'open',
)


def utility_pattern(words=(), prefixes=()) -> re.Pattern:
    """Anchored pattern for exact utility names and `prefix-<value>` roots."""
    alts = [re.escape(w) for w in words]
    alts += [re.escape(p) + r'\S+' for p in prefixes]
    return re.compile(rf'^{DECORATION}(?:{"|".join(alts)})!?$')


SIZING_RE = utility_pattern(
    prefixes=('w-', 'h-', 'min-w-', 'min-h-', 'max-w-', 'max-h-', 'size-'),
)
SPACING_RE = re.compile(
    rf'^{DECORATION}(?:[mp][xytrblse]?-\S+|gap-(?:[xy]-)?\S+|space-[xy]-\S+)!?$'
)
TYPOGRAPHY_RE = utility_pattern(
    words=(
        'italic', 'not-italic', 'underline', 'overline', 'line-through', 'no-underline',
        'uppercase', 'lowercase', 'capitalize', 'normal-case', 'truncate',
        'antialiased', 'subpixel-antialiased', 'ordinal', 'slashed-zero',
    ),
    prefixes=(
        'text-', 'font-', 'leading-', 'tracking-', 'whitespace-', 'break-', 'indent-',
        'align-', 'list-', 'decoration-', 'underline-offset-', 'line-clamp-', 'hyphens-',
    ),
)
LAYOUT_RE = utility_pattern(
    words=(
        'flex', 'inline-flex', 'grid', 'inline-grid', 'block', 'inline-block', 'inline',
        'hidden', 'contents', 'flow-root', 'container', 'grow', 'shrink',
        'table', 'inline-table', 'table-row', 'table-cell', 'table-caption',
        'table-column', 'table-row-group', 'table-column-group',
        'table-header-group', 'table-footer-group',
    ),
    prefixes=(
        'flex-', 'grid-', 'items-', 'justify-', 'content-', 'self-', 'place-', 'order-',
        'col-', 'row-', 'basis-', 'grow-', 'shrink-', 'auto-cols-', 'auto-rows-',
        'columns-', 'float-', 'clear-', 'overflow-', 'box-', 'object-', 'aspect-',
    ),
)
POSITIONING_RE = utility_pattern(
    words=('static', 'fixed', 'absolute', 'relative', 'sticky', 'isolate',
           'transform', 'transform-none', 'transform-gpu'),
    prefixes=('inset-', 'top-', 'right-', 'bottom-', 'left-', 'start-', 'end-', 'z-',
              'translate-', 'rotate-', 'scale-', 'skew-', 'origin-', 'isolation-'),
)
BORDERS_RE = utility_pattern(
    words=('border', 'rounded', 'outline', 'ring', 'ring-inset'),
    prefixes=('border-', 'rounded-', 'outline-', 'divide-', 'ring-'),
)
BACKGROUND_RE = utility_pattern(
    words=('shadow',),
    prefixes=('bg-', 'from-', 'via-', 'to-', 'shadow-', 'opacity-', 'mix-blend-'),
)
ANIMATION_RE = utility_pattern(
    words=('transition',),
    prefixes=('transition-', 'duration-', 'ease-', 'delay-', 'animate-'),
)
ACCESSIBILITY_RE = utility_pattern(
    words=('sr-only', 'not-sr-only', 'visible', 'invisible', 'collapse'),
    prefixes=('aria-', 'forced-color-adjust-'),
)
PSEUDO_RE = re.compile(
    rf'^{BREAKPOINT}(?:'
    rf'(?:{"|".join(re.escape(v) for v in STATE_VARIANTS)}|group-\S+?|peer-\S+?):\S+'
    r'|group(?:/\S+)?|peer(?:/\S+)?'
    r')$'
)


# First match wins; OTHER must stay last so every token is claimed.
RULES: List[Tuple[Category, Callable[[str], bool]]] = [
    (Category.SIZING, lambda c: bool(SIZING_RE.match(c))),
    (Category.SPACING, lambda c: bool(SPACING_RE.match(c))),
    (Category.TYPOGRAPHY, lambda c: bool(TYPOGRAPHY_RE.match(c))),
    (Category.LAYOUT, lambda c: bool(LAYOUT_RE.match(c))),
    (Category.POSITIONING, lambda c: bool(POSITIONING_RE.match(c))),
    (Category.BORDERS, lambda c: bool(BORDERS_RE.match(c))),
    (Category.BACKGROUND, lambda c: bool(BACKGROUND_RE.match(c))),
    (Category.ANIMATION, lambda c: bool(ANIMATION_RE.match(c))),
    (Category.ACCESSIBILITY, lambda c: bool(ACCESSIBILITY_RE.match(c))),
    (Category.PSEUDO, lambda c: bool(PSEUDO_RE.match(c))),
    (Category.OTHER, lambda c: True),
]


def split_classes(classes: str) -> List[str]:
    return [c for c in classes.split() if c]


def category_of(cls: str) -> Category:
    for category, pred in RULES:
        if pred(cls):
            return category
    return Category.OTHER


def bucket_classes(classes: str) -> Dict[Category, List[str]]:
    """Assign every token to one bucket, keeping first-seen order inside each."""
    buckets: Dict[Category, List[str]] = {category: [] for category in Category}
    for c in split_classes(classes):
        buckets[category_of(c)].append(c)
    return buckets


def group_classes(classes: str) -> List[str]:
    """Return one space-joined string per non-empty category, in category order.

    >>> group_classes('flex bg-red-500 p-2 text-sm')
    ['p-2', 'text-sm', 'flex', 'bg-red-500']
    """
    return [' '.join(g) for g in bucket_classes(classes).values() if g]
