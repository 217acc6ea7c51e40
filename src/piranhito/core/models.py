from dataclasses import dataclass, field
from typing import Iterable, Tuple

from piranhito.constants import (
    RANDOM_DIRECTIVE_PREFIX,
    RANDOM_DIRECTIVE_SUFFIX,
)


@dataclass(frozen=True)
class MarkerTokens:
    """The three literal tokens bounding one feature-gated region."""
    start: str
    leave: str
    end: str


@dataclass(frozen=True)
class FeatureMarker:
    id: str
    eyecatcher: str


@dataclass(frozen=True)
class SubstitutionRule:
    match: str
    replacement: str

    @property
    def is_random(self) -> bool:
        return self.replacement.startswith(RANDOM_DIRECTIVE_PREFIX)

    @property
    def random_argument(self) -> str | None:
        """Raw text between the directive parentheses, or None when malformed."""
        if not self.is_random or not self.replacement.endswith(RANDOM_DIRECTIVE_SUFFIX):
            return None
        return self.replacement[len(RANDOM_DIRECTIVE_PREFIX):-len(RANDOM_DIRECTIVE_SUFFIX)]


@dataclass(frozen=True)
class TokenPair:
    source: str
    target: str


@dataclass(frozen=True)
class ProjectProfile:
    """Read-only configuration bundle for one target project variant.

    Every list is stored as a tuple and applied in declared order.
    """
    id: str
    features: Tuple[FeatureMarker, ...] = ()
    substitutions: Tuple[SubstitutionRule, ...] = ()
    removable_lines: Tuple[str, ...] = ()
    removable_tokens: Tuple[str, ...] = ()
    token_replacements: Tuple[TokenPair, ...] = ()
    copyright_features: Tuple[FeatureMarker, ...] = ()
    copyright_substitutions: Tuple[SubstitutionRule, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError('profile id must be non-empty')
        for name in (
            'features',
            'substitutions',
            'removable_lines',
            'removable_tokens',
            'token_replacements',
            'copyright_features',
            'copyright_substitutions',
        ):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))


def rules(pairs: Iterable[Tuple[str, str]]) -> Tuple[SubstitutionRule, ...]:
    """Build substitution rules from (match, replacement) pairs."""
    return tuple(SubstitutionRule(match=m, replacement=r) for m, r in pairs)


def features(pairs: Iterable[Tuple[str, str]]) -> Tuple[FeatureMarker, ...]:
    """Build feature markers from (id, eyecatcher) pairs."""
    return tuple(FeatureMarker(id=i, eyecatcher=e) for i, e in pairs)


def token_pairs(pairs: Iterable[Tuple[str, str]]) -> Tuple[TokenPair, ...]:
    return tuple(TokenPair(source=s, target=t) for s, t in pairs)


@dataclass
class StripStats:
    """Feature ids touched while stripping one text, in encounter order."""
    removed: list[str] = field(default_factory=list)
    fallbacks: list[str] = field(default_factory=list)
    unbalanced: list[str] = field(default_factory=list)
