from __future__ import annotations
"""
ProfileRegistry

Immutable mapping from project id to `ProjectProfile`. A registry is built
once at start-up and passed explicitly to the pipelines; merging extra
profiles returns a new registry instead of mutating the current one.

Extra profiles can come from:
    - a JSON file (see `load_profiles_json` for the schema);
    - a Python reference 'module.path:attr' naming an iterable of
      `ProjectProfile` objects, or a zero-argument callable returning one.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from piranhito.core.errors import ProfileLoadError, UnknownProfileError
from piranhito.core.models import ProjectProfile, features, rules, token_pairs
from piranhito.logging.helpers import get_logger
from piranhito.profiles.builtin import BUILTIN_PROFILES
from piranhito.utils.imports import load_object_from_ref


class ProfileRegistry(Mapping[str, ProjectProfile]):
    def __init__(self, profiles: Iterable[ProjectProfile] = ()) -> None:
        table: dict[str, ProjectProfile] = {}
        for prof in profiles:
            if not isinstance(prof, ProjectProfile):
                raise TypeError(f'expected ProjectProfile, got {type(prof).__name__}')
            # Later definitions replace earlier ones with the same id.
            table[prof.id] = prof
        self._profiles: Mapping[str, ProjectProfile] = MappingProxyType(table)

    @classmethod
    def default(cls) -> 'ProfileRegistry':
        """Registry holding the built-in profiles only."""
        return cls(BUILTIN_PROFILES)

    def __getitem__(self, profile_id: str) -> ProjectProfile:
        return self._profiles[profile_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f'ProfileRegistry({list(self._profiles)!r})'

    def get_profile(self, profile_id: str) -> ProjectProfile:
        """Exact, case-sensitive lookup.

        Raises:
            UnknownProfileError: If no profile is registered under `profile_id`.
        """
        try:
            return self._profiles[profile_id]
        except KeyError:
            raise UnknownProfileError(profile_id, self.ids()) from None

    def ids(self) -> tuple[str, ...]:
        return tuple(self._profiles)

    def merged(self, extra: Iterable[ProjectProfile]) -> 'ProfileRegistry':
        return ProfileRegistry([*self._profiles.values(), *extra])


_DEFAULT_REGISTRY: Optional[ProfileRegistry] = None


def get_default_registry() -> ProfileRegistry:
    """Process-wide built-in registry, created on first use."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = ProfileRegistry.default()
    return _DEFAULT_REGISTRY


# --------------------------------------------------------------------------- #
#  External profile sources                                                   #
# --------------------------------------------------------------------------- #
def _pairs(raw: Any, *, field_name: str, profile_id: str) -> list[tuple[str, str]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ProfileLoadError(f'profile {profile_id!r}: {field_name!r} must be a list')
    out: list[tuple[str, str]] = []
    for item in raw:
        if isinstance(item, dict) and {'id', 'eyecatcher'} <= item.keys():
            item = [item['id'], item['eyecatcher']]
        if not (isinstance(item, (list, tuple)) and len(item) == 2 and all(isinstance(x, str) for x in item)):
            raise ProfileLoadError(f'profile {profile_id!r}: invalid {field_name!r} entry {item!r}')
        out.append((item[0], item[1]))
    return out


def _strings(raw: Any, *, field_name: str, profile_id: str) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
        raise ProfileLoadError(f'profile {profile_id!r}: {field_name!r} must be a list of strings')
    return tuple(raw)


def profile_from_dict(data: Mapping[str, Any]) -> ProjectProfile:
    """Build a `ProjectProfile` from its JSON representation."""
    pid = data.get('id')
    if not isinstance(pid, str) or not pid:
        raise ProfileLoadError(f'profile entry without a valid "id": {dict(data)!r}')
    return ProjectProfile(
        id=pid,
        features=features(_pairs(data.get('features'), field_name='features', profile_id=pid)),
        substitutions=rules(_pairs(data.get('substitutions'), field_name='substitutions', profile_id=pid)),
        removable_lines=_strings(data.get('removable_lines'), field_name='removable_lines', profile_id=pid),
        removable_tokens=_strings(data.get('removable_tokens'), field_name='removable_tokens', profile_id=pid),
        token_replacements=token_pairs(
            _pairs(data.get('token_replacements'), field_name='token_replacements', profile_id=pid)
        ),
        copyright_features=features(
            _pairs(data.get('copyright_features'), field_name='copyright_features', profile_id=pid)
        ),
        copyright_substitutions=rules(
            _pairs(data.get('copyright_substitutions'), field_name='copyright_substitutions', profile_id=pid)
        ),
    )


def load_profiles_json(path: Path) -> list[ProjectProfile]:
    """Parse a profile file.

    Schema::

        {"profiles": [{"id": "...",
                       "features": [{"id": "...", "eyecatcher": "..."}],
                       "substitutions": [["match", "replacement"]],
                       "removable_lines": ["..."],
                       "removable_tokens": ["..."],
                       "token_replacements": [["from", "to"]],
                       "copyright_features": [...],
                       "copyright_substitutions": [...]}]}

    A bare top-level list of profile objects is accepted as well.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding='utf-8'))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ProfileLoadError(f'cannot read profiles from {path}: {exc}') from exc
    entries = payload.get('profiles') if isinstance(payload, dict) else payload
    if not isinstance(entries, list):
        raise ProfileLoadError(f'{path}: expected a "profiles" list')
    out: list[ProjectProfile] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ProfileLoadError(f'{path}: profile entries must be objects, got {entry!r}')
        out.append(profile_from_dict(entry))
    return out


def load_profiles_ref(ref: str) -> list[ProjectProfile]:
    """Resolve a 'module.path:attr' reference into a list of profiles."""
    try:
        obj = load_object_from_ref(ref)
    except ImportError as exc:
        raise ProfileLoadError(str(exc)) from exc
    if callable(obj) and not isinstance(obj, ProjectProfile):
        obj = obj()
    if isinstance(obj, ProjectProfile):
        return [obj]
    try:
        items = list(obj)
    except TypeError as exc:
        raise ProfileLoadError(f'{ref} is not an iterable of ProjectProfile') from exc
    bad = [x for x in items if not isinstance(x, ProjectProfile)]
    if bad:
        raise ProfileLoadError(f'{ref} contains non-profile entries: {bad!r}')
    return items


def load_profile_source(source: str, *, logger: Optional[logging.Logger] = None) -> list[ProjectProfile]:
    """Load profiles from a JSON path or a 'module:attr' reference."""
    log = logger or get_logger('profiles')
    src = (source or '').strip()
    if not src:
        return []
    candidate = Path(src)
    if candidate.suffix.lower() == '.json' or candidate.is_file():
        loaded = load_profiles_json(candidate)
    else:
        loaded = load_profiles_ref(src)
    log.info('✔ %d profile(s) loaded from %s', len(loaded), src)
    return loaded


def build_registry(
    sources: Iterable[str] = (),
    *,
    base: Optional[ProfileRegistry] = None,
    logger: Optional[logging.Logger] = None,
) -> ProfileRegistry:
    """Return `base` (built-ins by default) merged with every extra source, in order."""
    reg = base if base is not None else ProfileRegistry.default()
    extra: list[ProjectProfile] = []
    for src in sources:
        extra.extend(load_profile_source(src, logger=logger))
    return reg.merged(extra) if extra else reg
