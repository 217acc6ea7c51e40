from __future__ import annotations

"""Project-wide constants used across modules.

Marker grammar and sentinels are bit-exact: existing tagged source trees
depend on them.
"""

MARKER_PREFIX: str = '/*Piranhito?@-'
MARKER_SUFFIX: str = '*/'

FUNC_BEGIN_SENTINEL: str = '/*Piranhito?@-@FuncBegin@*/'
FUNC_END_SENTINEL: str = '/*Piranhito?@-@FuncEnd@*/'
EMPTY_CONDITION_SENTINEL: str = 'if (!_CE_) /*Piranhito?@*/ '

RANDOM_DIRECTIVE_PREFIX: str = '@Random('
RANDOM_DIRECTIVE_SUFFIX: str = ')'
RANDOM_IDENTIFIER_PREFIX: str = '_'
RANDOM_ALPHABET: str = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'

MODE_TRANSFORM: str = 'transform'
MODE_COPYRIGHT: str = 'copyright'
MODE_CHECK: str = 'check'

# Source and script files get the full transform; data and localization
# files only get copyright alignment.
TRANSFORM_SUFFIXES: tuple[str, ...] = ('.swift', '.js')
COPYRIGHT_SUFFIXES: tuple[str, ...] = ('.swift', '.js', '.json', '.strings')
