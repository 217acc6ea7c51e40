import logging
import random
from typing import Optional, Sequence

from piranhito.constants import RANDOM_ALPHABET, RANDOM_IDENTIFIER_PREFIX
from piranhito.core.errors import InvalidRandomDirectiveError
from piranhito.core.interfaces.rng import RandomSourceProtocol
from piranhito.core.models import SubstitutionRule
from piranhito.logging.helpers import get_logger


def random_identifier(rng: RandomSourceProtocol, length: int, *, prefix: str = RANDOM_IDENTIFIER_PREFIX) -> str:
    """Return `prefix` padded with random alphanumerics to a total of `length` chars.

    The prefix is kept whole even when it is longer than `length`.
    """
    return prefix + ''.join(rng.choice(RANDOM_ALPHABET) for _ in range(length - len(prefix)))


class SubstitutionEngine:
    def __init__(
        self,
        *,
        rng: Optional[RandomSourceProtocol] = None,
        logger: Optional[logging.Logger] = None,
        random_prefix: str = RANDOM_IDENTIFIER_PREFIX,
    ) -> None:
        """Ordered literal replacement with `@Random(N)` support.

        `rng` defaults to a fresh OS-seeded `random.Random`; pass a seeded
        instance for reproducible output.
        """
        self._rng: RandomSourceProtocol = rng if rng is not None else random.Random()
        self._log = logger or get_logger('processing.substitute')
        self._prefix = random_prefix

    def parse_random_length(self, rule: SubstitutionRule) -> int:
        raw = rule.random_argument
        digits = (raw or '').strip()
        if not (digits.isascii() and digits.isdecimal()):
            raise InvalidRandomDirectiveError(rule.replacement, rule.match)
        length = int(digits)
        if length < 1:
            raise InvalidRandomDirectiveError(rule.replacement, rule.match)
        return length

    def replacement_for(self, rule: SubstitutionRule) -> str:
        """Resolve the value that will replace every occurrence of `rule.match`.

        A random directive draws one fresh value per call; all occurrences in
        the current text share it.
        """
        if not rule.is_random:
            return rule.replacement
        return random_identifier(self._rng, self.parse_random_length(rule), prefix=self._prefix)

    def substitute(self, text: str, rules: Sequence[SubstitutionRule]) -> str:
        for rule in rules:
            if not rule.match:
                self._log.warning('⚠  empty match string in substitution rule skipped: %r', rule)
                continue
            value = self.replacement_for(rule)
            if rule.match in text:
                self._log.debug('substitute %r → %r (%d hits)', rule.match, value, text.count(rule.match))
                text = text.replace(rule.match, value)
        return text
