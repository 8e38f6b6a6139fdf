"""Dataclasses representing inflection rules and the lemma lexicon."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List


@dataclass(frozen=True)
class InflectionRule:
    """Single suffix rule.

    Attributes:
        pattern: Regular expression matched against the end of the word. It
            covers the suffix and, where needed, its left context.
        singular: Suffix of the singular form.
        plural: Suffix of the plural form.
        exceptions: Full words the rule must not touch.
    """

    pattern: str
    singular: str
    plural: str
    exceptions: FrozenSet[str] = frozenset()

    @property
    def is_identity(self) -> bool:
        return self.singular == self.plural


@dataclass
class LemmaEntry:
    """Lexicon entry for one canonical lemma.

    Attributes:
        lemma: Canonical dictionary form.
        inflections: Inflected surface forms (plural, verb forms, comparison).
        derived: Derived surface forms such as ``happiness`` for ``happy``.
        surface: ``False`` when the lemma itself never occurs as a word.
    """

    lemma: str
    inflections: List[str] = field(default_factory=list)
    derived: List[str] = field(default_factory=list)
    surface: bool = True

    @property
    def forms(self) -> List[str]:
        result: List[str] = []
        for form in self.inflections + self.derived:
            if form not in result:
                result.append(form)
        return result


@dataclass
class Lexicon:
    """Collection of lemma entries keyed by lemma.

    ``index`` maps every known surface form to its single lemma. Surface
    lemmas map to themselves.
    """

    entries: Dict[str, LemmaEntry] = field(default_factory=dict)
    index: Dict[str, str] = field(default_factory=dict)
