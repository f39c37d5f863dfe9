"""Find the gift recipient in a message and normalise it to a small vocabulary."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Mapping

_LEAD = re.compile(
    r"\b(?:for|para|pour)\s+"
    r"(?:(?:my|the|our|a|an|minha|meu|mi|mis|tu|la|el|o|ma|mon|mes|le|les)\s+)?",
    re.IGNORECASE,
)
_WORD = re.compile(r"\S+")
_WORD_CHARS = re.compile(r"^[^\W\d_][\w'’-]*$")
_TRAILING_PUNCT = ".,!?;:)"
_POSSESSIVES = ("'s", "’s")
_MAX_WORDS = 3

# A recipient phrase ends at any of these.
_STOP_WORDS = frozenset(
    {
        "under", "over", "above", "below", "between", "from", "with", "who", "whose", "that",
        "which", "to", "on", "at", "in", "of", "for", "and", "or", "about", "around", "less",
        "more", "than", "up", "max", "budget", "ideas", "idea", "gift", "gifts", "present",
        "presents", "something", "anything", "this", "next", "likes", "loves", "is", "birthday",
        "bday", "christmas", "xmas", "holiday", "holidays", "anniversary", "housewarming",
        "até", "menos", "mais", "com", "de", "do", "da", "que", "por", "entre", "presente",
        "con", "del", "más", "hasta", "regalo", "moins", "plus", "avec", "du", "des", "sous",
        "cadeau", "aniversário", "cumpleaños", "anniversaire", "natal", "navidad", "noël",
    }
)


@dataclass(frozen=True, slots=True)
class RecipientMatch:
    """Normalised recipient and the ``(start, end)`` span of the phrase in the text."""

    recipient: str
    span: tuple[int, int]
    known: bool


class RecipientResolver:
    """Maps recipient phrases such as "ladies" or "mother" to canonical tags."""

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._aliases: Dict[str, str] = dict(aliases) if aliases is not None else _default_aliases()

    def resolve(self, raw_value: str) -> tuple[str, bool]:
        """Return ``(tag, known)`` for a recipient phrase.

        The whole phrase is tried first, then its words from last to first, so
        "my lovely mother" resolves to ``mom``. Unknown phrases come back
        lower-cased and marked unknown.
        """

        key = " ".join(raw_value.strip().lower().split())
        if key in self._aliases:
            return self._aliases[key], True
        for word in reversed(key.split()):
            if word in self._aliases:
                return self._aliases[word], True
        return key, False

    def extract(self, text: str) -> RecipientMatch | None:
        """Return the best recipient match in ``text``.

        Every "for <words>" phrase is considered; the first one naming a known
        recipient wins, otherwise the first non-empty phrase.
        """

        fallback: RecipientMatch | None = None
        for lead in _LEAD.finditer(text):
            words, end = _collect_words(text, lead.end())
            if not words:
                continue
            recipient, known = self.resolve(" ".join(words))
            match = RecipientMatch(recipient=recipient, span=(lead.start(), end), known=known)
            if known:
                return match
            if fallback is None:
                fallback = match
        return fallback


def _collect_words(text: str, offset: int) -> tuple[list[str], int]:
    """Read up to ``_MAX_WORDS`` recipient words starting at ``offset``."""

    words: list[str] = []
    end = offset
    for token in _WORD.finditer(text, offset):
        raw = token.group()
        clean = raw.rstrip(_TRAILING_PUNCT)
        possessive = clean.lower().endswith(_POSSESSIVES)
        if possessive:
            clean = clean[:-2]
        if not clean or clean.lower() in _STOP_WORDS or not _WORD_CHARS.match(clean):
            break
        words.append(clean)
        end = token.end()
        if possessive or clean != raw or len(words) >= _MAX_WORDS:
            break
    return words, end


def _default_aliases() -> Dict[str, str]:
    groups = {
        "woman": ("woman", "women", "lady", "ladies", "her", "mulher", "mujer"),
        "man": ("man", "men", "guy", "guys", "gentleman", "gentlemen", "him", "homem", "hombre", "homme"),
        "mom": ("mom", "mother", "mum", "mommy", "mama", "mãe", "mae", "mamá", "madre", "maman", "mère"),
        "dad": ("dad", "father", "daddy", "papa", "pai", "papá", "padre", "père"),
        "wife": ("wife", "esposa", "femme"),
        "husband": ("husband", "marido", "esposo", "mari"),
        "girlfriend": ("girlfriend", "gf", "namorada", "novia", "copine"),
        "boyfriend": ("boyfriend", "bf", "namorado", "novio", "copain"),
        "sister": ("sister", "sis", "irmã", "hermana", "sœur", "soeur"),
        "brother": ("brother", "bro", "irmão", "hermano", "frère", "frere"),
        "son": ("son", "filho", "hijo", "fils"),
        "daughter": ("daughter", "filha", "hija", "fille"),
        "friend": ("friend", "best friend", "bestie", "amigo", "amiga", "ami", "amie"),
        "grandma": ("grandma", "grandmother", "granny", "avó", "abuela", "grand-mère"),
        "grandpa": ("grandpa", "grandfather", "avô", "abuelo", "grand-père"),
        "boss": ("boss", "chefe", "jefe", "patron"),
        "coworker": ("coworker", "co-worker", "colleague", "colega", "collègue"),
        "kids": ("kid", "kids", "child", "children", "crianças", "niños", "enfants"),
        "teacher": ("teacher", "professor", "professora", "profesor", "profesora", "prof"),
    }
    return {alias: tag for tag, aliases in groups.items() for alias in aliases}
