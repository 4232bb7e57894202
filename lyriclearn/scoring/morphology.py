"""
Lightweight Spanish line analysis used by the song difficulty scorer.

Tokens get a rough part of speech, a suffix-stripped lemma and, for verbs,
a guessed tense. Everything is rule based: no tagger model is loaded.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional

# Checked in order; the first tense with a matching ending wins
TENSE_ENDINGS = (
    ("presente", ("o", "as", "a", "amos", "áis", "an", "es", "e", "emos", "éis", "en")),
    ("preterito", ("é", "aste", "ó", "amos", "asteis", "aron", "í", "iste", "ió", "imos", "isteis", "ieron")),
    ("imperfecto", ("aba", "abas", "ábamos", "abais", "aban", "ía", "ías", "íamos", "íais", "ían")),
    ("futuro", ("é", "ás", "á", "emos", "éis", "án")),
    ("condicional", ("ía", "ías", "íamos", "íais", "ían")),
)
SUBJUNCTIVE_PATTERNS = (
    re.compile(r"que.*[ae]$"),
    re.compile(r"si.*[ae]ra$"),
    re.compile(r"si.*[ae]se$"),
)

VERB_ENDINGS = ("ar", "er", "ir", "ár", "ér", "ír")

_DETERMINERS = {"el", "la", "los", "las", "un", "una", "unos", "unas"}
_PRONOUNS = {
    "yo", "tú", "él", "ella", "nosotros", "vosotros", "ellos", "ellas",
    "me", "te", "se", "nos", "os", "lo", "la", "le", "les",
}
_ADPOSITIONS = {
    "de", "en", "con", "por", "para", "sin", "sobre", "bajo",
    "entre", "desde", "hacia", "hasta",
}
_CONJUNCTIONS = {"y", "o", "pero", "aunque", "porque", "que", "si", "cuando", "donde", "como"}

_VERB_SUFFIX = re.compile(r"(ar|er|ir|ando|iendo|ado|ido)$")
_EDGE_PUNCTUATION = re.compile(r"""^[¿?¡!.,;:'"()\[\]{}…«»\-]+|[¿?¡!.,;:'"()\[\]{}…«»\-]+$""")


@dataclass
class ParsedToken:
    text: str
    lemma: str
    pos: str
    is_verb: bool
    tense: Optional[str] = None
    confidence: float = 0.8


@dataclass
class ParsedLine:
    line: str
    sentence_index: int
    tokens: List[ParsedToken] = field(default_factory=list)


def detect_tense(word: str) -> Optional[str]:
    lower_word = word.lower()
    for tense, endings in TENSE_ENDINGS:
        if lower_word.endswith(endings):
            return tense
    if any(pattern.search(lower_word) for pattern in SUBJUNCTIVE_PATTERNS):
        return "subjuntivo"
    return None


def is_verb(word: str, pos: str) -> bool:
    if pos == "VERB":
        return True
    lower_word = word.lower()
    return any(
        lower_word.endswith(ending) or lower_word.endswith(ending + "s")
        for ending in VERB_ENDINGS
    )


def get_lemma(word: str) -> str:
    """Strip gerund, participle or plural endings."""
    lower_word = word.lower()

    if lower_word.endswith("ando"):
        return lower_word[:-4] + "ar"
    if lower_word.endswith("iendo"):
        return lower_word[:-5] + "ar"
    if lower_word.endswith(("ado", "ido")):
        return lower_word[:-3] + "ar"
    if lower_word.endswith("s") and len(lower_word) > 3:
        return lower_word[:-1]
    return lower_word


def part_of_speech(word: str) -> str:
    lower_word = word.lower()

    if lower_word in _DETERMINERS:
        return "DET"
    if lower_word in _PRONOUNS:
        return "PRON"
    if lower_word in _ADPOSITIONS:
        return "ADP"
    if lower_word in _CONJUNCTIONS:
        return "CONJ"
    if _VERB_SUFFIX.search(lower_word):
        return "VERB"
    if lower_word.endswith("mente"):
        return "ADV"
    if lower_word.endswith(("o", "a", "os", "as")) and len(lower_word) > 3:
        return "ADJ"
    return "NOUN"


def tokenize_line(line: str) -> List[str]:
    """Whitespace tokens with leading and trailing punctuation removed."""
    tokens = []
    for raw in line.split():
        token = _EDGE_PUNCTUATION.sub("", raw)
        if token:
            tokens.append(token)
    return tokens


def analyze_line(line: str, sentence_index: int = 0) -> ParsedLine:
    tokens = []
    for text in tokenize_line(line):
        pos = part_of_speech(text)
        verb = is_verb(text, pos)
        tokens.append(ParsedToken(
            text=text,
            lemma=get_lemma(text),
            pos=pos,
            is_verb=verb,
            tense=detect_tense(text) if verb else None,
        ))
    return ParsedLine(line=line, sentence_index=sentence_index, tokens=tokens)


def analyze_lines(lines) -> List[ParsedLine]:
    """Analyze every non-blank line, numbering them in order."""
    return [
        analyze_line(line, index)
        for index, line in enumerate(l for l in lines if isinstance(l, str) and l.strip())
    ]
