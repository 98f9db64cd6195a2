import unicodedata
import numpy as np
from collections import Counter

# Symbols are restricted to the Basic Multilingual Plane
UNICODE_RANGE = 65536

# controls, surrogates, line/paragraph separators and unassigned code points
NON_PRINTABLE_CATEGORIES = {"Cc", "Cs", "Zl", "Zp", "Cn"}


def is_printable(symbol: str) -> bool:
    """
    Returns True if the character can take part in the code, i.e. it
    lies below UNICODE_RANGE and is printable in the sense of a UTF-8
    locale's iswprint: every space separator (ASCII space, no-break
    space, ideographic space, ...) and format character counts, while
    control characters and line breaks do not.
    """
    return ord(symbol) < UNICODE_RANGE and unicodedata.category(symbol) not in NON_PRINTABLE_CATEGORIES


class FrequencyTable:
    """
    Read-only mapping from symbol to its number of occurrences.

    Only positive counts are kept. Symbols are stored in ascending
    code point order, which is also the order every consumer
    (tree builder, reports) sees them in.
    """

    def __init__(self, counts=None):
        counts = dict(counts or {})
        for symbol, count in counts.items():
            if count < 0:
                raise ValueError(f"Negative count {count} for symbol {symbol!r}")
        self._counts = {s: int(c) for s, c in sorted(counts.items()) if c > 0}

    @classmethod
    def from_text(cls, text, printable=is_printable):
        table, _ = count_symbols(text, printable=printable)
        return table

    @property
    def symbols(self):
        return list(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def items(self):
        return self._counts.items()

    def counts(self) -> np.ndarray:
        return np.array(list(self._counts.values()), dtype=np.int64)

    def pmf(self) -> np.ndarray:
        """
        Probability mass function over the stored symbols, aligned
        with `symbols`.

        returns
            pmf: np.array of shape [k], empty for an empty table
        """
        counts = self.counts()
        if counts.size == 0:
            return np.zeros(0, dtype=np.float64)
        return counts / counts.sum()

    def __getitem__(self, symbol) -> int:
        return self._counts.get(symbol, 0)

    def __contains__(self, symbol):
        return symbol in self._counts

    def __iter__(self):
        return iter(self._counts)

    def __len__(self):
        return len(self._counts)

    def __eq__(self, other):
        if isinstance(other, FrequencyTable):
            return self._counts == other._counts
        return NotImplemented

    def __repr__(self):
        return f"FrequencyTable({self._counts!r})"


def count_symbols(text, printable=is_printable):
    """
    Counts the symbols of a text in a single pass. Symbols rejected by
    `printable` are neither counted nor kept.

    text: any iterable of single characters
    printable: predicate deciding which characters take part

    returns
        table: FrequencyTable of the kept symbols
        kept: str, the input text with rejected symbols removed
    """
    counter = Counter()
    kept = []
    for symbol in text:
        if printable(symbol):
            counter[symbol] += 1
            kept.append(symbol)
    return FrequencyTable(counter), "".join(kept)
