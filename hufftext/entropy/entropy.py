import numpy as np
from typing import Optional

from hufftext.entropy.frequency import FrequencyTable


def calc_entropy(pmf):
    """
    Computes entropy for the given probability mass function
    with the formula SUM{ - p(x) * log2(p(x))}.

    pmf: np.array of shape [B] containing the probabilities for bins

    returns
        entropy: scalar value in bits/symbol
    """
    pmf = np.asarray(pmf, dtype=np.float64)
    # zero bins contribute nothing and would break the logarithm
    nonzero_pmf = pmf[pmf > 0]
    if nonzero_pmf.size == 0:
        return 0.0
    # a certain symbol yields -0.0
    return max(0.0, float(-np.sum(nonzero_pmf * np.log2(nonzero_pmf))))


def average_code_length(table: FrequencyTable, codebook) -> float:
    """
    Average codeword length in bits/symbol, weighting every code by
    the probability of its symbol.
    """
    if len(table) == 0:
        return 0.0
    lengths = np.array([len(codebook[symbol]) for symbol in table.symbols], dtype=np.float64)
    return float(np.sum(table.pmf() * lengths))


def code_efficiency(table: FrequencyTable, codebook) -> Optional[float]:
    """
    Ratio between the entropy and the average code length. Undefined
    (None) when the code spends no bits at all, which happens for an
    empty table or a single-symbol alphabet.
    """
    length = average_code_length(table, codebook)
    if length == 0:
        return None
    return calc_entropy(table.pmf()) / length
