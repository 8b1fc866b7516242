from collections import Counter
from .types import FrequencyTable, SymbolFrequency


def analyze_frequencies(text: str) -> FrequencyTable:
    # Step 1: Count occurrences, Counter keeps first-seen order of symbols
    counts = Counter(text)

    # Step 2: Sort by count in descending order, the sort is stable so ties keep first-seen order
    sorted_by_frequency = sorted(counts.items(), key=lambda item: -item[1])

    # Step 3: Turn counts into probabilities over the whole text
    return FrequencyTable([
        SymbolFrequency(symbol, count, count / len(text)) for symbol, count in sorted_by_frequency
    ])
