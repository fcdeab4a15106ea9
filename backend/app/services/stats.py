from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List


def compute_survey_stats(
    options: List[str],
    answer_values: Iterable[str],
    include_unmatched: bool = True,
) -> Dict[str, float]:
    """
    Compute the share of respondents that picked each option.

    Values are tallied by exact string match. Every declared option is present
    in the result, at 0 when nobody chose it. A value that matches no option is
    reported under its own literal key unless ``include_unmatched`` is False;
    it counts toward the total either way.

    >>> compute_survey_stats(["pizza", "hot dog"], ["tacos", "pizza"])
    {'pizza': 0.5, 'hot dog': 0, 'tacos': 0.5}
    """
    counts = Counter(answer_values)
    total = sum(counts.values())

    stats: Dict[str, float] = {option: 0 for option in options}
    if total == 0:
        return stats

    for value, count in counts.items():
        if value not in stats and not include_unmatched:
            continue
        stats[value] = count / total
    return stats


def survey_stats(survey, answers, include_unmatched: bool = True) -> Dict[str, float]:
    """Stats for a loaded Survey and its Answer rows"""
    return compute_survey_stats(
        list(survey.options),
        (answer.value for answer in answers),
        include_unmatched=include_unmatched,
    )
