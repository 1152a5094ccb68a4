"""Matching of cleaned customer names against existing customers."""
from dataclasses import dataclass
import logging
from typing import Callable, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from ..utils.normalization import matching_key
from .store import CustomerRef

logger = logging.getLogger(__name__)

# 0.0 means identical, 1.0 means nothing in common
Scorer = Callable[[str, str], float]

DEFAULT_SEARCH_THRESHOLD = 0.3
DEFAULT_ACCEPT_THRESHOLD = 0.2

def levenshtein_score(left: str, right: str) -> float:
    """Normalized Levenshtein distance between two names, ignoring case.

    The edit distance is divided by the length of the longer name, so a
    single typo in a long name scores lower than in a short one.

    Examples:
        >>> levenshtein_score("Acme Corporation", "acme corporaton")
        0.0625
    """
    return Levenshtein.normalized_distance(matching_key(left), matching_key(right))


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one candidate name.

    ``score`` is set for fuzzy matches, and for rejected candidates when a
    near miss was found inside the search threshold.
    """
    matched: bool
    customer_id: Optional[int] = None
    method: Optional[str] = None
    score: Optional[float] = None
    matched_name: Optional[str] = None


NO_MATCH = MatchResult(matched=False)


class CustomerMatcher:
    """Decides whether a candidate name refers to an existing customer.

    An exact case-insensitive hit always wins. Otherwise every customer is
    scored; scores above ``search_threshold`` are discarded, and the best
    remaining one is accepted only when it is strictly below
    ``accept_threshold``. Equal best scores go to the lowest customer id.
    """

    def __init__(
        self,
        scorer: Scorer = levenshtein_score,
        search_threshold: float = DEFAULT_SEARCH_THRESHOLD,
        accept_threshold: float = DEFAULT_ACCEPT_THRESHOLD
    ):
        if not 0.0 <= accept_threshold <= search_threshold <= 1.0:
            raise ValueError(
                "Thresholds must satisfy 0 <= accept_threshold <= search_threshold <= 1 "
                f"(got accept={accept_threshold}, search={search_threshold})"
            )
        self.scorer = scorer
        self.search_threshold = search_threshold
        self.accept_threshold = accept_threshold

    def find_exact(self, candidate: str, customers: Sequence[CustomerRef]) -> Optional[CustomerRef]:
        """First customer whose name equals the candidate ignoring case."""
        key = matching_key(candidate)
        for customer in customers:
            if matching_key(customer.name) == key:
                return customer
        return None

    def best_fuzzy(self, candidate: str, customers: Sequence[CustomerRef]) -> Optional[tuple]:
        """Lowest-scoring customer within the search threshold.

        Returns:
            Tuple of (score, customer), or None if nobody is close enough
        """
        best = None
        for customer in customers:
            score = self.scorer(candidate, customer.name)
            if score > self.search_threshold:
                continue
            if best is None or (score, customer.id) < (best[0], best[1].id):
                best = (score, customer)
        return best

    def match(self, candidate: str, customers: Sequence[CustomerRef]) -> MatchResult:
        """Match a cleaned, non-empty candidate against a customer snapshot.

        Args:
            candidate: Name already passed through ``normalize_customer_name``
            customers: Current customers as (id, name) pairs

        Returns:
            MatchResult describing the decision
        """
        exact = self.find_exact(candidate, customers)
        if exact is not None:
            logger.debug(f"Exact match found for customer: {candidate}")
            return MatchResult(
                matched=True,
                customer_id=exact.id,
                method='exact',
                score=0.0,
                matched_name=exact.name
            )

        if not customers:
            return NO_MATCH

        best = self.best_fuzzy(candidate, customers)
        if best is None:
            return NO_MATCH

        score, customer = best
        if score < self.accept_threshold:
            logger.info(f'Fuzzy match found: "{candidate}" matched to "{customer.name}" (score: {score:.3f})')
            return MatchResult(
                matched=True,
                customer_id=customer.id,
                method='fuzzy',
                score=score,
                matched_name=customer.name
            )

        logger.debug(f'Closest customer to "{candidate}" was "{customer.name}" (score: {score:.3f}), not accepted')
        return MatchResult(matched=False, score=score, matched_name=customer.name)
