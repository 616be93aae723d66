"""
Prestige venue lists used by the advisor and the trend predictor.

Matching is a case-insensitive substring test, so "Proceedings of NeurIPS 2024"
counts as NeurIPS.
"""

from typing import Iterable, Optional

ADVISOR_TOP_VENUES = (
    "NeurIPS", "ICML", "ICLR", "ACL", "EMNLP", "NAACL",
    "AAAI", "IJCAI", "CVPR", "ICCV", "ECCV", "KDD", "WWW",
    "SIGIR", "CIKM", "WSDM", "CHI", "UIST",
    "Nature", "Science", "IEEE", "ACM",
)

# The predictor also counts arXiv and the major journals.
PREDICTION_TOP_VENUES = (
    "arXiv", "NeurIPS", "ICML", "ICLR", "ACL", "EMNLP", "NAACL",
    "AAAI", "IJCAI", "CVPR", "ICCV", "ECCV", "KDD", "WWW",
    "Nature", "Science", "Nature Machine Intelligence",
    "IEEE Transactions on Pattern Analysis and Machine Intelligence",
    "Artificial Intelligence", "Journal of Machine Learning Research",
    "SIGIR", "CIKM", "WSDM", "CHI", "UIST",
)


def is_top_venue(venue: Optional[str], venues: Iterable[str] = ADVISOR_TOP_VENUES) -> bool:
    """Check whether a venue name contains any of the listed venues."""
    if not venue:
        return False
    v = venue.lower()
    return any(tv.lower() in v for tv in venues)
