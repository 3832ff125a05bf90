import re
from typing import List

MAX_KEYWORDS = 15

TECHNICAL_TERMS = (
    "python", "java", "javascript", "typescript", "react", "node", "sql",
    "nosql", "aws", "azure", "gcp", "docker", "kubernetes", "terraform",
    "linux", "git", "rest", "graphql", "api", "microservices", "ci/cd",
    "devops", "agile", "scrum", "machine learning", "data analysis",
    "cloud", "security", "testing", "html", "css",
)

ACTION_TERMS = (
    "leadership", "management", "strategy", "communication", "collaboration",
    "mentoring", "optimization", "innovation", "stakeholder", "analytics",
    "delivery", "growth", "problem solving",
)

STOP_WORDS = frozenset((
    "the", "and", "for", "are", "but", "not", "you", "all", "any", "can",
    "had", "her", "was", "one", "our", "out", "has", "have", "with", "this",
    "that", "from", "they", "will", "would", "there", "their", "what",
    "about", "which", "when", "your", "who", "into", "than", "them", "these",
    "been", "also", "such", "its", "were", "more", "other", "some", "must",
))

_WORD = re.compile(r"\b[a-z]{3,}\b")


def extract_keywords(description: str, title: str = "") -> List[str]:
    """Return up to 15 salient lowercase terms from a job posting.

    Curated vocabulary hits come first (substring match, vocabulary order),
    followed by plain word tokens in text order, stop-words removed.
    """
    text = f"{description or ''} {title or ''}".lower()

    curated = [term for term in TECHNICAL_TERMS + ACTION_TERMS if term in text]
    tokens = [token for token in _WORD.findall(text) if token not in STOP_WORDS]

    return list(dict.fromkeys(curated + tokens))[:MAX_KEYWORDS]
