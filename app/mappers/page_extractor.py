"""Heuristic signal extraction from raw page markup.

Everything here is a pure function of the markup (plus the URL and the
clock for the final record), so repeated runs over the same page give the
same signals.
"""

import re
from datetime import datetime, timezone

from bs4 import BeautifulSoup

from app.schemas.website import ExtractionResult

MAIN_CONTENT_LIMIT = 2000
COMPANY_TERMS_LIMIT = 20
NAVIGATION_ITEMS_LIMIT = 15
NAVIGATION_ITEM_MAX_LEN = 50

PARKING_INDICATORS = (
    "this domain may be for sale",
    "parked domain",
    "domain parking",
    "buy this domain",
    "domain for sale",
    "expired domain",
    "coming soon",
)

# Presence-only vocabulary, reported in declaration order
BUSINESS_TERMS = (
    "mission", "vision", "values", "about", "company", "business", "services", "products",
    "solutions", "team", "experience", "expertise", "industry", "customers", "clients",
    "innovation", "technology", "quality", "excellence", "professional", "development",
    "training", "consultation", "support", "partnership", "collaboration", "strategy",
    "management", "leadership", "growth", "success", "results", "performance",
)

# Capitalized noise that should never count as a company term
COMMON_WORDS = frozenset({
    "The", "And", "For", "Are", "But", "Not", "You", "All", "Can", "Had", "Her", "Was", "One",
    "Our", "Out", "Day", "Get", "Has", "Him", "His", "How", "Its", "May", "New", "Now", "Old",
    "See", "Two", "Who", "Boy", "Did", "She", "Use", "Way", "Web", "Why", "More", "Home",
    "Page", "About", "Contact", "News", "Blog", "Search", "Login", "Sign", "Register",
})

_SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# ASCII word boundaries so "Café" yields "Caf"; \s still spans non-breaking spaces
_WORD_CHAR = r"[A-Za-z0-9_]"
_CAPITALIZED_RE = re.compile(
    rf"(?<!{_WORD_CHAR})[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*(?!{_WORD_CHAR})"
)


def _soup(markup: str | BeautifulSoup) -> BeautifulSoup:
    if isinstance(markup, BeautifulSoup):
        return markup
    return BeautifulSoup(markup, "html.parser")


def is_parking_page(html: str) -> bool:
    """True if the markup contains any known parking/for-sale phrase."""
    lower = html.lower()
    return any(indicator in lower for indicator in PARKING_INDICATORS)


def clean_text(html: str) -> str:
    """Drop script/style blocks and tags, then collapse whitespace."""
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def count_words(text: str) -> int:
    return len(text.split(" "))


def extract_title(markup: str | BeautifulSoup) -> str:
    tag = _soup(markup).find("title")
    if tag is None:
        return ""
    return tag.get_text().strip()


def _is_description(value: str | None) -> bool:
    return value is not None and value.lower() == "description"


def extract_description(markup: str | BeautifulSoup) -> str:
    """Content of the first <meta name="description">, or empty string."""
    tag = _soup(markup).find("meta", attrs={"name": _is_description})
    if tag is None:
        return ""
    return (tag.get("content") or "").strip()


def extract_business_keywords(text: str) -> list[str]:
    """Vocabulary terms present anywhere in the lower-cased cleaned text."""
    return [term for term in BUSINESS_TERMS if term in text]


def extract_company_terms(html: str) -> list[str]:
    """Capitalized phrases seen more than once, in first-seen order."""
    counts: dict[str, int] = {}
    for term in _CAPITALIZED_RE.findall(html):
        if len(term) > 2 and term not in COMMON_WORDS:
            counts[term] = counts.get(term, 0) + 1

    repeated = [term for term, count in counts.items() if count > 1]
    return repeated[:COMPANY_TERMS_LIMIT]


def _is_menu_list(tag) -> bool:
    classes = tag.get("class") or []
    return "menu" in " ".join(classes).lower()


def extract_navigation_items(markup: str | BeautifulSoup) -> list[str]:
    """Anchor labels from <nav> blocks, then from <ul class="...menu...">."""
    soup = _soup(markup)
    blocks = soup.find_all("nav") + [ul for ul in soup.find_all("ul") if _is_menu_list(ul)]

    items: list[str] = []
    for block in blocks:
        for anchor in block.find_all("a"):
            label = anchor.get_text().strip()
            if 0 < len(label) < NAVIGATION_ITEM_MAX_LEN:
                items.append(label)
                if len(items) == NAVIGATION_ITEMS_LIMIT:
                    return items
    return items


def extract_key_information(html: str, url: str) -> ExtractionResult:
    text = clean_text(html)
    soup = _soup(html)

    return ExtractionResult(
        url=url,
        title=extract_title(soup),
        description=extract_description(soup),
        main_content=text[:MAIN_CONTENT_LIMIT],
        business_keywords=extract_business_keywords(text.lower()),
        company_terms=extract_company_terms(html),
        navigation_items=extract_navigation_items(soup),
        extracted_at=datetime.now(timezone.utc),
        word_count=count_words(text),
    )
