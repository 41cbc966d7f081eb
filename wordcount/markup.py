"""
markup.py - HTML Visible Text Extraction

Strips an HTML document down to the text a reader would see, so markup
and boilerplate don't get counted as words.
"""

import re

from bs4 import BeautifulSoup


NON_CONTENT_TAGS = ["script", "style", "noscript", "svg", "iframe",
                    "form", "meta", "link"]
BOILERPLATE_TAGS = ["header", "footer", "nav", "aside"]
BOILERPLATE_NAMES = re.compile(
    r"(menu|nav|footer|header|sidebar|breadcrumb|cookie|popup)", re.I)


def extract_visible_text(content):
    """
    Return the visible text of an HTML document (bytes or str) with
    whitespace runs collapsed to single spaces.
    """
    if not content:
        return ""

    soup = BeautifulSoup(content, "lxml")

    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    root = soup.body or soup
    for tag in root.find_all(BOILERPLATE_TAGS):
        tag.decompose()

    for attr in ("class", "id"):
        for node in root.find_all(attrs={attr: BOILERPLATE_NAMES}):
            # may already be gone with a decomposed ancestor
            if not node.decomposed:
                node.decompose()

    text = root.get_text(separator=" ")
    return re.sub(r"\s+", " ", text).strip()
