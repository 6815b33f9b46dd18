"""Entry extraction: turns a parsed dictionary page into an Entry.

The page is a nested outline and every rule reads it the same way:
read label → read indicator → read examples → recurse.

    .entryWrapper > .gramb            part-of-speech group
        ul.semb > li                  sense
            ol.subSenses > li         sub-sense
    .etymology:has(> h3.phrases-title)
        .senseInnerWrapper > ul.gramb > li     phrase
        (next sibling) li.phrase_sense         phrase sense

A missing node never aborts extraction: each rule reads optional values
and collapses them to "" / [] before building its record.
"""

import logging

from adapter.html.document import Document, Node, Selector
from domain.model.entry import Entry, Phrase, PhraseSense, PosGroup, Sense, SubSense

logger = logging.getLogger(__name__)

# Part-of-speech labels whose groups are dropped from the output
UNUSED_POS = frozenset({"abbreviation", "noun", ""})

POS_GROUPS = Selector(".entryWrapper > .gramb")
POS_LABEL = Selector(".pos span")
SENSE_ITEMS = Selector("ul.semb > li")
SUB_SENSE_ITEMS = Selector("ol.subSenses > li")
INDICATOR = Selector(".ind")
# Only one level of exclusion: examples inside any .subSense belong to it
OWN_EXAMPLES = Selector(".ex:not(.subSense *)")
ALL_EXAMPLES = Selector(".ex")
EXAMPLE_TEXT = Selector("em")
PHRASES_SECTION = Selector(".etymology:has(> h3.phrases-title)")
PHRASE_ITEMS = Selector(".senseInnerWrapper > ul.gramb > li")
PHRASE_TEXT = Selector(".ind .phrase")
PHRASE_SENSE_ITEMS = Selector("li.phrase_sense")


# ── Defensive reads ──────────────────────────────────────────


def _first_text(node: Node | None, selector: Selector) -> str | None:
    if node is None:
        return None
    match = node.select_first(selector)
    return match.text() if match is not None else None


def _examples(node: Node, selector: Selector) -> list[str]:
    """Text of the first <em> in every example element matched by selector."""
    return [_first_text(example, EXAMPLE_TEXT) or "" for example in node.select_all(selector)]


# ── Part-of-speech outline ───────────────────────────────────


def scrape_poses(document: Document) -> list[PosGroup]:
    """Extract every part-of-speech group not in UNUSED_POS."""
    poses: list[PosGroup] = []
    for group in document.select_all(POS_GROUPS):
        pos = _first_text(group, POS_LABEL) or ""
        if pos in UNUSED_POS:
            logger.debug("Skipping part-of-speech group", extra={"pos": pos})
            continue
        poses.append(PosGroup(pos=pos, senses=scrape_senses(group)))
    return poses


def scrape_senses(group: Node) -> list[Sense]:
    """Extract the senses of one part-of-speech group.

    A sense's examples exclude those nested inside its sub-senses.
    """
    senses: list[Sense] = []
    for item in group.select_all(SENSE_ITEMS):
        senses.append(Sense(
            sense=_first_text(item, INDICATOR) or "",
            examples=_examples(item, OWN_EXAMPLES),
            sub_senses=scrape_sub_senses(item),
        ))
    return senses


def scrape_sub_senses(sense_item: Node) -> list[SubSense]:
    senses: list[SubSense] = []
    for item in sense_item.select_all(SUB_SENSE_ITEMS):
        senses.append(SubSense(
            sense=_first_text(item, INDICATOR) or "",
            examples=_examples(item, ALL_EXAMPLES),
        ))
    return senses


# ── Phrase outline ───────────────────────────────────────────


def scrape_phrases(document: Document) -> list[Phrase]:
    """Extract idiomatic phrases from the first phrases section, if any."""
    section = document.select_first(PHRASES_SECTION)
    if section is None:
        return []

    phrases: list[Phrase] = []
    for item in section.select_all(PHRASE_ITEMS):
        # Every matching phrase node contributes, not only the first
        phrase = "".join(node.text() for node in item.select_all(PHRASE_TEXT))
        phrases.append(Phrase(
            phrase=phrase,
            senses=scrape_phrase_senses(item.next_element_sibling()),
        ))
    return phrases


def scrape_phrase_senses(senses_node: Node | None) -> list[PhraseSense]:
    """Extract phrase senses from the block that follows a phrase item."""
    if senses_node is None:
        return []

    senses: list[PhraseSense] = []
    for item in senses_node.select_all(PHRASE_SENSE_ITEMS):
        senses.append(PhraseSense(
            sense=_first_text(item, INDICATOR) or "",
            examples=_examples(item, OWN_EXAMPLES),
        ))
    return senses


# ── Entry ────────────────────────────────────────────────────


def extract_entry(word: str, document: Document) -> Entry:
    """Build the Entry for a word from its parsed page."""
    entry = Entry(
        word=word,
        pos_list=scrape_poses(document),
        phrases=scrape_phrases(document),
    )
    logger.debug("Entry extracted", extra={
        "word": word,
        "pos_count": len(entry.pos_list),
        "phrase_count": len(entry.phrases),
    })
    return entry
