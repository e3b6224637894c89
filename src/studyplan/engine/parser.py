"""Parse free-form subject lines.

Line format::

    Subject: topic1|topic2|topic3
    Subject
"""

from __future__ import annotations

from .types import Subject

_NAME_SEPARATOR = ":"
_TOPIC_SEPARATOR = "|"


def parse_subject_line(line: str) -> Subject:
    """Parse one trimmed, non-blank line into a subject.

    Text before the first colon is the name; everything after it is the topic
    list. Later colons stay inside the topic text instead of cutting the last
    topic short, so ``"Chem: Ratio: 1|Gas"`` yields ``("Ratio: 1", "Gas")``.
    Empty names are kept as-is.
    """
    name, _, topics_text = line.partition(_NAME_SEPARATOR)
    topics = tuple(topic.strip() for topic in topics_text.split(_TOPIC_SEPARATOR) if topic.strip())
    return Subject(name=name.strip(), topics=topics, weight=float(max(1, len(topics))))


def parse_subjects(text: str) -> list[Subject]:
    """Return subjects in input line order, skipping blank lines.

    Duplicates are not merged.
    """
    subjects: list[Subject] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        subjects.append(parse_subject_line(line))
    return subjects
