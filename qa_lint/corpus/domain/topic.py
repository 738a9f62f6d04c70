"""Topic-key normalization and level/topic location of corpus files."""

import re
from pathlib import PurePosixPath

from qa_lint.config.domain.normalization import NormalizationConfig
from qa_lint.corpus.domain.document import DocKey

_WHITESPACE_RUN = re.compile(r"\s+")
_UNDERSCORE_RUN = re.compile(r"_{2,}")


def normalize_topic(raw: str, config: NormalizationConfig) -> str:
    """Normalize one topic name so incidental naming drift still pairs.

    Trims, optionally lowercases, maps configured separator characters to
    ``_`` and, when ``collapse_whitespace`` is on, turns each whitespace run
    into a single ``_`` and squeezes repeated underscores.
    """
    topic = raw.strip()
    if config.lowercase:
        topic = topic.lower()
    for separator in config.separators:
        topic = topic.replace(separator, "_")
    if config.collapse_whitespace:
        topic = _WHITESPACE_RUN.sub("_", topic)
        topic = _UNDERSCORE_RUN.sub("_", topic)
    return topic


def locate(
    relative_path: PurePosixPath,
    levels: list[str],
    config: NormalizationConfig,
) -> tuple[str | None, str, DocKey | None]:
    """Split a root-relative path into (level, raw topic, key).

    The first directory is the level; the rest, minus the file suffix, is the
    topic. Nested directories below the level become part of the topic,
    joined with ``/`` and normalized per segment. The key is None for files
    directly under the root or under an unknown level directory.
    """
    parts = relative_path.parts
    stem_parts = [*parts[:-1], PurePosixPath(parts[-1]).stem]
    if len(stem_parts) == 1:
        return None, stem_parts[0], None

    level = stem_parts[0]
    topic_parts = stem_parts[1:]
    raw_topic = "/".join(topic_parts)
    if level not in levels:
        return level, raw_topic, None

    normalized = "/".join(normalize_topic(part, config) for part in topic_parts)
    if not normalized.strip("/"):
        return level, raw_topic, None
    return level, raw_topic, DocKey(level=level, topic=normalized)
