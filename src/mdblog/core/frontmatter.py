"""Line-based front-matter extraction for Markdown articles"""

from mdblog.core.models import FrontMatter


DELIMITER = "---"


def parse_frontmatter(lines: list[str]) -> FrontMatter:
    """Split lines into a `key: value` header and the body after the closing `---`.

    Without an opening delimiter the whole file is body. Header lines with no
    colon (or a leading colon) are skipped. A header that is never closed
    swallows the rest of the file.
    """
    if not lines or lines[0].strip() != DELIMITER:
        return FrontMatter(meta={}, body=list(lines))

    meta: dict[str, str] = {}
    index = 1
    while index < len(lines):
        line = lines[index].strip()
        index += 1
        if line == DELIMITER:
            break
        key, sep, value = line.partition(":")
        if sep and key:
            meta[key.strip()] = value.strip()
    return FrontMatter(meta=meta, body=list(lines[index:]))
