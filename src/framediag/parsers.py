"""Parsers for /proc text tables and process listings."""

from framediag.models import U32_MAX, U64_MAX, ProcessRow


def parse_unsigned(token: str, limit: int = U64_MAX) -> int | None:
    """Parse a plain decimal token, returning None if it is not in [0, limit]."""
    digits = token[1:] if token.startswith("+") else token
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    value = int(digits)
    return value if value <= limit else None


def parse_colon_kb(text: str, key: str) -> int | None:
    """
    Find ``key`` in a ``Label:   Number kB`` table and return Number.

    Used for both /proc/meminfo and /proc/<pid>/status. A line matches only
    if ``key`` is followed by optional whitespace and a colon, so asking for
    ``Mem`` never picks up ``MemTotal``. The first matching line decides.
    """
    for line in text.splitlines():
        if not line.startswith(key):
            continue
        rest = line[len(key):].lstrip()
        if not rest.startswith(":"):
            continue
        tokens = rest[1:].split()
        if not tokens:
            return None
        return parse_unsigned(tokens[0])
    return None


def parse_process_rows(text: str) -> list[ProcessRow]:
    """
    Parse ``pid ppid rss comm`` lines.

    Lines whose first three fields are not unsigned integers (a header row,
    garbage) are dropped. The command keeps the rest of the line and is
    empty when missing.
    """
    rows: list[ProcessRow] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        fields = line.split(maxsplit=3)
        if len(fields) < 3:
            continue

        pid = parse_unsigned(fields[0], U32_MAX)
        parent_pid = parse_unsigned(fields[1], U32_MAX)
        resident_kb = parse_unsigned(fields[2])
        if pid is None or parent_pid is None or resident_kb is None:
            continue

        command_name = fields[3] if len(fields) > 3 else ""
        rows.append(ProcessRow(pid, parent_pid, resident_kb, command_name))
    return rows


def parse_listing_output(text: str) -> list[ProcessRow]:
    """
    Parse listing output, retrying without the first line if nothing parsed.

    The retry covers a single header line. A multi-line banner is not
    recovered.
    """
    rows = parse_process_rows(text)
    if not rows and "\n" in text:
        _, rest = text.split("\n", 1)
        rows = parse_process_rows(rest)
    return rows
