"""Reading the site alias to site number mapping from ``Config.ini``."""

from __future__ import annotations

import configparser
import re
from os import PathLike
from pathlib import Path

DEFAULT_SITES_AUTO_MAP = "<Site01,1><Site02,2><Site03,3><Site04,4>"

_ENTRY = re.compile(r"<(\w+),(\d+)>")


class SiteMappingError(ValueError):
    """The site mapping is missing, empty or incomplete."""


def parse_sites_auto_map(text: str) -> dict[str, str]:
    """Parse ``<Alias,Number>`` entries into a mapping sorted by alias.

    Raises :class:`SiteMappingError` when the text is empty, holds no
    entries, or lacks ``Site01``.
    """
    if not text:
        raise SiteMappingError("SitesAutoMap is missing or empty")
    mapping: dict[str, str] = {}
    for match in _ENTRY.finditer(text):
        mapping[match.group(1)] = match.group(2)
    if not mapping:
        raise SiteMappingError("no site mapping could be parsed")
    if "Site01" not in mapping:
        raise SiteMappingError("no mapping for Site01")
    return dict(sorted(mapping.items()))


def load_site_mapping(path: str | PathLike[str]) -> dict[str, str]:
    """Read ``SitesAutoMap`` from an INI file and parse it.

    Keys outside any section belong to ``[General]``. A missing key falls
    back to :data:`DEFAULT_SITES_AUTO_MAP`.
    """
    path = Path(path)
    if not path.is_file():
        raise SiteMappingError(f"configuration file {path} does not exist")
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.read_string("[General]\n" + path.read_text(encoding="utf-8"))
    value = parser.get("General", "SitesAutoMap", fallback=DEFAULT_SITES_AUTO_MAP)
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return parse_sites_auto_map(value)