from .paths import rebase, resolve_site_root
from .suffixes import is_page_name, normalize_suffixes, suffix_set

__all__ = [
    "is_page_name",
    "normalize_suffixes",
    "rebase",
    "resolve_site_root",
    "suffix_set",
]
