"""Field normalization for raw wiki page objects.

Every consumer of Azure DevOps page JSON (tree listing, single-page read,
upsert results, search hits) goes through these helpers so ids, titles,
ordering and storage paths get the same defaults everywhere.
"""

from typing import Any, Dict, Mapping, Optional


def title_from_path(path: Optional[str]) -> str:
    """Return the last non-empty '/'-separated segment of a page path.

    Example:
        >>> title_from_path("/Home/Quick-Start")
        'Quick-Start'
        >>> title_from_path("/")
        ''
    """
    if not path:
        return ""
    segments = [segment for segment in str(path).split('/') if segment]
    return segments[-1] if segments else ""


def normalize_page_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Extract the common page fields from a raw page object.

    Returns:
        Dict with keys id (str), title (str), order (int), storage_path (str)
    """
    page_id = raw.get('id')
    order = raw.get('order')
    return {
        'id': str(page_id) if page_id is not None else "",
        'title': title_from_path(raw.get('path')),
        'order': order if isinstance(order, int) and not isinstance(order, bool) else 0,
        'storage_path': raw.get('gitItemPath') or "",
    }
