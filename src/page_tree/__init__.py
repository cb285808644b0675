"""Page hierarchy reconstruction for Azure DevOps wikis.

This package normalizes raw page objects and rebuilds the ordered page tree
from the pages listing endpoint, whatever shape the listing comes back in.
"""

from .normalizer import title_from_path, normalize_page_fields
from .tree_builder import PageTreeBuilder, build_page_tree, prune_tree

__all__ = [
    'title_from_path',
    'normalize_page_fields',
    'PageTreeBuilder',
    'build_page_tree',
    'prune_tree',
]
