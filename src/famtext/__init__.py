"""
famtext: free-text genealogy import engine.

    from famtext import import_tree

    result = import_tree("NAME: Bob\nNAME: Alice; PARENTS: Bob")
    result.document  # JSON array with Bob at level 0 and Alice at level 1
"""

from famtext.import_core import ImportResult, TreeImporter, import_tree

__all__ = [
    "ImportResult",
    "TreeImporter",
    "import_tree",
]
