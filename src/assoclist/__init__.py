from assoclist.alist import AssociativeList
from assoclist.entry import Entry

__all__ = ["AssociativeList", "Entry"]
