"""Internal pygit2 constants - keeps trivia out of public modules."""

from __future__ import annotations

import pygit2

# Diff options
DIFF_NORMAL = pygit2.enums.DiffOption.NORMAL
DIFF_INCLUDE_UNTRACKED = pygit2.enums.DiffOption.INCLUDE_UNTRACKED

# Delta kinds
DELTA_ADDED = pygit2.GIT_DELTA_ADDED
DELTA_DELETED = pygit2.GIT_DELTA_DELETED
DELTA_MODIFIED = pygit2.GIT_DELTA_MODIFIED
DELTA_RENAMED = pygit2.GIT_DELTA_RENAMED
DELTA_COPIED = pygit2.GIT_DELTA_COPIED
DELTA_TYPECHANGE = pygit2.GIT_DELTA_TYPECHANGE

# Working tree / index status flags
STATUS_WT_NEW = pygit2.GIT_STATUS_WT_NEW
STATUS_WT_MODIFIED = pygit2.GIT_STATUS_WT_MODIFIED
STATUS_WT_DELETED = pygit2.GIT_STATUS_WT_DELETED
STATUS_INDEX_NEW = pygit2.GIT_STATUS_INDEX_NEW
STATUS_INDEX_MODIFIED = pygit2.GIT_STATUS_INDEX_MODIFIED
STATUS_INDEX_DELETED = pygit2.GIT_STATUS_INDEX_DELETED

STATUS_NEW = STATUS_WT_NEW | STATUS_INDEX_NEW
STATUS_DELETED = STATUS_WT_DELETED | STATUS_INDEX_DELETED
STATUS_MODIFIED = STATUS_WT_MODIFIED | STATUS_INDEX_MODIFIED
