import os
import stat
from pathlib import Path
from typing import Iterator, List, NamedTuple, Union

from watchdog.utils.dirsnapshot import DirectorySnapshot

from .errors import WalkError


class Entry(NamedTuple):
    path: str  # relative to the walk root, "." for the root itself
    mtime_ns: int
    is_dir: bool


def _lstat(path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except OSError as e:
        raise WalkError(path, e) from e


def _listdir(path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise WalkError(path, e) from e


def iter_entries(root: Union[str, Path], recursive: bool = False) -> Iterator[Entry]:
    """Lazily yield every entry below root in lexical order.

    Subdirectories are yielded but only descended into when recursive is set.
    Symlinks are reported as themselves and never followed. Nothing is stat'ed
    beyond the point where the caller stops iterating.
    """
    root = os.fspath(root)

    def _walk(directory: str) -> Iterator[Entry]:
        for dirent in _listdir(directory):
            try:
                st = dirent.stat(follow_symlinks=False)
            except OSError as e:
                raise WalkError(dirent.path, e) from e
            is_dir = stat.S_ISDIR(st.st_mode)
            yield Entry(os.path.relpath(dirent.path, root), st.st_mtime_ns, is_dir)
            if is_dir and recursive:
                yield from _walk(dirent.path)

    return _walk(root)


def snapshot_entries(
    root: Union[str, Path], recursive: bool = False
) -> Iterator[Entry]:
    """Take a full watchdog snapshot of root and yield its entries.

    Unlike iter_entries, the root directory itself is included. Without
    recursive, subdirectories are left out entirely, their own mtime included.
    watchdog quietly skips entries that vanish mid-walk, so the stat and
    listdir hooks turn every OSError into a WalkError, which it does not catch.
    """
    root = os.fspath(root)
    snapshot = DirectorySnapshot(root, recursive=recursive, stat=_lstat, listdir=_listdir)
    for path in sorted(snapshot.paths):
        st = snapshot.stat_info(path)
        is_dir = stat.S_ISDIR(st.st_mode)
        rel = os.path.relpath(path, root)
        if is_dir and not recursive and rel != ".":
            continue
        yield Entry(rel, st.st_mtime_ns, is_dir)
