"""
Pytest configuration and fixtures
"""
import os
import sys

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


# Fixed base timestamp so tests never depend on filesystem clock resolution
BASE_NS = 1_700_000_000 * 10**9


def set_mtime(path, offset_s=0):
    """Set atime and mtime of path to BASE_NS + offset_s seconds"""
    ns = BASE_NS + int(offset_s * 10**9)
    os.utime(path, ns=(ns, ns))
    return ns


def settle(root):
    """Pin every entry under root, root included, to BASE_NS"""
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            set_mtime(os.path.join(dirpath, name))
    set_mtime(root)


@pytest.fixture
def tree(tmp_path):
    """
    A small tree with settled timestamps:

        a.txt
        b.txt
        sub/c.txt
        sub/deep/d.txt
    """
    (tmp_path / "sub" / "deep").mkdir(parents=True)
    for rel in ("a.txt", "b.txt", "sub/c.txt", "sub/deep/d.txt"):
        (tmp_path / rel).write_text(rel)
    settle(tmp_path)
    return tmp_path
