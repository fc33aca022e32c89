from __future__ import annotations

import logging
import os
import stat
import tempfile

from lxml import etree

logger = logging.getLogger(__name__)


def ensure_directory(path: str) -> None:
    if path and not os.path.isdir(path):
        logger.debug("Creating output directory %s", path)
        os.makedirs(path, exist_ok=True)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def output_file_mode(out_path: str) -> int:
    """Mode for a freshly written output: keep the existing file's, else 0666 minus umask."""
    if os.path.exists(out_path):
        return stat.S_IMODE(os.stat(out_path).st_mode)
    return 0o666 & ~_current_umask()


def write_tree_atomic(tree: etree._ElementTree, out_path: str, pretty: bool = True) -> None:
    """Write an XML tree to a temporary file next to out_path and rename it over out_path.

    The destination is only replaced once the document was written completely,
    so a failure never leaves a truncated file behind.
    """
    directory: str = os.path.dirname(os.path.abspath(out_path))
    ensure_directory(directory)
    fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".xsd", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            tree.write(f, pretty_print=pretty, xml_declaration=True, encoding="UTF-8")
        # mkstemp creates the file owner-only
        os.chmod(tmp_path, output_file_mode(out_path))
        os.replace(tmp_path, out_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


__all__ = ["ensure_directory", "output_file_mode", "write_tree_atomic"]
