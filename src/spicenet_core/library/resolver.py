# src/spicenet_core/library/resolver.py
"""
Locates the library files that define the models and sub-circuits a netlist uses
but does not define itself.

This is deliberately not a SPICE parser. Three directive shapes are recognized with
regular expressions, each anchored at the start of a line:

    .SUBCKT <name> ...      sub-circuit header
    .model <name> ...       device model
    .include <path>         dependency on another file

Directive keywords are case-insensitive, names are matched exactly.
"""
import logging
import os
import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .exceptions import ModelNotFoundError, ModelLibraryReadError

logger = logging.getLogger(__name__)

# Names are letters and digits only; the name must be followed by a blank or the end of the line.
_NAME_FRAGMENT = r"([a-zA-Z0-9]+)(?=[ \t\r]|$)"

SUBCKT_REGEX = re.compile(r"^[ \t]*(?i:\.subckt)[ \t]+" + _NAME_FRAGMENT + r".*$", re.MULTILINE)
MODEL_REGEX = re.compile(r"^[ \t]*(?i:\.model)[ \t]+" + _NAME_FRAGMENT + r".*$", re.MULTILINE)
INCLUDE_REGEX = re.compile(r"^[ \t]*(?i:\.include)[ \t]+(.+)$", re.MULTILINE)

_PATH_SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}


def find_directive_names(pattern: re.Pattern, content: str) -> List[str]:
    """Returns every name captured by a SUBCKT or model pattern, in file order."""
    return [match.group(1) for match in pattern.finditer(content)]


def find_first_include(content: str) -> Optional[str]:
    """
    Returns the argument of the first `.include` directive in `content`, with
    surrounding blanks and double quotes removed, or None.

    Only the first directive is reported; any later `.include` lines in the same
    file are not followed.
    """
    match = INCLUDE_REGEX.search(content)
    if match is None:
        return None
    argument = match.group(1).strip().strip('"').strip()
    return argument or None


class ModelResolver:
    """
    Searches an ordered list of directories for the file defining a model or
    sub-circuit name.

    The resolver keeps no state between calls: every `resolve` rescans the
    filesystem, so library edits are always picked up.
    """

    def __init__(self, search_paths: Sequence[Union[str, Path]]):
        self.search_paths: List[str] = [str(p) for p in search_paths]

    def resolve(self, name: str) -> Dict[str, str]:
        """
        Finds the file defining `name` and the file its first `.include` requires.

        Sub-circuit headers take precedence over model definitions: every file is
        first checked for a `.SUBCKT <name>` header, in search order, and only if
        none has one are the same files checked for `.model <name>`. The first
        matching file wins.

        Returns:
            An insertion-ordered mapping. The first entry maps `name` to the defining
            file's path (search path joined with the file name). If that file has an
            include directive, a second entry maps the include argument to its path:
            the argument itself if it contains a path separator, otherwise the
            argument joined onto the defining file's directory.

        Raises:
            ModelNotFoundError: If no file on any search path defines `name`.
            ModelLibraryReadError: If a search path or a file in it cannot be read.
        """
        scanned: List[Tuple[Path, str]] = []
        for file_path, content in self._iter_library_files():
            scanned.append((file_path, content))
            if name in find_directive_names(SUBCKT_REGEX, content):
                logger.debug(f"Found sub-circuit '{name}' in '{file_path}'.")
                return self._build_result(name, file_path, content)

        # Only files already read are candidates; every file was read by the pass above.
        for file_path, content in scanned:
            if name in find_directive_names(MODEL_REGEX, content):
                logger.debug(f"Found model '{name}' in '{file_path}'.")
                return self._build_result(name, file_path, content)

        logger.warning(f"No definition for '{name}' in search paths {self.search_paths}.")
        raise ModelNotFoundError(name=name, search_paths=list(self.search_paths))

    def _iter_library_files(self) -> Iterator[Tuple[Path, str]]:
        """Yields (path, text) for every regular file of every search path, non-recursively."""
        for search_path in self.search_paths:
            try:
                entries = list(Path(search_path).iterdir())
            except OSError as e:
                raise ModelLibraryReadError(
                    path=search_path, details=f"Cannot list search path directory: {e}"
                ) from e

            for entry in entries:
                if not entry.is_file():
                    continue
                try:
                    content = entry.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    raise ModelLibraryReadError(path=entry, details=f"Cannot read library file: {e}") from e
                yield entry, content

    def _build_result(self, name: str, file_path: Path, content: str) -> Dict[str, str]:
        result: Dict[str, str] = {name: str(file_path)}
        include = find_first_include(content)
        if include is not None:
            if any(sep in include for sep in _PATH_SEPARATORS):
                result[include] = include
            else:
                # A bare file name is relative to the including file.
                result[include] = str(file_path.parent / include)
        logger.debug(f"Resolved '{name}' -> {result}")
        return result
