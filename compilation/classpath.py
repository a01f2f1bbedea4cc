"""
Classpath assembly for compiler invocations.
"""

from typing import Iterable, List, Optional, Sequence, Union

from utils.platform import classpath_separator

BuildPath = Union[str, Sequence[str], None]


class ClasspathBuilder:
    """
    Joins classpath roots into a single separator-delimited string.

    The common prefix (library paths followed by test framework paths) is
    fixed at construction; every build call appends the build output path
    to it. Entry order is preserved and repeated entries keep only their
    first position.
    """

    def __init__(self, common_paths: Iterable[str], separator: Optional[str] = None):
        self.separator = separator or classpath_separator()
        self._common_entries = self._split(common_paths)

    @property
    def common_path(self) -> str:
        """The common prefix, ending with a separator unless empty."""
        if not self._common_entries:
            return ""
        return self.separator.join(self._common_entries) + self.separator

    def _split(self, paths: BuildPath) -> List[str]:
        if paths is None:
            return []
        if isinstance(paths, str):
            paths = [paths]
        entries = []
        for path in paths:
            # A single entry may itself be a joined classpath
            entries.extend(part for part in str(path).split(self.separator) if part.strip())
        return entries

    def build(self, build_path: BuildPath = None) -> str:
        """
        Build the full classpath for a compilation.

        Args:
            build_path: Build output path, a joined classpath string, or a list of paths

        Returns:
            Classpath string without a trailing separator ("" if there are no entries)
        """
        entries = []
        for entry in self._common_entries + self._split(build_path):
            if entry not in entries:
                entries.append(entry)
        return self.separator.join(entries).rstrip(self.separator)
