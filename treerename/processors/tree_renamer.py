"""Recursive, conflict-aware file renaming over a directory tree."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from treerename.messages import INVALID_PATH_MESSAGE, found_line, renamed_line
from treerename.models.rename import RenameOutcome, RenameRequest


# Process directory entries in raw filesystem order unless asked otherwise
DEFAULT_SORT_ENTRIES = False


class RootPathNotFoundError(FileNotFoundError):
    """Raised when the root path of a rename request does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(INVALID_PATH_MESSAGE.format(path=path))
        self.path = Path(path)


class TreeRenamer:
    """Renames matching files throughout a directory tree.

    Every file whose name satisfies the request filter is renamed to the
    request's target name inside its own parent directory. A file is never
    renamed onto an existing entry: if the target name is already taken in
    that directory the file is left alone.

    The existence check and the rename are two separate filesystem calls, so
    two renamers must not run on overlapping trees at the same time.
    """

    def __init__(
        self,
        sort_entries: bool = DEFAULT_SORT_ENTRIES,
        console: Console | None = None,
    ) -> None:
        """Initialize the renamer.

        Args:
            sort_entries: Visit directory entries sorted by name instead of in
                          filesystem enumeration order. Makes the log deterministic.
            console: If provided, progress notices (directories entered,
                     conflicts skipped) are printed to it.
        """
        self.sort_entries = sort_entries
        self.console = console

    def run(self, request: RenameRequest) -> RenameOutcome:
        """Rename every matching file under the request's root path.

        Args:
            request: Root path, optional name filter and target name.

        Returns:
            RenameOutcome with the log of found and renamed files.

        Raises:
            RootPathNotFoundError: If the root path does not exist.
            OSError: If listing a directory or renaming a file fails.
        """
        root = Path(request.root_path)
        if not root.exists():
            raise RootPathNotFoundError(root)

        return self._walk(root, request)

    def _list_entries(self, directory: Path) -> list[Path]:
        """List the immediate children of a directory.

        The listing is taken before any rename so files renamed during the walk
        are not visited twice. Anything that is not a directory has no children.
        """
        if not directory.is_dir():
            return []

        entries = list(directory.iterdir())
        if self.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries

    def _walk(self, directory: Path, request: RenameRequest) -> RenameOutcome:
        """Depth-first walk of one directory, merging subdirectory outcomes."""
        if self.console is not None:
            self.console.print(f"[dim]Scanning {escape(str(directory))}[/dim]")

        outcome = RenameOutcome()
        for entry in self._list_entries(directory):
            if entry.is_dir():
                outcome = outcome.merge(self._walk(entry, request))
            elif request.matches(entry.name):
                outcome = outcome.merge(self._rename_file(entry, request.target_name))

        return outcome

    def _rename_file(self, source: Path, target_name: str) -> RenameOutcome:
        """Rename a single matched file unless the target name is taken.

        Args:
            source: Matched file.
            target_name: New name within the same directory.

        Returns:
            RenameOutcome for this file; always marked as matched.
        """
        log = [found_line(source)]
        target = source.parent / target_name

        if target.exists() or target.is_symlink():
            if self.console is not None:
                self.console.print(f"[dim]Skipped {escape(str(source))}: {escape(target_name)} already exists[/dim]")
            return RenameOutcome(log=log, matched=True)

        source.rename(target)
        log.append(renamed_line(target))
        return RenameOutcome(log=log, matched=True, renamed=1)


def rename(
    root_path: str | Path,
    match_name: str,
    target_name: str,
    sort_entries: bool = DEFAULT_SORT_ENTRIES,
    console: Console | None = None,
) -> RenameOutcome:
    """Rename files named ``match_name`` to ``target_name`` throughout ``root_path``.

    A blank ``match_name`` makes every file a candidate. Since all candidates in
    a directory share the same target name, the first one renamed takes the name
    and the rest are left as they are.
    """
    request = RenameRequest(root_path=str(root_path), match_name=match_name, target_name=target_name)
    return TreeRenamer(sort_entries=sort_entries, console=console).run(request)
