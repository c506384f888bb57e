"""Read changes out of a git repository."""

import logging
from pathlib import Path
from typing import Callable, Iterator, Mapping, Optional

import git
from git import Repo

from copymig.models.author import Author
from copymig.models.change import Change
from copymig.models.revision import GitRevision

logger = logging.getLogger(__name__)

LabelFinder = Callable[[str], Mapping[str, str]]


class HistoryError(ValueError):
    """A repository or revision could not be read."""


class GitHistory:
    """Produces Change objects from the commits of a git repository."""

    def __init__(self, repo_path: Path, label_finder: Optional[LabelFinder] = None):
        self.repo_path = Path(repo_path)
        self.label_finder = label_finder
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it if needed."""
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path)
            except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
                raise HistoryError(f"Not a git repository: {self.repo_path}") from e
        return self._repo

    def changes(
        self,
        rev: str = "HEAD",
        max_count: Optional[int] = None,
        with_files: bool = False,
    ) -> Iterator[Change[GitRevision]]:
        """Iterate changes reachable from `rev`, newest first."""
        kwargs = {}
        if max_count is not None:
            kwargs["max_count"] = max_count
        repo = self.repo
        try:
            commits = list(repo.iter_commits(rev, **kwargs))
        except (git.GitCommandError, ValueError) as e:
            raise HistoryError(f"Cannot read history from '{rev}': {e}") from e

        logger.debug("Read %d commits from %s at %s", len(commits), self.repo_path, rev)
        for commit in commits:
            yield self._to_change(commit, with_files)

    def get(self, ref: str, with_files: bool = False) -> Change[GitRevision]:
        """Resolve a single revision into a change."""
        repo = self.repo
        try:
            commit = repo.commit(ref)
        except (git.exc.BadName, git.GitCommandError, ValueError) as e:
            raise HistoryError(f"Unknown revision '{ref}'") from e
        return self._to_change(commit, with_files)

    def _to_change(self, commit: git.Commit, with_files: bool) -> Change[GitRevision]:
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")

        labels = self.label_finder(message) if self.label_finder else {}
        change_files = None
        if with_files:
            change_files = set(commit.stats.files.keys())
            logger.debug("Commit %s touches %d files", commit.hexsha, len(change_files))

        return Change[GitRevision](
            revision=GitRevision(sha=commit.hexsha),
            author=Author(name=commit.author.name or "", email=commit.author.email or ""),
            message=message,
            date_time=commit.authored_datetime,
            labels=labels,
            change_files=change_files,
        )
