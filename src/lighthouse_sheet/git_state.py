"""Repository state lookup through the ``git`` executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple, Union

from .errors import RepoQueryError
from .models import RepositoryState

logger = logging.getLogger(__name__)


class GitStateReader:
    """Collects commit, branch, tag and dirty-tree information for a checkout.

    Each query is independent: a failing query is logged and leaves its field
    empty, and :meth:`read` never raises.
    """

    def __init__(
        self,
        repo_path: Union[str, Path] = ".",
        runner: Optional[Callable[..., str]] = None,
    ) -> None:
        self._repo_path = Path(repo_path)
        self._runner = runner or self._default_runner

    def read(self) -> RepositoryState:
        commit_id = self._query_or_default("commit id", self.commit_id, "")
        message = self._query_or_default("last commit message", self.last_commit_message, "")
        branch = self._query_or_default("branch", self.branch, "")
        tags = self._query_or_default("tags", self.tags, ())
        dirty = self._query_or_default("uncommitted changes", self.has_uncommitted_changes, False)

        return RepositoryState(
            commit_id=commit_id,
            message=message,
            branch=branch,
            tags=tags,
            has_uncommitted_changes=dirty,
        )

    def commit_id(self) -> str:
        return self._git("rev-parse", "HEAD")

    def last_commit_message(self) -> str:
        return self._git("log", "-1", "--pretty=%B")

    def branch(self) -> str:
        return self._git("rev-parse", "--abbrev-ref", "HEAD")

    def tags(self) -> Tuple[str, ...]:
        output = self._git("tag", "--points-at", "HEAD")
        return tuple(line.strip() for line in output.splitlines() if line.strip())

    def has_uncommitted_changes(self) -> bool:
        return self._git("status", "--porcelain") != ""

    # ------------------------------------------------------------------
    # Internals

    def _query_or_default(self, field_name: str, query: Callable[[], object], default):
        try:
            return query()
        except RepoQueryError as exc:
            logger.warning(
                "Failed to get %s: %s",
                field_name,
                exc,
                extra={"field": field_name, "repo_path": str(self._repo_path)},
            )
            return default

    def _git(self, *args: str) -> str:
        command = ["git", *args]
        try:
            output = self._runner(command, cwd=self._repo_path)
        except (subprocess.CalledProcessError, OSError) as exc:
            raise RepoQueryError(f"'{' '.join(command)}' failed: {exc}") from exc
        return output.strip()

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout
