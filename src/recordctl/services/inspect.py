"""InspectService — stream a text file, echo it, and count lines/words/characters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from recordctl.domain.textstats import tally
from recordctl.infrastructure.filesystem import iter_lines, resolve_start_dir
from recordctl.services.base import BaseService
from recordctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class InspectService(BaseService):
    """Summarize a text file line by line."""

    def start_dir(self) -> Path:
        """Directory file selection starts in.

        ``<project_root>/<inspect.start_dir>`` when it exists, otherwise the
        project root itself.
        """
        root = self._settings.project_root
        found = resolve_start_dir(root, self._settings.inspect.start_dir)
        if found is None:
            logger.warning(
                "Start directory %r not found under %s; using project root",
                self._settings.inspect.start_dir,
                root,
            )
            return root
        return found

    def resolve(self, selection: str, start: Path | None = None) -> Path:
        """Resolve a user-typed path against *start* unless absolute.

        *start* defaults to :meth:`start_dir`; callers that already showed the
        user a start directory pass it in so the lookup happens once.
        """
        path = Path(selection).expanduser()
        if path.is_absolute():
            return path
        return (start if start is not None else self.start_dir()) / path

    def inspect(
        self,
        path: Path,
        *,
        echo: Callable[[str], None] | None = None,
    ) -> ServiceResult:
        """Stream *path*, passing each line to *echo*, and return the counts."""
        op = "inspect_file"
        if path.is_dir():
            return ServiceResult.failure(
                op, "NOT_A_FILE", f"Not a file: {path}", path=str(path)
            )
        try:
            stats = tally(iter_lines(path), echo=echo)
        except FileNotFoundError:
            return ServiceResult.failure(
                op,
                "NOT_FOUND",
                f"The selected file does not exist: {path}",
                path=str(path),
            )
        except UnicodeDecodeError as exc:
            return ServiceResult.failure(
                op,
                "READ_FAILED",
                f"File is not valid UTF-8 text: {exc.reason}",
                path=str(path),
            )
        except OSError as exc:
            logger.warning("Read failed for %s: %s", path, exc)
            return ServiceResult.failure(
                op,
                "READ_FAILED",
                f"An I/O error occurred while reading the file: {exc}",
                path=str(path),
            )

        logger.debug("Inspected %s: %s", path, stats)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "file_name": path.name,
                "path": str(path.absolute()),
                **stats.to_dict(),
            },
        )
