"""BaseService — common foundation for recordctl services.

Every service receives the frozen :class:`RecordSettings` at construction
time and reads its section (``collect`` / ``inspect``) from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recordctl.config.settings import RecordSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class InspectService(BaseService):
            def inspect(self, path: Path) -> ServiceResult:
                start = self._settings.inspect.start_dir
                ...
    """

    def __init__(self, settings: RecordSettings) -> None:
        self._settings = settings
