"""Config settings – Settings base class.

Subclasses such as :class:`~chalk_log.config.settings.layout.LayoutSettings`
declare their fields as dataclass fields and an environment prefix in
``_prefix``; :class:`~chalk_log.config.settings.loaders.EnvSettingsLoader`
reads ``<PREFIX>_<FIELD>`` for each of them.
"""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Validation runs on construction, so a settings object built by hand or by
    a loader is always checked by the subclass's :meth:`_validate`.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject invalid field values (raise a ``ConfigError``)."""


__all__ = ["Settings"]
