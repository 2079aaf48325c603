"""
Draft form store — the persisted state behind the company "post a job" form.

Holds the draft fields plus the dark-mode, submitting and success flags.
Every mutation is written through the injected DraftStoragePort, so the
draft survives restarts until it is reset or cleared. Field values are
type-checked on merge only; callers run validate_job() before submitting.
"""

import logging
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from jobboard.domain.models import DraftFormState, JobDraft
from jobboard.ports.draft_storage_port import DraftStoragePort

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "job-form-store"


class DraftFormStore:
    """Key-value container for the draft job form."""

    def __init__(self, storage: DraftStoragePort, key: str = DEFAULT_STORE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._state = self._load()

    def _load(self) -> DraftFormState:
        payload = self._storage.read(self._key)
        if payload is None:
            return DraftFormState()
        try:
            return DraftFormState.model_validate(payload)
        except ValidationError as exc:
            logger.warning(f"Discarding invalid persisted draft '{self._key}': {exc}")
            return DraftFormState()

    def _save(self) -> None:
        self._storage.write(self._key, self._state.model_dump(mode="json", by_alias=True))

    # ── Reads ─────────────────────────────────────────────────

    def get(self) -> DraftFormState:
        """Return a copy of the current state."""
        return self._state.model_copy(deep=True)

    # ── Mutations ─────────────────────────────────────────────

    def set(self, partial: dict[str, Any]) -> DraftFormState:
        """Shallow-merge draft fields (camelCase or snake_case keys)."""
        fields = JobDraft.model_fields
        by_alias = {to_camel(name): name for name in fields}

        updates: dict[str, Any] = {}
        for key, value in partial.items():
            name = key if key in fields else by_alias.get(key)
            if name is None:
                raise ValueError(f"Unknown draft field: {key}")
            updates[name] = value

        merged = {**self._state.form_data.model_dump(), **updates}
        try:
            form_data = JobDraft.model_validate(merged)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = to_camel(str(error["loc"][0])) if error["loc"] else "draft"
            raise ValueError(f"Invalid value for {field}: {error['msg']}") from exc

        self._state.form_data = form_data
        self._save()
        return self.get()

    def reset(self) -> None:
        """Restore the default draft and clear the submission flags. Dark mode is kept."""
        self._state = DraftFormState(dark_mode=self._state.dark_mode)
        self._save()

    def clear(self) -> None:
        """Forget everything, including dark mode, and drop the persisted entry."""
        self._state = DraftFormState()
        self._storage.clear(self._key)

    def toggle_dark_mode(self) -> bool:
        self._state.dark_mode = not self._state.dark_mode
        self._save()
        return self._state.dark_mode

    def set_is_submitting(self, value: bool) -> None:
        self._state.is_submitting = value
        self._save()

    def set_submit_success(self, value: bool) -> None:
        self._state.submit_success = value
        self._save()
