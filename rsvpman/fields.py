"""
Label-based field extraction for form webhooks.

Form providers deliver answers as a list of descriptors:

    [
        {"label": "first_name", "value": "Jane"},
        {"label": "attending_events", "value": ["opt-1"],
         "options": [{"id": "opt-1", "text": "Ceremony"}]},
    ]

Forms differ per wedding, so nothing here assumes a field exists.
A missing label is a normal outcome (None), never an error.
"""

from typing import Any


def _is_empty(value) -> bool:
    return value is None or value == "" or value == []


class FormFields:
    """
    Label -> value mapping built in a single pass over the descriptor list.

    The first descriptor with a non-empty value wins for its label. An empty
    value (None, "" or []) counts as absent, so an empty first descriptor
    does not block a later descriptor with the same label. Option ids are
    resolved to their display text when the descriptor carries an
    ``options`` list; options without a scalar ``id`` are ignored.
    """

    def __init__(self, descriptors: list | None):
        self._values: dict[str, Any] = {}

        for descriptor in descriptors or []:
            if not isinstance(descriptor, dict):
                continue
            label = descriptor.get("label")
            if not isinstance(label, str):
                continue
            label = label.strip()
            if not label or label in self._values:
                continue
            value = self._resolve_options(
                descriptor.get("value"), descriptor.get("options")
            )
            if _is_empty(value):
                continue
            self._values[label] = value

    @classmethod
    def from_payload(cls, payload: dict) -> "FormFields":
        """Build from a webhook payload (``data.fields`` or top-level ``fields``)."""
        return cls(payload_descriptors(payload))

    @staticmethod
    def _resolve_options(value, options):
        if not isinstance(options, list) or not options:
            return value

        lookup = {}
        for option in options:
            if not isinstance(option, dict) or "text" not in option:
                continue
            if _hashable(option.get("id")):
                lookup[option["id"]] = option["text"]

        if isinstance(value, list):
            return [lookup.get(item, item) if _hashable(item) else item for item in value]
        if isinstance(value, str):
            return lookup.get(value, value)
        return value

    def get(self, label: str) -> Any | None:
        """Value for ``label``, or None when the form didn't carry it."""
        return self._values.get(label)

    def get_text(self, label: str) -> str | None:
        """Value as a stripped string, or None."""
        value = self.get(label)
        if value is None:
            return None
        if isinstance(value, list):
            value = ", ".join(str(item) for item in value)
        text = str(value).strip()
        return text or None

    def get_list(self, label: str) -> list | None:
        """Value as a list (scalars are wrapped), or None."""
        value = self.get(label)
        if value is None:
            return None
        if isinstance(value, list):
            return value
        return [value]

    def labels(self) -> list[str]:
        return list(self._values)

    def __contains__(self, label: str) -> bool:
        return label in self._values

    def __len__(self) -> int:
        return len(self._values)


def _hashable(item) -> bool:
    return isinstance(item, (str, int, float, bool))


def payload_descriptors(payload) -> list:
    """Raw descriptor list of a payload, or [] when it has none."""
    descriptors = None
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        descriptors = data.get("fields")
    if descriptors is None and isinstance(payload, dict):
        descriptors = payload.get("fields")
    if not isinstance(descriptors, list):
        return []
    return descriptors
