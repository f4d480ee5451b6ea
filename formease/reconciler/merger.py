from collections.abc import MutableMapping

from formease.extraction.models import CONTRACT_FIELDS, ExtractedRecord

FormState = MutableMapping[str, object]


class FieldMergeReconciler:
    """Merges extracted values into a caller-owned form state."""

    def merge(self, record: ExtractedRecord, form_state: FormState) -> int:
        """Write every non-empty extracted field into the form state.

        Empty extracted values never overwrite the form. Keys outside the
        extraction contract are left alone.

        Returns:
            Number of fields written, from 0 to 6.
        """
        filled = 0
        for attr, key in CONTRACT_FIELDS:
            value = getattr(record, attr)
            if value:
                form_state[key] = value
                filled += 1
        return filled
