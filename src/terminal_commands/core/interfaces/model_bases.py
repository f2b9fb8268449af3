"""Nominal marker base classes for model standardization.

`DomainModel` marks Pydantic-based domain and configuration models.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        repr_attrs = ("id", "name", "display_text")
        for attr in repr_attrs:
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    text = str(attr_value)
                    if len(text) > 40:
                        text = text[:37] + "..."
                    return f'<{class_name} {attr}="{text}">'

        return f"<{class_name}>"
