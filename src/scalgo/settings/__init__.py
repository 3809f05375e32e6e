"""Settings directive mini-language for scalgo documents."""
from __future__ import annotations

from scalgo.settings.directives import (
    DIRECTIVES,
    EnlistmentSettings,
    apply_directive,
    split_directive,
)

__all__ = ["DIRECTIVES", "EnlistmentSettings", "apply_directive", "split_directive"]
