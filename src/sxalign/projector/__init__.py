"""Tree projection for sxalign.

The projector package is organized into logical modules:
- core: Projector class, sequence projection and node dispatch
- markup: markup element projection
- padding: placeholder whitespace for elided markup heads
- indent: memoized indentation strings

"""

from __future__ import annotations

from sxalign.projector.core import Projector
from sxalign.projector.padding import descriptor_width

__all__ = ["Projector", "descriptor_width"]
