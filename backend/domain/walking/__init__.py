"""Walking domain package.

Layers:
  * core: entities, value objects, events, exceptions and ports
  * calculation: pure aggregation and streak services
  * insights: ranked insight generation over a history window

Everything here is synchronous and side-effect free except the ports, which
infrastructure adapters implement.
"""

from __future__ import annotations

DEFAULT_STEP_GOAL = 7000

__all__ = ["DEFAULT_STEP_GOAL"]
