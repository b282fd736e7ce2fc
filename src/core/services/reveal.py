"""Per-node reveal schedule for animated renderers.

The core does not animate anything. It hands the renderer an ordered list of
instructions and the renderer decides how to wait between them.
"""

from __future__ import annotations

from core.domain.models import RevealStep, Triangle

# Nodes in row r start r * ROW_STRIDE steps after the first node.
ROW_STRIDE = 10


def is_filled(value: int) -> bool:
    return value % 2 == 0


def reveal_schedule(
    triangle: Triangle,
    *,
    animated: bool = True,
    step_ms: int = 20,
) -> list[RevealStep]:
    """Row-major reveal instructions, `delay_ms = (row * 10 + col) * step_ms`.

    With `animated=False` every node is shown at once (delay 0).
    """

    steps: list[RevealStep] = []
    for row_index, row in enumerate(triangle):
        for col_index, value in enumerate(row):
            delay = (row_index * ROW_STRIDE + col_index) * step_ms if animated else 0
            steps.append(
                RevealStep(
                    row=row_index,
                    col=col_index,
                    value=value,
                    delay_ms=delay,
                    filled=is_filled(value),
                )
            )
    return steps
